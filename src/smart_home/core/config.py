"""
Configuration for the smart-home core.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class SmartHomeConfig:
    """
    Tunables shared by the Home, the controller, and the automation engine.

    Attributes:
        version: Config schema version
        energy_saving_brightness: Brightness forced on lit lights by
            energy-saving mode (1-100)
        history_size: Number of rule executions kept by the engine
        overwrite_rooms: When True, adding a room whose name already exists
            replaces it; when False it raises DuplicateRoomError
    """

    CURRENT_VERSION = 1

    version: int = CURRENT_VERSION
    energy_saving_brightness: int = 30
    history_size: int = 100
    overwrite_rooms: bool = True

    def __post_init__(self) -> None:
        if not 1 <= self.energy_saving_brightness <= 100:
            raise ValueError(
                f"energy_saving_brightness must be between 1 and 100, "
                f"got {self.energy_saving_brightness}"
            )
        if self.history_size < 1:
            raise ValueError(f"history_size must be positive, got {self.history_size}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "version": self.version,
            "energy_saving_brightness": self.energy_saving_brightness,
            "history_size": self.history_size,
            "overwrite_rooms": self.overwrite_rooms,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SmartHomeConfig":
        """
        Deserialize from dict.

        Missing keys fall back to defaults.

        Raises:
            ValueError: If the version is newer than this library supports,
                or a value is out of range
        """
        version = data.get("version", cls.CURRENT_VERSION)
        if version > cls.CURRENT_VERSION:
            raise ValueError(f"Unsupported config version: {version}")

        return cls(
            version=version,
            energy_saving_brightness=data.get("energy_saving_brightness", 30),
            history_size=data.get("history_size", 100),
            overwrite_rooms=data.get("overwrite_rooms", True),
        )
