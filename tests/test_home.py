"""Tests for Home."""

import pytest

from smart_home import (
    DeviceNotFoundError,
    DuplicateRoomError,
    Home,
    Light,
    MotionSensor,
    Room,
    SmartHomeConfig,
    SmartTV,
    Thermostat,
)


@pytest.fixture
def home():
    """Create a home with 3 rooms and 5 devices."""
    home = Home("Test House")

    living = Room("Living Room")
    living.add_device(Light("L1", "Living Light"))
    living.add_device(SmartTV("TV1", "Living TV"))

    bedroom = Room("Bedroom")
    bedroom.add_device(Light("L2", "Bedroom Light"))
    bedroom.add_device(Thermostat("T1", "Bedroom Thermostat", 21))

    hall = Room("Hall")
    hall.add_device(MotionSensor("M1", "Hall Sensor"))

    for room in (living, bedroom, hall):
        home.add_room(room)
    return home


class TestFindDevice:
    """Tests for cross-room lookup."""

    @pytest.mark.parametrize("device_id", ["L1", "TV1", "L2", "T1", "M1"])
    def test_finds_every_device(self, home, device_id):
        """Test that every existing ID resolves to its device."""
        assert home.find_device(device_id).device_id == device_id

    @pytest.mark.parametrize("device_id", ["L3", "", "tv1"])
    def test_missing(self, home, device_id):
        """Test that unknown IDs fail after searching all rooms."""
        with pytest.raises(DeviceNotFoundError):
            home.find_device(device_id)

    def test_cross_room_duplicate_returns_first_room(self, home):
        """Test that rooms are searched in insertion order."""
        home.get_room("Hall").add_device(Light("L1", "Hall Light"))
        assert home.find_device("L1").name == "Living Light"
        assert home.find_room_of("L1").name == "Living Room"


class TestAggregation:
    """Tests for home-wide queries."""

    def test_get_all_devices_order(self, home):
        """Test room order then device order."""
        assert [d.device_id for d in home.get_all_devices()] == ["L1", "TV1", "L2", "T1", "M1"]

    def test_turn_off_everything(self, home):
        """Test that every device ends up off."""
        for room in home.rooms.values():
            room.turn_on_all_devices()
        home.turn_off_everything()
        assert not any(d.is_on for d in home.get_all_devices())

    def test_status_report(self, home):
        """Test the summary lines."""
        report = home.status_report()
        assert "TEST HOUSE" in report
        assert "Total Rooms: 3" in report
        assert "Total Devices: 5" in report


class TestRooms:
    """Tests for room management and the overwrite policy."""

    def test_overwrite_by_default(self, home, caplog):
        """Test that a same-named room replaces the old one with a warning."""
        with caplog.at_level("WARNING"):
            home.add_room(Room("Hall"))
        assert home.room_count == 3
        assert home.get_room("Hall").device_count == 0
        assert "replaced" in caplog.text

    def test_overwrite_refused(self, home):
        """Test the explicit no-overwrite policy."""
        with pytest.raises(DuplicateRoomError):
            home.add_room(Room("Hall"), overwrite=False)
        assert home.get_room("Hall").device_count == 1

    def test_overwrite_policy_from_config(self):
        """Test that the config default is honored."""
        home = Home("Strict", config=SmartHomeConfig(overwrite_rooms=False))
        home.add_room(Room("Kitchen"))
        with pytest.raises(DuplicateRoomError):
            home.add_room(Room("Kitchen"))

    def test_remove_room(self, home):
        """Test removing rooms."""
        assert home.remove_room("Hall").name == "Hall"
        assert home.remove_room("Hall") is None
        with pytest.raises(DeviceNotFoundError):
            home.find_device("M1")

    def test_rooms_is_a_copy(self, home):
        """Test that the rooms mapping cannot be mutated from outside."""
        home.rooms.clear()
        assert home.room_count == 3
