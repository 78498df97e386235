#!/usr/bin/env python3
"""
Quick example demonstrating smart-home basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from smart_home import (
    CentralController,
    DeviceNotFoundError,
    Home,
    Light,
    MotionSensor,
    Room,
    SmartTV,
    Thermostat,
)
from smart_home.automation import AutomationEngine, energy_cap_rule, motion_light_rule

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

print("=" * 60)
print("smart-home Example")
print("=" * 60)

# 1. Build the home
print("\n1. Building the home...")
home = Home("My Smart Home")

living_room = Room("Living Room")
living_light = Light("L001", "Living Room Light", brightness=80)
tv = SmartTV("TV001", "Smart TV")
motion_sensor = MotionSensor("MS001", "Motion Sensor")
for device in (living_light, tv, motion_sensor):
    living_room.add_device(device)

bedroom = Room("Bedroom")
bedroom_light = Light("L002", "Bedroom Light", brightness=60)
thermostat = Thermostat("T001", "Smart Thermostat", initial_temperature=22)
for device in (bedroom_light, thermostat):
    bedroom.add_device(device)

home.add_room(living_room)
home.add_room(bedroom)
print(f"   ✓ {home.room_count} rooms, {len(home.get_all_devices())} devices")

# 2. Controller and automation engine
print("\n2. Creating controller and automation engine...")
controller = CentralController(home)
engine = AutomationEngine(home)
engine.add_rule(motion_light_rule("Motion Light Rule", motion_sensor, living_light))
engine.add_rule(
    energy_cap_rule(
        "Energy Saving Rule",
        controller,
        threshold_watts=200,
        dim_lights=[living_light],
        turn_off=[tv],
    )
)
for name, enabled in engine.list_rules():
    print(f"   ✓ {name} [{'ENABLED' if enabled else 'DISABLED'}]")

# 3. Drive some devices
print("\n3. Driving devices...")
tv.turn_on()
tv.start_streaming("Netflix")
thermostat.turn_on()
thermostat.set_mode("heat")
thermostat.set_temperature(25)
thermostat.schedule_task("07:00", "settemp 21")
print(f"   ✓ Total consumption: {controller.get_total_energy_consumption():.2f}W")

# 4. Motion triggers the rules
print("\n4. Simulating motion and evaluating rules...")
motion_sensor.turn_on()
motion_sensor.detect_motion()
result = engine.evaluate_rules()
print(f"   ✓ Rules triggered: {result.triggered}")
print(f"   ✓ Total consumption: {controller.get_total_energy_consumption():.2f}W")

# 5. Lookups and global commands
print("\n5. Lookups and commands...")
for device in controller.list_devices_by_type("light"):
    print(f"   • {device.get_status()}")
recognized = controller.execute_global_command("dim")
print(f"   ✓ 'dim' recognized by {recognized} device(s)")
try:
    controller.find_device("X999")
except DeviceNotFoundError as e:
    print(f"   ✗ {e}")

# 6. Full status
print("\n6. Full status...")
print(controller.show_all_status())

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
