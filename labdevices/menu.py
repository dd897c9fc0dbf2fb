"""
Interactive text menu for managing the device container.
"""

import logging
from typing import Callable, Optional
from labdevices.hierarchy.base import MeasurementDevice, Material
from labdevices.hierarchy.devices import TemperatureMeasurementDevice, TemperatureScale
from labdevices.hierarchy.container import MeasurementDeviceContainer

log = logging.getLogger(__name__)

MEASUREMENT_TYPE = "MeasurementDevice"
TEMPERATURE_TYPE = "TemperatureMeasurementDevice"

MAIN_MENU = (
    "\nChoose an option:\n"
    "1. Switch to next device\n"
    "2. Change device attributes\n"
    "3. Print device info\n"
    "4. Start measuring\n"
    "5. Stop measuring\n"
    "6. Print temperature\n"
    "7. Print all devices\n"
    "8. Add a new device\n"
    "9. Search or sort devices\n"
    "0. Exit\n"
    "Enter option: "
)

ATTRIBUTE_MENU = (
    "Choose attribute to change:\n"
    "1. Name\n"
    "2. Unit\n"
    "3. Min Value\n"
    "4. Max Value\n"
    "5. Material\n"
    "6. Temperature\n"
    "7. Temperature Scale\n"
    "Enter option: "
)

SEARCH_MENU = (
    "Choose search or sort option:\n"
    "1. Find devices by name\n"
    "2. Sort devices by min value\n"
    "3. Sort devices by max value\n"
    "4. Sort devices by temperature\n"
    "Enter option: "
)

MATERIAL_PROMPT = "Enter material (1 for Plastic, 2 for Metal, 3 for Glass): "
SCALE_PROMPT = "Choose temperature scale (1 - Celsius, 2 - Fahrenheit, 3 - Kelvin): "
NOT_TEMPERATURE = "Current device is not a TemperatureMeasurementDevice."
NO_DEVICE = "No device selected."


class DeviceMenu:
    """Drives a MeasurementDeviceContainer from console input."""

    def __init__(self, container: MeasurementDeviceContainer, input_func: Optional[Callable[[str], str]] = None):
        self.container = container
        self._input = input_func or input

    # ---- input helpers ----

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> Optional[int]:
        raw = self._ask(prompt)
        try:
            return int(raw)
        except ValueError:
            print("Invalid input.")
            log.debug(f"Expected an integer, got {raw!r}")
            return None

    def _ask_float(self, prompt: str) -> Optional[float]:
        raw = self._ask(prompt)
        try:
            return float(raw)
        except ValueError:
            print("Invalid input.")
            log.debug(f"Expected a number, got {raw!r}")
            return None

    def _ask_material(self, prompt: str = MATERIAL_PROMPT) -> Optional[Material]:
        choice = self._ask_int(prompt)
        if choice is None:
            return None
        try:
            return Material.from_choice(choice)
        except ValueError as e:
            print("Invalid material.")
            log.debug(str(e))
            return None

    def _ask_scale(self) -> Optional[TemperatureScale]:
        choice = self._ask_int(SCALE_PROMPT)
        if choice is None:
            return None
        try:
            return TemperatureScale.from_choice(choice)
        except ValueError as e:
            print("Invalid temperature scale.")
            log.debug(str(e))
            return None

    def _current_temperature_device(self) -> Optional[TemperatureMeasurementDevice]:
        device = self.container.current_device()
        if device is None:
            print(NO_DEVICE)
            return None
        temperature_device = device.as_temperature_device()
        if temperature_device is None:
            print(NOT_TEMPERATURE)
        return temperature_device

    # ---- adding devices ----

    def ask_device_type(self) -> str:
        return self._ask(f"Enter device type ({MEASUREMENT_TYPE} / {TEMPERATURE_TYPE}): ")

    def create_device(self, device_type: str) -> Optional[MeasurementDevice]:
        """
        Prompt for the fields of a new device of ``device_type``.

        All common fields are asked before the type is checked. Returns None if
        the type or any answer was invalid.
        """
        name = self._ask("Enter device name: ")
        unit = self._ask("Enter unit: ")
        min_value = self._ask_float("Enter min value: ")
        max_value = self._ask_float("Enter max value: ")
        material = self._ask_material()

        if device_type not in (MEASUREMENT_TYPE, TEMPERATURE_TYPE):
            print(f"Invalid device type. Please choose either {MEASUREMENT_TYPE} or {TEMPERATURE_TYPE}.")
            return None
        if min_value is None or max_value is None or material is None:
            print("Device not added.")
            return None

        if device_type == TEMPERATURE_TYPE:
            scale = self._ask_scale()
            if scale is None:
                print("Device not added.")
                return None
            return TemperatureMeasurementDevice(name, unit, min_value, max_value, material, scale)
        return MeasurementDevice(name, unit, min_value, max_value, material)

    def insert_device(self, device: MeasurementDevice) -> bool:
        """Ask where to put ``device`` and insert it there."""
        self.container.print_devices()
        option = self._ask_int(
            "Choose position to insert the device (1 - at the beginning, 2 - at the end, 3 - at a specific position): "
        )
        if option == 1:
            self.container.insert_front(device)
            return True
        if option == 2:
            self.container.insert_back(device)
            return True
        if option == 3:
            position = self._ask_int(f"Enter position to insert (1 - {len(self.container) + 1}): ")
            if position is None:
                print("Device not added.")
                return False
            return self.container.insert_at(device, position - 1)
        print("Invalid option. Device not inserted.")
        return False

    def add_devices(self):
        """Keep adding devices until the user answers something other than 'y'."""
        add_more = "y"
        while add_more == "y":
            device_type = self.ask_device_type()
            device = self.create_device(device_type)
            if device_type not in (MEASUREMENT_TYPE, TEMPERATURE_TYPE):
                continue
            if device is not None and self.insert_device(device):
                log.info(f"Added {device!r}")
            add_more = self._ask("Do you want to add another device? (y/n): ")

    # ---- main menu ----

    def change_attribute(self):
        option = self._ask_int(ATTRIBUTE_MENU)
        if option is None or option == 0:
            return
        if not 1 <= option <= 7:
            print("Invalid option.")
            return
        if option in (6, 7):
            temperature_device = self._current_temperature_device()
            if temperature_device is None:
                return
            if option == 6:
                value = self._ask_float("Enter new temperature: ")
                if value is not None:
                    temperature_device.set_current_temperature(value)
            else:
                scale = self._ask_scale()
                if scale is not None:
                    temperature_device.set_temperature_scale(scale)
            return

        device = self.container.current_device()
        if device is None:
            print(NO_DEVICE)
            return
        if option == 1:
            device.set_name(self._ask("Enter new name: "))
        elif option == 2:
            device.set_unit(self._ask("Enter new unit: "))
        elif option == 3:
            value = self._ask_float("Enter new min value: ")
            if value is not None:
                device.set_min_value(value)
        elif option == 4:
            value = self._ask_float("Enter new max value: ")
            if value is not None:
                device.set_max_value(value)
        elif option == 5:
            material = self._ask_material("Enter new material (1 for Plastic, 2 for Metal, 3 for Glass): ")
            if material is not None:
                device.set_material(material)

    def search_or_sort(self):
        option = self._ask_int(SEARCH_MENU)
        if option == 1:
            name = self._ask("Enter device name to search: ")
            found = self.container.find_by_name(name)
            if not found:
                print("No devices found with the given name.")
            else:
                print(f"Devices found with the name '{name}':")
                for device in found:
                    device.print_info()
        elif option == 2:
            self.container.sort_by_min_value()
            print("Devices sorted by min value.")
        elif option == 3:
            self.container.sort_by_max_value()
            print("Devices sorted by max value.")
        elif option == 4:
            self.container.sort_by_temperature()
            print("Devices sorted by temperature.")
        elif option is not None:
            print("Invalid option.")

    def _with_current(self, action: Callable[[MeasurementDevice], None]):
        device = self.container.current_device()
        if device is None:
            print(NO_DEVICE)
            return
        action(device)

    def handle_option(self, option: int) -> bool:
        """
        Run one main menu option.

        Returns:
            False when the user chose to exit
        """
        if option == 0:
            print("Exiting program.")
            return False
        if option == 1:
            self.container.switch_to_next()
        elif option == 2:
            self.change_attribute()
        elif option == 3:
            self._with_current(lambda d: d.print_info())
        elif option == 4:
            self._with_current(lambda d: d.start_measuring())
        elif option == 5:
            self._with_current(lambda d: d.stop_measuring())
        elif option == 6:
            temperature_device = self._current_temperature_device()
            if temperature_device is not None:
                temperature_device.print_temperature()
        elif option == 7:
            self.container.print_devices()
        elif option == 8:
            self.add_devices()
        elif option == 9:
            self.search_or_sort()
        else:
            print("Invalid option.")
        return True

    def run(self, add_devices_first: bool = True) -> int:
        """Run the menu until the user exits or input ends. Always returns 0."""
        try:
            if add_devices_first:
                self.add_devices()
            while True:
                option = self._ask_int(MAIN_MENU)
                if option is None:
                    continue
                if not self.handle_option(option):
                    break
        except EOFError:
            log.info("Input closed, leaving menu")
            print()
        return 0
