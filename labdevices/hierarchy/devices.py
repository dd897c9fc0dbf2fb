"""
Temperature measurement device.
"""
import logging
from enum import Enum
from typing import Optional, Dict, Any
from labdevices.hierarchy.base import MeasurementDevice, Material, DeviceKind, format_number

log = logging.getLogger(__name__)


class TemperatureScale(Enum):
    """Scale used to display a temperature reading."""
    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"

    @classmethod
    def from_choice(cls, choice: int) -> "TemperatureScale":
        """
        Map a 1-based menu code (1 Celsius, 2 Fahrenheit, 3 Kelvin) to a scale.

        Raises:
            ValueError: if the code is outside 1..3
        """
        members = list(cls)
        if not 1 <= choice <= len(members):
            raise ValueError(f"Temperature scale code must be between 1 and {len(members)}, got {choice}")
        return members[choice - 1]

    def __str__(self) -> str:
        return self.value


def convert_temperature(temperature: float, scale: TemperatureScale) -> float:
    """
    Convert a Celsius reading into the given display scale.

    Only goes one way: the stored value is always Celsius.
    """
    if scale == TemperatureScale.FAHRENHEIT:
        return temperature * 9.0 / 5.0 + 32
    if scale == TemperatureScale.KELVIN:
        return temperature + 273.15
    return temperature


class TemperatureMeasurementDevice(MeasurementDevice):
    """Represents a measurement device that also reports a current temperature."""

    kind = DeviceKind.TEMPERATURE

    def __init__(
        self,
        name: str,
        unit: str,
        min_value: float,
        max_value: float,
        material: Material,
        scale: TemperatureScale = TemperatureScale.CELSIUS
    ):
        super().__init__(name, unit, min_value, max_value, material)
        self.temperature_scale = scale
        self._current_temperature = 0.0

    @property
    def current_temperature(self) -> float:
        """Last accepted reading, in Celsius."""
        return self._current_temperature

    def as_temperature_device(self) -> Optional["TemperatureMeasurementDevice"]:
        return self

    def start_measuring(self):
        super().start_measuring()
        print("Temperature measurement started")

    def stop_measuring(self):
        super().stop_measuring()
        print("Temperature measurement stopped")

    def set_current_temperature(self, temperature: float) -> bool:
        """
        Record a new reading.

        Readings are only accepted while the device is active; otherwise the
        value is dropped.

        Returns:
            True if the reading was stored
        """
        if not self.is_active:
            print("Device is not ACTIVE!!!")
            log.warning(f"Rejected temperature {temperature} for inactive device {self.name}")
            return False
        self._current_temperature = temperature
        return True

    def set_temperature_scale(self, scale: TemperatureScale):
        self.temperature_scale = scale

    def convert_temperature(self, temperature: float, scale: TemperatureScale) -> float:
        return convert_temperature(temperature, scale)

    def format_temperature(self) -> str:
        shown = convert_temperature(self._current_temperature, self.temperature_scale)
        return f"Current Temperature: {format_number(shown)} {self.temperature_scale}"

    def print_temperature(self):
        print(self.format_temperature())

    def format_info(self) -> str:
        return super().format_info() + "\n" + self.format_temperature()

    def to_dict(self) -> Dict[str, Any]:
        """Convert device to dictionary representation."""
        data = super().to_dict()
        data['current_temperature'] = self._current_temperature
        data['scale'] = self.temperature_scale.value
        return data

    def __repr__(self) -> str:
        return f"TemperatureMeasurementDevice(name={self.name}, temperature={self._current_temperature}, scale={self.temperature_scale.value}, active={self.is_active})"
