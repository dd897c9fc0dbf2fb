"""
Base classes for measurement devices.
"""
import logging
from enum import Enum
from typing import Optional, Dict, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from labdevices.hierarchy.devices import TemperatureMeasurementDevice

log = logging.getLogger(__name__)

FRAME = "============"


def format_number(value: float) -> str:
    """Format a float the way a default C++ output stream would (6 significant digits)."""
    return f"{value:g}"


class Material(Enum):
    """Housing material of a measurement device."""
    PLASTIC = "Plastic"
    METAL = "Metal"
    GLASS = "Glass"

    @classmethod
    def from_choice(cls, choice: int) -> "Material":
        """
        Map a 1-based menu code (1 Plastic, 2 Metal, 3 Glass) to a Material.

        Raises:
            ValueError: if the code is outside 1..3
        """
        members = list(cls)
        if not 1 <= choice <= len(members):
            raise ValueError(f"Material code must be between 1 and {len(members)}, got {choice}")
        return members[choice - 1]

    def __str__(self) -> str:
        return self.value


class DeviceKind(Enum):
    """Discriminant for the device variants."""
    MEASUREMENT = "measurement"
    TEMPERATURE = "temperature"


class MeasurementDevice:
    """Represents a generic measurement device."""

    kind = DeviceKind.MEASUREMENT

    def __init__(
        self,
        name: str,
        unit: str,
        min_value: float,
        max_value: float,
        material: Material
    ):
        self.name = name
        self.unit = unit
        self.min_value = min_value
        self.max_value = max_value
        self.material = material

        self._active = False

    @property
    def is_active(self) -> bool:
        """Whether the device is currently measuring."""
        return self._active

    def as_temperature_device(self) -> Optional["TemperatureMeasurementDevice"]:
        """Return this device as a temperature device, or None if it is not one."""
        return None

    def start_measuring(self):
        """Activate the device. No-op if it is already active."""
        if not self._active:
            print("\nStart of measurement")
            self._active = True
            log.debug(f"{self.name}: measurement started")

    def stop_measuring(self):
        """Deactivate the device. No-op if it is already inactive."""
        if self._active:
            print("End of measurement\n")
            self._active = False
            log.debug(f"{self.name}: measurement stopped")

    def format_info(self) -> str:
        lines = [
            FRAME,
            f"Name: {self.name}",
            f"Unit: {self.unit}",
            f"Min Value: {format_number(self.min_value)}",
            f"Max Value: {format_number(self.max_value)}",
            f"Material: {self.material}",
            FRAME,
        ]
        return "\n".join(lines)

    def print_info(self):
        """Print all device fields."""
        print(self.format_info())

    def set_name(self, name: str):
        self.name = name

    def set_unit(self, unit: str):
        self.unit = unit

    def set_min_value(self, min_value: float):
        self.min_value = min_value

    def set_max_value(self, max_value: float):
        self.max_value = max_value

    def set_material(self, material: Material):
        self.material = material

    def to_dict(self) -> Dict[str, Any]:
        """Convert device to dictionary representation."""
        return {
            'type': self.kind.value,
            'name': self.name,
            'unit': self.unit,
            'min_value': self.min_value,
            'max_value': self.max_value,
            'material': self.material.value,
            'is_active': self._active,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name}, unit={self.unit}, min={self.min_value}, max={self.max_value}, material={self.material.value}, active={self._active})"
