"""
Container holding an ordered collection of measurement devices.
"""
import logging
from typing import List, Optional, Dict, Any, Iterator, Tuple
from labdevices.hierarchy.base import MeasurementDevice

log = logging.getLogger(__name__)


class MeasurementDeviceContainer:
    """Owns an ordered list of devices and tracks the currently selected one."""

    def __init__(self):
        self._devices: List[MeasurementDevice] = []
        # None until the first device is inserted
        self._current_index: Optional[int] = None

    def __len__(self) -> int:
        return len(self._devices)

    def __iter__(self) -> Iterator[MeasurementDevice]:
        return iter(list(self._devices))

    @property
    def devices(self) -> Tuple[MeasurementDevice, ...]:
        """Snapshot of the devices in container order."""
        return tuple(self._devices)

    @property
    def current_index(self) -> Optional[int]:
        return self._current_index

    def _inserted(self):
        if self._current_index is None:
            self._current_index = 0

    def insert_front(self, device: MeasurementDevice):
        """Insert a device at the beginning."""
        self._devices.insert(0, device)
        self._inserted()
        log.debug(f"Inserted {device.name} at front ({len(self._devices)} devices)")

    def insert_back(self, device: MeasurementDevice):
        """Insert a device at the end."""
        self._devices.append(device)
        self._inserted()
        log.debug(f"Inserted {device.name} at back ({len(self._devices)} devices)")

    def insert_at(self, device: MeasurementDevice, index: int) -> bool:
        """
        Insert a device so that it ends up at ``index``.

        Valid positions are 0..len(container) inclusive. Anything else leaves the
        container unchanged and the device is not stored.

        Returns:
            True if the device was inserted
        """
        if not 0 <= index <= len(self._devices):
            print("Invalid index. Device not added.")
            log.warning(f"Rejected insert of {device.name} at index {index} (size {len(self._devices)})")
            return False
        self._devices.insert(index, device)
        self._inserted()
        log.debug(f"Inserted {device.name} at index {index}")
        return True

    def switch_device(self, index: int) -> bool:
        """Select the device at ``index`` as current."""
        if not 0 <= index < len(self._devices):
            print("Invalid device index.")
            log.debug(f"Ignored switch to index {index} (size {len(self._devices)})")
            return False
        self._current_index = index
        print(f"Switched to device {index + 1}")
        return True

    def switch_to_next(self) -> bool:
        """Advance the selection by one, wrapping around at the end."""
        if not self._devices:
            print("No device selected.")
            return False
        return self.switch_device((self._current_index + 1) % len(self._devices))

    def current_device(self) -> Optional[MeasurementDevice]:
        """Get the currently selected device, or None if the container is empty."""
        if not self._devices:
            return None
        return self._devices[self._current_index]

    def print_devices(self):
        """Print every device, numbered from 1."""
        print("Devices in container:")
        for i, device in enumerate(self._devices, 1):
            print(f"{i}. ", end="")
            device.print_info()

    def find_by_name(self, name: str) -> List[MeasurementDevice]:
        """Get all devices whose name matches exactly, in container order."""
        return [device for device in self._devices if device.name == name]

    def sort_by_min_value(self):
        self._devices.sort(key=lambda d: d.min_value)

    def sort_by_max_value(self):
        self._devices.sort(key=lambda d: d.max_value)

    def sort_by_temperature(self):
        """
        Sort temperature devices by ascending current temperature.

        Plain measurement devices carry no temperature and are placed after all
        temperature devices, keeping their relative order.
        """
        temperature_count = sum(1 for d in self._devices if d.as_temperature_device() is not None)
        if 0 < temperature_count < len(self._devices):
            log.warning(
                f"Sorting {len(self._devices)} devices by temperature, "
                f"{len(self._devices) - temperature_count} without a temperature moved to the end"
            )
        self._devices.sort(key=_temperature_sort_key)

    def to_dict(self) -> Dict[str, Any]:
        """Convert container to dictionary representation."""
        return {
            'current_index': self._current_index,
            'devices': [device.to_dict() for device in self._devices],
        }

    def __repr__(self) -> str:
        return f"MeasurementDeviceContainer(devices={len(self._devices)}, current_index={self._current_index})"


def _temperature_sort_key(device: MeasurementDevice) -> Tuple[int, float]:
    temperature_device = device.as_temperature_device()
    if temperature_device is None:
        return (1, 0.0)
    return (0, temperature_device.current_temperature)
