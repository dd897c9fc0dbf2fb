"""
Configuration loader for hierarchy objects.

Builds device objects from the ``devices`` section of the configuration and
places them in a container.
"""
import logging
from typing import Iterable, TYPE_CHECKING
from labdevices.hierarchy.base import MeasurementDevice, DeviceKind
from labdevices.hierarchy.devices import TemperatureMeasurementDevice, TemperatureScale
from labdevices.hierarchy.container import MeasurementDeviceContainer

if TYPE_CHECKING:
    from labdevices.config import DeviceConfig

log = logging.getLogger(__name__)


def build_device(device_cfg: "DeviceConfig") -> MeasurementDevice:
    """Create the device described by a configuration entry."""
    if device_cfg.type == DeviceKind.TEMPERATURE:
        return TemperatureMeasurementDevice(
            device_cfg.name,
            device_cfg.unit,
            device_cfg.min_value,
            device_cfg.max_value,
            device_cfg.material,
            device_cfg.scale or TemperatureScale.CELSIUS,
        )
    return MeasurementDevice(
        device_cfg.name,
        device_cfg.unit,
        device_cfg.min_value,
        device_cfg.max_value,
        device_cfg.material,
    )


def load_container(device_cfgs: Iterable["DeviceConfig"]) -> MeasurementDeviceContainer:
    """
    Build a container holding the configured devices.

    Args:
        device_cfgs: Device entries, inserted at the back in the given order

    Returns:
        A new container; empty if no entries were given
    """
    container = MeasurementDeviceContainer()
    for device_cfg in device_cfgs:
        device = build_device(device_cfg)
        container.insert_back(device)
        log.info(f"Loaded {device_cfg.type.value} device '{device.name}' from configuration")
    return container
