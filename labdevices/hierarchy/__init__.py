"""
Hierarchy module for measurement devices.

This module provides object-oriented classes representing the device catalogue:
- MeasurementDevice (base device)
- TemperatureMeasurementDevice (device with a temperature reading)
- MeasurementDeviceContainer (ordered collection with a current selection)
"""

from labdevices.hierarchy.base import MeasurementDevice, Material, DeviceKind
from labdevices.hierarchy.devices import TemperatureMeasurementDevice, TemperatureScale, convert_temperature
from labdevices.hierarchy.container import MeasurementDeviceContainer
from labdevices.hierarchy.loader import build_device, load_container

__all__ = [
    'MeasurementDevice',
    'Material',
    'DeviceKind',
    'TemperatureMeasurementDevice',
    'TemperatureScale',
    'convert_temperature',
    'MeasurementDeviceContainer',
    'build_device',
    'load_container',
]
