from typing import Optional, List
from pydantic import BaseModel, Field, field_validator, model_validator
from labdevices.hierarchy.base import Material, DeviceKind
from labdevices.hierarchy.devices import TemperatureScale

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    level: str = "WARNING"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator('level')
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}', expected one of {', '.join(LOG_LEVELS)}")
        return level


class MenuConfig(BaseModel):
    add_devices_on_startup: bool = True  # Run the interactive add-device loop before the main menu


class DeviceConfig(BaseModel):
    """A device created at start-up, before the menu runs."""
    type: DeviceKind = DeviceKind.MEASUREMENT
    name: str
    unit: str
    min_value: float = 0.0
    max_value: float = 0.0
    material: Material = Material.PLASTIC
    scale: Optional[TemperatureScale] = None  # temperature devices only, defaults to Celsius

    @model_validator(mode='after')
    def validate_scale(self):
        """Only temperature devices carry a display scale."""
        if self.type == DeviceKind.MEASUREMENT and self.scale is not None:
            raise ValueError(f"Device '{self.name}' is a measurement device and cannot have a scale")
        if self.type == DeviceKind.TEMPERATURE and self.scale is None:
            self.scale = TemperatureScale.CELSIUS
        return self


class LabConfig(BaseModel):
    logging: LoggingConfig = LoggingConfig()
    menu: MenuConfig = MenuConfig()
    # Seed devices, appended in order
    devices: List[DeviceConfig] = Field(default_factory=list)
