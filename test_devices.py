"""
Unit tests for the measurement device hierarchy
Tests activation, setters, temperature gating and display
"""

import pytest

from labdevices.hierarchy import (
    MeasurementDevice, TemperatureMeasurementDevice, Material, TemperatureScale,
    DeviceKind, convert_temperature
)


@pytest.fixture
def device():
    return MeasurementDevice("Voltmeter", "V", 0.0, 250.0, Material.PLASTIC)


@pytest.fixture
def thermometer():
    return TemperatureMeasurementDevice("Probe", "C", -50.0, 150.0, Material.METAL, TemperatureScale.CELSIUS)


class TestMaterial:
    """Test material lookup"""

    def test_from_choice(self):
        """Test 1-based menu codes map to materials in order"""
        assert Material.from_choice(1) is Material.PLASTIC
        assert Material.from_choice(2) is Material.METAL
        assert Material.from_choice(3) is Material.GLASS

    @pytest.mark.parametrize("code", [0, 4, -1])
    def test_out_of_range_rejected(self, code):
        """Test codes outside 1..3 are rejected"""
        with pytest.raises(ValueError):
            Material.from_choice(code)

    def test_str(self):
        assert str(Material.GLASS) == "Glass"


class TestTemperatureScale:
    """Test temperature scale lookup and conversion"""

    def test_from_choice(self):
        assert TemperatureScale.from_choice(1) is TemperatureScale.CELSIUS
        assert TemperatureScale.from_choice(2) is TemperatureScale.FAHRENHEIT
        assert TemperatureScale.from_choice(3) is TemperatureScale.KELVIN

    def test_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            TemperatureScale.from_choice(4)

    def test_convert_freezing_point(self):
        """Test conversion of 0 degrees Celsius"""
        assert convert_temperature(0, TemperatureScale.FAHRENHEIT) == 32
        assert convert_temperature(0, TemperatureScale.KELVIN) == 273.15

    @pytest.mark.parametrize("value", [-40.0, 0.0, 21.5, 1000.0])
    def test_celsius_is_identity(self, value):
        assert convert_temperature(value, TemperatureScale.CELSIUS) == value

    def test_convert_boiling_point(self):
        assert convert_temperature(100, TemperatureScale.FAHRENHEIT) == 212
        assert convert_temperature(100, TemperatureScale.KELVIN) == pytest.approx(373.15)

    def test_device_method_matches_function(self, thermometer):
        assert thermometer.convert_temperature(37, TemperatureScale.FAHRENHEIT) == pytest.approx(98.6)


class TestMeasurementDevice:
    """Test base measurement device"""

    def test_defaults(self, device):
        """Test a new device is inactive and is not a temperature device"""
        assert device.is_active is False
        assert device.kind is DeviceKind.MEASUREMENT
        assert device.as_temperature_device() is None

    def test_start_is_idempotent(self, device, capsys):
        """Test starting twice keeps the device active and only notifies once"""
        device.start_measuring()
        device.start_measuring()

        assert device.is_active is True
        assert capsys.readouterr().out.count("Start of measurement") == 1

    def test_stop_is_idempotent(self, device, capsys):
        """Test stopping twice keeps the device inactive"""
        device.start_measuring()
        device.stop_measuring()
        device.stop_measuring()

        assert device.is_active is False
        assert capsys.readouterr().out.count("End of measurement") == 1

    def test_stop_when_inactive_is_silent(self, device, capsys):
        device.stop_measuring()
        assert capsys.readouterr().out == ""

    def test_setters_overwrite(self, device):
        """Test setters overwrite without validation"""
        device.set_name("Ammeter")
        device.set_unit("A")
        device.set_min_value(10.0)
        device.set_max_value(-10.0)
        device.set_material(Material.GLASS)

        assert device.name == "Ammeter"
        assert device.unit == "A"
        assert device.min_value == 10.0
        assert device.max_value == -10.0
        assert device.material is Material.GLASS

    def test_print_info(self, device, capsys):
        """Test the printed block lists every field"""
        device.print_info()
        out = capsys.readouterr().out

        assert out == (
            "============\n"
            "Name: Voltmeter\n"
            "Unit: V\n"
            "Min Value: 0\n"
            "Max Value: 250\n"
            "Material: Plastic\n"
            "============\n"
        )

    def test_to_dict(self, device):
        data = device.to_dict()

        assert data['type'] == "measurement"
        assert data['name'] == "Voltmeter"
        assert data['material'] == "Plastic"
        assert data['is_active'] is False
        assert set(data) == {'type', 'name', 'unit', 'min_value', 'max_value', 'material', 'is_active'}


class TestTemperatureMeasurementDevice:
    """Test temperature measurement device"""

    def test_defaults(self, thermometer):
        assert thermometer.current_temperature == 0.0
        assert thermometer.temperature_scale is TemperatureScale.CELSIUS
        assert thermometer.kind is DeviceKind.TEMPERATURE
        assert thermometer.as_temperature_device() is thermometer

    def test_start_prints_both_notices(self, thermometer, capsys):
        """Test the base notice comes before the temperature notice"""
        thermometer.start_measuring()
        out = capsys.readouterr().out

        assert thermometer.is_active is True
        assert out.index("Start of measurement") < out.index("Temperature measurement started")

    def test_stop_prints_both_notices(self, thermometer, capsys):
        thermometer.start_measuring()
        capsys.readouterr()
        thermometer.stop_measuring()
        out = capsys.readouterr().out

        assert thermometer.is_active is False
        assert out.index("End of measurement") < out.index("Temperature measurement stopped")

    def test_set_temperature_while_inactive_is_rejected(self, thermometer, capsys):
        """Test a reading is dropped while the device is inactive"""
        assert thermometer.set_current_temperature(42.0) is False

        assert thermometer.current_temperature == 0.0
        assert "Device is not ACTIVE!!!" in capsys.readouterr().out

    def test_set_temperature_while_active(self, thermometer):
        thermometer.start_measuring()

        assert thermometer.set_current_temperature(42.0) is True
        assert thermometer.current_temperature == 42.0

    def test_rejected_value_is_not_applied_later(self, thermometer):
        """Test a rejected reading is not queued for when the device starts"""
        thermometer.set_current_temperature(42.0)
        thermometer.start_measuring()

        assert thermometer.current_temperature == 0.0

    def test_reading_survives_stop(self, thermometer):
        thermometer.start_measuring()
        thermometer.set_current_temperature(20.0)
        thermometer.stop_measuring()

        assert thermometer.current_temperature == 20.0

    def test_print_temperature_in_selected_scale(self, thermometer, capsys):
        """Test display converts from Celsius without changing the stored value"""
        thermometer.start_measuring()
        thermometer.set_current_temperature(25.0)
        thermometer.set_temperature_scale(TemperatureScale.KELVIN)
        capsys.readouterr()

        thermometer.print_temperature()

        assert capsys.readouterr().out == "Current Temperature: 298.15 Kelvin\n"
        assert thermometer.current_temperature == 25.0

    def test_print_info_appends_temperature(self, thermometer, capsys):
        thermometer.set_temperature_scale(TemperatureScale.FAHRENHEIT)
        thermometer.print_info()
        lines = capsys.readouterr().out.splitlines()

        assert lines[1] == "Name: Probe"
        assert lines[-2] == "============"
        assert lines[-1] == "Current Temperature: 32 Fahrenheit"

    def test_to_dict_includes_temperature(self, thermometer):
        data = thermometer.to_dict()

        assert data['type'] == "temperature"
        assert data['current_temperature'] == 0.0
        assert data['scale'] == "Celsius"
