"""
Units of measurement understood by Home Assistant.

Each family is a closed str enum whose value is the exact token Home
Assistant expects in 'unit_of_measurement'. The families are combined into
the untagged ``Unit`` union: on the wire only the token appears.
"""
from enum import Enum
from typing import Union


class PowerUnit(str, Enum):
    WATT = "W"
    KILO_WATT = "kW"


class VoltUnit(str, Enum):
    VOLT = "V"


class EnergyUnit(str, Enum):
    WATT_HOUR = "Wh"
    KILO_WATT_HOUR = "kWh"


class ElectricalUnit(str, Enum):
    CURRENT_AMPERE = "A"
    VOLT_AMPERE = "VA"


class AngleUnit(str, Enum):
    DEGREE = "°"


class CurrencyUnit(str, Enum):
    EURO = "€"
    DOLLAR = "$"
    CENT = "¢"


class TempUnit(str, Enum):
    CELSIUS = "°C"
    FAHRENHEIT = "°F"
    KELVIN = "K"


class TimeUnit(str, Enum):
    MICROSECONDS = "μs"
    MILLISECONDS = "ms"
    SECONDS = "s"
    MINUTES = "min"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"
    MONTHS = "m"
    YEARS = "y"


class LengthUnit(str, Enum):
    MILLIMETERS = "mm"
    CENTIMETERS = "cm"
    METERS = "m"
    KILOMETERS = "km"
    INCHES = "in"
    FEET = "ft"
    YARDS = "yd"
    MILES = "mi"


class FrequencyUnit(str, Enum):
    HERTZ = "Hz"
    GIGA_HERTZ = "GHz"


class PressureUnit(str, Enum):
    PA = "Pa"
    HPA = "hPa"
    BAR = "bar"
    MBAR = "mbar"
    INHG = "inHg"
    PSI = "psi"


class VolumeUnit(str, Enum):
    LITERS = "L"
    MILLILITERS = "mL"
    CUBIC_METERS = "m³"
    CUBIC_FEET = "ft³"
    GALLONS = "gal"
    FLUID_OUNCE = "fl. oz."


class VolumeFlowRateUnit(str, Enum):
    CUBIC_METERS_PER_HOUR = "m³/h"
    CUBIC_FEET_PER_MINUTE = "ft³/m"


class AreaUnit(str, Enum):
    SQUARE_METERS = "m²"


class MassUnit(str, Enum):
    GRAMS = "g"
    KILOGRAMS = "kg"
    MILLIGRAMS = "mg"
    MICROGRAMS = "µg"
    OUNCES = "oz"
    POUNDS = "lb"


class ConductivityUnit(str, Enum):
    CONDUCTIVITY = "µS/cm"


class LightUnit(str, Enum):
    LUX = "lx"


class UvUnit(str, Enum):
    UV_INDEX = "UV index"


class PercentageUnit(str, Enum):
    PERCENTAGE = "%"


class IrradiationUnit(str, Enum):
    WATTS_PER_SQUARE_METER = "W/m²"


class PrecipitationUnit(str, Enum):
    MILLIMETERS_PER_HOUR = "mm/h"


class ConcentrationUnit(str, Enum):
    MICROGRAMS_PER_CUBIC_METER = "µg/m³"
    MILLIGRAMS_PER_CUBIC_METER = "mg/m³"
    PARTS_PER_CUBIC_METER = "p/m³"
    PARTS_PER_MILLION = "ppm"
    PARTS_PER_BILLION = "ppb"


class SpeedUnit(str, Enum):
    MILLIMETERS_PER_DAY = "mm/d"
    INCHES_PER_DAY = "in/d"
    METERS_PER_SECOND = "m/s"
    INCHES_PER_HOUR = "in/h"
    KILOMETERS_PER_HOUR = "km/h"
    MILES_PER_HOUR = "mph"


class SignalStrengthUnit(str, Enum):
    DECIBELS = "dB"
    DECIBELS_MILLIWATT = "dBm"


class DataUnit(str, Enum):
    BITS = "bit"
    KILOBITS = "kbit"
    MEGABITS = "Mbit"
    GIGABITS = "Gbit"
    BYTES = "B"
    KILOBYTES = "kB"
    MEGABYTES = "MB"
    GIGABYTES = "GB"
    TERABYTES = "TB"
    PETABYTES = "PB"
    EXABYTES = "EB"
    ZETTABYTES = "ZB"
    YOTTABYTES = "YB"
    KIBIBYTES = "KiB"
    MEBIBYTES = "MiB"
    GIBIBYTES = "GiB"
    TEBIBYTES = "TiB"
    PEBIBYTES = "PiB"
    EXBIBYTES = "EiB"
    ZEBIBYTES = "ZiB"
    YOBIBYTES = "YiB"


class DataRateUnit(str, Enum):
    BITS_PER_SECOND = "bit/s"
    KILOBITS_PER_SECOND = "kbit/s"
    MEGABITS_PER_SECOND = "Mbit/s"
    GIGABITS_PER_SECOND = "Gbit/s"
    BYTES_PER_SECOND = "B/s"
    KILOBYTES_PER_SECOND = "kB/s"
    MEGABYTES_PER_SECOND = "MB/s"
    GIGABYTES_PER_SECOND = "GB/s"
    KIBIBYTES_PER_SECOND = "KiB/s"
    MEBIBYTES_PER_SECOND = "MiB/s"
    GIBIBYTES_PER_SECOND = "GiB/s"


# Length comes before Time so that a bare "m" read from YAML means meters.
UNIT_FAMILIES = (
    PowerUnit,
    VoltUnit,
    EnergyUnit,
    ElectricalUnit,
    AngleUnit,
    CurrencyUnit,
    TempUnit,
    LengthUnit,
    TimeUnit,
    FrequencyUnit,
    PressureUnit,
    VolumeUnit,
    VolumeFlowRateUnit,
    AreaUnit,
    MassUnit,
    ConductivityUnit,
    LightUnit,
    UvUnit,
    PercentageUnit,
    IrradiationUnit,
    PrecipitationUnit,
    ConcentrationUnit,
    SpeedUnit,
    SignalStrengthUnit,
    DataUnit,
    DataRateUnit,
)

Unit = Union[
    PowerUnit,
    VoltUnit,
    EnergyUnit,
    ElectricalUnit,
    AngleUnit,
    CurrencyUnit,
    TempUnit,
    LengthUnit,
    TimeUnit,
    FrequencyUnit,
    PressureUnit,
    VolumeUnit,
    VolumeFlowRateUnit,
    AreaUnit,
    MassUnit,
    ConductivityUnit,
    LightUnit,
    UvUnit,
    PercentageUnit,
    IrradiationUnit,
    PrecipitationUnit,
    ConcentrationUnit,
    SpeedUnit,
    SignalStrengthUnit,
    DataUnit,
    DataRateUnit,
]


def render_unit(unit: Unit) -> str:
    """Return the wire token for a unit, without any family discriminator."""
    if not isinstance(unit, UNIT_FAMILIES):
        raise TypeError(f"Not a unit of measurement: {unit!r}")
    return unit.value
