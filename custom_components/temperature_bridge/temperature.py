"""Temperature unit normalization and Celsius/Fahrenheit conversion.

Every conversion goes through Celsius: the source unit is mapped to Celsius
using TEMPERATURE_FROM_UNITS, then Celsius is mapped to the target unit using
TEMPERATURE_TO_UNITS. Units without an entry in those tables (Kelvin, for
example) are still normalized but never converted.
"""

import logging
from typing import Callable, NamedTuple, Optional

from homeassistant.const import UnitOfTemperature

from .const import (
    CLUSTER_TEMPERATURE_MEASUREMENT,
    CLUSTER_THERMOSTAT,
    DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE,
    DEVICE_MODE_FORCE_CELSIUS,
    DEVICE_MODE_FORCE_FAHRENHEIT,
    DEVICE_MODE_NONE,
    TARGET_CELSIUS,
    TARGET_FAHRENHEIT,
    TEMPERATURE_MEASUREMENT_ATTRIBUTES,
    THERMOSTAT_TEMPERATURE_ATTRIBUTES,
    UNIT_CELSIUS,
    UNIT_FAHRENHEIT,
)

_LOGGER = logging.getLogger(__name__)


class TemperatureUnitConverter(NamedTuple):
    """Converts a value expressed in one of `units` to Celsius."""

    units: frozenset
    to_celsius: Callable[[float], float]


class TemperatureOutputConverter(NamedTuple):
    """Converts a Celsius value to one of `units`."""

    units: frozenset
    from_celsius: Callable[[float], float]


class TemperatureConversionResult(NamedTuple):
    """Outcome of convert_temperature_value."""

    value: Optional[float]
    converted: bool
    unit: Optional[str] = None


CELSIUS_UNITS = frozenset({"C", "CELSIUS", "DEGREE_CELSIUS", "DEGREES_CELSIUS", "°C"})
FAHRENHEIT_UNITS = frozenset(
    {"F", "FAHRENHEIT", "DEGREE_FAHRENHEIT", "DEGREES_FAHRENHEIT", "°F"}
)

TEMPERATURE_FROM_UNITS: tuple[TemperatureUnitConverter, ...] = (
    TemperatureUnitConverter(CELSIUS_UNITS, lambda value: value),
    TemperatureUnitConverter(FAHRENHEIT_UNITS, lambda value: (value - 32) * 5 / 9),
)

TEMPERATURE_TO_UNITS: tuple[TemperatureOutputConverter, ...] = (
    TemperatureOutputConverter(CELSIUS_UNITS, lambda value: value),
    TemperatureOutputConverter(FAHRENHEIT_UNITS, lambda value: value * 9 / 5 + 32),
)

# Exact matches only; "DEGREE_CELSIUS" and friends keep their own spelling
_NORMALIZED_UNIT_MAP: dict[str, str] = {
    "CELSIUS": UNIT_CELSIUS,
    "C": UNIT_CELSIUS,
    "FAHRENHEIT": UNIT_FAHRENHEIT,
    "F": UNIT_FAHRENHEIT,
}


def normalize_temperature_unit(unit: Optional[str]) -> Optional[str]:
    """Normalize free-form unit text to a canonical token.

    `°c` becomes `C`, `fahrenheit` becomes `F` and `degree fahrenheit`
    becomes `DEGREE_FAHRENHEIT`. Empty input gives None.
    """
    if not unit:
        return None
    normalized = (
        unit.upper().replace("°", "").replace("-", "_").replace(" ", "_").strip()
    )
    return _NORMALIZED_UNIT_MAP.get(normalized, normalized)


def _find_from_converter(unit: Optional[str]) -> Optional[TemperatureUnitConverter]:
    normalized = normalize_temperature_unit(unit)
    if not normalized:
        return None
    for converter in TEMPERATURE_FROM_UNITS:
        if normalized in converter.units:
            return converter
    return None


def _find_to_converter(unit: Optional[str]) -> Optional[TemperatureOutputConverter]:
    normalized = normalize_temperature_unit(unit)
    if not normalized:
        return None
    for converter in TEMPERATURE_TO_UNITS:
        if normalized in converter.units:
            return converter
    return None


def _known_unit(normalized: Optional[str]) -> Optional[str]:
    if normalized in (UNIT_CELSIUS, UNIT_FAHRENHEIT):
        return normalized
    return None


def convert_temperature_value(
    value: Optional[float], from_unit: Optional[str], to_unit: Optional[str]
) -> TemperatureConversionResult:
    """Convert a temperature between units, pivoting through Celsius.

    The value is only converted when both units are recognized and differ.
    Otherwise it is returned unchanged with `converted` set to False and
    `unit` set to the source unit when that is C or F.
    """
    normalized_from = normalize_temperature_unit(from_unit)
    normalized_to = normalize_temperature_unit(to_unit)
    unconverted = TemperatureConversionResult(
        value, False, _known_unit(normalized_from)
    )

    if (
        value is None
        or not normalized_to
        or not normalized_from
        or normalized_from == normalized_to
    ):
        return unconverted

    from_converter = _find_from_converter(normalized_from)
    to_converter = _find_to_converter(normalized_to)
    if from_converter is None or to_converter is None:
        _LOGGER.debug(
            "No temperature conversion from %s to %s", normalized_from, normalized_to
        )
        return unconverted

    celsius = from_converter.to_celsius(value)
    result = to_converter.from_celsius(celsius)
    return TemperatureConversionResult(result, True, _known_unit(normalized_to))


def resolve_temperature_target_unit(
    system_conversion: str,
    device_conversion: str = DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE,
) -> Optional[str]:
    """Return the unit values should be shown in, or None for no conversion.

    Device settings take priority over the system setting.
    """
    if device_conversion == DEVICE_MODE_NONE:
        return None
    if device_conversion == DEVICE_MODE_FORCE_CELSIUS:
        return UNIT_CELSIUS
    if device_conversion == DEVICE_MODE_FORCE_FAHRENHEIT:
        return UNIT_FAHRENHEIT
    if system_conversion == TARGET_CELSIUS:
        return UNIT_CELSIUS
    if system_conversion == TARGET_FAHRENHEIT:
        return UNIT_FAHRENHEIT
    return None


def to_temperature_unit_symbol(unit: Optional[str]) -> str:
    """Return the display symbol for a unit, or an empty string when unknown."""
    normalized = normalize_temperature_unit(unit)
    if normalized == UNIT_CELSIUS:
        return UnitOfTemperature.CELSIUS.value
    if normalized == UNIT_FAHRENHEIT:
        return UnitOfTemperature.FAHRENHEIT.value
    return ""


def is_temperature_attribute(cluster_name: str, attribute_name: str) -> bool:
    """Return whether a cluster attribute holds a temperature.

    The cluster name is matched case-insensitively, the attribute name exactly.
    """
    cluster = cluster_name.lower()
    if cluster == CLUSTER_TEMPERATURE_MEASUREMENT:
        return attribute_name in TEMPERATURE_MEASUREMENT_ATTRIBUTES
    if cluster == CLUSTER_THERMOSTAT:
        return attribute_name in THERMOSTAT_TEMPERATURE_ATTRIBUTES
    return False
