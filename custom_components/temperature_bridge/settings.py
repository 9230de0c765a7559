"""System and per-device temperature conversion settings."""

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

import homeassistant.helpers.config_validation as cv
import voluptuous as vol

from .const import (
    CONF_DEVICE_CONVERSIONS,
    CONF_SYSTEM_CONVERSION,
    DEFAULT_TEMPERATURE_CONVERSION_TARGET,
    DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE,
    DEVICE_TEMPERATURE_CONVERSION_OPTIONS,
    SYSTEM_TEMPERATURE_CONVERSION_OPTIONS,
)
from .temperature import (
    TemperatureConversionResult,
    convert_temperature_value,
    is_temperature_attribute,
    resolve_temperature_target_unit,
)

_LOGGER = logging.getLogger(__name__)

SYSTEM_CONVERSION_VALUES = [
    option["value"] for option in SYSTEM_TEMPERATURE_CONVERSION_OPTIONS
]
DEVICE_CONVERSION_VALUES = [
    option["value"] for option in DEVICE_TEMPERATURE_CONVERSION_OPTIONS
]

SYSTEM_CONVERSION_SCHEMA = vol.In(SYSTEM_CONVERSION_VALUES)
DEVICE_CONVERSION_SCHEMA = vol.In(DEVICE_CONVERSION_VALUES)

OPTIONS_SCHEMA = vol.Schema(
    {
        vol.Optional(
            CONF_SYSTEM_CONVERSION, default=DEFAULT_TEMPERATURE_CONVERSION_TARGET
        ): SYSTEM_CONVERSION_SCHEMA,
        vol.Optional(CONF_DEVICE_CONVERSIONS, default={}): vol.Schema(
            {cv.string: DEVICE_CONVERSION_SCHEMA}
        ),
    },
    extra=vol.REMOVE_EXTRA,
)


class TemperatureConversionSettings:
    """Hold the system target and per-device conversion overrides."""

    def __init__(
        self,
        system_conversion: str = DEFAULT_TEMPERATURE_CONVERSION_TARGET,
        device_conversions: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Init TemperatureConversionSettings object."""
        self._system_conversion = system_conversion
        self._device_conversions = MappingProxyType(dict(device_conversions or {}))

    @classmethod
    def from_options(cls, options: Optional[Mapping[str, Any]]):
        """Build settings from config entry options.

        Invalid values are dropped one by one with a warning; the rest of the
        options are kept.
        """
        options = options or {}
        system_conversion = options.get(
            CONF_SYSTEM_CONVERSION, DEFAULT_TEMPERATURE_CONVERSION_TARGET
        )
        try:
            system_conversion = SYSTEM_CONVERSION_SCHEMA(system_conversion)
        except vol.Invalid as err:
            _LOGGER.warning(
                "Ignoring invalid system temperature conversion %s: %s",
                system_conversion,
                err,
            )
            system_conversion = DEFAULT_TEMPERATURE_CONVERSION_TARGET

        raw_conversions = options.get(CONF_DEVICE_CONVERSIONS) or {}
        if not isinstance(raw_conversions, Mapping):
            _LOGGER.warning(
                "Ignoring invalid device temperature conversions: %s", raw_conversions
            )
            raw_conversions = {}

        device_conversions = {}
        for device_id, mode in raw_conversions.items():
            try:
                device_id = cv.string(device_id).strip()
                mode = DEVICE_CONVERSION_SCHEMA(mode)
            except vol.Invalid as err:
                _LOGGER.warning(
                    "Ignoring temperature conversion for device %s: %s", device_id, err
                )
                continue
            if device_id:
                device_conversions[device_id] = mode
        return cls(system_conversion, device_conversions)

    def as_options(self) -> dict[str, Any]:
        """Return config entry options reproducing these settings."""
        return {
            CONF_SYSTEM_CONVERSION: self._system_conversion,
            CONF_DEVICE_CONVERSIONS: dict(self._device_conversions),
        }

    def get_system_conversion(self) -> str:
        """Retrieve the system conversion target."""
        return self._system_conversion

    def get_device_conversions(self) -> Mapping[str, str]:
        """Retrieve the per-device overrides."""
        return self._device_conversions

    def get_device_conversion(self, device_id: Optional[str]) -> str:
        """Retrieve the conversion mode of a device."""
        if not device_id:
            return DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE
        return self._device_conversions.get(
            device_id, DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE
        )

    def get_target_unit(self, device_id: Optional[str]) -> Optional[str]:
        """Return the unit values of a device should be converted to."""
        return resolve_temperature_target_unit(
            self._system_conversion, self.get_device_conversion(device_id)
        )

    def convert_attribute(
        self,
        device_id: Optional[str],
        cluster_name: str,
        attribute_name: str,
        value: Optional[float],
        unit: Optional[str],
    ) -> TemperatureConversionResult:
        """Convert a cluster attribute value if it is a temperature."""
        if not is_temperature_attribute(cluster_name, attribute_name):
            return convert_temperature_value(value, unit, None)

        target_unit = self.get_target_unit(device_id)
        result = convert_temperature_value(value, unit, target_unit)
        if result.converted:
            _LOGGER.debug(
                "Device %s %s.%s converted %s %s -> %s %s",
                device_id,
                cluster_name,
                attribute_name,
                value,
                unit,
                result.value,
                result.unit,
            )
        return result

