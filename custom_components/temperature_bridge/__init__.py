"""Temperature unit conversion for bridged smart-home devices."""
import logging
from typing import Optional

import homeassistant.helpers.config_validation as cv
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from .const import BRIDGE_DATA, DOMAIN
from .settings import TemperatureConversionSettings

_LOGGER = logging.getLogger(__name__)


CONFIG_SCHEMA = cv.config_entry_only_config_schema(DOMAIN)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry):
    """Setup Temperature Bridge Entry"""
    hass.data.setdefault(DOMAIN, {})
    hass.data[DOMAIN].setdefault(entry.entry_id, {})

    settings = TemperatureConversionSettings.from_options(entry.options)
    hass.data[DOMAIN][entry.entry_id][BRIDGE_DATA] = settings
    entry.async_on_unload(entry.add_update_listener(async_update_options))

    _LOGGER.info(
        "Temperature conversion target %s with %d device overrides",
        settings.get_system_conversion(),
        len(settings.get_device_conversions()),
    )
    return True


async def async_update_options(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Rebuild settings after the options flow changed them."""
    hass.data[DOMAIN][entry.entry_id][BRIDGE_DATA] = (
        TemperatureConversionSettings.from_options(entry.options)
    )
    _LOGGER.debug("Reloaded temperature conversion options for %s", entry.title)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry):
    """Unload Entry"""
    hass.data.get(DOMAIN, {}).pop(entry.entry_id, None)
    return True


def get_conversion_settings(
    hass: HomeAssistant, entry_id: Optional[str] = None
) -> TemperatureConversionSettings:
    """Return the loaded conversion settings, or defaults when not set up."""
    entries = hass.data.get(DOMAIN, {})
    if entry_id is not None:
        entry_data = entries.get(entry_id)
    else:
        entry_data = next(iter(entries.values()), None)
    if not entry_data or BRIDGE_DATA not in entry_data:
        return TemperatureConversionSettings()
    return entry_data[BRIDGE_DATA]
