"""Config flow for Temperature Bridge integration."""
import logging

import voluptuous as vol
from homeassistant import config_entries, exceptions
from homeassistant.core import callback

from .const import (
    CONF_DEVICE_CONVERSION,
    CONF_DEVICE_CONVERSIONS,
    CONF_DEVICE_ID,
    CONF_SYSTEM_CONVERSION,
    DEFAULT_NAME,
    DEFAULT_TEMPERATURE_CONVERSION_TARGET,
    DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE,
    DEVICE_TEMPERATURE_CONVERSION_OPTIONS,
    DOMAIN,
    SYSTEM_TEMPERATURE_CONVERSION_OPTIONS,
)
from .settings import OPTIONS_SCHEMA, TemperatureConversionSettings

_LOGGER = logging.getLogger(__name__)
EDIT_KEY = "edit_selection"
EDIT_SYSTEM = "System Settings"
EDIT_DEVICE = "Device Settings"

SYSTEM_CONVERSION_LABELS = {
    option["value"]: option["label"] for option in SYSTEM_TEMPERATURE_CONVERSION_OPTIONS
}
DEVICE_CONVERSION_LABELS = {
    option["value"]: option["label"] for option in DEVICE_TEMPERATURE_CONVERSION_OPTIONS
}


def system_settings_schema(default=DEFAULT_TEMPERATURE_CONVERSION_TARGET):
    """Form schema for the system conversion target."""
    return vol.Schema(
        {
            vol.Required(CONF_SYSTEM_CONVERSION, default=default): vol.In(
                SYSTEM_CONVERSION_LABELS
            ),
        }
    )


def device_settings_schema():
    """Form schema asking which device to configure."""
    return vol.Schema({vol.Required(CONF_DEVICE_ID): str})


def device_conversion_schema(default=DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE):
    """Form schema for the conversion mode of one device."""
    return vol.Schema(
        {
            vol.Required(CONF_DEVICE_CONVERSION, default=default): vol.In(
                DEVICE_CONVERSION_LABELS
            ),
        }
    )


def validate_device_id(device_id):
    """Return the stripped device identifier, rejecting blank ones."""
    device_id = (device_id or "").strip()
    if not device_id:
        raise InvalidDeviceId
    return device_id


def apply_device_conversion(options, device_id, device_conversion):
    """Return new options with the override for device_id set or cleared.

    Choosing follow_system removes the override.
    """
    device_id = validate_device_id(device_id)
    settings = TemperatureConversionSettings.from_options(options)
    new_options = settings.as_options()
    if device_conversion == DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE:
        new_options[CONF_DEVICE_CONVERSIONS].pop(device_id, None)
    else:
        new_options[CONF_DEVICE_CONVERSIONS][device_id] = device_conversion
    return new_options


class ConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Temperature Bridge."""

    VERSION = 1

    async def async_step_user(self, user_input=None):
        """Handle the initial step."""
        await self.async_set_unique_id(DOMAIN)
        self._abort_if_unique_id_configured()

        if user_input is not None:
            return self.async_create_entry(
                title=DEFAULT_NAME,
                data={},
                options=OPTIONS_SCHEMA(
                    {CONF_SYSTEM_CONVERSION: user_input[CONF_SYSTEM_CONVERSION]}
                ),
            )

        return self.async_show_form(
            step_id="user", data_schema=system_settings_schema()
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        """Get the options flow for this handler."""
        return OptionsFlowHandler()


class OptionsFlowHandler(config_entries.OptionsFlow):
    """Handle a option flow for Temperature Bridge."""

    def __init__(self) -> None:
        """Initialize options flow."""
        self._device_id = None

    async def async_step_init(self, user_input=None):
        """Manage the options."""
        if user_input is not None:
            if user_input[EDIT_KEY] == EDIT_SYSTEM:
                return await self.async_step_system_settings()
            if user_input[EDIT_KEY] == EDIT_DEVICE:
                return await self.async_step_device_settings()

        return self.async_show_form(
            step_id="init",
            data_schema=vol.Schema(
                {
                    vol.Required(EDIT_KEY, default=EDIT_SYSTEM): vol.In(
                        [EDIT_SYSTEM, EDIT_DEVICE]
                    )
                },
            ),
        )

    async def async_step_system_settings(self, user_input=None):
        """Change the system conversion target, keeping device overrides."""
        settings = TemperatureConversionSettings.from_options(
            self.config_entry.options
        )

        if user_input is not None:
            options = settings.as_options()
            options[CONF_SYSTEM_CONVERSION] = user_input[CONF_SYSTEM_CONVERSION]
            return self.async_create_entry(title="", data=OPTIONS_SCHEMA(options))

        return self.async_show_form(
            step_id="system_settings",
            data_schema=system_settings_schema(settings.get_system_conversion()),
        )

    async def async_step_device_settings(self, user_input=None):
        """Ask which device to configure."""
        errors = {}
        if user_input is not None:
            try:
                self._device_id = validate_device_id(user_input.get(CONF_DEVICE_ID))
            except InvalidDeviceId:
                _LOGGER.debug(
                    "Rejected blank device id %r", user_input.get(CONF_DEVICE_ID)
                )
                errors["base"] = "invalid_device"
            else:
                return await self.async_step_device_conversion()

        settings = TemperatureConversionSettings.from_options(
            self.config_entry.options
        )
        configured = ", ".join(sorted(settings.get_device_conversions())) or "-"
        return self.async_show_form(
            step_id="device_settings",
            data_schema=device_settings_schema(),
            errors=errors,
            description_placeholders={"configured_devices": configured},
        )

    async def async_step_device_conversion(self, user_input=None):
        """Set or clear the conversion mode of the selected device."""
        if user_input is not None:
            options = apply_device_conversion(
                self.config_entry.options,
                self._device_id,
                user_input[CONF_DEVICE_CONVERSION],
            )
            return self.async_create_entry(title="", data=OPTIONS_SCHEMA(options))

        settings = TemperatureConversionSettings.from_options(
            self.config_entry.options
        )
        return self.async_show_form(
            step_id="device_conversion",
            data_schema=device_conversion_schema(
                settings.get_device_conversion(self._device_id)
            ),
            description_placeholders={"device_id": self._device_id},
        )


class InvalidDeviceId(exceptions.HomeAssistantError):
    """Error to indicate the device identifier is blank."""
