"""Tests for setting up and unloading Temperature Bridge entries."""

from homeassistant.loader import async_get_integration
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.temperature_bridge import get_conversion_settings
from custom_components.temperature_bridge.const import BRIDGE_DATA, DOMAIN


async def test_setup_entry_stores_settings(hass, loaded_entry) -> None:
    """Test that setup keeps the settings built from entry options."""
    settings = hass.data[DOMAIN][loaded_entry.entry_id][BRIDGE_DATA]
    assert settings.as_options() == dict(loaded_entry.options)
    assert get_conversion_settings(hass) is settings
    assert get_conversion_settings(hass, loaded_entry.entry_id) is settings
    assert settings.get_target_unit("node-1") == "C"
    assert settings.get_target_unit("node-3") == "F"


async def test_setup_entry_with_invalid_options(
    hass, enable_custom_integrations
) -> None:
    """Test that bad stored options fall back per value instead of failing setup."""
    entry = MockConfigEntry(
        domain=DOMAIN,
        unique_id=DOMAIN,
        options={
            "system_conversion": "rankine",
            "device_conversions": {" a ": "force_celsius", "b": "bogus"},
        },
    )
    entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(entry.entry_id)
    await hass.async_block_till_done()

    assert get_conversion_settings(hass, entry.entry_id).as_options() == {
        "system_conversion": "none",
        "device_conversions": {"a": "force_celsius"},
    }


async def test_options_update_rebuilds_settings(hass, loaded_entry) -> None:
    """Test that changed options replace the stored settings."""
    before = get_conversion_settings(hass, loaded_entry.entry_id)
    hass.config_entries.async_update_entry(
        loaded_entry,
        options={"system_conversion": "celsius", "device_conversions": {}},
    )
    await hass.async_block_till_done()

    after = get_conversion_settings(hass, loaded_entry.entry_id)
    assert after is not before
    assert after.get_system_conversion() == "celsius"
    assert after.get_target_unit("node-1") == "C"
    assert before.get_system_conversion() == "fahrenheit"


async def test_unload_entry(hass, loaded_entry) -> None:
    assert await hass.config_entries.async_unload(loaded_entry.entry_id)
    await hass.async_block_till_done()

    assert loaded_entry.entry_id not in hass.data[DOMAIN]
    assert get_conversion_settings(hass, loaded_entry.entry_id).as_options() == {
        "system_conversion": "none",
        "device_conversions": {},
    }


async def test_integration_manifest(hass, enable_custom_integrations) -> None:
    integration = await async_get_integration(hass, DOMAIN)
    assert integration.name == "Temperature Bridge"
    assert integration.config_flow is True
    assert str(integration.version) == "0.1.0"
    assert integration.documentation is None
