"""Fixtures for Temperature Bridge tests."""

import pytest
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.temperature_bridge.const import DEFAULT_NAME, DOMAIN


@pytest.fixture
def config_entry():
    """Return an unsaved entry with a Fahrenheit target and two device overrides."""
    return MockConfigEntry(
        domain=DOMAIN,
        unique_id=DOMAIN,
        title=DEFAULT_NAME,
        data={},
        options={
            "system_conversion": "fahrenheit",
            "device_conversions": {"node-1": "force_celsius", "node-2": "none"},
        },
    )


@pytest.fixture
async def loaded_entry(hass, enable_custom_integrations, config_entry):
    """Add the entry to Home Assistant and set it up."""
    config_entry.add_to_hass(hass)
    assert await hass.config_entries.async_setup(config_entry.entry_id)
    await hass.async_block_till_done()
    return config_entry
