"""Constants for the Temperature Bridge integration."""

from typing import Final

DEFAULT_NAME = "Temperature Bridge"
DOMAIN = "temperature_bridge"
BRIDGE_DATA = "data"
CONF_SYSTEM_CONVERSION = "system_conversion"
CONF_DEVICE_CONVERSIONS = "device_conversions"
CONF_DEVICE_ID = "device_id"
CONF_DEVICE_CONVERSION = "device_conversion"

UNIT_CELSIUS = "C"
UNIT_FAHRENHEIT = "F"

TARGET_NONE = "none"
TARGET_CELSIUS = "celsius"
TARGET_FAHRENHEIT = "fahrenheit"

DEVICE_MODE_FOLLOW_SYSTEM = "follow_system"
DEVICE_MODE_NONE = "none"
DEVICE_MODE_FORCE_CELSIUS = "force_celsius"
DEVICE_MODE_FORCE_FAHRENHEIT = "force_fahrenheit"

DEFAULT_TEMPERATURE_CONVERSION_TARGET: Final = TARGET_NONE
DEFAULT_TEMPERATURE_DEVICE_CONVERSION_MODE: Final = DEVICE_MODE_FOLLOW_SYSTEM

SYSTEM_TEMPERATURE_CONVERSION_OPTIONS: Final = [
    {"value": TARGET_NONE, "label": "No conversion"},
    {"value": TARGET_CELSIUS, "label": "Celsius"},
    {"value": TARGET_FAHRENHEIT, "label": "Fahrenheit"},
]

DEVICE_TEMPERATURE_CONVERSION_OPTIONS: Final = [
    {"value": DEVICE_MODE_FOLLOW_SYSTEM, "label": "Follow system settings"},
    {"value": DEVICE_MODE_NONE, "label": "No conversion"},
    {"value": DEVICE_MODE_FORCE_CELSIUS, "label": "Force Celsius"},
    {"value": DEVICE_MODE_FORCE_FAHRENHEIT, "label": "Force Fahrenheit"},
]

CLUSTER_TEMPERATURE_MEASUREMENT = "temperaturemeasurement"
CLUSTER_THERMOSTAT = "thermostat"

TEMPERATURE_MEASUREMENT_ATTRIBUTES: Final = frozenset({"measuredValue"})

THERMOSTAT_TEMPERATURE_ATTRIBUTES: Final = frozenset(
    {
        "localTemperature",
        "outdoorTemperature",
        "occupiedHeatingSetpoint",
        "occupiedCoolingSetpoint",
        "unoccupiedHeatingSetpoint",
        "unoccupiedCoolingSetpoint",
        "absMinHeatSetpointLimit",
        "absMaxHeatSetpointLimit",
        "absMinCoolSetpointLimit",
        "absMaxCoolSetpointLimit",
        "minHeatSetpointLimit",
        "maxHeatSetpointLimit",
        "minCoolSetpointLimit",
        "maxCoolSetpointLimit",
    }
)
