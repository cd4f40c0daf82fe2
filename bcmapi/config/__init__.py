from .constants import (
    ENVELOPE_PAYLOAD_KEYS,
    ERROR_KEY,
    ITEMS_KEY,
    PAGE_NUMBER_KEY,
    PAGE_SIZE_KEY,
    RESULT_KEY,
    TOTAL_COUNT_KEY,
    EnvelopeFlavor,
)
from .environment import SerializerEnvironmentConfig, get_environment

__all__ = [
    "ENVELOPE_PAYLOAD_KEYS",
    "ERROR_KEY",
    "ITEMS_KEY",
    "PAGE_NUMBER_KEY",
    "PAGE_SIZE_KEY",
    "RESULT_KEY",
    "TOTAL_COUNT_KEY",
    "EnvelopeFlavor",
    "SerializerEnvironmentConfig",
    "get_environment",
]
