from __future__ import annotations

from enum import Enum
from typing import Final, Mapping

# ---------------------------------------------------------------------------
# Reserved wire keys
# ---------------------------------------------------------------------------
ERROR_KEY: Final[str] = "error"
RESULT_KEY: Final[str] = "result"

ITEMS_KEY: Final[str] = "items"
PAGE_NUMBER_KEY: Final[str] = "page_number"
PAGE_SIZE_KEY: Final[str] = "page_size"
TOTAL_COUNT_KEY: Final[str] = "total_count"


# ---------------------------------------------------------------------------
# Write-method result envelopes
# ---------------------------------------------------------------------------
class EnvelopeFlavor(str, Enum):
    RESULT_ID = "result_id"
    RESULT_ID_LIST = "result_id_list"
    UPLOAD_STATUS = "upload_status"
    ENTITY = "entity"
    COLLECTION = "collection"


# The media API reports every write result under the same key.
ENVELOPE_PAYLOAD_KEYS: Final[Mapping[EnvelopeFlavor, str]] = {
    EnvelopeFlavor.RESULT_ID: RESULT_KEY,
    EnvelopeFlavor.RESULT_ID_LIST: RESULT_KEY,
    EnvelopeFlavor.UPLOAD_STATUS: RESULT_KEY,
    EnvelopeFlavor.ENTITY: RESULT_KEY,
    EnvelopeFlavor.COLLECTION: RESULT_KEY,
}


__all__ = [
    "ERROR_KEY",
    "RESULT_KEY",
    "ITEMS_KEY",
    "PAGE_NUMBER_KEY",
    "PAGE_SIZE_KEY",
    "TOTAL_COUNT_KEY",
    "EnvelopeFlavor",
    "ENVELOPE_PAYLOAD_KEYS",
]
