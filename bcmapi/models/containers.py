"""Generic wrappers: paged item collections and write-call result envelopes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, Optional, TypeVar

from marshmallow import fields, pre_load

from ..config import (
    ENVELOPE_PAYLOAD_KEYS,
    ITEMS_KEY,
    PAGE_NUMBER_KEY,
    PAGE_SIZE_KEY,
    TOTAL_COUNT_KEY,
    EnvelopeFlavor,
)
from ..exceptions import describe_type
from ..schemas import BrightcoveSchema, Entity, WireInteger

T = TypeVar("T")


def _type_label(type_key: Any) -> str:
    return "".join(ch for ch in describe_type(type_key) if ch.isalnum())


def _empty_items() -> list[Any]:
    return []


@dataclass
class ItemCollection(Generic[T]):
    """One page of items returned by a find call, in server order."""

    items: list[T] = field(default_factory=_empty_items)
    page_number: int = 0
    page_size: int = 0
    total_count: int = 0

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> T:
        return self.items[index]


@dataclass
class ResultEnvelope(Generic[T]):
    """Wraps the single ``result`` value returned by a write call."""

    result: Optional[T] = None

    def unwrap(self) -> Optional[T]:
        return self.result


class ItemCollectionSchema(BrightcoveSchema):
    __model__ = ItemCollection

    page_number = WireInteger(data_key=PAGE_NUMBER_KEY)
    page_size = WireInteger(data_key=PAGE_SIZE_KEY)
    total_count = WireInteger(data_key=TOTAL_COUNT_KEY)

    @pre_load
    def _wrap_bare_list(self, data: Any, **_: Any) -> Any:
        if isinstance(data, list):
            return {ITEMS_KEY: data}
        return data

    @classmethod
    def for_item(cls, item_type: Any) -> type["ItemCollectionSchema"]:
        return cls.from_dict(  # type: ignore[return-value]
            {"items": fields.List(Entity(item_type), data_key=ITEMS_KEY)},
            name=f"{_type_label(item_type)}CollectionSchema",
        )


class ResultEnvelopeSchema(BrightcoveSchema):
    __model__ = ResultEnvelope

    @classmethod
    def for_payload(
        cls, payload_type: Any, flavor: EnvelopeFlavor
    ) -> type["ResultEnvelopeSchema"]:
        return cls.from_dict(  # type: ignore[return-value]
            {"result": Entity(payload_type, data_key=ENVELOPE_PAYLOAD_KEYS[flavor])},
            name=f"{_type_label(payload_type)}EnvelopeSchema",
        )


__all__ = [
    "ItemCollection",
    "ResultEnvelope",
    "ItemCollectionSchema",
    "ResultEnvelopeSchema",
]
