"""Parsing of raw identifiers coming in from handlers."""

from typing import Protocol, TypeVar

from events.domain.errors import InvalidEventIdError, InvalidIdError
from events.domain.value_objects import EventId

IdT = TypeVar("IdT", covariant=True)


class _ParsableId(Protocol[IdT]):
    def from_string(self, value: str) -> IdT: ...


def parse_id(id_type: _ParsableId[IdT], raw: str, kind: str) -> IdT:
    """Parse a UUID-backed identifier or raise InvalidIdError."""
    try:
        return id_type.from_string(str(raw))
    except ValueError:
        raise InvalidIdError(kind=kind) from None


def parse_event_id(raw: str) -> EventId:
    try:
        return EventId.from_string(str(raw))
    except ValueError:
        raise InvalidEventIdError() from None
