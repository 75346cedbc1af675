"""
Events produced by the markup tokenizer.

Each kind of event is its own frozen dataclass with a ``kind`` field holding
the matching EventKind, so consumers can branch on ``event.kind`` (or use a
match statement on the classes). Event is the union of all of them.

Offsets are indices into the scanned text, ``start`` inclusive and ``end``
exclusive. Payloads are raw slices of the text: nothing is entity decoded.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from _saxlex.tokenizer.event_kind import EventKind

# Attribute values are None for boolean attributes, ie. <input disabled>.
Attributes = Dict[str, Optional[str]]


@dataclass(frozen=True)
class CommentEvent:
    data: str
    start: int
    end: int
    kind: EventKind = field(default=EventKind.COMMENT, init=False)


@dataclass(frozen=True)
class CDATAEvent:
    data: str
    start: int
    end: int
    kind: EventKind = field(default=EventKind.CDATA, init=False)


@dataclass(frozen=True)
class DoctypeEvent:
    data: str
    start: int
    end: int
    kind: EventKind = field(default=EventKind.DOCTYPE, init=False)


@dataclass(frozen=True)
class ProcessingInstructionEvent:
    data: str
    start: int
    end: int
    kind: EventKind = field(default=EventKind.PROCESSING_INSTRUCTION, init=False)


@dataclass(frozen=True)
class StartTagEvent:
    name: str
    attributes: Attributes
    start: int
    end: int
    kind: EventKind = field(default=EventKind.START_TAG, init=False)


@dataclass(frozen=True)
class EndTagEvent:
    name: str
    start: int
    end: int
    kind: EventKind = field(default=EventKind.END_TAG, init=False)


@dataclass(frozen=True)
class EmptyTagEvent:
    name: str
    attributes: Attributes
    start: int
    end: int
    kind: EventKind = field(default=EventKind.EMPTY_TAG, init=False)


@dataclass(frozen=True)
class TextEvent:
    data: str
    start: int
    end: int
    kind: EventKind = field(default=EventKind.TEXT, init=False)


@dataclass(frozen=True)
class ErrorEvent:
    """
    Advisory event for malformed markup. Scanning continues after it.
    """

    message: str
    kind: EventKind = field(default=EventKind.ERROR, init=False)


@dataclass(frozen=True)
class EndOfInputEvent:
    kind: EventKind = field(default=EventKind.END_OF_INPUT, init=False)


Event = Union[
    CommentEvent,
    CDATAEvent,
    DoctypeEvent,
    ProcessingInstructionEvent,
    StartTagEvent,
    EndTagEvent,
    EmptyTagEvent,
    TextEvent,
    ErrorEvent,
    EndOfInputEvent,
]


def source_text(event, text):
    """
    :param event: Any event with a span, eg. StartTagEvent.
    :param text: The text the event was scanned from.
    :returns: The part of text covered by the event, ie. the full
        '<br class="x"/>' for the corresponding EmptyTagEvent.
    :raises ValueError: If the event does not carry a span.
    """
    if event.kind not in EventKind.spanned():
        raise ValueError(f"{event.kind} events do not cover any text")
    return text[event.start : event.end]
