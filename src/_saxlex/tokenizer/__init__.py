"""
In this module, tokenizing means a single forward pass over a complete text,
turning markup constructs into events (see _saxlex.tokenizer.event). The
tokenizer is lazy: an event is only scanned when it is requested, and a
consumer that stops iterating simply stops the scan.

The tokenizer is permissive. It never raises on malformed input. Unknown
'<!' and '<?' constructs produce an ErrorEvent and scanning continues at the
next '<' or after the next '>'. Unterminated constructs run to the end of
the text. Entities are not decoded and names are not validated.

The spans of the events cover the text without gaps or overlaps, except for
the parts skipped after an ErrorEvent, and the last event is always an
EndOfInputEvent.
"""

from .event import (
    Attributes,
    CDATAEvent,
    CommentEvent,
    DoctypeEvent,
    EmptyTagEvent,
    EndOfInputEvent,
    EndTagEvent,
    ErrorEvent,
    Event,
    ProcessingInstructionEvent,
    StartTagEvent,
    TextEvent,
    source_text,
)
from .event_kind import EventKind
from .markup_tokenizer import (
    INVALID_MARKUP,
    MarkupTokenizer,
    ScanState,
    TokenizerOptions,
)

__all__ = [
    "Attributes",
    "CDATAEvent",
    "CommentEvent",
    "DoctypeEvent",
    "EmptyTagEvent",
    "EndOfInputEvent",
    "EndTagEvent",
    "ErrorEvent",
    "Event",
    "EventKind",
    "INVALID_MARKUP",
    "MarkupTokenizer",
    "ProcessingInstructionEvent",
    "ScanState",
    "StartTagEvent",
    "TextEvent",
    "TokenizerOptions",
    "source_text",
]
