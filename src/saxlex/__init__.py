import saxlex.version
from _saxlex.dispatcher import EventDispatcher, ParseInProgressError
from _saxlex.reading import lazy_scan, scan, scan_file
from _saxlex.tokenizer import (
    INVALID_MARKUP,
    Attributes,
    CDATAEvent,
    CommentEvent,
    DoctypeEvent,
    EmptyTagEvent,
    EndOfInputEvent,
    EndTagEvent,
    ErrorEvent,
    Event,
    EventKind,
    MarkupTokenizer,
    ProcessingInstructionEvent,
    ScanState,
    StartTagEvent,
    TextEvent,
    TokenizerOptions,
    source_text,
)

__version__ = saxlex.version.version

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
    "EventDispatcher",
    "EventKind",
    "INVALID_MARKUP",
    "MarkupTokenizer",
    "ParseInProgressError",
    "ProcessingInstructionEvent",
    "ScanState",
    "StartTagEvent",
    "TextEvent",
    "TokenizerOptions",
    "lazy_scan",
    "scan",
    "scan_file",
    "source_text",
]
