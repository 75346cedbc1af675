import logging
from dataclasses import dataclass
from typing import Callable, Optional

from _saxlex.tokenizer.attribute_scanner import scan_attributes
from _saxlex.tokenizer.common import (
    WHITESPACE,
    matches_keyword,
    read_past,
    read_until,
)
from _saxlex.tokenizer.event import (
    CDATAEvent,
    CommentEvent,
    DoctypeEvent,
    EmptyTagEvent,
    EndOfInputEvent,
    EndTagEvent,
    ErrorEvent,
    ProcessingInstructionEvent,
    StartTagEvent,
    TextEvent,
)
from _saxlex.tokenizer.event_kind import EventKind

logger = logging.getLogger(__name__)

INVALID_MARKUP = "Invalid XML"


@dataclass(frozen=True)
class TokenizerOptions:
    """
    :param strict: Reserved, has no effect on tokenization.
    :param debug: Called with a progress message at each decision point
        of the scan. Messages are also logged at DEBUG level.
    """

    strict: bool = False
    debug: Optional[Callable[[str], None]] = None


class ScanState:
    """
    A single pass over a text. Holds the cursor and hands out one event
    per call to advance().

    >>> state = ScanState("<br/>")
    >>> state.advance()
    EmptyTagEvent(name='br', attributes={}, start=0, end=5, kind=...)
    >>> state.advance()
    EndOfInputEvent(kind=<EventKind.END_OF_INPUT: 'eof'>)
    >>> state.advance() is None
    True

    """

    def __init__(self, text, options=None):
        self.text = text
        self.options = options or TokenizerOptions()
        self.cursor = 0
        self.started = False
        self.finished = False

    def trace(self, message):
        logger.debug(message)
        if self.options.debug is not None:
            self.options.debug(message)

    def advance(self):
        """
        :returns: The next event, or None after the EndOfInputEvent
            has been returned.
        """
        if self.finished:
            return None
        if not self.started:
            self.started = True
            self.trace("start parsing")
        if self.cursor >= len(self.text):
            self.finished = True
            self.trace("end parsing")
            return EndOfInputEvent()
        if self.text[self.cursor] == "<":
            return self.scan_markup()
        return self.scan_text()

    def scan_text(self):
        self.trace("found text")
        start = self.cursor
        self.cursor = read_until(self.text, start, "<")
        return TextEvent(self.text[start : self.cursor], start, self.cursor)

    def scan_markup(self):
        """
        Dispatch on the characters following a '<' at the cursor.
        """
        text = self.text
        start = self.cursor
        if text.startswith("<!--", start):
            self.trace("found <!--")
            return self.scan_delimited(CommentEvent, start + 4, "-->", start + 2)
        if text.startswith("<![CDATA[", start):
            self.trace("found <![CDATA[")
            return self.scan_delimited(CDATAEvent, start + 9, "]]>")
        if matches_keyword(text, start, "<!DOCTYPE"):
            self.trace("found <!DOCTYPE")
            # The whitespace after the keyword is not part of the payload.
            return self.scan_delimited(DoctypeEvent, start + 10, ">")
        if text.startswith("<!", start):
            return self.recover()
        if text.startswith("</", start):
            self.trace("found </")
            return self.scan_end_tag()
        if matches_keyword(text, start, "<?xml", ignore_case=True):
            self.trace("found <?xml")
            return self.scan_delimited(ProcessingInstructionEvent, start + 5, "?>")
        if text.startswith("<?", start):
            return self.recover()
        self.trace("found <")
        return self.scan_tag()

    def scan_delimited(self, event_type, data_start, terminator, search_from=None):
        """
        Scan a construct running until terminator, ie. a comment or a cdata
        section. An unterminated construct runs to the end of the text.

        :param event_type: The event class to create.
        :param data_start: Offset of the first payload character.
        :param terminator: The string closing the construct.
        :param search_from: Where to start searching for the terminator,
            defaults to data_start.
        """
        start = self.cursor
        if search_from is None:
            search_from = data_start
        data_end = read_until(self.text, search_from, terminator)
        self.cursor = min(data_end + len(terminator), len(self.text))
        data = self.text[data_start:data_end]
        return event_type(data, start, self.cursor)

    def scan_end_tag(self):
        start = self.cursor
        name_end = read_until(self.text, start + 2, ">")
        self.cursor = read_past(self.text, start + 2, ">")
        return EndTagEvent(self.text[start + 2 : name_end], start, self.cursor)

    def scan_tag_name(self):
        """
        Consume a tag name at the cursor. The name ends at '>', '/>' or
        whitespace; a whitespace terminator is consumed as well.
        """
        text = self.text
        name_start = self.cursor
        while self.cursor < len(text):
            char = text[self.cursor]
            if char == ">" or text.startswith("/>", self.cursor):
                return text[name_start : self.cursor]
            if char in WHITESPACE:
                self.cursor += 1
                return text[name_start : self.cursor - 1]
            self.cursor += 1
        return text[name_start : self.cursor]

    def scan_tag(self):
        start = self.cursor
        self.cursor += 1
        name = self.scan_tag_name()
        kind, attributes, self.cursor = scan_attributes(
            self.text, self.cursor, self.trace
        )
        if kind == EventKind.EMPTY_TAG:
            return EmptyTagEvent(name, attributes, start, self.cursor)
        return StartTagEvent(name, attributes, start, self.cursor)

    def recover(self):
        """
        Skip a malformed '<!' or '<?' construct. Scanning resumes at the
        next '<' or just after the next '>', whichever comes first.
        """
        start = self.cursor
        self.trace(f"invalid markup at {start}")
        self.cursor = min(
            read_until(self.text, start + 1, "<"),
            read_past(self.text, start + 1, ">"),
        )
        return ErrorEvent(INVALID_MARKUP)


class MarkupTokenizer:
    """
    The markup tokenizer is an iterable of events for a given text,
    see _saxlex.tokenizer.event. Each iteration is an independent pass over
    the text, so iterating twice gives the same events.

    >>> list(MarkupTokenizer("<p>hi</p>"))
    [StartTagEvent(name='p', ...), TextEvent(data='hi', ...), EndTagEvent(...), EndOfInputEvent(...)]

    """

    def __init__(self, text, strict=False, debug=None, options=None):
        """
        :param text: The complete text to tokenize.
        :param strict: See TokenizerOptions.
        :param debug: See TokenizerOptions.
        :param options: A TokenizerOptions, overrides strict and debug
            when given.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected text to be a str, got {type(text).__name__}")
        self.text = text
        if options is None:
            options = TokenizerOptions(strict=strict, debug=debug)
        self.options = options

    def scan(self):
        """
        :returns: A fresh ScanState positioned at the start of the text.
        """
        return ScanState(self.text, self.options)

    def __iter__(self):
        state = self.scan()
        while True:
            event = state.advance()
            if event is None:
                return
            yield event
