from _saxlex.tokenizer.common import WHITESPACE, is_whitespace
from _saxlex.tokenizer.event_kind import EventKind

QUOTES = "\"'"


def _ignore(message):
    pass


class AttributeScanner:
    """
    Scans the attribute list of a start or empty tag, ie. everything
    following the tag name up to and including the closing '>' or '/>'.

    >>> scanner = AttributeScanner('<a href="x" hidden>', 3)
    >>> scanner.scan()
    <EventKind.START_TAG: 'start'>
    >>> scanner.attributes
    {'href': 'x', 'hidden': None}
    >>> scanner.cursor
    19

    The scanner is permissive: it never fails. Keys without a value are
    stored with the value None, values may be double quoted, single quoted
    or unquoted, and a backslash directly before the closing quote escapes
    it. Empty keys (eg. from '<a ="x">') are dropped. If the text ends
    before the tag is closed, whatever was gathered is kept and the tag is
    reported as a start tag.
    """

    def __init__(self, text, cursor, trace=_ignore):
        """
        :param text: The text being scanned.
        :param cursor: Offset of the first character after the tag name
            (and after the whitespace that ended it, if any).
        :param trace: Callable given progress messages.
        """
        self.text = text
        self.cursor = cursor
        self.trace = trace
        self.attributes = {}

    def scan(self):
        """
        Scan attributes until the end of the tag.

        :returns: EventKind.EMPTY_TAG if the tag was closed by '/>' and
            EventKind.START_TAG otherwise.
        """
        text = self.text
        while self.cursor < len(text):
            char = text[self.cursor]
            if char == ">":
                self.cursor += 1
                return EventKind.START_TAG
            if text.startswith("/>", self.cursor):
                self.cursor += 2
                return EventKind.EMPTY_TAG
            if char in WHITESPACE:
                self.cursor += 1
                continue
            self.trace("found attribute")
            key = self.scan_key()
            if self.scan_equals():
                self.store(key, self.scan_value(key))
            else:
                self.store(key, None)
        return EventKind.START_TAG

    def store(self, key, value):
        if key:
            self.attributes[key] = value

    def at_tag_end(self):
        text = self.text
        return text[self.cursor] == ">" or text.startswith("/>", self.cursor)

    def scan_key(self):
        """
        Consume an attribute key, stopping before '=', '>', '/>'
        or whitespace.
        """
        text = self.text
        start = self.cursor
        while self.cursor < len(text):
            if text[self.cursor] in WHITESPACE or text[self.cursor] == "=":
                break
            if self.at_tag_end():
                break
            self.cursor += 1
        return text[start : self.cursor]

    def scan_equals(self):
        """
        Skip whitespace and consume a following '='.

        :returns: True if a value follows, False if the attribute
            is a boolean attribute. In the latter case the character after
            the whitespace is left for the attribute loop.
        """
        text = self.text
        while is_whitespace(text, self.cursor):
            self.cursor += 1
        if self.cursor < len(text) and text[self.cursor] == "=":
            self.cursor += 1
            return True
        return False

    def scan_value(self, key):
        text = self.text
        while is_whitespace(text, self.cursor):
            self.cursor += 1
        self.trace(f"found key: {key}")
        if self.cursor < len(text) and text[self.cursor] in QUOTES:
            quote = text[self.cursor]
            self.cursor += 1
            value = self.scan_quoted_value(quote)
        else:
            value = self.scan_unquoted_value()
        self.trace(f"found value: {value}")
        return value

    def scan_quoted_value(self, quote):
        """
        Consume a quoted value and its closing quote. The opening quote
        has already been consumed.
        """
        text = self.text
        value = []
        while self.cursor < len(text):
            char = text[self.cursor]
            self.cursor += 1
            if char == quote:
                if value and value[-1] == "\\":
                    value[-1] = quote
                    continue
                break
            value.append(char)
        return "".join(value)

    def scan_unquoted_value(self):
        """
        Consume an unquoted value, stopping before whitespace, '>' or '/>'.
        """
        text = self.text
        start = self.cursor
        while self.cursor < len(text):
            if text[self.cursor] in WHITESPACE or self.at_tag_end():
                break
            self.cursor += 1
        return text[start : self.cursor]


def scan_attributes(text, cursor, trace=_ignore):
    """
    Convenience wrapper around AttributeScanner.

    :returns: Tuple of the closing EventKind (START_TAG or EMPTY_TAG), the
        attribute dictionary and the offset just after the tag.
    """
    scanner = AttributeScanner(text, cursor, trace)
    kind = scanner.scan()
    return kind, scanner.attributes, scanner.cursor
