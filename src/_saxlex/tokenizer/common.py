# Whitespace as in https://www.w3.org/TR/xml/#sec-common-syn
WHITESPACE = frozenset(" \t\n\r")


def is_whitespace(text, index):
    """
    :returns: True if there is a whitespace character at index in text,
        False for any other character or when index is past the end.
    """
    return index < len(text) and text[index] in WHITESPACE


def read_until(text, cursor, token):
    """
    Find the next occurrence of token in text, searching from cursor.

    >>> read_until("<a>b</a>", 1, "<")
    4

    :returns: The offset of the first character of token, or len(text)
        if token does not occur at or after cursor.
    """
    index = text.find(token, cursor)
    if index < 0:
        return len(text)
    return index


def read_past(text, cursor, token):
    """
    Like read_until but returns the offset just after token. When token does
    not occur the result is clamped to len(text).
    """
    index = text.find(token, cursor)
    if index < 0:
        return len(text)
    return index + len(token)


def matches_keyword(text, cursor, keyword, ignore_case=False):
    """
    :returns: True if text contains keyword at cursor and the keyword is
        immediately followed by a whitespace character.
    """
    end = cursor + len(keyword)
    word = text[cursor:end]
    if ignore_case:
        word = word.lower()
        keyword = keyword.lower()
    return word == keyword and is_whitespace(text, end)
