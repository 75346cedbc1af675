import pathlib
from contextlib import contextmanager

from _saxlex.tokenizer import MarkupTokenizer


def scan(text, strict=False, debug=None):
    """
    Tokenize the given text and return the list of all its events,
    ie. scan("<br/>") == [EmptyTagEvent("br", {}, 0, 5), EndOfInputEvent()].
    """
    return list(MarkupTokenizer(text, strict=strict, debug=debug))


def read_text(filelike, encoding="utf-8"):
    """
    Read the complete contents of filelike, which is either a path or
    an open text stream. Paths are opened and closed again, streams are
    left open.
    """
    if isinstance(filelike, (str, pathlib.Path)):
        with open(filelike, "rt", encoding=encoding) as file_stream:
            return file_stream.read()
    return filelike.read()


def scan_file(filelike, encoding="utf-8", **options):
    """
    Reads a markup file and returns the list of its events,
    ie. events = scan_file("/my/file.xml").

    The whole file is read into memory before scanning starts.
    """
    return scan(read_text(filelike, encoding), **options)


@contextmanager
def lazy_scan(filelike, encoding="utf-8", **options):
    """
    Context manager giving an iterator of the events in a markup file,
    the file contents are read on entering.

    >>> with lazy_scan("/my/file.xml") as events:
    ...     for event in events:
    ...         print(event.kind)

    """
    yield iter(MarkupTokenizer(read_text(filelike, encoding), **options))
