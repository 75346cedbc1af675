from enum import Enum, unique


@unique
class EventKind(Enum):
    COMMENT = "comment"
    CDATA = "cdata"
    DOCTYPE = "doctype"
    PROCESSING_INSTRUCTION = "processinginstruction"
    START_TAG = "start"
    END_TAG = "end"
    EMPTY_TAG = "empty"
    TEXT = "text"
    ERROR = "error"
    END_OF_INPUT = "eof"

    @classmethod
    def spanned(cls):
        """
        :returns: The kinds of events that carry a start/end offset pair.
        """
        return tuple(k for k in cls if k not in (cls.ERROR, cls.END_OF_INPUT))

    @classmethod
    def tags(cls):
        return (cls.START_TAG, cls.END_TAG, cls.EMPTY_TAG)

    @classmethod
    def lookup(cls, kind):
        """
        Resolve an event kind given either as an EventKind or as its
        string value, ie. EventKind.lookup("start") is EventKind.START_TAG.

        :raises ValueError: If kind does not name any event kind.
        """
        if isinstance(kind, cls):
            return kind
        try:
            return cls(kind)
        except ValueError as err:
            raise ValueError(
                f"Unknown event kind {kind!r}, expected one of "
                f"{[k.value for k in cls]}"
            ) from err
