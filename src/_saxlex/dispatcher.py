"""
The dispatcher consumes the events of a MarkupTokenizer and pushes each of
them to the listeners registered for its kind, in the manner of a SAX parser.
"""

import asyncio
import inspect
import logging
import threading
import warnings
from collections import defaultdict

from _saxlex.tokenizer import EventKind, MarkupTokenizer

logger = logging.getLogger(__name__)


class ParseInProgressError(RuntimeError):
    """
    Raised by EventDispatcher.parse if the same dispatcher is already
    parsing, ie. when parse is called from within a listener. This is a
    usage error and unrelated to the ErrorEvents produced for bad markup.
    """

    pass


def _as_callable(listener):
    """
    Listeners are either callables taking the event, or objects with
    a handle_event method.
    """
    handle_event = getattr(listener, "handle_event", None)
    if callable(handle_event):
        return handle_event
    if callable(listener):
        return listener
    raise TypeError(
        f"Listener {listener!r} is neither callable nor has a handle_event method"
    )


def _schedule(awaitable, listener):
    """
    Listeners may be coroutine functions. Their results are not awaited,
    instead they are started as tasks on the running event loop.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        if inspect.iscoroutine(awaitable):
            awaitable.close()
        warnings.warn(
            f"Listener {listener!r} returned an awaitable but no event loop "
            "is running, it was discarded",
            RuntimeWarning,
            stacklevel=3,
        )
        return None
    return asyncio.ensure_future(awaitable)


class EventDispatcher:
    """
    Registry of listeners per event kind which drives a tokenizer to
    completion.

    >>> dispatcher = EventDispatcher("<p>hi</p>")
    >>> dispatcher.add_listener("text", lambda event: print(event.data))
    >>> dispatcher.parse()
    hi

    Listeners for the same kind are called in the order they were added,
    and events are dispatched in the order they are scanned.
    """

    def __init__(self, source, strict=False, debug=None):
        """
        :param source: Either the text to parse or a MarkupTokenizer.
        :param strict: See TokenizerOptions, ignored if given a tokenizer.
        :param debug: See TokenizerOptions, ignored if given a tokenizer.
        """
        if isinstance(source, MarkupTokenizer):
            self.tokenizer = source
        else:
            self.tokenizer = MarkupTokenizer(source, strict=strict, debug=debug)
        self.listeners = defaultdict(list)
        self._parsing = threading.Lock()

    @property
    def parsing(self):
        return self._parsing.locked()

    def add_listener(self, kind, listener):
        """
        :param kind: An EventKind or its value, eg. "start".
        :param listener: Callable or object with a handle_event method,
            called with each event of the given kind.
        """
        _as_callable(listener)
        self.listeners[EventKind.lookup(kind)].append(listener)

    def remove_listener(self, kind, listener):
        """
        Remove the first registration of listener for kind. Does nothing
        if the listener is not registered.
        """
        listeners = self.listeners[EventKind.lookup(kind)]
        if listener in listeners:
            listeners.remove(listener)

    def dispatch(self, event):
        # Copy so listeners may add or remove listeners while being called.
        for listener in list(self.listeners[event.kind]):
            result = _as_callable(listener)(event)
            if inspect.isawaitable(result):
                _schedule(result, listener)

    def parse(self):
        """
        Tokenize the whole text and dispatch every event.

        :raises ParseInProgressError: If this dispatcher is already parsing.
        """
        if not self._parsing.acquire(blocking=False):
            raise ParseInProgressError("Currently parsing")
        try:
            logger.debug("dispatching events")
            for event in self.tokenizer:
                self.dispatch(event)
        finally:
            self._parsing.release()
