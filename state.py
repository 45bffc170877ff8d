# state.py
import queue
import threading
from typing import Any, Callable, List

PLACEHOLDER_TEXT = "Click a button to fetch todo info"


class DisplayState:
    """The one piece of text the view shows.

    Owned by the view. Observers are called with the new value after every
    ``set``; callers are expected to be on the UI thread.
    """

    def __init__(self, value: str = PLACEHOLDER_TEXT):
        self._value = value
        self._observers: List[Callable[[str], Any]] = []

    @property
    def value(self) -> str:
        return self._value

    def get(self) -> str:
        return self._value

    def set(self, value: str):
        self._value = value
        for observer in list(self._observers):
            observer(value)

    def subscribe(self, observer: Callable[[str], Any]):
        self._observers.append(observer)
        observer(self._value)


class UiQueue:
    """Tasks posted from any thread, run on the thread that calls ``drain``."""

    def __init__(self):
        self._tasks: "queue.Queue" = queue.Queue()
        self._owner = threading.get_ident()

    def post(self, fn: Callable, *args, **kwargs):
        self._tasks.put((fn, args, kwargs))

    def drain(self) -> int:
        if threading.get_ident() != self._owner:
            raise RuntimeError("UiQueue.drain() called off the UI thread")
        ran = 0
        while True:
            try:
                fn, args, kwargs = self._tasks.get_nowait()
            except queue.Empty:
                return ran
            fn(*args, **kwargs)
            ran += 1

    def pending(self) -> int:
        return self._tasks.qsize()
