# decorators.py
import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)


def run_in_thread(fn: Callable) -> Callable:
    """Run a blocking handler in a daemon thread so the UI remains responsive."""
    def wrapper(*args, **kwargs):
        t = threading.Thread(target=fn, args=args, kwargs=kwargs, daemon=True)
        t.start()
        return t
    return wrapper


def catch_errors(fn: Callable) -> Callable:
    """Catch exceptions, log them and hand them to ``_report_error`` when available."""
    def wrapper(self, *args, **kwargs):
        try:
            return fn(self, *args, **kwargs)
        except Exception as e:
            logger.exception("Unhandled error in %s", fn.__name__)
            if hasattr(self, "_report_error"):
                self._report_error(e, *args, **kwargs)
    return wrapper
