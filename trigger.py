# trigger.py
import logging
from typing import Optional

from adapters import TodoFetchAdapter, error_text, loading_text
from decorators import catch_errors, run_in_thread
from state import DisplayState, UiQueue

logger = logging.getLogger(__name__)


class FetchTrigger:
    """Sets the loading text, fetches in the background, posts the result back.

    Nothing guards against overlapping fetches: whichever result is drained
    last is what the view shows.
    """

    def __init__(self, state: DisplayState, adapter: TodoFetchAdapter, ui_queue: UiQueue):
        self.state = state
        self.adapter = adapter
        self.ui_queue = ui_queue
        self.last_worker = None

    def fetch(self, todo_id: int):
        logger.info("Fetching product %s", todo_id)
        self.state.set(loading_text(todo_id))
        self.last_worker = self._fetch_in_background(todo_id)
        return self.last_worker

    @run_in_thread
    @catch_errors
    def _fetch_in_background(self, todo_id: int):
        text = self.adapter.run(todo_id)
        self.ui_queue.post(self.state.set, text)

    def _report_error(self, error: Exception, todo_id: Optional[int] = None, *args, **kwargs):
        self.ui_queue.post(self.state.set, error_text(todo_id, error))
