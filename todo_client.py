# todo_client.py
import logging
from typing import Optional

import requests

from config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class InvalidURLError(ValueError):
    """Raised when a todo URL cannot be prepared for sending."""


class TodoClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._timeout = timeout or DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def todo_url(self, todo_id: int) -> str:
        url = f"{self._base_url}/todos/{todo_id}"
        try:
            requests.Request("GET", url).prepare()
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise InvalidURLError(url) from e
        return url

    # Plain GET: no headers, no retry, status code is not checked.
    def get_body(self, todo_id: int) -> bytes:
        url = self.todo_url(todo_id)
        logger.info("GET %s", url)
        r = requests.get(url, timeout=self._timeout)
        logger.debug("GET %s -> %s (%d bytes)", url, r.status_code, len(r.content or b""))
        return r.content or b""
