# adapters.py
import logging
from dataclasses import dataclass
from typing import Dict

import requests

from todo_client import InvalidURLError, TodoClient

logger = logging.getLogger(__name__)

INVALID_URL_TEXT = "Invalid URL"


@dataclass(frozen=True)
class ResourceInfo:
    todo_id: int
    label: str
    accessibility_id: str


RESOURCES: Dict[str, ResourceInfo] = {
    "ButtonA": ResourceInfo(todo_id=1, label="Button A", accessibility_id="ButtonA"),
    "ButtonB": ResourceInfo(todo_id=2, label="Button B", accessibility_id="ButtonB"),
    "ButtonC": ResourceInfo(todo_id=3, label="Button C", accessibility_id="ButtonC"),
}


def loading_text(todo_id: int) -> str:
    return f"Loading product {todo_id}..."


def error_text(todo_id: int, error: Exception) -> str:
    return f"Error fetching product {todo_id}: {error}"


def no_data_text(todo_id: int) -> str:
    return f"No data received for product {todo_id}"


class TodoFetchAdapter:
    """Turns one round trip through the client into the text to display.

    Transport errors win over the body; a body that is empty or not valid
    UTF-8 is reported as missing. The body is never parsed.
    """

    def __init__(self, client: TodoClient):
        self.client = client

    def run(self, todo_id: int) -> str:
        try:
            body = self.client.get_body(todo_id)
        except InvalidURLError as e:
            logger.warning("Invalid URL for product %s: %s", todo_id, e)
            return INVALID_URL_TEXT
        except requests.RequestException as e:
            logger.warning("Fetching product %s failed: %s", todo_id, e)
            return error_text(todo_id, e)
        try:
            text = body.decode("utf-8") if body else ""
        except UnicodeDecodeError:
            text = ""
        if not text:
            logger.warning("No data received for product %s", todo_id)
            return no_data_text(todo_id)
        logger.info("Product %s: %d bytes", todo_id, len(body))
        return text
