from unittest import mock

import pytest
import requests

from todo_client import InvalidURLError, TodoClient


def test_todo_url_interpolates_id():
    client = TodoClient()
    assert client.todo_url(2) == "https://jsonplaceholder.typicode.com/todos/2"


def test_todo_url_rejects_unpreparable_base():
    client = TodoClient(base_url="not a url")
    with pytest.raises(InvalidURLError):
        client.todo_url(1)


def test_get_body_returns_raw_bytes_without_checking_status():
    client = TodoClient(timeout=5)
    resp = mock.Mock(status_code=404, content=b"{}")
    with mock.patch("todo_client.requests.get", return_value=resp) as get:
        assert client.get_body(1) == b"{}"
    get.assert_called_once_with("https://jsonplaceholder.typicode.com/todos/1", timeout=5)


def test_get_body_propagates_transport_errors():
    client = TodoClient()
    with mock.patch("todo_client.requests.get",
                    side_effect=requests.ConnectionError("connection refused")):
        with pytest.raises(requests.ConnectionError):
            client.get_body(3)
