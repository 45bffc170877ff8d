from unittest import mock

import pytest

tk = pytest.importorskip("tkinter")

from config import AppConfig
from gui import APP_TITLE, TodoFetcherApp
from state import PLACEHOLDER_TEXT


@pytest.fixture
def app():
    try:
        a = TodoFetcherApp(AppConfig())
    except tk.TclError:
        pytest.skip("no display available")
    a.withdraw()
    yield a
    a.destroy()


def test_widgets_have_stable_identifiers(app):
    assert app.accessibility_ids() == ["Title", "ButtonA", "ButtonB", "ButtonC", "ResponseText"]
    assert app.find_by_id("Title").cget("text") == APP_TITLE
    assert app.find_by_id("ButtonB").cget("text") == "Button B"
    assert str(app.find_by_id("ButtonC")).endswith(".buttonC")
    assert app.find_by_id("Missing") is None


def test_response_region_starts_with_placeholder_and_is_read_only(app):
    assert app.response_text() == PLACEHOLDER_TEXT
    assert str(app.txt_response.cget("state")) == "disabled"


def test_button_fetches_and_renders(app):
    body = b'{"userId":1,"id":1}'
    with mock.patch("todo_client.requests.get",
                    return_value=mock.Mock(status_code=200, content=body)):
        app.find_by_id("ButtonA").invoke()
        assert app.response_text() == "Loading product 1..."
        app.trigger.last_worker.join(timeout=5)
    app.ui_queue.drain()
    assert app.response_text() == body.decode()
