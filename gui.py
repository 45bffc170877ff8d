# gui.py
import logging
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional

from adapters import RESOURCES, TodoFetchAdapter
from config import AppConfig
from mixins import MONO_FONT, AccessibilityMixin, ThemingMixin
from state import DisplayState, UiQueue
from todo_client import TodoClient
from trigger import FetchTrigger

logger = logging.getLogger(__name__)

APP_TITLE = "Example Mac App"
DRAIN_INTERVAL_MS = 50


class TodoFetcherApp(tk.Tk, ThemingMixin, AccessibilityMixin):
    """Three buttons, one text region. Each button fetches one todo."""

    def __init__(self, config: Optional[AppConfig] = None):
        super().__init__()
        self.title(APP_TITLE)
        self.geometry("520x420")
        self.minsize(420, 360)
        self.apply_theme()

        self.config_ = config or AppConfig.from_env()
        self._client = TodoClient(self.config_.base_url, self.config_.timeout)
        self.display_state = DisplayState()
        self.ui_queue = UiQueue()
        self.trigger = FetchTrigger(self.display_state, TodoFetchAdapter(self._client), self.ui_queue)

        self._build_menubar()
        self._build_layout()
        self.display_state.subscribe(self._render_response)
        self._drain_job = self.after(DRAIN_INTERVAL_MS, self._drain_ui_queue)

    # ---- Menus ----
    def _build_menubar(self):
        menubar = tk.Menu(self)
        self.config(menu=menubar)

        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Exit", command=self.destroy)
        menubar.add_cascade(label="File", menu=file_menu)

        help_menu = tk.Menu(menubar, tearoff=0)
        help_menu.add_command(label="About", command=lambda: messagebox.showinfo(
            "About", f"{APP_TITLE} • fetches todos from {self.config_.base_url}"))
        menubar.add_cascade(label="Help", menu=help_menu)

    # ---- Layout ----
    def _build_layout(self):
        body = ttk.Frame(self, padding=12)
        body.pack(fill=tk.BOTH, expand=True)

        title = ttk.Label(body, text=APP_TITLE, style="Title.TLabel",
                          name=self.widget_name("Title"))
        title.pack(side=tk.TOP, pady=(10, 10))
        self.register_widget("Title", title)

        for identifier, info in RESOURCES.items():
            btn = ttk.Button(body, text=info.label, name=self.widget_name(identifier),
                             command=lambda todo_id=info.todo_id: self.fetch_product(todo_id))
            btn.pack(side=tk.TOP, pady=(0, 10))
            self.register_widget(identifier, btn)

        ttk.Separator(body, orient=tk.HORIZONTAL).pack(fill=tk.X, pady=(0, 10))

        # Read-only, scrollable, capped at roughly 200px.
        out_frame = tk.Frame(body, highlightthickness=1, highlightbackground="gray",
                             height=200)
        out_frame.pack(fill=tk.BOTH, expand=False)
        out_frame.pack_propagate(False)
        self.txt_response = tk.Text(out_frame, wrap=tk.WORD, font=MONO_FONT,
                                    borderwidth=0, padx=12, pady=12,
                                    name=self.widget_name("ResponseText"))
        self.txt_response.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        sb_out = ttk.Scrollbar(out_frame, command=self.txt_response.yview)
        sb_out.pack(side=tk.RIGHT, fill=tk.Y)
        self.txt_response.config(yscrollcommand=sb_out.set, state="disabled")
        self.register_widget("ResponseText", self.txt_response)

    # ---- Rendering ----
    def _render_response(self, text: str):
        self.txt_response.configure(state="normal")
        self.txt_response.delete("1.0", tk.END)
        self.txt_response.insert("1.0", text)
        self.txt_response.configure(state="disabled")

    def response_text(self) -> str:
        return self.txt_response.get("1.0", "end-1c")

    def _drain_ui_queue(self):
        self.ui_queue.drain()
        self._drain_job = self.after(DRAIN_INTERVAL_MS, self._drain_ui_queue)

    # ---- Buttons ----
    def fetch_product(self, todo_id: int):
        return self.trigger.fetch(todo_id)

    def destroy(self):
        if getattr(self, "_drain_job", None) is not None:
            self.after_cancel(self._drain_job)
            self._drain_job = None
        super().destroy()


def main():
    config = AppConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info("Starting %s against %s", APP_TITLE, config.base_url)
    TodoFetcherApp(config).mainloop()


if __name__ == "__main__":
    main()
