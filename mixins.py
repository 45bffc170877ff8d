# mixins.py
from tkinter import ttk
from typing import Dict, Optional

MONO_FONT = ("TkFixedFont", 11)
TITLE_FONT = ("TkDefaultFont", 16, "bold")


class ThemingMixin:
    def apply_theme(self):
        try:
            style = ttk.Style(self)
            for theme in ("aqua", "vista", "clam"):
                if theme in style.theme_names():
                    style.theme_use(theme)
                    break
            style.configure("Title.TLabel", font=TITLE_FONT)
        except Exception:
            pass


class AccessibilityMixin:
    """Stable identifiers for widgets that UI automation looks up."""

    @staticmethod
    def widget_name(identifier: str) -> str:
        # Tk path components may not start with an uppercase letter.
        return identifier[:1].lower() + identifier[1:]

    def register_widget(self, identifier: str, widget):
        if not hasattr(self, "_widgets_by_id"):
            self._widgets_by_id: Dict[str, object] = {}
        self._widgets_by_id[identifier] = widget
        return widget

    def find_by_id(self, identifier: str) -> Optional[object]:
        return getattr(self, "_widgets_by_id", {}).get(identifier)

    def accessibility_ids(self):
        return list(getattr(self, "_widgets_by_id", {}))
