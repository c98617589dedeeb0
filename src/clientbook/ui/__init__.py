"""Terminal user interface."""

from clientbook.ui.app import build_logic, run
from clientbook.ui.view import PersonListView

__all__ = ["PersonListView", "build_logic", "run"]
