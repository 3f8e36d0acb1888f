"""View implementations for GUI."""

from .gui_presenter import GUIPresenter

__all__ = ["GUIPresenter"]
