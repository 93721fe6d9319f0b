"""Textual host: the controller is importable without textual installed."""

from .controller import TextualEdAdapter, TextualUIHooks

__all__ = ["TextualEdAdapter", "TextualUIHooks"]
