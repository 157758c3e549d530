"""Textual host for the editor."""

from .controller import TextualEditorAdapter, TextualUIHooks, format_status

__all__ = ["TextualEditorAdapter", "TextualUIHooks", "format_status"]
