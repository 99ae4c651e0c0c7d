"""Textual front end for the document tracker."""

from .controller import EditorController, EditorUIHooks

__all__ = ["EditorController", "EditorUIHooks"]
