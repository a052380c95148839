"""Состояние выбора материала."""

from .selection_state import SelectionState

__all__ = ["SelectionState"]
