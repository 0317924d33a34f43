from enum import Enum


class ToolMode(Enum):
    """Tool selected in the toolbar."""
    SELECT = "select"
    DRAW = "draw"
    HIGHLIGHT = "highlight"
    TEXT = "text"
