"""
Indentation-aware line builder

Configuration (indent style and width) is set fluently; lines are added at the
current depth and joined once at the end.
"""
from enum import Enum
from typing import List, Optional


DEFAULT_TAB_SIZE = 4


class IndentationType(str, Enum):
    """Indentation unit"""
    SPACES = "spaces"
    TABS = "tabs"


class IndentationAwareStringBuilder:
    """Accumulates lines, prefixing each with the indentation of the current depth"""

    def __init__(self):
        self._indentation_type = IndentationType.SPACES
        self._tab_size: Optional[int] = DEFAULT_TAB_SIZE
        self._level = 0
        self._buffer: List[str] = []

    def with_indentation_type(self, indentation_type: IndentationType) -> 'IndentationAwareStringBuilder':
        """Switch indentation unit; spaces reset the width to the default"""
        self._indentation_type = IndentationType(indentation_type)
        self._tab_size = DEFAULT_TAB_SIZE if self._indentation_type == IndentationType.SPACES else None
        return self

    def with_tab_size(self, tab_size: int) -> 'IndentationAwareStringBuilder':
        """Number of spaces per level (ignored for tabs)"""
        if tab_size < 0:
            raise ValueError("Tab size cannot be negative")
        self._tab_size = tab_size
        return self

    @property
    def indentation_level(self) -> int:
        return self._level

    @property
    def indent_unit(self) -> str:
        if self._indentation_type == IndentationType.TABS:
            return "\t"
        return " " * (self._tab_size if self._tab_size is not None else DEFAULT_TAB_SIZE)

    def add(self, line: str) -> 'IndentationAwareStringBuilder':
        self._buffer.append(f"{self.indent_unit * self._level}{line}")
        return self

    def increase_indentation(self) -> 'IndentationAwareStringBuilder':
        self._level += 1
        return self

    def decrease_indentation(self) -> 'IndentationAwareStringBuilder':
        if self._level == 0:
            raise ValueError("Indentation level is already zero")
        self._level -= 1
        return self

    def lines(self) -> List[str]:
        return list(self._buffer)

    def build_string(self) -> str:
        return "\n".join(self._buffer)
