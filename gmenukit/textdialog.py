"""Scrollable, word-wrapped text viewing."""

from __future__ import annotations

from typing import Callable, Optional

from .settings import Action
from .utilities import split, trim

TextWidth = Callable[[str], int]

_COLUMN_STEP = 30
_COLUMN_MARGIN = 10


def _join_words(words: list[str]) -> str:
    return trim(" ".join(words))


def wrap_lines(raw_text: str, max_width: int,
               text_width: Optional[TextWidth] = None) -> list[str]:
    """Split ``raw_text`` into lines no wider than ``max_width`` where possible.

    Lines are broken at spaces; a line that cannot be broken (a single long
    word) is kept as it is, and lines that already fit are left untouched.
    """
    measure = text_width or len
    lines = split(raw_text, "\n")
    index = 0
    while index < len(lines):
        row = trim(lines[index])
        if measure(row) > max_width:
            words = split(row, " ")
            count = len(words)
            while measure(row) > max_width and count > 0:
                count -= 1
                row = _join_words(words[:count])
            if count > 0:
                lines[index] = row
                rest = _join_words(words[count:])
                if rest:
                    lines.insert(index + 1, rest)
        index += 1
    return lines


class TextView:
    """A page of text lines with vertical and horizontal scrolling."""

    def __init__(self, rows_per_page: int, view_width: int,
                 text_width: Optional[TextWidth] = None) -> None:
        self.rows_per_page = rows_per_page
        self.view_width = view_width
        self._measure: TextWidth = text_width or len
        self.raw_text = ""
        self.lines: list[str] = []
        self.first_row = 0
        self.first_col = 0

    def append_text(self, text: str) -> None:
        """Add ``text`` to the raw text."""
        self.raw_text += text

    def append_file(self, path) -> None:
        """Add the contents of the file at ``path``; an unreadable file adds nothing."""
        try:
            with open(path, encoding="utf-8", errors="replace", newline="") as handle:
                self.raw_text += handle.read()
        except OSError:
            return

    def prepare(self, max_width: int) -> list[str]:
        """Wrap the raw text into lines no wider than ``max_width``."""
        self.lines = wrap_lines(self.raw_text, max_width, self._measure)
        return self.lines

    def visible_lines(self) -> list[str]:
        """The lines currently on the page."""
        start = max(self.first_row, 0)
        return self.lines[start:start + self.rows_per_page]

    @property
    def line_width(self) -> int:
        """Width of the widest line on the page."""
        return max((self._measure(line) for line in self.visible_lines()), default=0)

    def scroll_to_end(self) -> None:
        """Show the last page of text."""
        if len(self.lines) >= self.rows_per_page:
            self.first_row = len(self.lines) - self.rows_per_page

    def _page_up(self) -> None:
        if self.first_row >= self.rows_per_page - 1:
            self.first_row -= self.rows_per_page - 1
        else:
            self.first_row = 0

    def _page_down(self) -> None:
        total = len(self.lines)
        if self.first_row + self.rows_per_page * 2 - 1 < total:
            self.first_row += self.rows_per_page - 1
        else:
            self.first_row = max(0, total - self.rows_per_page)

    def handle(self, action: Action) -> bool:
        """Scroll in response to ``action``; return False when the view should close."""
        total = len(self.lines)
        left_limit = -(self.line_width - self.view_width) - _COLUMN_MARGIN
        if action is Action.UP and self.first_row > 0:
            self.first_row -= 1
        elif action is Action.DOWN and self.first_row + self.rows_per_page < total:
            self.first_row += 1
        elif action is Action.RIGHT and self.first_col > left_limit:
            self.first_col -= _COLUMN_STEP
        elif action is Action.LEFT and self.first_col < 0:
            self.first_col += _COLUMN_STEP
        elif action is Action.PAGEUP or (action is Action.LEFT and self.first_col == 0):
            self._page_up()
        elif action is Action.PAGEDOWN or (action is Action.RIGHT and self.first_col == 0):
            self._page_down()
        elif action in (Action.SETTINGS, Action.CANCEL):
            return False
        return True