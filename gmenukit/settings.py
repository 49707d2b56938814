"""Editable settings shown as rows of a settings dialog."""

from __future__ import annotations

import abc
import enum
from typing import Callable, Optional

from .utilities import constrain, eval_int_conf


class Action(enum.Enum):
    """Input actions a setting or dialog can react to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    MODIFIER = enum.auto()
    CONFIRM = enum.auto()
    CANCEL = enum.auto()
    MANUAL = enum.auto()
    DEC = enum.auto()
    INC = enum.auto()
    SECTION_PREV = enum.auto()
    SECTION_NEXT = enum.auto()
    PAGEUP = enum.auto()
    PAGEDOWN = enum.auto()
    SETTINGS = enum.auto()
    MENU = enum.auto()
    VOLUP = enum.auto()
    VOLDOWN = enum.auto()


class MenuSetting:
    """A titled, described row of a settings dialog."""

    def __init__(self, title: str, description: str) -> None:
        self.title = title
        self.description = description

    def handle(self, action: Action) -> bool:
        """React to ``action``; True if the setting consumed it."""
        return False

    def edited(self) -> bool:
        """True if the value differs from the one the setting started with."""
        return False


class IntSetting(MenuSetting):
    """An integer kept within ``[minimum, maximum]`` and stepped by ``delta``."""

    def __init__(self, title: str, description: str, value: int, default: int,
                 minimum: int, maximum: int, delta: int = 1,
                 on_change: Optional[Callable[[], object]] = None) -> None:
        super().__init__(title, description)
        self._original = value
        self._default = default
        self._minimum = minimum
        self._maximum = maximum
        self._delta = delta
        self._on_change = on_change
        self._value = value
        self.set_value(eval_int_conf(value, default, minimum, maximum))

    @property
    def value(self) -> int:
        return self._value

    def set_value(self, value: int) -> None:
        """Store ``value`` clamped into the allowed range."""
        self._value = constrain(value, self._minimum, self._maximum)

    def set_default(self) -> None:
        """Go back to the default value."""
        self.set_value(self._default)

    @property
    def text(self) -> str:
        """The value as displayed."""
        return str(self._value)

    def handle(self, action: Action) -> bool:
        before = self._value
        if action is Action.LEFT:
            self.set_value(self._value - self._delta)
        elif action is Action.RIGHT:
            self.set_value(self._value + self._delta)
        elif action is Action.DEC:
            self.set_value(self._value - 10 * self._delta)
        elif action is Action.INC:
            self.set_value(self._value + 10 * self._delta)
        elif action is Action.MENU:
            self.set_default()
        if before != self._value and self._on_change is not None:
            self._on_change()
        return False

    def edited(self) -> bool:
        return self._original != self._value


class StringSettingBase(MenuSetting, abc.ABC):
    """A string value that can be cleared and edited."""

    def __init__(self, title: str, description: str, value: str) -> None:
        super().__init__(title, description)
        self._original = value
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value

    def clear(self) -> None:
        """Empty the value."""
        self.set_value("")

    @abc.abstractmethod
    def edit(self) -> None:
        """Let the user change the value."""

    def handle(self, action: Action) -> bool:
        if action is Action.MENU:
            self.clear()
        if action is Action.CONFIRM:
            self.edit()
        return False

    def edited(self) -> bool:
        return self._original != self._value


class StringSetting(StringSettingBase):
    """A free-text value edited through an ``editor`` callback.

    The editor receives the description and the current value and returns
    the new text, or ``None`` when the edit was cancelled.
    """

    def __init__(self, title: str, description: str, value: str,
                 editor: Optional[Callable[[str, str], Optional[str]]] = None) -> None:
        super().__init__(title, description, value)
        self._editor = editor

    def edit(self) -> None:
        if self._editor is None:
            return
        result = self._editor(self.description, self._value)
        if result is not None:
            self.set_value(result)