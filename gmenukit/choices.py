"""Settings that pick one of several strings, or edit an RGBA colour."""

from __future__ import annotations

import dataclasses
from typing import Callable, Optional, Sequence, Union

from .settings import Action, MenuSetting, StringSettingBase
from .surface import RGBAColor
from .utilities import constrain

_COMPONENTS = ("r", "g", "b", "a")


class MultiStringSetting(StringSettingBase):
    """A string chosen from a fixed list, cycled with left and right.

    A value that is not among the choices is replaced by the first choice.
    ``handle`` returns ``Action.CANCEL`` when ``on_change`` returns a true
    value, asking the dialog to close.
    """

    def __init__(self, title: str, description: str, value: str,
                 choices: Sequence[str],
                 on_change: Optional[Callable[[], object]] = None,
                 on_select: Optional[Callable[[], object]] = None,
                 formatter: Optional[Callable[[str], str]] = None) -> None:
        super().__init__(title, description, value)
        self._choices = tuple(choices)
        self._on_change = on_change
        self._on_select = on_select
        self._formatter = formatter
        self._selected = 0
        try:
            start = self._choices.index(value)
        except ValueError:
            start = len(self._choices)
        self.select(start)

    @property
    def choices(self) -> tuple[str, ...]:
        return self._choices

    @property
    def selected(self) -> int:
        """Index of the current choice."""
        return self._selected

    def select(self, index: int) -> None:
        """Select ``index``, wrapping past either end of the list."""
        if not self._choices:
            raise IndexError("no choices to select from")
        if index < 0:
            index = len(self._choices) - 1
        elif index >= len(self._choices):
            index = 0
        self._selected = index
        self.set_value(self._choices[index])

    @property
    def display_value(self) -> str:
        """The value as shown, passed through the formatter if there is one."""
        if self._formatter is not None:
            return self._formatter(self.value)
        return self.value

    def handle(self, action: Action) -> Union[bool, Action]:
        before = self.value
        if action is Action.LEFT:
            self.select(self._selected - 1)
        elif action is Action.RIGHT:
            self.select(self._selected + 1)
        elif action is Action.CONFIRM and self._on_select is not None:
            self._on_select()
        elif action is Action.MENU:
            self.select(0)
        if before != self.value and self._on_change is not None and self._on_change():
            return Action.CANCEL
        return False

    def edit(self) -> None:
        """Choices are changed by cycling; there is nothing to edit."""


class RGBASetting(MenuSetting):
    """A colour edited one component (R, G, B or A) at a time."""

    def __init__(self, title: str, description: str, value: RGBAColor) -> None:
        super().__init__(title, description)
        self._original = value
        self._value = value
        self._part = 0
        self._editing = False

    @property
    def value(self) -> RGBAColor:
        return self._value

    @property
    def editing(self) -> bool:
        """True while the component editor is active."""
        return self._editing

    @property
    def part(self) -> int:
        """Index of the component being edited: 0 red, 1 green, 2 blue, 3 alpha."""
        return self._part

    @property
    def component_texts(self) -> tuple[str, str, str, str]:
        """The four components as displayed."""
        return tuple(str(channel) for channel in self._value.as_tuple())

    def set_component(self, value: int) -> None:
        """Set the selected component, keeping its low eight bits."""
        name = _COMPONENTS[self._part]
        self._value = dataclasses.replace(self._value, **{name: value & 0xFF})

    @property
    def component(self) -> int:
        """Value of the selected component."""
        return getattr(self._value, _COMPONENTS[self._part])

    def handle(self, action: Action) -> bool:
        if self._editing:
            if action is Action.SETTINGS:
                return False
            if action in (Action.INC, Action.UP):
                self.set_component(constrain(self.component + 1, 0, 255))
            elif action in (Action.DEC, Action.DOWN):
                self.set_component(constrain(self.component - 1, 0, 255))
            elif action is Action.LEFT:
                self._part = constrain(self._part - 1, 0, 3)
            elif action is Action.RIGHT:
                self._part = constrain(self._part + 1, 0, 3)
            elif action in (Action.CONFIRM, Action.CANCEL):
                self._editing = False
            return True
        if action is Action.CONFIRM:
            self._editing = True
        return False

    def edited(self) -> bool:
        return self._original != self._value