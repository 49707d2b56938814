"""A scrolling list of settings driven by input actions."""

from __future__ import annotations

import enum
from typing import Callable, Iterable, Optional

from .settings import Action, MenuSetting


class _Step(enum.Enum):
    CLOSE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    SAVE = enum.auto()
    PAGEUP = enum.auto()
    PAGEDOWN = enum.auto()


_NAVIGATION = {
    Action.UP: _Step.UP,
    Action.DOWN: _Step.DOWN,
    Action.PAGEUP: _Step.PAGEUP,
    Action.PAGEDOWN: _Step.PAGEDOWN,
    Action.SETTINGS: _Step.SAVE,
}


class SettingsDialog:
    """Moves a selection over settings and decides whether to save them.

    ``rows`` is the paging step; ``rows + 1`` settings are visible at once.
    ``confirm_save`` is asked when the dialog is cancelled with unsaved edits
    and returns whether to save them.
    """

    def __init__(self, title: str, rows: int, allow_cancel: bool = True,
                 confirm_save: Optional[Callable[[], bool]] = None) -> None:
        self.title = title
        self.rows = rows
        self.allow_cancel = allow_cancel
        self._confirm_save = confirm_save
        self._settings: list[MenuSetting] = []
        self.selected = 0
        self.first_element = 0
        self.save = False
        self.running = True

    @property
    def settings(self) -> list[MenuSetting]:
        return list(self._settings)

    @property
    def description(self) -> str:
        """Description of the selected setting."""
        return self._settings[self.selected].description if self._settings else ""

    def add_setting(self, setting: MenuSetting) -> None:
        self._settings.append(setting)

    def edited(self) -> bool:
        """True if any setting has been changed."""
        return any(setting.edited() for setting in self._settings)

    def _normalise(self) -> None:
        count = len(self._settings)
        if self.selected < 0:
            self.selected = count - 1
        if self.selected >= count:
            self.selected = 0
        if self.selected >= self.first_element + self.rows:
            self.first_element = self.selected - self.rows
        if self.selected < self.first_element:
            self.first_element = self.selected

    def visible(self) -> list[tuple[int, MenuSetting]]:
        """Index and setting of each row currently on screen."""
        self._normalise()
        start = max(self.first_element, 0)
        end = self.first_element + self.rows + 1
        return list(enumerate(self._settings))[start:end]

    def _close(self) -> None:
        self.running = False
        if self.allow_cancel and self.edited():
            self.save = bool(self._confirm_save()) if self._confirm_save else False

    def _perform(self, step: _Step) -> None:
        if step is _Step.SAVE:
            self.save = True
            self.running = False
        elif step is _Step.CLOSE:
            self._close()
        elif step is _Step.UP:
            self.selected -= 1
        elif step is _Step.DOWN:
            self.selected += 1
        elif step is _Step.PAGEUP:
            self.selected = max(self.selected - self.rows, 0)
        elif step is _Step.PAGEDOWN:
            self.selected = min(self.selected + self.rows, len(self._settings) - 1)

    def _step_for(self, action: Action) -> Optional[_Step]:
        if action is Action.CANCEL:
            return _Step.CLOSE if self.allow_cancel else None
        return _NAVIGATION.get(action)

    def handle(self, action: Action) -> bool:
        """Process one input action; return whether the dialog is still open."""
        if not self.running:
            return False
        self._normalise()
        step: Optional[_Step] = None
        outcome = self._settings[self.selected].handle(action) if self._settings else False
        if isinstance(outcome, Action):
            step = _Step.CLOSE if outcome is Action.CANCEL else _NAVIGATION.get(outcome)
        elif not outcome:
            step = self._step_for(action)
        if step is not None:
            self._perform(step)
        self._normalise()
        return self.running

    def run(self, actions: Iterable[Action]) -> bool:
        """Process actions until the dialog closes; return whether to save."""
        for action in actions:
            if not self.handle(action):
                break
        return self.save