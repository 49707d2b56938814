"""Idle suspend and power-off timers."""

from __future__ import annotations

import subprocess
import threading
from typing import Callable, Optional, Union

Callback = Optional[Callable[[], object]]

_POWER_OFF_COMMAND = "sync; poweroff"


def _system_power_off() -> None:
    subprocess.run(_POWER_OFF_COMMAND, shell=True, check=False)


class PowerManager:
    """Suspends after ``suspend_timeout`` seconds idle, powers off after ``power_timeout`` minutes.

    Only one timer runs at a time: the suspend timer while active, the
    power-off timer while suspended.  A timeout of zero disables its timer.
    ``can_power_off`` (a flag or a callable returning one) gates the
    power-off timer.
    """

    def __init__(self, suspend_timeout: float, power_timeout: float,
                 on_suspend: Callback = None, on_resume: Callback = None,
                 on_power_off: Callback = None,
                 can_power_off: Union[bool, Callable[[], bool]] = False) -> None:
        self._suspend_timeout = suspend_timeout
        self._power_timeout = power_timeout
        self._on_suspend = on_suspend
        self._on_resume = on_resume
        self._on_power_off = on_power_off if on_power_off is not None else _system_power_off
        self._can_power_off = can_power_off
        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._timer_kind: Optional[str] = None
        self.suspend_active = False
        self.reset_suspend_timer()

    @property
    def timer_kind(self) -> Optional[str]:
        """``"suspend"``, ``"power"`` or None, naming the timer that is armed."""
        return self._timer_kind

    def _power_off_allowed(self) -> bool:
        check = self._can_power_off
        return bool(check()) if callable(check) else bool(check)

    def _start(self, seconds: float, callback: Callable[[], None], kind: str) -> None:
        timer = threading.Timer(seconds, callback)
        timer.daemon = True
        self._timer = timer
        self._timer_kind = kind
        timer.start()

    def set_suspend_timeout(self, suspend_timeout: float) -> None:
        self._suspend_timeout = suspend_timeout
        self.reset_suspend_timer()

    def set_power_timeout(self, power_timeout: float) -> None:
        self._power_timeout = power_timeout
        self.reset_suspend_timer()

    def clear_timer(self) -> None:
        """Cancel whichever timer is armed."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._timer_kind = None

    def reset_suspend_timer(self) -> None:
        """Restart the idle countdown towards suspend."""
        with self._lock:
            self.clear_timer()
            if self._suspend_timeout > 0:
                self._start(self._suspend_timeout, self.suspend, "suspend")

    def reset_power_timer(self) -> None:
        """Restart the countdown towards power-off."""
        with self._lock:
            self.clear_timer()
            if self._power_timeout > 0 and self._power_off_allowed():
                self._start(self._power_timeout * 60, self.power_off, "power")

    def suspend(self) -> None:
        """Enter suspend and start the power-off countdown."""
        with self._lock:
            if self._on_suspend is not None:
                self._on_suspend()
            self.reset_power_timer()
            self.suspend_active = True

    def resume(self) -> None:
        """Leave suspend and restart the idle countdown."""
        with self._lock:
            if self._on_resume is not None:
                self._on_resume()
            self.suspend_active = False
            self.reset_suspend_timer()

    def power_off(self) -> None:
        """Turn the device off."""
        self._on_power_off()