"""Description of the device the launcher runs on, and its detection."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

from .utilities import file_exists

_DEVICES_FILE = "proc/bus/input/devices"
_DEVICES_LIMIT = 10000


class VolumeMode(enum.IntEnum):
    MUTE = 0
    PHONES = 1
    NORMAL = 2


class FirmwareType(enum.IntEnum):
    GENERIC = 0
    RETROARCADE = 1
    OPEN2X = 2
    GPH = 3


class PlatformKind(enum.Enum):
    RETROFW = "retrofw"
    OPENDINGUX = "opendingux"
    GKD350H = "gkd350h"
    MIYOO = "miyoo"
    GENERIC = "generic"


_MARKERS = (
    ("proc/jz/gpio", PlatformKind.RETROFW),
    ("sys/devices/platform/jz-lcd.0/keep_aspect_ratio", PlatformKind.OPENDINGUX),
    ("proc/jz/gpio/gpios", PlatformKind.GKD350H),
    ("sys/devices/platform/soc/1c23400.battery/power_supply/miyoo-battery/voltage_now",
     PlatformKind.MIYOO),
)


def detect_platform(root: str | os.PathLike = "/") -> PlatformKind:
    """Identify the device from marker files below ``root``."""
    base = Path(root)
    for marker, kind in _MARKERS:
        if file_exists(base / marker):
            return kind
    return PlatformKind.GENERIC


@dataclass
class Platform:
    """Capabilities and screen geometry of a device."""

    fwtype: FirmwareType = FirmwareType.GENERIC
    rtc: bool = False
    tvout: bool = False
    udc: bool = False
    ext_sd: bool = False
    hw_scaler: bool = False
    ipk: bool = False
    gamma: bool = False
    joystick: bool = True
    battery: bool = True
    volume: bool = True
    backlight: bool = True
    cpu_menu: int = 0
    cpu_link: int = 0
    cpu_max: int = 0
    cpu_min: int = 0
    cpu_step: int = 0
    opk: str = "linux"
    data_path: str = ""
    home_path: str = ""
    width: int = 480
    height: int = 272
    bpp: int = 16

    def devices(self, root: str | os.PathLike = "/") -> int:
        """Size of the input-device listing (capped), used to notice device changes."""
        try:
            with open(Path(root) / _DEVICES_FILE, "rb") as handle:
                return len(handle.read(_DEVICES_LIMIT))
        except OSError:
            return 0

    def volume_mode(self, volume: int) -> VolumeMode:
        """Mute for a zero volume, normal otherwise."""
        return VolumeMode.NORMAL if volume else VolumeMode.MUTE