from pathlib import Path

from gmenukit.platform import (
    FirmwareType,
    Platform,
    PlatformKind,
    VolumeMode,
    detect_platform,
)


def touch(root: Path, rel: str, data: bytes = b"") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path


def test_detect_generic(tmp_path):
    assert detect_platform(tmp_path) is PlatformKind.GENERIC


def test_detect_retrofw(tmp_path):
    touch(tmp_path, "proc/jz/gpio")
    assert detect_platform(tmp_path) is PlatformKind.RETROFW


def test_detect_opendingux(tmp_path):
    touch(tmp_path, "sys/devices/platform/jz-lcd.0/keep_aspect_ratio")
    assert detect_platform(tmp_path) is PlatformKind.OPENDINGUX


def test_detect_gkd350h(tmp_path):
    touch(tmp_path, "proc/jz/gpio/gpios")
    assert detect_platform(tmp_path) is PlatformKind.GKD350H


def test_detect_miyoo(tmp_path):
    touch(tmp_path,
          "sys/devices/platform/soc/1c23400.battery/power_supply/miyoo-battery/voltage_now")
    assert detect_platform(tmp_path) is PlatformKind.MIYOO


def test_defaults():
    platform = Platform()
    assert (platform.width, platform.height, platform.bpp) == (480, 272, 16)
    assert platform.opk == "linux"
    assert platform.fwtype is FirmwareType.GENERIC


def test_devices_counts_bytes(tmp_path):
    touch(tmp_path, "proc/bus/input/devices", b"x" * 50)
    assert Platform().devices(tmp_path) == 50


def test_devices_capped(tmp_path):
    touch(tmp_path, "proc/bus/input/devices", b"x" * 20000)
    assert Platform().devices(tmp_path) == 10000


def test_devices_missing(tmp_path):
    assert Platform().devices(tmp_path) == 0


def test_volume_mode():
    platform = Platform()
    assert platform.volume_mode(0) is VolumeMode.MUTE
    assert platform.volume_mode(7) is VolumeMode.NORMAL