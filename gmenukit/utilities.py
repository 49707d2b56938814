"""String, path and filesystem helpers shared across the launcher."""

from __future__ import annotations

import math
import os
import shutil
import string
import subprocess
import time

_WHITESPACE = " \t\n\r"
_SHELL_SPECIAL = "\\`$();|{}&'\"*?<>[]!^~-#\n\r "
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_MIB = 1024 * 1024
_SYSTEM_DATA_DIR = "/usr/share/gmenunx"


def trim(text: str) -> str:
    """Strip spaces, tabs and line breaks from both ends."""
    return text.strip(_WHITESPACE)


def strreplace(orig: str, search: str, replace: str) -> str:
    """Replace every occurrence of ``search``; an empty search leaves the text as is."""
    if not search:
        return orig
    return orig.replace(search, replace)


def cmdclean(cmdline: str) -> str:
    """Escape shell metacharacters with a backslash."""
    return "".join("\\" + ch if ch in _SHELL_SPECIAL else ch for ch in cmdline)


def file_exists(path: str | os.PathLike) -> bool:
    """True if ``path`` exists and is a regular file."""
    return os.path.isfile(path)


def dir_exists(path: str | os.PathLike) -> bool:
    """True if ``path`` exists and is a directory."""
    return os.path.isdir(path)


def rmtree(path: str | os.PathLike) -> bool:
    """Remove a directory tree; report whether it succeeded."""
    if not os.path.isdir(path):
        return False
    try:
        shutil.rmtree(path)
    except OSError:
        return False
    return True


def constrain(x, imin, imax):
    """Clamp ``x`` into ``[imin, imax]``."""
    return min(imax, max(imin, x))


def eval_int_conf(val: int, default: int, imin: int, imax: int) -> int:
    """Use ``default`` for an unset (zero) value out of range, else clamp."""
    if val == 0 and (val < imin or val > imax):
        return default
    return constrain(val, imin, imax)


def eval_str_conf(val: str, default: str) -> str:
    """Use ``default`` when ``val`` is empty."""
    return val if val else default


def split(text: str, delim: str, destructive: bool = True) -> list[str]:
    """Split on ``delim``; non-destructive splitting keeps the delimiter on each piece."""
    if not delim:
        return [text]
    pieces: list[str] = []
    start = 0
    while True:
        found = text.find(delim, start)
        if found < 0:
            pieces.append(text[start:])
            break
        end = found if destructive else found + len(delim)
        pieces.append(text[start:end])
        start = found + len(delim)
        if start == len(text):
            pieces.append("")
            break
    return pieces


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _ticks() -> int:
    return int(time.monotonic() * 1000)


def int_transition(start: int, end: int, tick_start: int, duration: int = 500,
                   tick_now: int | None = None) -> int:
    """Value of a linear transition from ``start`` to ``end`` at ``tick_now`` (ms)."""
    if tick_now is None or tick_now < 0:
        tick_now = _ticks()
    elapsed = (tick_now - tick_start) / duration
    return min(_round_half_away(elapsed * (end - start)), max(start, end))


def run_command(cmd: str) -> str:
    """Run a shell command and return what it wrote to standard output."""
    try:
        completed = subprocess.run(cmd, shell=True, capture_output=True, text=True,
                                   errors="replace")
    except OSError:
        return ""
    return completed.stdout


def _normalise_missing(path: str) -> str:
    parts = split(path, "/")
    if len(parts) <= 2:
        return ""
    head, kept = parts[0], []
    for part in parts[1:]:
        if part in (".", ""):
            continue
        if part == "..":
            if kept:
                kept.pop()
            continue
        kept.append(part)
    return head + "/" + "/".join(kept)


def real_path(path: str) -> str:
    """Resolve ``path``; a missing path is normalised lexically instead."""
    try:
        return os.path.realpath(path, strict=True)
    except FileNotFoundError:
        return _normalise_missing(path)
    except OSError:
        return os.path.realpath(path)


def _last_separator(path: str) -> int:
    pos = path.rfind("/")
    if pos == len(path) - 1 and pos > 0:
        pos = path.rfind("/", 0, pos)
    return pos


def dir_name(path: str) -> str:
    """Resolved parent directory of ``path`` (a trailing slash is ignored)."""
    pos = _last_separator(path)
    head = path if pos < 0 else path[:pos]
    return real_path("/" + head)


def base_name(path: str, strip_extension: bool = False) -> str:
    """Last component of ``path``, optionally without its extension."""
    path = path[_last_separator(path) + 1:]
    if strip_extension:
        dot = path.rfind(".")
        if dot >= 0:
            path = path[:dot]
    return path


def lowercase(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_ASCII_LOWER)


def file_ext(path: str, to_lower: bool = False) -> str:
    """Extension of ``path`` including the dot, or an empty string."""
    pos = path.rfind(".")
    if pos > 0:
        ext = path[pos:]
        return lowercase(ext) if to_lower else ext
    return ""


def unique_filename(path: str, ext: str) -> str:
    """First of ``path+ext``, ``path0+ext``, ``path1+ext``... that does not exist."""
    candidate = path + ext
    counter = 0
    while file_exists(candidate):
        candidate = f"{path}{counter}{ext}"
        counter += 1
    return candidate


def file_copy(src: str | os.PathLike, dst: str | os.PathLike) -> bool:
    """Copy a file's contents; report whether it succeeded."""
    try:
        shutil.copyfile(src, dst)
    except OSError:
        return False
    return True


def disk_free(path: str | os.PathLike) -> str:
    """Free and total space of the filesystem holding ``path``, e.g. ``"12/345MiB"``."""
    try:
        stats = os.statvfs(path)
    except (OSError, AttributeError):
        return "N/A"
    free = stats.f_bfree * stats.f_bsize // _MIB
    total = stats.f_blocks * stats.f_frsize // _MIB
    if total >= 10000:
        return (f"{free // 1024}.{(free % 1024) * 10 // 1024}/"
                f"{total // 1024}.{(total % 1024) * 10 // 1024}GiB")
    return f"{free}/{total}MiB"


def get_date_time() -> str:
    """Current local date and time as ``YYYY-MM-DD HH:MM``."""
    return time.strftime("%Y-%m-%d %H:%M", time.localtime())


def home_path(path: str = "") -> str:
    """Path inside the per-user configuration directory; ``"../"`` gives the home itself."""
    home = os.environ.get("HOME") or os.path.expanduser("~")
    if path == "../":
        return home
    return home + "/.gmenunx/" + path


def data_path(path: str = "") -> str:
    """Path inside the shared data directory, or the current directory if it is absent."""
    if dir_exists(_SYSTEM_DATA_DIR):
        return _SYSTEM_DATA_DIR + "/" + path
    return "./" + path


def case_less_key(text: str) -> str:
    """Sort key for case-insensitive ordering."""
    return lowercase(text)