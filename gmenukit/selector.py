"""File selection support: display aliases, per-file parameters and previews."""

from __future__ import annotations

import os
from typing import Iterable, Optional

from .utilities import cmdclean, dir_exists, file_exists, lowercase, real_path, strreplace, trim

_DEFAULT_SCREENS = "./.images"
_PREVIEW_EXTENSIONS = (".png", ".jpg")
_FILE_PLACEHOLDER = "%f"


def _substr(text: str, start: int, count: int = -1) -> str:
    if count < 0:
        return text[start:]
    return text[start:start + count]


def parse_aliases(lines: Iterable[str]) -> tuple[dict[str, str], dict[str, str]]:
    """Parse ``name=alias;params`` lines into alias and parameter maps keyed by lower-case name."""
    aliases: dict[str, str] = {}
    params: dict[str, str] = {}
    for raw in lines:
        line = raw.rstrip("\n")
        d1 = line.find("=")
        d2 = line.find(";")
        if d2 > d1:
            d2 -= d1 + 1
        name = lowercase(trim(_substr(line, 0, d1)))
        aliases[name] = trim(_substr(line, d1 + 1, d2))
        if d2 > 0:
            params[name] = trim(_substr(line, d1 + d2 + 2))
    return aliases, params


def build_favourite_params(params: str, selected_path: str) -> str:
    """Command parameters that open ``selected_path``, filling ``%f`` if present."""
    escaped = cmdclean(selected_path)
    if _FILE_PLACEHOLDER in params:
        return strreplace(params, _FILE_PLACEHOLDER, escaped)
    return params + " " + escaped


def _stem(filename: str) -> Optional[str]:
    dot = filename.rfind(".")
    if dot > 0:
        return filename[:dot]
    return None


class Selector:
    """Names, parameters and preview images for the files of one directory."""

    def __init__(self, directory: str, alias_file: Optional[str] = None,
                 screens_dir: str = "") -> None:
        self.directory = os.fspath(directory)
        self.screens_dir = screens_dir
        self.aliases: dict[str, str] = {}
        self._params: dict[str, str] = {}
        self._previews: dict[str, Optional[str]] = {}
        if alias_file:
            self.load_aliases(alias_file)

    def load_aliases(self, path) -> bool:
        """Load an alias file; return whether it existed."""
        if not file_exists(path):
            return False
        with open(path, encoding="utf-8", errors="replace") as handle:
            self.aliases, self._params = parse_aliases(handle)
        return True

    def display_name(self, filename: str) -> str:
        """The alias of ``filename``, or the name itself when it has none."""
        stem = _stem(filename)
        key = lowercase(stem if stem is not None else filename)
        return self.aliases.get(key) or filename

    def params(self, filename: str) -> str:
        """Extra launch parameters for ``filename``, or an empty string."""
        stem = _stem(filename)
        key = lowercase(stem) if stem is not None else filename
        return self._params.get(key, "")

    def _find_preview(self, filename: str) -> Optional[str]:
        stem = _stem(filename)
        if not stem or stem == ".":
            return None
        screens = self.screens_dir or _DEFAULT_SCREENS
        if screens.startswith("."):
            screens_dir = real_path(self.directory + "/" + screens) + "/"
        else:
            screens_dir = real_path(screens) + "/"
        if dir_exists(screens_dir):
            for ext in _PREVIEW_EXTENSIONS:
                if file_exists(screens_dir + stem + ext):
                    return screens_dir + stem + ext
        for ext in _PREVIEW_EXTENSIONS:
            candidate = self.directory + "/" + stem + ext
            if file_exists(candidate):
                return candidate
        return None

    def preview(self, filename: str) -> Optional[str]:
        """Path of a preview image for ``filename``, or None; results are cached."""
        key = self.directory + "/" + filename
        if key not in self._previews:
            self._previews[key] = self._find_preview(filename)
        return self._previews[key]