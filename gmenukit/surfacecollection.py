"""A cache of loaded surfaces keyed by path, with skin-aware lookup."""

from __future__ import annotations

import logging
import os

from .surface import Surface
from .utilities import data_path, file_exists

_log = logging.getLogger(__name__)

_SKIN_PREFIX = "skin:"


class SurfaceCollection:
    """Loads surfaces on first use and hands out the cached ones afterwards.

    Paths starting with ``skin:`` are looked up in the current skin and then
    in the default skin.  A path of the form ``package.opk#icon.png`` is
    looked up as ``icons/icon.png`` in the current skin.  A path that cannot
    be loaded is remembered as ``None`` so that it is not searched again.
    """

    def __init__(self, skin: str | os.PathLike | None = None,
                 default_skin: str | os.PathLike | None = None) -> None:
        self._default_skin = os.fspath(default_skin) if default_skin is not None \
            else data_path("skins/Default")
        self._skin = os.fspath(skin) if skin is not None else self._default_skin
        self._surfaces: dict[str, Surface | None] = {}

    @property
    def skin(self) -> str:
        """Directory of the current skin."""
        return self._skin

    def set_skin(self, skin: str | os.PathLike) -> None:
        """Switch to another skin directory."""
        self._skin = os.fspath(skin)

    def skin_file_path(self, file: str, fallback: bool = True) -> str:
        """Path of ``file`` in the current skin, else in the default skin, else ``""``."""
        candidate = self._skin + "/" + file
        if file_exists(candidate):
            return candidate
        if fallback:
            candidate = self._default_skin.rstrip("/") + "/" + file
            if file_exists(candidate):
                return candidate
        return ""

    def _load(self, path: str) -> Surface | None:
        package, sep, member = path.partition("#")
        if sep:
            icon_path = self.skin_file_path("icons/" + member, False)
            if icon_path:
                _log.debug("Adding package skin surface: '%s'", icon_path)
                return Surface.from_file(icon_path)
            _log.error("Unable to extract file: %s from %s", member, package)
            return None

        if path.startswith(_SKIN_PREFIX):
            path = self.skin_file_path(path[len(_SKIN_PREFIX):])
        if path and file_exists(path):
            _log.debug("Adding surface: '%s'", path)
            return Surface.from_file(path)
        return None

    def add(self, path: str, key: str = "") -> Surface | None:
        """Load ``path`` under ``key`` (the path itself by default) unless already cached."""
        if not path:
            return None
        if not key:
            key = path
        if key in self._surfaces:
            return self._surfaces[key]
        surface = self._load(path)
        self._surfaces[key] = surface
        return surface

    def add_surface(self, surface: Surface, key: str) -> Surface | None:
        """Store an existing surface under ``key``; an entry already there wins."""
        if key in self._surfaces:
            return self._surfaces[key]
        self._surfaces[key] = surface
        return surface

    def __getitem__(self, key: str) -> Surface | None:
        if key in self._surfaces:
            return self._surfaces[key]
        return self.add(key)

    def __contains__(self, key: object) -> bool:
        return key in self._surfaces

    def __len__(self) -> int:
        return len(self._surfaces)

    def delete(self, key: str) -> bool:
        """Forget the entry under ``key``; report whether there was one."""
        return self._surfaces.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        """Forget every entry."""
        self._surfaces.clear()

    def move(self, source: str, target: str) -> None:
        """Re-key the entry under ``source`` to ``target``, replacing what was there."""
        self.delete(target)
        self._surfaces[target] = self._surfaces.pop(source, None)


_MISSING = object()