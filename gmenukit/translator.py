"""Lookup of translated interface strings."""

from __future__ import annotations

import os
from pathlib import Path

from .utilities import case_less_key, data_path, strreplace, trim

DEFAULT_LANGUAGE = "English"


class Translator:
    """Maps interface terms to the strings of the selected language."""

    def __init__(self, translations_dir: str | os.PathLike | None = None) -> None:
        if translations_dir is None:
            translations_dir = data_path("translations")
        self._dir = Path(translations_dir)
        self._lang = DEFAULT_LANGUAGE
        self._translations: dict[str, str] = {}

    @property
    def lang(self) -> str:
        """The language currently selected."""
        return self._lang

    def set_lang(self, lang: str) -> None:
        """Select ``lang`` and load its translation file, if there is one."""
        if not lang:
            return
        self._translations.clear()
        try:
            with open(self._dir / lang, encoding="utf-8", errors="replace") as handle:
                for raw in handle:
                    line = trim(raw)
                    if not line or line.startswith("#"):
                        continue
                    key, sep, value = line.partition("=")
                    if not sep:
                        value = line
                    self._translations[trim(key)] = trim(value)
        except OSError:
            pass
        self._lang = lang

    def translate(self, term: str, *args) -> str:
        """Translate ``term`` and substitute ``$1``, ``$2``... with ``args``."""
        result = term
        if self._lang != DEFAULT_LANGUAGE:
            result = self._translations.get(term, term)
        for number, arg in enumerate(args, start=1):
            if arg is None:
                break
            result = strreplace(result, f"${number}", str(arg))
        return result

    def __getitem__(self, term: str) -> str:
        return self.translate(term)

    def languages(self) -> list[str]:
        """Available languages, the default first."""
        try:
            names = [entry.name for entry in self._dir.iterdir()
                     if entry.is_file() and entry.name != DEFAULT_LANGUAGE
                     and not entry.name.startswith(".")]
        except OSError:
            names = []
        return [DEFAULT_LANGUAGE, *sorted(names, key=case_less_key)]