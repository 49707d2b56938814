# gmenukit

Building blocks for a launcher menu on small handheld consoles:

- `gmenukit.utilities`: string and path helpers (`trim`, `split`, `cmdclean`,
  `base_name`, `dir_name`, `file_ext`, `real_path`, `unique_filename`,
  `disk_free`, `home_path`, `data_path`, ...).
- `gmenukit.translator`: `Translator`, a `key=value` translation table.
- `gmenukit.surface`: `RGBAColor`, `Rect`, `Align`, `ScaleMode` and `Surface`,
  an RGBA pixel buffer backed by Pillow with clipping, fills, outlines and blits.
- `gmenukit.surfacecollection`: `SurfaceCollection`, a cache of skin images.
- `gmenukit.settings` and `gmenukit.choices`: menu settings (`IntSetting`,
  `StringSetting`, `MultiStringSetting`, `RGBASetting`) driven by `Action` values.
- `gmenukit.settingsdialog`: `SettingsDialog`, a scrolling list of settings.
- `gmenukit.textdialog`: `wrap_lines` and `TextView`, word-wrapped scrolling text.
- `gmenukit.selector`: `Selector`, file aliases, launch parameters and previews.
- `gmenukit.touchscreen`: `Touchscreen`, press and release tracking.
- `gmenukit.powermanager`: `PowerManager`, suspend and power-off timers.
- `gmenukit.platform`: `Platform` and `detect_platform`.
- `gmenukit.terminal`: `wrap_command`, `run_lines` and the `gmenukit-run` command.

## Install

```
pip install gmenukit
```

## A taste

```python
from gmenukit.utilities import cmdclean, base_name
from gmenukit.surface import strtorgba, rgbatostr
from gmenukit.settings import IntSetting, Action
from gmenukit.settingsdialog import SettingsDialog

cmdclean("ls my dir")              # 'ls\\ my\\ dir'
base_name("/roms/game.gba", True)  # 'game'

color = strtorgba("#ff800080")
rgbatostr(color)                   # '#ff800080'

volume = IntSetting("Volume", "Sound level", 50, 50, 0, 100)
volume.handle(Action.RIGHT)
volume.value                       # 51

dialog = SettingsDialog("Settings", rows=5)
dialog.add_setting(volume)
dialog.edited()                    # True
dialog.run([Action.SETTINGS])      # True: the settings are to be saved
```

Translations are plain `key=value` files in a directory, one file per
language; `English` is the default and is never looked up:

```python
from gmenukit.translator import Translator

tr = Translator("translations")
tr.set_lang("Deutsch")
tr.translate("Installing $1", "game.opk")
tr.languages()                     # ['English', ...]
```

## Command line

Run a shell command and print its output line by line, followed by a
`----` separator and `Done`:

```
gmenukit-run "ls -l /media"
```

`--script PATH` names the `script` utility used to give the command a
terminal; when it does not exist the command runs under `/bin/sh -c`.

## What it does not do

The package holds state and logic only. It does not open a window, draw
text, read input devices or run a menu event loop: settings, dialogs, the
text view and the touchscreen are fed `Action` values or samples by the
caller. It does not read `.opk` packages; a `package.opk#icon.png` path
given to `SurfaceCollection` is only looked up as `icons/icon.png` in the
current skin.

## Tests

```
pip install "gmenukit[test]"
pytest
```