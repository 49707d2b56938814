import pytest

from gmenukit.choices import MultiStringSetting, RGBASetting
from gmenukit.settings import Action
from gmenukit.surface import RGBAColor

CHOICES = ["ON", "OFF", "AUTO"]


def make(value="OFF", **kwargs):
    return MultiStringSetting("Title", "Desc", value, CHOICES, **kwargs)


def test_value_in_choices_is_selected():
    setting = make("AUTO")
    assert setting.selected == 2
    assert setting.value == "AUTO"
    assert setting.edited() is False


def test_unknown_value_falls_back_to_first_choice():
    setting = make("bogus")
    assert setting.selected == 0
    assert setting.value == CHOICES[0]
    assert setting.edited() is True


def test_right_wraps_to_start():
    setting = make("AUTO")
    setting.handle(Action.RIGHT)
    assert setting.value == CHOICES[0]


def test_left_wraps_to_end():
    setting = make("ON")
    setting.handle(Action.LEFT)
    assert setting.value == CHOICES[-1]


def test_menu_resets_to_first():
    setting = make("AUTO")
    setting.handle(Action.MENU)
    assert setting.selected == 0


def test_select_negative_goes_to_last():
    setting = make("ON")
    setting.select(-1)
    assert setting.selected == len(CHOICES) - 1


def test_on_change_called_and_can_request_close():
    calls = []
    setting = make("ON", on_change=lambda: calls.append(1) or True)
    assert setting.handle(Action.RIGHT) is Action.CANCEL
    assert calls == [1]


def test_on_change_not_called_without_change():
    calls = []
    setting = make("ON", on_change=lambda: calls.append(1))
    assert setting.handle(Action.UP) is False
    assert calls == []


def test_on_select_called_on_confirm():
    calls = []
    setting = make("ON", on_select=lambda: calls.append("open"))
    setting.handle(Action.CONFIRM)
    assert calls == ["open"]
    assert setting.value == "ON"


def test_formatter_applies_to_display_value():
    setting = make("OFF", formatter=str.lower)
    assert setting.display_value == "off"
    assert setting.value == "OFF"


def test_empty_choices_raise():
    with pytest.raises(IndexError):
        MultiStringSetting("T", "D", "x", [])


def color():
    return RGBAColor(10, 20, 30, 40)


def test_rgba_initial_state():
    setting = RGBASetting("T", "D", color())
    assert setting.component_texts == ("10", "20", "30", "40")
    assert setting.editing is False
    assert setting.edited() is False


def test_rgba_confirm_starts_editing_and_up_increments_red():
    setting = RGBASetting("T", "D", color())
    assert setting.handle(Action.CONFIRM) is False
    assert setting.editing is True
    assert setting.handle(Action.UP) is True
    assert setting.value.r == color().r + 1
    assert setting.edited() is True


def test_rgba_part_moves_and_clamps():
    setting = RGBASetting("T", "D", color())
    setting.handle(Action.CONFIRM)
    for _ in range(6):
        setting.handle(Action.RIGHT)
    assert setting.part == 3
    assert setting.component == color().a
    for _ in range(6):
        setting.handle(Action.LEFT)
    assert setting.part == 0


def test_rgba_components_clamp():
    setting = RGBASetting("T", "D", RGBAColor(255, 0, 0, 255))
    setting.handle(Action.CONFIRM)
    setting.handle(Action.INC)
    assert setting.value.r == 255
    setting.handle(Action.RIGHT)
    setting.handle(Action.DEC)
    assert setting.value.g == 0


def test_rgba_settings_passes_through_and_confirm_stops():
    setting = RGBASetting("T", "D", color())
    setting.handle(Action.CONFIRM)
    assert setting.handle(Action.SETTINGS) is False
    assert setting.editing is True
    setting.handle(Action.CANCEL)
    assert setting.editing is False


def test_rgba_up_without_editing_does_nothing():
    setting = RGBASetting("T", "D", color())
    assert setting.handle(Action.UP) is False
    assert setting.value == color()