import pytest

from gmenukit.settings import Action
from gmenukit.textdialog import TextView, wrap_lines


def test_wrap_breaks_at_spaces():
    assert wrap_lines("a b c", 3) == ["a b", "c"]


def test_wrap_several_lines():
    assert wrap_lines("one two three\nfour", 7) == ["one two", "three", "four"]


def test_wrap_keeps_fitting_lines_untouched():
    assert wrap_lines("  hi  ", 10) == ["  hi  "]


def test_wrap_keeps_unbreakable_word():
    assert wrap_lines("abcdef", 3) == ["abcdef"]


def test_wrap_respects_width_invariant():
    text = "the quick brown fox jumps over the lazy dog again and again"
    lines = wrap_lines(text, 12)
    assert all(len(line) <= 12 for line in lines)
    assert " ".join(lines).split() == text.split()


def test_wrap_uses_custom_measure():
    lines = wrap_lines("aa bb cc", 8, lambda s: 2 * len(s))
    assert lines == ["aa bb", "cc"]


def _view(count, rows=3, width=20):
    view = TextView(rows, width)
    view.append_text("\n".join(f"line{n}" for n in range(count)))
    view.prepare(100)
    return view


def test_append_and_prepare():
    view = TextView(3, 20)
    view.append_text("x\n")
    view.append_text("y")
    assert view.prepare(100) == ["x", "y"]


def test_append_file(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("first\nsecond")
    view = TextView(3, 20)
    view.append_file(path)
    assert view.prepare(100) == ["first", "second"]


def test_append_missing_file_adds_nothing(tmp_path):
    view = TextView(3, 20)
    view.append_file(tmp_path / "absent.txt")
    assert view.raw_text == ""


def test_scroll_down_and_up():
    view = _view(10)
    assert view.handle(Action.UP) is True
    assert view.first_row == 0
    view.handle(Action.DOWN)
    assert view.first_row == 1
    assert view.visible_lines() == view.lines[1:4]


def test_down_stops_at_last_page():
    view = _view(4)
    view.handle(Action.DOWN)
    view.handle(Action.DOWN)
    assert view.first_row == 1


def test_page_down_and_up():
    view = _view(10)
    view.handle(Action.PAGEDOWN)
    assert view.first_row == 2
    view.handle(Action.PAGEUP)
    assert view.first_row == 0


def test_page_down_clamps_to_last_page():
    view = _view(5)
    view.handle(Action.PAGEDOWN)
    assert view.first_row == 2


def test_scroll_to_end():
    view = _view(10)
    view.scroll_to_end()
    assert view.visible_lines() == view.lines[-3:]


def test_horizontal_scroll():
    view = TextView(3, 20)
    view.append_text("x" * 100)
    view.prepare(1000)
    view.handle(Action.RIGHT)
    assert view.first_col == -30
    view.handle(Action.LEFT)
    assert view.first_col == 0


def test_line_width_is_widest_visible():
    view = TextView(2, 20)
    view.append_text("ab\nabcd\nabcdefgh")
    view.prepare(100)
    assert view.line_width == 4


@pytest.mark.parametrize("action", [Action.CANCEL, Action.SETTINGS])
def test_close_actions(action):
    assert _view(5).handle(action) is False