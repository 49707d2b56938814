import pytest
from PIL import Image

from gmenukit.surface import Surface
from gmenukit.surfacecollection import SurfaceCollection


def _png(path, size, color=(10, 20, 30, 255)):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, color).save(path)
    return path


@pytest.fixture
def skins(tmp_path):
    skin = tmp_path / "skins" / "Custom"
    default = tmp_path / "skins" / "Default"
    skin.mkdir(parents=True)
    default.mkdir(parents=True)
    _png(skin / "imgs" / "own.png", (4, 3))
    _png(default / "imgs" / "shared.png", (5, 6))
    _png(skin / "icons" / "game.png", (7, 2))
    return skin, default


@pytest.fixture
def collection(skins):
    skin, default = skins
    return SurfaceCollection(str(skin), str(default))


def test_skin_file_path_prefers_current_skin(collection, skins):
    skin, _ = skins
    assert collection.skin_file_path("imgs/own.png") == str(skin) + "/imgs/own.png"


def test_skin_file_path_falls_back_to_default(collection, skins):
    _, default = skins
    assert collection.skin_file_path("imgs/shared.png") == str(default) + "/imgs/shared.png"
    assert collection.skin_file_path("imgs/shared.png", False) == ""


def test_skin_file_path_missing(collection):
    assert collection.skin_file_path("imgs/none.png") == ""


def test_add_skin_prefix_loads_surface(collection):
    surface = collection.add("skin:imgs/shared.png")
    assert (surface.width, surface.height) == (5, 6)
    assert "skin:imgs/shared.png" in collection


def test_add_plain_path_and_cache(collection, skins):
    skin, _ = skins
    path = str(skin / "imgs" / "own.png")
    first = collection.add(path)
    assert (first.width, first.height) == (4, 3)
    assert collection.add(path) is first
    assert collection[path] is first


def test_add_with_key(collection, skins):
    skin, _ = skins
    surface = collection.add(str(skin / "imgs" / "own.png"), "alias")
    assert collection["alias"] is surface


def test_add_empty_path(collection):
    assert collection.add("") is None
    assert len(collection) == 0


def test_missing_file_is_cached_as_none(collection):
    assert collection["skin:imgs/none.png"] is None
    assert "skin:imgs/none.png" in collection


def test_package_icon_from_skin(collection):
    surface = collection.add("/somewhere/app.opk#game.png")
    assert (surface.width, surface.height) == (7, 2)


def test_package_icon_missing(collection):
    assert collection.add("/somewhere/app.opk#other.png") is None
    assert "/somewhere/app.opk#other.png" in collection


def test_add_surface_keeps_existing(collection):
    first = Surface(2, 2)
    second = Surface(3, 3)
    assert collection.add_surface(first, "k") is first
    assert collection.add_surface(second, "k") is first


def test_delete(collection):
    collection.add_surface(Surface(1, 1), "k")
    assert collection.delete("k") is True
    assert "k" not in collection
    assert collection.delete("k") is False


def test_move(collection):
    moved = Surface(2, 2)
    collection.add_surface(moved, "a")
    collection.add_surface(Surface(1, 1), "b")
    collection.move("a", "b")
    assert "a" not in collection
    assert collection["b"] is moved


def test_clear(collection):
    collection.add_surface(Surface(1, 1), "a")
    collection.add_surface(Surface(1, 1), "b")
    collection.clear()
    assert len(collection) == 0


def test_set_skin(collection, tmp_path):
    other = tmp_path / "other"
    _png(other / "imgs" / "own.png", (9, 9))
    collection.set_skin(str(other))
    assert collection.skin == str(other)
    surface = collection.add("skin:imgs/own.png")
    assert (surface.width, surface.height) == (9, 9)