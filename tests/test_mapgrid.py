import pytest

from cubraycaster.errors import CubError, MapError, MapErrorKind
from cubraycaster.mapgrid import (
    Scene,
    count_spawns,
    find_start,
    has_valid_path,
    load_scene,
    parse_map_lines,
    parse_scene,
)

MAP = ["111111\n", "100001\n", "10N001\n", "100001\n", "111111\n"]
ROWS = ("111111", "100001", "10N001", "100001", "111111")


def header():
    return [
        "NO north.xpm\n",
        "SO south.xpm\n",
        "WE west.xpm\n",
        "EA east.xpm\n",
        "\n",
        "F 220,100,0\n",
        "C 225,30,0\n",
        "\n",
    ]


@pytest.fixture
def texture_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("north", "south", "west", "east"):
        (tmp_path / f"{name}.xpm").write_text("x")
    return tmp_path


def test_count_spawns():
    assert count_spawns("10N0S1\n") == 2
    assert count_spawns("1111\n") == 0


def test_parse_map_lines_strips_newlines():
    assert parse_map_lines(MAP) == ROWS


def test_parse_map_lines_allows_trailing_blank_lines():
    assert parse_map_lines(MAP + ["\n", "   \n"]) == ROWS


def test_parse_map_lines_without_final_newline():
    assert parse_map_lines(["1N1\n", "111"]) == ("1N1", "111")


def test_parse_map_lines_leftovers():
    with pytest.raises(MapError) as info:
        parse_map_lines(MAP + ["\n", "111\n"])
    assert info.value.kind is MapErrorKind.LEFTOVERS


def test_parse_map_lines_empty():
    with pytest.raises(MapError) as info:
        parse_map_lines([])
    assert info.value.kind is MapErrorKind.EMPTY


def test_parse_map_lines_wrong_characters():
    with pytest.raises(MapError) as info:
        parse_map_lines(["1X1\n"])
    assert info.value.kind is MapErrorKind.WRONG_CHARACTERS


def test_wrong_characters_reported_before_spawn_count():
    with pytest.raises(MapError) as info:
        parse_map_lines(["1N1\n", "1S1\n", "1Z1\n"])
    assert info.value.kind is MapErrorKind.WRONG_CHARACTERS


@pytest.mark.parametrize("lines", [["1N1\n", "1S1\n"], ["111\n", "101\n"]])
def test_parse_map_lines_spawn_count(lines):
    with pytest.raises(MapError) as info:
        parse_map_lines(lines)
    assert info.value.kind is MapErrorKind.SPAWN


def test_find_start():
    assert find_start(("111", "1E1", "111")) == (1, 1)


def test_find_start_without_spawn():
    with pytest.raises(MapError):
        find_start(("111", "101"))


def test_closed_map_has_valid_path():
    assert has_valid_path(ROWS, 2, 2) is True


@pytest.mark.parametrize(
    "grid",
    [
        ("111111", "100001", "10N000", "100001", "111111"),
        ("111111", "100001", "10N0 1", "100001", "111111"),
        ("111111", "100001", "10N001", "10001", "111111"),
    ],
)
def test_open_map_has_no_valid_path(grid):
    assert has_valid_path(grid, 2, 2) is False


def test_has_valid_path_leaves_grid_untouched():
    grid = list(ROWS)
    has_valid_path(grid, 2, 2)
    assert tuple(grid) == ROWS


def test_parse_scene(texture_dir):
    scene = parse_scene(header() + MAP)
    assert isinstance(scene, Scene)
    assert (scene.start_x, scene.start_y) == (2, 2)
    assert scene.orientation == "N"
    assert scene.grid == ROWS
    assert scene.rows == 5
    assert scene.floor == (220, 100, 0)
    assert scene.ceiling == (225, 30, 0)
    assert scene.texture_paths == ("north.xpm", "south.xpm", "west.xpm", "east.xpm")


def test_parse_scene_open_map(texture_dir):
    lines = header() + ["111\n", "1N0\n", "111\n"]
    with pytest.raises(MapError) as info:
        parse_scene(lines)
    assert info.value.kind is MapErrorKind.NOT_PLAYABLE


def test_parse_scene_without_map(texture_dir):
    with pytest.raises(MapError) as info:
        parse_scene(header())
    assert info.value.kind is MapErrorKind.EMPTY


def test_parse_scene_missing_elements(texture_dir):
    with pytest.raises(CubError) as info:
        parse_scene(header()[:4] + MAP)
    assert not isinstance(info.value, MapError)


def test_load_scene(texture_dir):
    path = texture_dir / "room.cub"
    path.write_text("".join(header() + MAP))
    scene = load_scene(str(path))
    assert scene == parse_scene(header() + MAP)


def test_load_scene_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(str(tmp_path / "missing.cub"))