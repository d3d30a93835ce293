from cubraycaster.elements import SceneElements
from cubraycaster.game import Game, main
from cubraycaster.mapgrid import Scene
from cubraycaster.player import Key
from cubraycaster.textures import Texture

TEXTURES = tuple(Texture(width=1, height=1, pixels=((0x010203,),)) for _ in range(4))


def make_scene():
    grid = ("11111", "10001", "10E01", "10001", "11111")
    elements = SceneElements("n.xpm", "s.xpm", "w.xpm", "e.xpm", (0, 0, 0), (9, 9, 9))
    return Scene(elements=elements, grid=grid, start_x=2, start_y=2)


def test_step_moves_player_and_draws():
    game = Game(make_scene(), TEXTURES)
    start = game.player.px
    game.press(Key.W)
    frame = game.step()
    assert game.player.px > start
    assert frame.pixel(0, 0) == 0x090909


def test_escape_stops_game():
    game = Game(make_scene(), TEXTURES)
    game.press(Key.ESCAPE)
    assert game.running is False


def test_main_wrong_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().err.startswith("Error\nMust be only 2 Arguments")


def test_main_wrong_extension(capsys):
    assert main(["level.txt"]) == 0
    assert "Extension of the map file not valid" in capsys.readouterr().err


def test_main_missing_file(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["absent.cub"]) == 1
    assert capsys.readouterr().err.strip() != ""