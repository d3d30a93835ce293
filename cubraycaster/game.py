"""The game window, its main loop and the command entry point."""

from __future__ import annotations

import sys

from .config import MAX_SCREEN_HEIGHT, MAX_SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from .elements import check_map_argument
from .errors import CubError, format_error
from .mapgrid import load_scene
from .player import Key, Player
from .render import Frame, render_frame
from .textures import load_textures

SCREEN_TOO_LARGE = "Map size is exceeding screen size!"
WINDOW_TITLE = "cube"


class Game:
    """A scene, its textures, the player and the frame being drawn."""

    def __init__(self, scene, textures) -> None:
        if SCREEN_WIDTH > MAX_SCREEN_WIDTH or SCREEN_HEIGHT > MAX_SCREEN_HEIGHT:
            raise CubError(SCREEN_TOO_LARGE, headline=False)
        self.scene = scene
        self.textures = textures
        self.player = Player.from_scene(scene)
        self.frame = Frame(SCREEN_WIDTH, SCREEN_HEIGHT)
        self.running = True

    def press(self, key: int) -> None:
        if self.player.press(key):
            self.running = False

    def release(self, key: int) -> None:
        self.player.release(key)

    def step(self) -> Frame:
        """Advance the player one frame and redraw the view."""
        self.player.update(self.scene.grid)
        return render_frame(self.frame, self.scene, self.player, self.textures)

    def run(self) -> None:
        """Open the window and run until it is closed or Escape is pressed."""
        import pygame

        keys = {
            pygame.K_w: Key.W,
            pygame.K_a: Key.A,
            pygame.K_s: Key.S,
            pygame.K_d: Key.D,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_ESCAPE: Key.ESCAPE,
        }
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.frame.width, self.frame.height))
            pygame.display.set_caption(WINDOW_TITLE)
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN and event.key in keys:
                        self.press(keys[event.key])
                    elif event.type == pygame.KEYUP and event.key in keys:
                        self.release(keys[event.key])
                if not self.running:
                    break
                frame = self.step()
                surface = pygame.image.frombuffer(
                    bytes(frame.pixels), (frame.width, frame.height), "BGRA"
                )
                screen.blit(surface.convert(), (0, 0))
                pygame.display.flip()
        finally:
            pygame.quit()


def main(argv=None) -> int:
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_map_argument(args)
    except CubError as error:
        sys.stderr.write(format_error(error))
        return 0
    try:
        scene = load_scene(path)
        game = Game(scene, load_textures(scene))
    except (CubError, OSError) as error:
        sys.stderr.write(format_error(error))
        return 1
    game.run()
    return 1


if __name__ == "__main__":
    sys.exit(main())