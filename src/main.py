"""Entry point for the MineStake grid-reveal game.

Sets up the game session, event bus, input mapping and Arcade window.
"""
import logging
import os

from arcade import Window, key, run, set_background_color, color

from minestake.config import GameConfig
from minestake.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from minestake.events.bus import EVENT_MOUSE_PRESS, EVENT_NEW_GAME_REQUEST
from minestake.persistence.store import JsonFileStore
from minestake.rendering.render_system import RenderSystem
from minestake.session import GameSession
from minestake.ui.input_system import BoardInputSystem
from minestake.ui.layout import BoardGeometry, compute_board_geometry


class MineStakeWindow(Window):
    def __init__(self, config: GameConfig):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, resizable=True)
        self.config = config
        self.session = GameSession(config, JsonFileStore(config.save_path))
        self.event_bus = self.session.event_bus
        self.render_system = RenderSystem(self.session, self)
        self.input_system = BoardInputSystem(self.event_bus, self.board_geometry)
        set_background_color(color.WHITE_SMOKE)
        self.event_bus.emit(EVENT_NEW_GAME_REQUEST)

    def board_geometry(self) -> BoardGeometry | None:
        state = self.session.state
        if state is None:
            return None
        return compute_board_geometry(self.width, self.height, state.board.rows, state.board.cols)

    def on_draw(self):
        self.clear()
        self.render_system.process(self.board_geometry())

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if self.render_system.show_leaderboard:
            self._set_leaderboard_visible(False)
            return
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == key.R:
            self._set_leaderboard_visible(False)
            self.event_bus.emit(EVENT_NEW_GAME_REQUEST)
        elif symbol == key.L:
            self._set_leaderboard_visible(not self.render_system.show_leaderboard)
        elif symbol == key.ESCAPE and self.render_system.show_leaderboard:
            self._set_leaderboard_visible(False)

    def on_close(self):
        self.session.close()
        super().on_close()

    def _set_leaderboard_visible(self, visible: bool) -> None:
        self.render_system.show_leaderboard = visible
        self.input_system.enabled = not visible


def main():
    logging.basicConfig(
        level=os.environ.get('MINESTAKE_LOG_LEVEL', 'INFO').upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    MineStakeWindow(GameConfig.from_env())
    run()


if __name__ == "__main__":
    main()
