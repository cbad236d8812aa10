"""Entry point for the tile-matching puzzle.

Sets up the headless simulation and an Arcade window that feeds it pointer
input and draws the board.
"""
import logging
import math

import arcade
from arcade import Window, run, set_background_color

from puzzle.config import SimulationConfig
from puzzle.simulation import Simulation

TILE_COLORS = [
    (255, 0, 0),
    (255, 255, 255),
    (255, 255, 0),
    (0, 255, 0),
    (0, 153, 255),
    (153, 0, 255),
    (128, 128, 128),
]
BACKGROUND = (77, 77, 77)
TILE_FILL = 0.95


class PuzzleWindow(Window):
    def __init__(self):
        super().__init__(1280, 720, "Puzzle", resizable=True)
        self.set_update_rate(1/60)
        self.simulation = Simulation(SimulationConfig(tile_type_count=len(TILE_COLORS)))
        self._mouse = None
        self._pressed = False
        self._held = False
        set_background_color(BACKGROUND)

    def _geometry(self):
        board = self.simulation.board
        tile_size = min(self.width / board.width, self.height / (board.height + 2))
        start_x = (self.width - board.width * tile_size) / 2
        start_y = tile_size
        return tile_size, start_x, start_y

    def _to_grid(self, x: float, y: float):
        tile_size, start_x, start_y = self._geometry()
        return (x - start_x) / tile_size, (y - start_y) / tile_size

    def on_update(self, delta_time: float):
        board = self.simulation.board
        pointer = None
        if self._mouse is not None:
            gx, gy = self._to_grid(*self._mouse)
            if 0 <= gx < board.width and 0 <= gy < board.height:
                pointer = (gx, gy)
        self.simulation.tick(delta_time, pointer, self._pressed, self._held)
        self._pressed = False

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self._mouse = (x, y)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        self._mouse = (x, y)
        self._pressed = True
        self._held = True

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self._held = False

    def on_draw(self):
        self.clear()
        sim = self.simulation
        board = sim.board
        tile_size, start_x, start_y = self._geometry()
        arcade.draw_lbwh_rectangle_filled(
            start_x, start_y, board.width * tile_size, board.height * tile_size, arcade.color.BLACK
        )
        grid = sim.grid_snapshot()
        drag = sim.drag_start_cell()
        progress = sim.fall_progress_fraction()
        falling = 0 < progress < 1
        pad = tile_size * (1 - TILE_FILL) / 2
        for y, row in enumerate(grid):
            for x, tile in enumerate(row):
                if tile is None:
                    continue
                left = start_x + x * tile_size
                bottom = start_y + y * tile_size
                if falling and sim.fell_this_step((x, y)):
                    bottom += (1 - progress) * tile_size
                if drag == (x, y):
                    arcade.draw_lbwh_rectangle_filled(
                        left - pad, bottom - pad, tile_size + 2 * pad, tile_size + 2 * pad, arcade.color.WHITE
                    )
                arcade.draw_lbwh_rectangle_filled(
                    left + pad, bottom + pad, tile_size - 2 * pad, tile_size - 2 * pad, TILE_COLORS[tile.kind]
                )
        # Cover tiles sliding in from the spawn row.
        arcade.draw_lbwh_rectangle_filled(
            start_x, start_y + board.height * tile_size, board.width * tile_size, tile_size, BACKGROUND
        )
        font = max(12, math.floor(tile_size * 0.4))
        arcade.draw_text(f"Score: {sim.score}", start_x, tile_size * 0.25, arcade.color.WHITE, font)
        arcade.draw_text(
            f"Best: {sim.best_score}",
            start_x + board.width * tile_size,
            tile_size * 0.25,
            arcade.color.WHITE,
            font,
            anchor_x="right",
        )


def main():
    logging.basicConfig(level=logging.INFO)
    PuzzleWindow()
    run()

if __name__ == "__main__":
    main()
