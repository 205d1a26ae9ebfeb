"""Draws the board, score header and leaderboard overlay with arcade primitives."""
from __future__ import annotations

import arcade

from minestake.components.cell import CellKind
from minestake.components.game_state import GameStatus
from minestake.session import GameSession
from minestake.ui.layout import BoardGeometry

HIDDEN_COLOR = (221, 221, 221)
REWARD_COLOR = (204, 255, 204)
PENALTY_COLOR = (255, 204, 204)
ACCENT_COLOR = (30, 144, 255)
HIGH_SCORE_COLOR = (255, 107, 0)


class RenderSystem:
    def __init__(self, session: GameSession, window) -> None:
        self.session = session
        self.window = window
        self.show_leaderboard = False

    def process(self, geometry: BoardGeometry | None) -> None:
        self._draw_header()
        if geometry is not None:
            self._draw_board(geometry)
        self._draw_banner()
        self._draw_footer()
        if self.show_leaderboard:
            self._draw_leaderboard()

    def _draw_header(self) -> None:
        top = self.window.height
        cx = self.window.width / 2
        arcade.draw_text("MineStake", cx, top - 40, arcade.color.BLACK, 28,
                         anchor_x="center", anchor_y="center", bold=True)
        state = self.session.state
        if state is not None:
            arcade.draw_text(f"Score: {state.score} / {state.total_reward}", cx, top - 80,
                             arcade.color.BLACK, 20, anchor_x="center", anchor_y="center")
        high = self.session.get_high_score()
        label = "New High Score: " if high.is_new else "High Score: "
        color = arcade.color.RED if high.is_new else HIGH_SCORE_COLOR
        arcade.draw_text(f"{label}{high.value}", cx, top - 112, color, 16,
                         anchor_x="center", anchor_y="center")

    def _draw_board(self, geometry: BoardGeometry) -> None:
        state = self.session.state
        if state is None:
            return
        size = geometry.cell_size - geometry.gap
        for row, col in state.board.positions():
            cell = state.board.cell_at(row, col)
            cx, cy = geometry.cell_center(row, col)
            if not cell.revealed:
                fill = HIDDEN_COLOR
            elif cell.kind is CellKind.PENALTY:
                fill = PENALTY_COLOR
            else:
                fill = REWARD_COLOR
            arcade.draw_lbwh_rectangle_filled(cx - size / 2, cy - size / 2, size, size, fill)
            if cell.revealed:
                glyph = "X" if cell.kind is CellKind.PENALTY else "<>"
                glyph_color = arcade.color.RED if cell.kind is CellKind.PENALTY else ACCENT_COLOR
                arcade.draw_text(glyph, cx, cy, glyph_color, max(size // 3, 10),
                                 anchor_x="center", anchor_y="center", bold=True)

    def _draw_banner(self) -> None:
        state = self.session.state
        if state is None or not state.is_over:
            return
        text = "You Win!" if state.status is GameStatus.WON else "Game Over"
        cx = self.window.width / 2
        cy = self.window.height / 2
        arcade.draw_lbwh_rectangle_filled(cx - 150, cy - 40, 300, 80, (0, 0, 0, 180))
        arcade.draw_text(text, cx, cy, arcade.color.WHITE, 24,
                         anchor_x="center", anchor_y="center", bold=True)

    def _draw_footer(self) -> None:
        arcade.draw_text("R: Restart    L: Leaderboard", self.window.width / 2, 30,
                         arcade.color.DIM_GRAY, 14, anchor_x="center", anchor_y="center")

    def _draw_leaderboard(self) -> None:
        w, h = self.window.width, self.window.height
        arcade.draw_lrbt_rectangle_filled(0, w, 0, h, (0, 0, 0, 128))
        panel_w, panel_h = w * 0.8, h * 0.6
        left = (w - panel_w) / 2
        bottom = (h - panel_h) / 2
        arcade.draw_lbwh_rectangle_filled(left, bottom, panel_w, panel_h, arcade.color.WHITE)
        top = bottom + panel_h
        arcade.draw_text("Leaderboard", left + 20, top - 40, arcade.color.BLACK, 22, bold=True)
        entries = self.session.get_leaderboard()
        if not entries:
            arcade.draw_text("No scores yet. Play a game!", w / 2, h / 2, arcade.color.GRAY, 16,
                             anchor_x="center", anchor_y="center")
            return
        for index, entry in enumerate(entries):
            y = top - 90 - index * 44
            arcade.draw_circle_filled(left + 35, y, 15, ACCENT_COLOR)
            arcade.draw_text(str(index + 1), left + 35, y, arcade.color.WHITE, 14,
                             anchor_x="center", anchor_y="center", bold=True)
            arcade.draw_text(str(entry.score), left + 70, y, arcade.color.BLACK, 18,
                             anchor_y="center", bold=True)
            arcade.draw_text(entry.date, left + panel_w - 20, y, arcade.color.GRAY, 14,
                             anchor_x="right", anchor_y="center")
