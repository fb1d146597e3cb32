"""
Board Renderer

Draws a GameState grid as an image using PIL (Pillow): one square per
cell, coloured by its CellState, with grid lines and a darker head.
"""

import io
import logging
from typing import Tuple

from PIL import Image, ImageDraw

from domain.constants import CellState
from domain.game_state import GameState

logger = logging.getLogger(__name__)

CELL_SIZE = 24  # Size of each grid cell in pixels
BORDER = 2


class ColorScheme:
    """Cell colours"""

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    BORDER = "#646464"

    HEAD = "#2F4314"
    BODY = "#4F7022"
    FOOD = "#EA2014"
    GAME_OVER_TINT = "#7F1D1D"


CELL_COLORS = {
    CellState.HEAD: ColorScheme.HEAD,
    CellState.BODY: ColorScheme.BODY,
    CellState.FOOD: ColorScheme.FOOD,
}


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class BoardRenderer:
    """Render board snapshots to images"""

    def __init__(self, cell_size: int = CELL_SIZE):
        if cell_size < 4:
            raise ValueError("cell_size must be at least 4 pixels")
        self.cell_size = cell_size

    def image_size(self, board_size: int) -> Tuple[int, int]:
        side = board_size * self.cell_size + 2 * BORDER
        return side, side

    def render(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.image_size(state.size), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        for r, row in enumerate(state.grid):
            for c, cell in enumerate(row):
                if cell == CellState.VOID:
                    continue
                self._draw_cell(draw, r, c, hex_to_rgb(CELL_COLORS[cell]), padding=0 if cell == CellState.HEAD else 1)

        self._draw_grid(draw, state.size)

        outline = ColorScheme.GAME_OVER_TINT if state.game_over else ColorScheme.BORDER
        side = img.size[0] - 1
        draw.rectangle([0, 0, side, side], outline=hex_to_rgb(outline), width=BORDER)

        return img

    def to_png_bytes(self, state: GameState) -> bytes:
        buffer = io.BytesIO()
        self.render(state).save(buffer, format="PNG")
        return buffer.getvalue()

    def _draw_grid(self, draw: ImageDraw.ImageDraw, board_size: int):
        extent = BORDER + board_size * self.cell_size
        for i in range(board_size + 1):
            offset = BORDER + i * self.cell_size
            draw.line([offset, BORDER, offset, extent], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
            draw.line([BORDER, offset, extent, offset], fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        row: int,
        col: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single filled cell"""
        x = BORDER + col * self.cell_size
        y = BORDER + row * self.cell_size
        draw.rectangle(
            [x + padding, y + padding, x + self.cell_size - padding, y + self.cell_size - padding],
            fill=color
        )
