"""
Frame rendering for snake simulation replays

This service turns GameState snapshots into images and videos by:
1. Rendering each frame using PIL (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg, or to GIF using Pillow

Cells are drawn at their own grid coordinates, so one board pixel maps to
``scale`` image pixels.
"""

import logging
import os
from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw
from moviepy import ImageSequenceClip

from domain.constants import BACKGROUND_COLOR, DEFAULT_UPS
from domain.game_state import GameState

logger = logging.getLogger(__name__)

GRID_LINE_COLOR = "#E5E7EB"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class SnakeFrameRenderer:
    """Render GameState snapshots to images, GIFs and MP4 videos"""

    def __init__(
        self,
        scale: int = 1,
        fps: float = DEFAULT_UPS,
        grid_lines: bool = False
    ):
        if scale < 1:
            raise ValueError(f"scale must be at least 1, got {scale}")
        self.scale = scale
        self.fps = fps
        self.grid_lines = grid_lines

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new(
            'RGB',
            (int(state.width * self.scale), int(state.height * self.scale)),
            hex_to_rgb(BACKGROUND_COLOR)
        )
        draw = ImageDraw.Draw(img)

        if self.grid_lines:
            self._draw_grid(draw, state)

        # Food first so the head covers it on the frame it is eaten
        self._draw_cell(draw, state.food_position, state.food_size, hex_to_rgb(state.food_color))

        snake_color = hex_to_rgb(state.snake_color)
        for position in state.snake_positions:
            self._draw_cell(draw, position, state.snake_size, snake_color)

        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, state: GameState):
        step = state.cell_size * self.scale
        img_width = state.width * self.scale
        img_height = state.height * self.scale
        color = hex_to_rgb(GRID_LINE_COLOR)

        x = step
        while x < img_width:
            draw.line([x, 0, x, img_height], fill=color, width=1)
            x += step

        y = step
        while y < img_height:
            draw.line([0, y, img_width, y], fill=color, width=1)
            y += step

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        position: Tuple[float, float],
        size: float,
        color: Tuple[int, int, int]
    ):
        """Draw a single filled square (snake segment or food)"""
        x, y = position
        left = x * self.scale
        top = y * self.scale
        side = size * self.scale
        # PIL rectangles include the bottom-right corner
        draw.rectangle([left, top, left + side - 1, top + side - 1], fill=color)

    def generate_video(self, states: Sequence[GameState], output_path: str) -> str:
        """
        Write a replay of ``states`` to ``output_path``.

        A ``.gif`` extension is written with Pillow; anything else is encoded
        as H.264 with MoviePy.

        Returns:
            Path to the generated file
        """
        if not states:
            raise ValueError("Cannot generate a video without frames")

        logger.info(f"Rendering {len(states)} frames to {output_path}")
        images: List[Image.Image] = [self.render_frame(state) for state in states]

        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        if output_path.lower().endswith('.gif'):
            images[0].save(
                output_path,
                save_all=True,
                append_images=images[1:],
                duration=int(1000 / self.fps),
                loop=0
            )
        else:
            frames = [np.array(image) for image in images]
            clip = ImageSequenceClip(frames, fps=self.fps)
            clip.write_videofile(
                output_path,
                codec='libx264',
                audio=False,
                logger=None
            )

        logger.info(f"Video created successfully at {output_path}")
        return output_path
