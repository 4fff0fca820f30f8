# rasterizer.py
# Per-column scanline bracket test. For each image column the equations are
# sampled at the column's left and right x boundaries; a pixel is on a curve
# when some left/right sample pair of one equation straddles the pixel's
# y interval.

import logging

import pyarrow as pa

from . import defaults
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


class Raster:
    """
    Rendered image: one pyarrow BooleanArray per column, row 0 at the top.
    True marks a pixel some curve passes through.
    """

    def __init__(self, width, height, columns):
        self.width = width
        self.height = height
        self.columns = columns

    def is_on_curve(self, i, j):
        return self.columns[i][j].as_py()

    def to_rgba_bytes(self, foreground=defaults.FOREGROUND, background=defaults.BACKGROUND):
        """Row-major RGBA bytes, ready for an image encoder."""
        columns = [column.to_pylist() for column in self.columns]
        fg, bg = bytes(foreground), bytes(background)
        data = bytearray()
        for j in range(self.height):
            for i in range(self.width):
                data += fg if columns[i][j] else bg
        return bytes(data)

    def __repr__(self):
        return f"Raster({self.width}x{self.height})"


def frame_coordinate(origin, extent, pixel, resolution):
    """Maps a pixel boundary index into frame space."""
    return origin + extent * (pixel / resolution)


def pixel_on_curve(left_samples, right_samples, y1, y2):
    """Bracket test: does any left/right sample pair straddle [y1, y2]?"""
    for left in left_samples:
        for right in right_samples:
            if (left >= y1 and right <= y2) or (left <= y1 and right >= y2):
                return True
    return False


def sample_column(layout, evaluator, i, width):
    """Evaluates every equation at the left and right x boundaries of column i."""
    x1 = frame_coordinate(layout.position[0], layout.size[0], i, width)
    x2 = frame_coordinate(layout.position[0], layout.size[0], i + 1, width)
    return [
        (evaluator.evaluate(equation, x1).to_pylist(), evaluator.evaluate(equation, x2).to_pylist())
        for equation in layout.equations
    ]


def rasterize(layout, max_branches=defaults.MAX_BRANCHES):
    """
    Renders every equation of a Layout.

    :param layout: Interpreted program; only read.
    :param max_branches: MultiValue size limit passed to the evaluator.
    :return: Raster
    :raises RenderError: The first evaluation failure; no partial image is kept.
    """
    width, height = layout.effective_resolution()
    evaluator = Evaluator(max_branches)
    logger.info("Rendering %d equation(s) at %dx%d", len(layout.equations), width, height)

    samples = [sample_column(layout, evaluator, i, width) for i in range(width)]

    # Row 0 is the top of the image, so pixel rows count down from the frame's top edge
    rows = []
    for j in range(height):
        pixel_y = height - j
        y1 = frame_coordinate(layout.position[1], layout.size[1], pixel_y - 1, height)
        y2 = frame_coordinate(layout.position[1], layout.size[1], pixel_y, height)
        rows.append((y1, y2))

    columns = []
    for column_samples in samples:
        column = [
            any(pixel_on_curve(left, right, y1, y2) for left, right in column_samples)
            for y1, y2 in rows
        ]
        columns.append(pa.array(column, type=pa.bool_()))
    return Raster(width, height, columns)
