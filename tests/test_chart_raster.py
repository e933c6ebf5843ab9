from __future__ import annotations

import unittest

import numpy as np

from luvatrix_chart.canvas import (
    CubicTo,
    DrawCircle,
    DrawLine,
    DrawText,
    MoveTo,
    RasterCanvas,
    RecordingCanvas,
    SvgCanvas,
    draw_all,
    flatten_path,
    path_data,
)
from luvatrix_chart.layout import PlotRect
from luvatrix_chart.raster import dash_polyline, draw_hline, fill_circle, new_canvas, text_size
from luvatrix_chart.raster.draw_text import DEFAULT_FONT_FAMILY, nearest_quarter_turn


RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)


class RasterPrimitiveTests(unittest.TestCase):
    def test_default_font_family(self) -> None:
        self.assertEqual(DEFAULT_FONT_FAMILY, "Times New Roman")

    def test_dash_pattern_splits_polyline(self) -> None:
        pieces = dash_polyline([(0.0, 0.0), (10.0, 0.0)], [4.0, 4.0])
        self.assertEqual(pieces, [[(0.0, 0.0), (4.0, 0.0)], [(8.0, 0.0), (10.0, 0.0)]])

    def test_dash_pattern_carries_across_vertices(self) -> None:
        pieces = dash_polyline([(0.0, 0.0), (3.0, 0.0), (3.0, 3.0)], [4.0, 4.0])
        self.assertEqual(pieces, [[(0.0, 0.0), (3.0, 0.0), (3.0, 1.0)]])

    def test_clip_limits_drawing(self) -> None:
        canvas = new_canvas(20, 10)
        draw_hline(canvas, 0, 19, 5, RED, clip=(5, 0, 10, 10))
        self.assertEqual(tuple(int(v) for v in canvas[5, 4]), (255, 255, 255, 255))
        self.assertEqual(tuple(int(v) for v in canvas[5, 5]), RED)
        self.assertEqual(tuple(int(v) for v in canvas[5, 9]), RED)
        self.assertEqual(tuple(int(v) for v in canvas[5, 10]), (255, 255, 255, 255))

    def test_filled_circle_covers_center_only(self) -> None:
        canvas = new_canvas(20, 20)
        fill_circle(canvas, 10.0, 10.0, 3.0, RED)
        self.assertEqual(tuple(int(v) for v in canvas[10, 10]), RED)
        self.assertEqual(tuple(int(v) for v in canvas[0, 0]), (255, 255, 255, 255))

    def test_rotated_text_size_swaps_dimensions(self) -> None:
        w0, h0 = text_size("value", font_size_px=18.0, rotate_deg=0)
        w1, h1 = text_size("value", font_size_px=18.0, rotate_deg=90)
        self.assertEqual((w0, h0), (h1, w1))
        self.assertEqual(nearest_quarter_turn(90.0), 90)
        self.assertEqual(nearest_quarter_turn(-80.0), -90)


class CanvasTests(unittest.TestCase):
    def test_recording_canvas_keeps_order(self) -> None:
        commands = [DrawLine(0.0, 0.0, 1.0, 1.0, stroke=BLACK), DrawCircle(1.0, 1.0, 2.0, fill=RED)]
        canvas = draw_all(RecordingCanvas(), commands)
        assert isinstance(canvas, RecordingCanvas)
        self.assertEqual(canvas.commands, commands)
        self.assertEqual(len(canvas.of_type(DrawCircle)), 1)

    def test_cubic_is_flattened_to_endpoint(self) -> None:
        subpaths = flatten_path((MoveTo(0.0, 0.0), CubicTo(2.0, 5.0, 8.0, 5.0, 10.0, 0.0)))
        self.assertEqual(len(subpaths), 1)
        self.assertEqual(len(subpaths[0]), 17)
        self.assertAlmostEqual(subpaths[0][-1][0], 10.0)
        self.assertAlmostEqual(subpaths[0][-1][1], 0.0)

    def test_path_data_formatting(self) -> None:
        self.assertEqual(
            path_data((MoveTo(0.0, 1.5), CubicTo(1.0, 2.0, 3.0, 4.0, 5.25, 6.0))),
            "M 0 1.5 C 1 2 3 4 5.25 6",
        )

    def test_svg_registers_one_clip_per_rect(self) -> None:
        clip = PlotRect(10.0, 10.0, 50.0, 50.0)
        canvas = SvgCanvas(100, 100)
        canvas.draw(DrawLine(0.0, 0.0, 100.0, 100.0, stroke=BLACK, clip=clip))
        canvas.draw(DrawCircle(20.0, 20.0, 2.0, fill=RED, clip=clip))
        canvas.draw(DrawText(5.0, 5.0, "10", font="serif", size=10.0, color=BLACK, superscript="3"))
        markup = canvas.to_markup()
        self.assertEqual(markup.count("<clipPath"), 1)
        self.assertEqual(markup.count('clip-path="url(#clip0)"'), 2)
        self.assertIn('<tspan dy="-0.4em" dx="-0.2em">3</tspan>', markup)
        self.assertIn('fill="#ff0000"', markup)

    def test_raster_canvas_respects_clip(self) -> None:
        canvas = RasterCanvas(40, 20)
        canvas.draw(DrawLine(0.0, 10.0, 39.0, 10.0, stroke=RED, clip=PlotRect(10.0, 0.0, 10.0, 20.0)))
        rgba = canvas.to_rgba()
        self.assertEqual(tuple(int(v) for v in rgba[10, 5]), (255, 255, 255, 255))
        self.assertEqual(tuple(int(v) for v in rgba[10, 15]), RED)
        self.assertEqual(tuple(int(v) for v in rgba[10, 25]), (255, 255, 255, 255))

    def test_raster_text_leaves_ink(self) -> None:
        canvas = RasterCanvas(120, 40)
        canvas.draw(DrawText(60.0, 20.0, "Label", font=DEFAULT_FONT_FAMILY, size=16.0, color=BLACK, anchor="middle", baseline="middle"))
        rgba = canvas.to_rgba()
        self.assertTrue(np.any(rgba[:, :, 0] < 128))
        self.assertEqual(canvas.size, (120, 40))


if __name__ == "__main__":
    unittest.main()
