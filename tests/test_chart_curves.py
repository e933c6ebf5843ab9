from __future__ import annotations

import unittest

import numpy as np

from luvatrix_chart import DrawCircle, DrawPath, DrawRect, series
from luvatrix_chart.curves import CubicTo, LineTo, MoveTo, build_path, path_vertices, series_commands
from luvatrix_chart.layout import PlotRect
from luvatrix_chart.limits import AxisDomain
from luvatrix_chart.mapping import PlotMapper


def _mapper(vmax: float = 2.0) -> PlotMapper:
    return PlotMapper.build(PlotRect(0.0, 0.0, 100.0, 100.0), AxisDomain(0.0, vmax), AxisDomain(0.0, vmax))


class BuildPathTests(unittest.TestCase):
    def test_fewer_than_two_points_build_nothing(self) -> None:
        self.assertEqual(build_path([], "linear"), ())
        self.assertEqual(build_path([(1.0, 1.0)], "bezier"), ())

    def test_linear_path(self) -> None:
        ops = build_path([(0.0, 0.0), (1.0, 2.0), (2.0, 1.0)], "linear")
        self.assertEqual(ops, (MoveTo(0.0, 0.0), LineTo(1.0, 2.0), LineTo(2.0, 1.0)))

    def test_step_path_goes_horizontal_then_vertical(self) -> None:
        ops = build_path([(0.0, 0.0), (1.0, 2.0), (2.0, 1.0)], "step")
        self.assertEqual(
            path_vertices(ops),
            [(0.0, 0.0), (1.0, 0.0), (1.0, 2.0), (2.0, 2.0), (2.0, 1.0)],
        )

    def test_bezier_control_arms_are_quarter_chord(self) -> None:
        ops = build_path([(0.0, 0.0), (10.0, 0.0)], "bezier")
        self.assertEqual(ops[1], CubicTo(2.5, 0.0, 7.5, 0.0, 10.0, 0.0))

    def test_spline_uses_cardinal_tangents(self) -> None:
        ops = build_path([(0.0, 0.0), (10.0, 10.0), (20.0, 0.0)], "spline")
        first = ops[1]
        assert isinstance(first, CubicTo)
        self.assertAlmostEqual(first.c1x, 10.0 / 12.0)
        self.assertAlmostEqual(first.c1y, 10.0 / 12.0)
        self.assertAlmostEqual(first.c2x, 10.0 - 20.0 / 12.0)
        self.assertAlmostEqual(first.c2y, 10.0)
        self.assertEqual((first.x, first.y), (10.0, 10.0))

    def test_spline_falls_back_to_linear_for_two_points(self) -> None:
        ops = build_path([(0.0, 0.0), (5.0, 5.0)], "spline")
        self.assertEqual(ops, (MoveTo(0.0, 0.0), LineTo(5.0, 5.0)))

    def test_unknown_interpolation_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_path([(0.0, 0.0), (1.0, 1.0)], "cubic")  # type: ignore[arg-type]


class SeriesCommandTests(unittest.TestCase):
    def test_step_series_in_mapped_space(self) -> None:
        entry = series([0.0, 2.0, 1.0], x=[0.0, 1.0, 2.0], interpolation="step")
        commands = series_commands(entry, _mapper())
        self.assertEqual(len(commands), 1)
        path = commands[0]
        assert isinstance(path, DrawPath)
        self.assertEqual(
            path.vertices(),
            [(0.0, 100.0), (50.0, 100.0), (50.0, 0.0), (100.0, 0.0), (100.0, 50.0)],
        )

    def test_nan_gap_splits_line(self) -> None:
        entry = series([0.0, 1.0, np.nan, 3.0, 4.0])
        paths = [c for c in series_commands(entry, _mapper(4.0)) if isinstance(c, DrawPath)]
        self.assertEqual(len(paths), 2)

    def test_isolated_point_draws_no_line(self) -> None:
        entry = series([0.0, np.nan, 2.0, 3.0])
        paths = [c for c in series_commands(entry, _mapper(3.0)) if isinstance(c, DrawPath)]
        self.assertEqual(len(paths), 1)

    def test_dashed_line_and_clip(self) -> None:
        clip = PlotRect(0.0, 0.0, 100.0, 100.0)
        entry = series([0.0, 1.0], line="dashed", color="red", line_width=2.0)
        path = series_commands(entry, _mapper(), clip=clip)[0]
        assert isinstance(path, DrawPath)
        self.assertEqual(path.dash, "5 5")
        self.assertEqual(path.stroke, (255, 0, 0, 255))
        self.assertEqual(path.width, 2.0)
        self.assertEqual(path.clip, clip)

    def test_markers_for_every_finite_point(self) -> None:
        entry = series([0.0, 1.0, np.nan, 2.0], line="none", marker="circle", marker_size=6.0)
        commands = series_commands(entry, _mapper(3.0))
        self.assertEqual(len(commands), 3)
        self.assertTrue(all(isinstance(c, DrawCircle) and c.r == 3.0 for c in commands))

    def test_square_and_cross_markers(self) -> None:
        squares = series_commands(series([1.0], x=[1.0], line="none", marker="square", marker_size=4.0), _mapper())
        self.assertEqual(squares, [DrawRect(x=48.0, y=48.0, width=4.0, height=4.0, fill=(0, 0, 0, 255))])
        crosses = series_commands(series([1.0], x=[1.0], line="none", marker="cross", marker_size=4.0), _mapper())
        cross = crosses[0]
        assert isinstance(cross, DrawPath)
        self.assertEqual(cross.width, 1.0)
        self.assertIsNone(cross.fill)
        self.assertEqual(cross.vertices(), [(48.0, 48.0), (52.0, 52.0), (48.0, 52.0), (52.0, 48.0)])

    def test_invalid_style_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            series([1.0], marker="star")


if __name__ == "__main__":
    unittest.main()
