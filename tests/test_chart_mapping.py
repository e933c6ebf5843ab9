from __future__ import annotations

import unittest

import numpy as np

from luvatrix_chart import Series, series
from luvatrix_chart.layout import PlotRect
from luvatrix_chart.limits import AxisDomain, axis_epsilon, resolve_range, series_extent
from luvatrix_chart.mapping import AxisMapper, PlotMapper
from luvatrix_chart.values import FLOAT32, FLOAT64, INT64, common_epsilon


class RangeResolverTests(unittest.TestCase):
    def test_single_point_is_padded_by_half_unit(self) -> None:
        domain = resolve_range([series([1.0], x=[5.0])], "x")
        self.assertEqual(domain.as_tuple(), (4.5, 5.5))

    def test_manual_range_is_used_verbatim(self) -> None:
        domain = resolve_range([series([1.0, 2.0])], "y", manual=(-3, 7))
        self.assertEqual(domain.as_tuple(), (-3.0, 7.0))

    def test_empty_input_falls_back_to_unit_domain(self) -> None:
        self.assertEqual(resolve_range([], "x").as_tuple(), (0.0, 1.0))
        self.assertEqual(resolve_range([series([])], "y").as_tuple(), (0.0, 1.0))

    def test_union_of_series_ignores_non_finite_points(self) -> None:
        data = [series([1.0, np.nan, 4.0]), series([-2.0, 3.0])]
        self.assertEqual(series_extent(data, "y"), (-2.0, 4.0))
        self.assertEqual(resolve_range(data, "y").as_tuple(), (-2.0, 4.0))

    def test_log_scale_snaps_to_decades(self) -> None:
        domain = resolve_range([series([2.0, 300.0])], "y", scale="log")
        self.assertEqual(domain.as_tuple(), (1.0, 1000.0))

    def test_common_epsilon_takes_coarsest_kind(self) -> None:
        self.assertEqual(common_epsilon([FLOAT64, INT64]), 1.0)
        self.assertEqual(common_epsilon([FLOAT64, FLOAT32]), FLOAT32.epsilon)
        self.assertEqual(common_epsilon([]), FLOAT64.epsilon)

    def test_integer_x_does_not_coarsen_float_y(self) -> None:
        data = [Series.from_points([(0, 0.1), (1, 0.2), (2, 0.3)])]
        self.assertEqual(axis_epsilon(data, "x"), 1.0)
        self.assertEqual(axis_epsilon(data, "y"), FLOAT64.epsilon)
        self.assertEqual(resolve_range(data, "y").as_tuple(), (0.1, 0.3))
        self.assertEqual(resolve_range(data, "x").as_tuple(), (0.0, 2.0))

    def test_integer_axis_pads_sub_unit_span(self) -> None:
        data = [series(np.array([3, 3], dtype=np.int64), x=[0.0, 0.5])]
        self.assertEqual(resolve_range(data, "y").as_tuple(), (2.5, 3.5))
        self.assertEqual(resolve_range(data, "x").as_tuple(), (0.0, 0.5))

    def test_collapsed_log_data_widens_by_decades(self) -> None:
        domain = resolve_range([series([0.3, 0.3], x=[0.0, 1.0])], "y", scale="log")
        self.assertAlmostEqual(domain.vmin, 0.01)
        self.assertAlmostEqual(domain.vmax, 10.0)
        domain = resolve_range([series([1.0, 1.0])], "y", scale="log")
        self.assertAlmostEqual(domain.vmin, 0.1)
        self.assertAlmostEqual(domain.vmax, 10.0)


class MapperTests(unittest.TestCase):
    def test_linear_mapping(self) -> None:
        mapper = AxisMapper(vmin=0.0, vmax=10.0, start=100.0, length=200.0)
        self.assertAlmostEqual(mapper.map(0.0), 100.0)
        self.assertAlmostEqual(mapper.map(5.0), 200.0)
        self.assertAlmostEqual(mapper.map(10.0), 300.0)

    def test_inverted_axis_puts_minimum_at_bottom(self) -> None:
        mapper = AxisMapper(vmin=0.0, vmax=10.0, start=50.0, length=100.0, inverted=True)
        self.assertAlmostEqual(mapper.map(0.0), 150.0)
        self.assertAlmostEqual(mapper.map(10.0), 50.0)

    def test_round_trip_within_half_pixel(self) -> None:
        domain = AxisDomain(-12.5, 87.25)
        mapper = PlotMapper.build(PlotRect(80.0, 60.0, 690.0, 470.0), domain, domain)
        values = np.linspace(domain.vmin, domain.vmax, 37)
        px = mapper.x.map_many(values)
        py = mapper.y.map_many(values)
        back_x = domain.vmin + (px - 80.0) / 690.0 * domain.span
        back_y = domain.vmin + (60.0 + 470.0 - py) / 470.0 * domain.span
        pixel_per_unit_x = 690.0 / domain.span
        pixel_per_unit_y = 470.0 / domain.span
        self.assertLess(float(np.max(np.abs(back_x - values))) * pixel_per_unit_x, 0.5)
        self.assertLess(float(np.max(np.abs(back_y - values))) * pixel_per_unit_y, 0.5)

    def test_degenerate_domain_maps_to_center(self) -> None:
        mapper = AxisMapper(vmin=3.0, vmax=3.0, start=0.0, length=100.0)
        self.assertTrue(mapper.is_degenerate())
        self.assertEqual(mapper.map(3.0), 50.0)
        self.assertEqual(mapper.map(99.0), 50.0)

    def test_log_mapping_and_clamp(self) -> None:
        mapper = AxisMapper(vmin=1.0, vmax=1000.0, start=0.0, length=300.0, log=True)
        self.assertAlmostEqual(mapper.map(10.0), 100.0)
        self.assertAlmostEqual(mapper.map(1000.0), 300.0)
        self.assertAlmostEqual(mapper.map(-5.0), -300.0)

    def test_integer_epsilon_does_not_collapse_log_axis(self) -> None:
        mapper = AxisMapper(vmin=1.0, vmax=5.0, start=0.0, length=100.0, log=True, epsilon=1.0)
        self.assertFalse(mapper.is_degenerate())

    def test_log_bounds_out_of_order_after_clamp_use_fallback(self) -> None:
        mapper = AxisMapper(vmin=-0.5, vmax=0.5, start=0.0, length=100.0, log=True)
        self.assertFalse(mapper.is_degenerate())
        self.assertAlmostEqual(mapper.map(1.0), 0.0)
        self.assertAlmostEqual(mapper.map(10.0), 100.0)

    def test_per_axis_epsilon_keeps_narrow_manual_range(self) -> None:
        mapper = PlotMapper.build(
            PlotRect(0.0, 0.0, 100.0, 100.0),
            AxisDomain(0.0, 2.0),
            AxisDomain(0.0, 0.5),
            x_epsilon=1.0,
        )
        self.assertFalse(mapper.y.is_degenerate())
        self.assertAlmostEqual(mapper.map_y(0.25), 50.0)

    def test_map_points_pairs_coordinates(self) -> None:
        mapper = PlotMapper.build(PlotRect(0.0, 0.0, 100.0, 100.0), AxisDomain(0.0, 2.0), AxisDomain(0.0, 2.0))
        points = mapper.map_points(np.array([0.0, 1.0, 2.0]), np.array([0.0, 2.0, 1.0]))
        self.assertEqual(points, [(0.0, 100.0), (50.0, 0.0), (100.0, 50.0)])


if __name__ == "__main__":
    unittest.main()
