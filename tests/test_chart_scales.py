from __future__ import annotations

import math
import unittest

import numpy as np

from luvatrix_chart.limits import AxisDomain
from luvatrix_chart.scales import (
    TickLabel,
    build_tick_set,
    format_linear_tick,
    format_log_tick,
    format_pi_value,
    generate_linear_minor_ticks,
    generate_linear_ticks,
    generate_log_minor_ticks,
    generate_log_ticks,
    generate_pi_minor_ticks,
    generate_pi_ticks,
    scale_exponent,
    target_tick_count,
)


def _contains(values: np.ndarray, expected: float) -> bool:
    return bool(np.any(np.isclose(values, expected, rtol=0.0, atol=1e-9)))


class LinearTickTests(unittest.TestCase):
    def test_nice_ticks_cover_domain_with_round_step(self) -> None:
        ticks = generate_linear_ticks(0.0, 10.0, 5)
        np.testing.assert_allclose(ticks, [0.0, 2.0, 4.0, 6.0, 8.0, 10.0])

    def test_nice_ticks_are_deterministic(self) -> None:
        first = generate_linear_ticks(-3.7, 42.1, 9)
        second = generate_linear_ticks(-3.7, 42.1, 9)
        np.testing.assert_array_equal(first, second)
        self.assertTrue(np.all(np.diff(first) > 0))

    def test_nice_ticks_have_constant_step(self) -> None:
        cases = [
            (0.0, 10.0, 5),
            (-3.7, 12.2, 8),
            (-250.0, -3.0, 6),
            (-0.5, 0.5, 10),
            (0.001, 0.009, 4),
            (1e-7, 3e-6, 5),
            (1e6, 5e7, 10),
            (-4e12, 9e12, 7),
        ]
        for vmin, vmax, target in cases:
            with self.subTest(vmin=vmin, vmax=vmax, target=target):
                ticks = generate_linear_ticks(vmin, vmax, target)
                self.assertGreaterEqual(ticks.size, 2)
                steps = np.diff(ticks)
                self.assertGreater(float(steps[0]), 0.0)
                np.testing.assert_allclose(steps, steps[0])

    def test_zero_crossing_tick_is_exact_zero(self) -> None:
        ticks = generate_linear_ticks(-0.3, 0.3, 7)
        self.assertIn(0.0, ticks.tolist())

    def test_equal_bounds_return_single_tick(self) -> None:
        np.testing.assert_array_equal(generate_linear_ticks(3.0, 3.0, 5), [3.0])

    def test_target_tick_count_has_floor_of_two(self) -> None:
        self.assertEqual(target_tick_count(640.0, 50.0), 12)
        self.assertEqual(target_tick_count(60.0, 50.0), 2)
        with self.assertRaises(ValueError):
            target_tick_count(100.0, 0.0)

    def test_minor_ticks_split_intervals_evenly(self) -> None:
        np.testing.assert_allclose(generate_linear_minor_ticks([0.0, 5.0], 4), [1.0, 2.0, 3.0, 4.0])
        self.assertEqual(generate_linear_minor_ticks([0.0, 5.0], 0).size, 0)


class LogTickTests(unittest.TestCase):
    def test_decade_ticks(self) -> None:
        np.testing.assert_allclose(generate_log_ticks(1.0, 1000.0), [1.0, 10.0, 100.0, 1000.0])

    def test_clamped_bounds_out_of_order_fall_back_to_one_decade(self) -> None:
        np.testing.assert_allclose(generate_log_ticks(-0.5, 0.5), [1.0, 10.0])

    def test_minor_ticks_fill_each_decade(self) -> None:
        minor = generate_log_minor_ticks([1.0, 10.0, 100.0])
        self.assertEqual(minor.size, 16)
        self.assertAlmostEqual(float(minor[0]), 2.0)
        self.assertAlmostEqual(float(minor[-1]), 90.0)

    def test_minor_ticks_skip_non_decade_gaps(self) -> None:
        self.assertEqual(generate_log_minor_ticks([1.0, 1000.0]).size, 0)

    def test_log_labels_use_superscript_exponent(self) -> None:
        self.assertEqual(format_log_tick(1000.0), TickLabel("10", superscript="3"))
        self.assertEqual(format_log_tick(0.01), TickLabel("10", superscript="-2"))
        self.assertEqual(format_log_tick(200.0), TickLabel("2.0·10", superscript="2"))
        self.assertEqual(format_log_tick(1000.0).plain(), "10^3")


class PiTickTests(unittest.TestCase):
    def test_full_period_includes_quarter_turns(self) -> None:
        ticks = generate_pi_ticks(0.0, 2.0 * math.pi)
        for expected in (0.0, math.pi / 2.0, math.pi, 1.5 * math.pi, 2.0 * math.pi):
            self.assertTrue(_contains(ticks, expected), expected)
        self.assertTrue(np.all(np.diff(ticks) > 0))

    def test_narrow_domain_uses_fine_fractions(self) -> None:
        ticks = generate_pi_ticks(0.0, math.pi / 4.0)
        self.assertTrue(_contains(ticks, math.pi / 8.0))

    def test_wide_domain_uses_half_multiples(self) -> None:
        ticks = generate_pi_ticks(0.0, 6.0 * math.pi)
        self.assertTrue(_contains(ticks, 0.5 * math.pi))
        self.assertTrue(_contains(ticks, 6.0 * math.pi))

    def test_very_wide_domain_strides_whole_multiples(self) -> None:
        ticks = generate_pi_ticks(0.0, 40.0 * math.pi)
        np.testing.assert_allclose(ticks / math.pi, [0.0, 5.0, 10.0, 15.0, 20.0, 25.0, 30.0, 35.0, 40.0])
        self.assertFalse(_contains(ticks, 0.5 * math.pi))

    def test_pi_labels(self) -> None:
        self.assertEqual(format_pi_value(0.0), "0")
        self.assertEqual(format_pi_value(math.pi), "π")
        self.assertEqual(format_pi_value(-math.pi), "-π")
        self.assertEqual(format_pi_value(math.pi / 2.0), "π/2")
        self.assertEqual(format_pi_value(2.0 * math.pi), "2π")
        self.assertEqual(format_pi_value(0.75 * math.pi), "3π/4")
        self.assertEqual(format_pi_value(0.1 * math.pi), "0.10π")

    def test_pi_minor_ticks_depend_on_interval(self) -> None:
        np.testing.assert_allclose(generate_pi_minor_ticks([0.0, math.pi / 2.0]), [math.pi / 4.0])
        np.testing.assert_allclose(
            generate_pi_minor_ticks([0.0, math.pi]),
            [math.pi / 4.0, math.pi / 2.0, 3.0 * math.pi / 4.0],
        )


class ScaleFactorTests(unittest.TestCase):
    def test_scientific_exponent(self) -> None:
        self.assertEqual(scale_exponent([0.0, 2000.0, 4000.0], "scientific"), 3)
        self.assertEqual(scale_exponent([0.0, 0.002, 0.004], "scientific"), -3)
        self.assertEqual(scale_exponent([0.0, 2.0, 8.0], "scientific"), 0)

    def test_engineering_exponent_is_multiple_of_three(self) -> None:
        self.assertEqual(scale_exponent([0.0, 20000.0, 40000.0], "engineering"), 3)
        self.assertEqual(scale_exponent([0.0, 0.0005], "engineering"), -6)

    def test_linear_scale_has_no_exponent(self) -> None:
        self.assertEqual(scale_exponent([0.0, 4000.0], "none"), 0)
        self.assertEqual(scale_exponent([0.0, 0.0], "scientific"), 0)

    def test_linear_labels_have_one_decimal(self) -> None:
        self.assertEqual(format_linear_tick(4000.0, factor=1000.0).text, "4.0")
        self.assertEqual(format_linear_tick(-0.01).text, "0.0")
        self.assertEqual(format_linear_tick(2.25).text, "2.2")

    def test_tick_set_scales_labels_by_shared_factor(self) -> None:
        ticks = build_tick_set(AxisDomain(0.0, 4000.0), "scientific", 5)
        self.assertEqual(ticks.exponent, 3)
        self.assertEqual([label.text for label in ticks.labels], ["0.0", "1.0", "2.0", "3.0", "4.0"])
        self.assertEqual(ticks.minor, ())

    def test_tick_set_minor_ticks_only_on_request(self) -> None:
        ticks = build_tick_set(AxisDomain(1.0, 100.0), "log", 5, minor=True)
        self.assertEqual(ticks.major, (1.0, 10.0, 100.0))
        self.assertEqual(len(ticks.minor), 16)


if __name__ == "__main__":
    unittest.main()
