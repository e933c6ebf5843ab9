from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import math

import numpy as np

from luvatrix_chart.elements import ScaleKind
from luvatrix_chart.limits import AxisDomain


PI = math.pi
PI_LABEL_TOLERANCE = 1e-3
PI_DEDUP_TOLERANCE = 1e-6
PI_DENOMINATORS = (1, 2, 3, 4, 6, 8)
PI_FINE_FRACTIONS = (
    0.0,
    1.0 / 8.0,
    1.0 / 6.0,
    1.0 / 4.0,
    1.0 / 3.0,
    3.0 / 8.0,
    1.0 / 2.0,
    5.0 / 8.0,
    2.0 / 3.0,
    3.0 / 4.0,
    5.0 / 6.0,
    7.0 / 8.0,
    1.0,
)
PI_FRACTIONS = (
    0.0,
    1.0 / 6.0,
    1.0 / 4.0,
    1.0 / 3.0,
    1.0 / 2.0,
    2.0 / 3.0,
    3.0 / 4.0,
    5.0 / 6.0,
    1.0,
    7.0 / 6.0,
    5.0 / 4.0,
    4.0 / 3.0,
    3.0 / 2.0,
    5.0 / 3.0,
    7.0 / 4.0,
    11.0 / 6.0,
    2.0,
)
LOG_LABEL_TOLERANCE = 1e-3
LOG_FALLBACK_DOMAIN = (1.0, 10.0)
DEFAULT_MINOR_PER_INTERVAL = 4


@dataclass(frozen=True)
class TickLabel:
    text: str
    superscript: str | None = None

    def plain(self) -> str:
        if self.superscript is None:
            return self.text
        return f"{self.text}^{self.superscript}"


@dataclass(frozen=True)
class TickSet:
    major: tuple[float, ...]
    minor: tuple[float, ...] = ()
    labels: tuple[TickLabel, ...] = ()
    exponent: int = 0

    @property
    def factor(self) -> float:
        return 10.0**self.exponent


def target_tick_count(length_px: float, density: float) -> int:
    if density <= 0:
        raise ValueError("tick density must be > 0")
    return max(2, int(length_px / density))


def generate_linear_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    """Nice-number ticks: a step from {1, 2, 5, 10} x 10^n covering the domain."""
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)
    if vmax < vmin:
        vmin, vmax = vmax, vmin

    step = _nice_number(vmax - vmin, target)
    if step <= 0 or not np.isfinite(step):
        return np.asarray([vmin, vmax], dtype=np.float64)

    start = math.floor(vmin / step) * step
    count = int(math.floor((vmax + 0.5 * step - start) / step)) + 1
    count = max(0, min(count, 2 * target + 1))
    ticks = start + np.arange(count, dtype=np.float64) * step
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    slack = 0.1 * step
    ticks = ticks[(ticks >= vmin - slack) & (ticks <= vmax + slack)]
    if ticks.size < 2:
        return np.asarray([vmin, vmax], dtype=np.float64)
    return ticks


def generate_log_ticks(vmin: float, vmax: float) -> np.ndarray:
    lo = vmin if vmin > 0 else 1.0
    hi = vmax if vmax > 0 else lo * 1000.0
    if (vmin <= 0 or vmax <= 0) and lo >= hi:
        lo, hi = LOG_FALLBACK_DOMAIN
    first = math.floor(math.log10(lo))
    last = math.ceil(math.log10(hi))
    tol = 1e-9
    ticks = [10.0**e for e in range(first, last + 1)]
    ticks = [t for t in ticks if lo * (1.0 - tol) <= t <= hi * (1.0 + tol)]
    if not ticks:
        return _fallback_ticks(lo, hi)
    return np.asarray(ticks, dtype=np.float64)


def generate_log_minor_ticks(major: Sequence[float]) -> np.ndarray:
    out: list[float] = []
    for current, upcoming in zip(major[:-1], major[1:]):
        if current <= 0 or upcoming <= 0:
            continue
        lc = math.log10(current)
        ln = math.log10(upcoming)
        # Only decades get the 2..9 subdivisions.
        if abs(ln - lc - 1.0) >= 0.1:
            continue
        magnitude = 10.0 ** math.floor(lc + 1e-9)
        for factor in range(2, 10):
            tick = factor * magnitude
            if current < tick < upcoming:
                out.append(tick)
    return np.asarray(out, dtype=np.float64)


def generate_linear_minor_ticks(major: Sequence[float], per_interval: int = DEFAULT_MINOR_PER_INTERVAL) -> np.ndarray:
    if per_interval <= 0:
        return np.zeros(0, dtype=np.float64)
    out: list[float] = []
    for current, upcoming in zip(major[:-1], major[1:]):
        interval = (upcoming - current) / (per_interval + 1)
        out.extend(current + interval * j for j in range(1, per_interval + 1))
    return np.asarray(out, dtype=np.float64)


def generate_pi_ticks(vmin: float, vmax: float) -> np.ndarray:
    """Ticks at readable fractions of pi, coarser as the domain widens."""
    if vmax < vmin:
        vmin, vmax = vmax, vmin
    tol = 1e-9 * max(1.0, abs(vmin), abs(vmax))
    lo_ratio = vmin / PI
    hi_ratio = vmax / PI
    span = hi_ratio - lo_ratio
    candidates: list[float] = []

    if span <= 0.5:
        for whole in range(math.floor(lo_ratio) - 1, math.ceil(hi_ratio) + 1):
            candidates.extend((whole + frac) * PI for frac in PI_FINE_FRACTIONS)
    elif span <= 3.0:
        for period in range(math.floor(lo_ratio / 2.0) - 1, math.ceil(hi_ratio / 2.0) + 1):
            candidates.extend((frac + period * 2.0) * PI for frac in PI_FRACTIONS)
    else:
        stride = 1
        if span > 20.0:
            stride = max(1, int(round(_nice_number(span, 10))))
        first = math.floor(lo_ratio / stride) * stride
        last = math.ceil(hi_ratio / stride) * stride
        for multiple in range(first, last + 1, stride):
            candidates.append(multiple * PI)
            if stride == 1:
                candidates.append((multiple + 0.5) * PI)

    ticks = sorted(t for t in candidates if vmin - tol <= t <= vmax + tol)
    deduped: list[float] = []
    for t in ticks:
        if deduped and abs(t - deduped[-1]) < PI_DEDUP_TOLERANCE:
            continue
        deduped.append(t)
    if not deduped:
        return _fallback_ticks(vmin, vmax)
    return np.asarray(deduped, dtype=np.float64)


def generate_pi_minor_ticks(major: Sequence[float]) -> np.ndarray:
    out: list[float] = []
    for current, upcoming in zip(major[:-1], major[1:]):
        interval = upcoming - current
        parts = 2 if interval <= PI / 2.0 else 4
        out.extend(current + interval * j / parts for j in range(1, parts))
    return np.asarray(out, dtype=np.float64)


def scale_exponent(ticks: Sequence[float], scale: ScaleKind) -> int:
    """Shared power of ten for scientific/engineering labels (0 = no factor)."""
    if scale not in {"scientific", "engineering"} or len(ticks) == 0:
        return 0
    max_abs = float(np.max(np.abs(np.asarray(ticks, dtype=np.float64))))
    if max_abs <= 0 or not np.isfinite(max_abs):
        return 0
    exp = math.floor(math.log10(max_abs))
    if scale == "scientific":
        if max_abs >= 10.0 or max_abs < 1.0:
            return exp
        return 0
    power = (exp // 3) * 3
    mantissa = max_abs / 10.0**power
    if mantissa >= 1000.0:
        power += 3
    elif mantissa < 1.0:
        power -= 3
    return power


def format_linear_tick(value: float, *, factor: float = 1.0) -> TickLabel:
    text = f"{value / factor:.1f}"
    if text == "-0.0":
        text = "0.0"
    return TickLabel(text)


def format_log_tick(value: float) -> TickLabel:
    abs_v = abs(value)
    if abs_v == 0 or not math.isfinite(abs_v):
        return TickLabel("0")
    log_v = math.log10(abs_v)
    if abs(round(log_v) - log_v) < LOG_LABEL_TOLERANCE:
        return TickLabel("10", superscript=str(int(round(log_v))))
    exponent = math.floor(log_v)
    coefficient = value / 10.0**exponent
    if abs(coefficient - 1.0) < LOG_LABEL_TOLERANCE:
        return TickLabel("10", superscript=str(exponent))
    return TickLabel(f"{coefficient:.1f}·10", superscript=str(exponent))


def format_pi_value(value: float) -> str:
    if abs(value) < 1e-6:
        return "0"
    ratio = value / PI
    for denom in PI_DENOMINATORS:
        numerator_f = ratio * denom
        numerator = int(round(numerator_f))
        if abs(numerator_f - numerator) >= PI_LABEL_TOLERANCE:
            continue
        if numerator == 0:
            return "0"
        if denom == 1:
            if numerator == 1:
                return "π"
            if numerator == -1:
                return "-π"
            return f"{numerator}π"
        if abs(numerator) == 1:
            return f"π/{denom}" if numerator > 0 else f"-π/{denom}"
        return f"{numerator}π/{denom}"
    return f"{ratio:.2f}π"


def format_tick_labels(ticks: Sequence[float], scale: ScaleKind, exponent: int = 0) -> tuple[TickLabel, ...]:
    if scale == "log":
        return tuple(format_log_tick(float(v)) for v in ticks)
    if scale == "pi":
        return tuple(TickLabel(format_pi_value(float(v))) for v in ticks)
    factor = 10.0**exponent
    return tuple(format_linear_tick(float(v), factor=factor) for v in ticks)


def build_tick_set(
    domain: AxisDomain,
    scale: ScaleKind,
    target: int,
    *,
    minor: bool = False,
    minor_per_interval: int = DEFAULT_MINOR_PER_INTERVAL,
) -> TickSet:
    if scale == "log":
        major = generate_log_ticks(domain.vmin, domain.vmax)
    elif scale == "pi":
        major = generate_pi_ticks(domain.vmin, domain.vmax)
    else:
        major = generate_linear_ticks(domain.vmin, domain.vmax, target)
    if major.size == 0:
        major = _fallback_ticks(domain.vmin, domain.vmax)

    minor_ticks = np.zeros(0, dtype=np.float64)
    if minor:
        if scale == "log":
            minor_ticks = generate_log_minor_ticks(major.tolist())
        elif scale == "pi":
            minor_ticks = generate_pi_minor_ticks(major.tolist())
        else:
            minor_ticks = generate_linear_minor_ticks(major.tolist(), minor_per_interval)

    exponent = scale_exponent(major.tolist(), scale)
    return TickSet(
        major=tuple(float(v) for v in major),
        minor=tuple(float(v) for v in minor_ticks),
        labels=format_tick_labels(major.tolist(), scale, exponent),
        exponent=exponent,
    )


def _fallback_ticks(vmin: float, vmax: float) -> np.ndarray:
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)
    return np.asarray(sorted((vmin, vmax)), dtype=np.float64)


def _nice_number(span: float, target: int) -> float:
    rough = span / max(target - 1, 1)
    if rough <= 0 or not math.isfinite(rough):
        return 0.0
    exp = math.floor(math.log10(rough))
    frac = rough / (10.0**exp)
    if frac < 1.5:
        nice_frac = 1.0
    elif frac < 3.5:
        nice_frac = 2.0
    elif frac < 7.5:
        nice_frac = 5.0
    else:
        nice_frac = 10.0
    return float(nice_frac * (10.0**exp))
