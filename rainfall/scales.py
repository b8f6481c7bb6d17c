"""Band and linear scales mapping chart data into drawable-area pixels."""

import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

# Upper bound used when every value is zero, so the axis still has a range
EMPTY_DOMAIN_MAX = 1.0

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def value_domain_max(values: Iterable[float], headroom: float = 1.15) -> float:
    """Top of the value axis: the largest value plus a fixed headroom margin."""
    largest = max(values, default=0.0)
    if not largest > 0:
        return EMPTY_DOMAIN_MAX
    upper = largest * headroom
    return upper if math.isfinite(upper) else largest


def _tick_spec(start: float, stop: float, count: float) -> Tuple[int, int, float]:
    step = (stop - start) / max(0.0, count)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    factor = 10 if error >= _E10 else 5 if error >= _E5 else 2 if error >= _E2 else 1
    if power < 0:
        inc = 10 ** -power / factor
        i1, i2 = round(start * inc), round(stop * inc)
        if i1 / inc < start:
            i1 += 1
        if i2 / inc > stop:
            i2 -= 1
        inc = -inc
    else:
        inc = float(10 ** power * factor)
        i1, i2 = round(start / inc), round(stop / inc)
        if i1 * inc < start:
            i1 += 1
        if i2 * inc > stop:
            i2 -= 1
    if i2 < i1 and 0.5 <= count < 2:
        return _tick_spec(start, stop, count * 2)
    return i1, i2, inc


def nice_ticks(start: float, stop: float, count: int) -> List[float]:
    """
    Evenly spaced round values covering [start, stop].

    The step is a power of ten times 1, 2 or 5, picked so that roughly
    ``count`` ticks fit the interval. Negative increments encode steps below
    one so the ticks are computed by division and stay exact.
    """
    if count <= 0 or not stop > start:
        return [start] if start == stop and count > 0 else []
    i1, i2, inc = _tick_spec(start, stop, count)
    if i2 < i1:
        return []
    steps = np.arange(i1, i2 + 1, dtype=float)
    ticks = steps / -inc if inc < 0 else steps * inc
    return [float(t) for t in ticks]


def tick_step(start: float, stop: float, count: int) -> float:
    _, _, inc = _tick_spec(start, stop, count)
    return 1 / -inc if inc < 0 else inc


class LinearScale:
    """Continuous mapping from a numeric domain onto a pixel range."""

    def __init__(self, domain: Tuple[float, float], range: Tuple[float, float]):
        d0, d1 = domain
        if d1 == d0:
            raise ValueError("Linear scale domain must not be empty")
        self.domain = (float(d0), float(d1))
        self.range = (float(range[0]), float(range[1]))

    def __call__(self, value: float) -> float:
        (d0, d1), (r0, r1) = self.domain, self.range
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 10) -> List[float]:
        return nice_ticks(self.domain[0], self.domain[1], count)

    def tick_format(self, count: int = 10):
        """Formatter with just enough decimals to tell adjacent ticks apart."""
        step = tick_step(self.domain[0], self.domain[1], count)
        decimals = max(0, -math.floor(math.log10(step)))
        return lambda v: f"{v:.{decimals}f}"


class BandScale:
    """
    Discrete mapping from categories onto evenly sized pixel slots.

    ``padding`` is the fraction of each step left empty between bands, and the
    same fraction is kept at both outer edges. Unknown categories map to None.
    """

    def __init__(self, domain: Sequence[str], range: Tuple[float, float], padding: float = 0.3):
        if not 0 <= padding < 1:
            raise ValueError(f"Band padding must be in [0, 1), got {padding}")
        self.domain = list(domain)
        self.range = (float(range[0]), float(range[1]))
        self.padding = padding

        start, stop = self.range
        n = len(self.domain)
        self.step = (stop - start) / max(1.0, n - padding + padding * 2)
        self.bandwidth = self.step * (1 - padding)
        # Centre the bands within the range
        start += (stop - start - self.step * (n - padding)) * 0.5
        self._positions: Dict[str, float] = {
            category: start + self.step * i for i, category in enumerate(self.domain)
        }

    def __call__(self, category: str) -> Optional[float]:
        return self._positions.get(category)

    def center(self, category: str) -> Optional[float]:
        x = self(category)
        return None if x is None else x + self.bandwidth / 2
