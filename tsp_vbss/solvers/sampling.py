from typing import Callable, Dict, Optional, Sequence

import numpy as np

from ..errors import DegenerateDistribution
from ..random_source import RandomSource
from .base import Tour


def threshold_scan_sample(
    probabilities: Sequence[float], rng: RandomSource, max_draws: Optional[int] = None
) -> Tour:
    """
    Historical VBSS draw: pick the first city whose probability exceeds a
    uniform ``r``, rejecting the draw if that city is already placed.

    This is not a weighted draw. A city is only reachable when every city
    scanned before it has a smaller probability, so most vectors run out of
    draws and raise ``DegenerateDistribution``.
    """
    probs = np.asarray(probabilities, dtype=float)
    n = probs.shape[0]
    if max_draws is None:
        max_draws = 100 * n
    visited = np.zeros(n, dtype=bool)
    out: Tour = []
    draws = 0
    while len(out) < n:
        if draws >= max_draws:
            raise DegenerateDistribution(
                f"threshold scan placed {len(out)} of {n} cities in {max_draws} draws"
            )
        draws += 1
        r = rng.random()
        hits = np.flatnonzero(probs > r)
        if hits.size == 0:
            continue
        i = int(hits[0])
        if visited[i]:
            continue
        visited[i] = True
        out.append(i)
    return out


def cumulative_sample(
    probabilities: Sequence[float], rng: RandomSource, max_draws: Optional[int] = None
) -> Tour:
    """
    Inverse-CDF draw without replacement over the unvisited cities' mass.

    Takes exactly one draw per city, so ``max_draws`` is accepted only to share
    the sampler signature.
    """
    probs = np.asarray(probabilities, dtype=float)
    n = probs.shape[0]
    remaining = probs.copy()
    out: Tour = []
    for _ in range(n):
        total = remaining.sum()
        if not np.isfinite(total) or total <= 0:
            raise DegenerateDistribution(
                f"{n - len(out)} unvisited cities have zero selection probability"
            )
        cdf = np.cumsum(remaining)
        i = int(np.searchsorted(cdf, rng.random() * total, side="right"))
        if i >= n or remaining[i] <= 0:
            # r landed on the float tail past cdf[-1]
            i = int(np.flatnonzero(remaining > 0)[-1])
        out.append(i)
        remaining[i] = 0.0
    return out


Sampler = Callable[[Sequence[float], RandomSource, Optional[int]], Tour]

SAMPLERS: Dict[str, Sampler] = {
    "scan": threshold_scan_sample,
    "cdf": cumulative_sample,
}
