from __future__ import annotations

from typing import List, Sequence

import numpy as np


def reference_fold(values: Sequence[float], alpha: float) -> List[float]:
    """Closed-loop EWMA written out longhand, independent of EWMA.update."""
    out: List[float] = []
    v = 0.0
    for i, x in enumerate(values):
        v = float(x) if i == 0 else alpha * float(x) + (1.0 - alpha) * v
        out.append(v)
    return out


def make_stream(n: int, *, seed: int = 0, spike_p: float = 0.1) -> np.ndarray:
    """Noisy baseline with occasional spikes, like a latency metric."""
    rng = np.random.default_rng(seed)
    base = rng.normal(loc=1.0, scale=0.2, size=n)
    spikes = rng.random(n) < spike_p
    base[spikes] += rng.uniform(5.0, 20.0, size=int(spikes.sum()))
    return base
