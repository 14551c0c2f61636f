from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Optional

from .errors import InvalidParameter, NotInitialized

if TYPE_CHECKING:
    from .config import EWMAcfg

logger = logging.getLogger(__name__)


def _as_real(x: object, what: str) -> float:
    if isinstance(x, bool) or not isinstance(x, numbers.Real):
        raise InvalidParameter(f"{what} must be a real number, got {x!r}")
    v = float(x)
    if not math.isfinite(v):
        raise InvalidParameter(f"{what} must be finite, got {v!r}")
    return v


def check_alpha(alpha: object) -> float:
    a = _as_real(alpha, "alpha")
    if not 0.0 < a <= 1.0:
        raise InvalidParameter(f"alpha must satisfy 0 < alpha <= 1, got {a!r}")
    return a


@dataclass
class EWMA:
    """Exponentially weighted moving average.

    update: x -> value := alpha * x + (1-alpha) * value

    alpha in (0,1]. Larger alpha => shorter memory; alpha=1 passes samples through.
    The first sample seeds the value exactly.
    """

    alpha: float
    # None while empty, the running average once seeded
    _value: Optional[float] = field(default=None, init=False, repr=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "alpha":
            if "alpha" in self.__dict__:
                raise AttributeError("alpha is fixed at construction")
            value = check_alpha(value)
        super().__setattr__(name, value)

    @classmethod
    def from_config(cls, cfg: "EWMAcfg") -> "EWMA":
        return cls(alpha=cfg.alpha)

    @property
    def has_data(self) -> bool:
        return self._value is not None

    @property
    def value(self) -> Optional[float]:
        return self._value

    def update(self, x: float) -> float:
        x = _as_real(x, "sample")
        if self._value is None:
            self._value = x
            return x
        v = self._value
        lo, hi = min(v, x), max(v, x)
        # rounding alone can land one ulp outside [lo, hi], e.g. on constant input
        self._value = min(max(self.alpha * x + (1.0 - self.alpha) * v, lo), hi)
        return self._value

    def read(self) -> float:
        return 0.0 if self._value is None else self._value

    def reset(self) -> None:
        if self._value is not None:
            logger.debug("reset EWMA(alpha=%g) from %g", self.alpha, self._value)
        self._value = None

    @property
    def time_constant(self) -> float:
        # Approx samples for 1-e^{-1} step response
        return 1.0 / self.alpha


def initialize(alpha: float) -> EWMA:
    return EWMA(alpha=alpha)


def update(estimator: Optional[EWMA], sample: float) -> float:
    if not isinstance(estimator, EWMA):
        raise NotInitialized("update() needs an estimator")
    return estimator.update(sample)


def read(estimator: Optional[EWMA]) -> float:
    if not isinstance(estimator, EWMA):
        raise NotInitialized("read() needs an estimator")
    return estimator.read()


def reset(estimator: Optional[EWMA]) -> None:
    if isinstance(estimator, EWMA):
        estimator.reset()


def calculate_array(values: Optional[Iterable[float]], alpha: float) -> List[float]:
    """Run a fresh EWMA over ``values`` and return every intermediate value.

    out[i] is what the (i+1)-th update of a new estimator returns. Raises
    InvalidParameter on a missing or empty sequence, a bad alpha, or a
    non-finite element; nothing is returned in those cases.
    """
    alpha = check_alpha(alpha)
    if values is None:
        raise InvalidParameter("values must not be None")
    xs = [_as_real(v, f"values[{i}]") for i, v in enumerate(values)]
    if not xs:
        raise InvalidParameter("values must not be empty")

    e = EWMA(alpha=alpha)
    out = [e.update(x) for x in xs]
    logger.debug("calculate_array: %d values, alpha=%g", len(out), e.alpha)
    return out
