from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

# Burst stream: a near-zero baseline with occasional large spikes.
DEFAULT_VALUES: List[float] = [
    0.000721, 0.000721, 13.0, 0.000721, 11.0, 0.000721, 0.000721, 0.000721,
    17.0, 0.000721, 0.000721, 0.000721, 0.000721, 13.3, 15.4, 0.000721,
    0.000721, 0.000721, 17.5, 2.4, 0.000721, 0.000721,
]


class EWMAcfg(BaseModel):
    alpha: float = Field(default=0.3, gt=0.0, le=1.0, allow_inf_nan=False)


class DemoCfg(BaseModel):
    ewma: EWMAcfg = Field(default_factory=EWMAcfg)
    values: List[float] = Field(default_factory=lambda: list(DEFAULT_VALUES), min_length=1)
    compare_alphas: List[float] = Field(
        default_factory=lambda: [0.1, 0.3, 0.7],
        description="alphas swept by the compare command",
    )

    @field_validator("compare_alphas")
    @classmethod
    def _alphas_in_range(cls, v: List[float]) -> List[float]:
        for a in v:
            if not 0.0 < a <= 1.0:
                raise ValueError(f"alpha must satisfy 0 < alpha <= 1, got {a}")
        return v
