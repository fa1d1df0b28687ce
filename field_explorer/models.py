from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from .errors import ConfigurationError


# ----------------------------
# 1) RANGE
# ----------------------------
@dataclass(frozen=True)
class Range:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    def validate(self, name: str = "range") -> "Range":
        if not (math.isfinite(self.min) and math.isfinite(self.max)):
            raise ConfigurationError(f"{name} bounds must be finite numbers, got [{self.min}, {self.max}].")
        if self.min >= self.max:
            raise ConfigurationError(f"{name} min must be less than max, got [{self.min}, {self.max}].")
        return self

    def samples(self, count: int) -> np.ndarray:
        # linspace pins the last sample to max exactly
        return np.linspace(self.min, self.max, count)


def check_count(value, minimum: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}.")
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}.")
    return int(value)


# ----------------------------
# 2) PER-POINT RESULT
# ----------------------------
@dataclass(frozen=True)
class PointResult:
    value: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, reason: str) -> "PointResult":
        return cls(value=float("nan"), error=reason)

    @classmethod
    def of(cls, value: float) -> "PointResult":
        if not math.isfinite(value):
            return cls.failed(f"non-finite value {value}")
        return cls(value=value)


# ----------------------------
# 3) SAMPLED DATASETS
# ----------------------------
@dataclass
class Mesh:
    """
    Regular resolution x resolution sampling of f and its gradient.

    z[row][col] = f(x[col], y[row]); u and v hold df/dx and df/dy at the
    same cell. Cells that could not be evaluated are NaN.
    """
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray
    u: np.ndarray
    v: np.ndarray

    @property
    def resolution(self) -> int:
        return int(self.x.shape[0])

    @property
    def dx(self) -> float:
        return float(self.x[1] - self.x[0])

    @property
    def dy(self) -> float:
        return float(self.y[1] - self.y[0])

    def nan_count(self) -> int:
        return int(np.count_nonzero(np.isnan(self.z)))

    def to_frame(self) -> pd.DataFrame:
        X, Y = np.meshgrid(self.x, self.y, indexing="xy")
        return pd.DataFrame({
            "x": X.ravel(),
            "y": Y.ravel(),
            "z": self.z.ravel(),
            "u": self.u.ravel(),
            "v": self.v.ravel(),
        })


@dataclass
class TrajectorySample:
    t: np.ndarray
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray

    def __len__(self) -> int:
        return int(self.t.shape[0])

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame({"t": self.t, "x": self.x, "y": self.y, "z": self.z})


@dataclass(frozen=True)
class PointProbe:
    x0: float
    y0: float
    z0: float
    u0: float
    v0: float
    magnitude: float
    x_end: float
    y_end: float
