"""Search configuration — precision resolution and the debug switch."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_PRECISION = 1.0


@dataclass
class SearchConfig:
    """Tunables for one polylabel search."""

    # Pruning tolerance, same units as the polygon coordinates
    precision: float | None = DEFAULT_PRECISION
    # Emit progress events to the diagnostics sink
    debug: bool = False
    # Used when precision is falsy (None, 0, 0.0) or NaN
    default_precision: float = DEFAULT_PRECISION

    def resolve_precision(self) -> float:
        """Falsy or NaN precision means "use the default"; negative precision is rejected."""
        if not self.precision or math.isnan(self.precision):
            return float(self.default_precision)
        if self.precision < 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        return float(self.precision)
