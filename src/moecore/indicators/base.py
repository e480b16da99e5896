from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

import numpy as np


@dataclass
class IndicatorResult:
    value: float | np.ndarray
    details: dict[str, Any] = field(default_factory=dict)


class QualityIndicator(Protocol):
    name: str

    def compute(
        self,
        front: np.ndarray,
        reference_front: Optional[np.ndarray] = None,
        **kwargs: Any,
    ) -> IndicatorResult: ...


__all__ = ["IndicatorResult", "QualityIndicator"]
