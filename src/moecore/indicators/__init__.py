"""Quality indicators comparing approximation sets to reference sets."""

from .base import IndicatorResult, QualityIndicator
from .normalizer import Normalizer
from .spread import GeneralizedSpread, generalized_spread

__all__ = [
    "IndicatorResult",
    "QualityIndicator",
    "Normalizer",
    "GeneralizedSpread",
    "generalized_spread",
]
