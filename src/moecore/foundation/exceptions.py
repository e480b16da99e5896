"""
moecore exception hierarchy.

Provides exceptions with helpful error messages and suggestions.
All moecore-specific exceptions inherit from MoeCoreError for easy catching.

Contract violations (structurally invalid calls) derive from the builtin
exception a caller would expect, so ``except ValueError`` / ``except
IndexError`` keep working:

    try:
        archive = FitnessBasedArchive(StrengthFitnessEvaluator(), capacity=-1)
    except MoeCoreError as e:
        logger.error("Archive setup failed: %s", e)
"""

from __future__ import annotations

from typing import Any


class MoeCoreError(Exception):
    """
    Base exception for all moecore errors.

    Attributes:
        message: Human-readable error description
        suggestion: Optional suggestion for fixing the error
        details: Optional dict with additional context
    """

    def __init__(
        self,
        message: str,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message with suggestion."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        return msg


# =============================================================================
# Contract violations
# =============================================================================


class ContractViolationError(MoeCoreError, ValueError):
    """Raised when a call is structurally invalid (a programming error)."""

    pass


class CapacityError(ContractViolationError):
    """Raised when an archive capacity or truncation size is negative."""

    def __init__(self, value: int, name: str = "capacity") -> None:
        message = f"{name} must be >= 0, got {value}."
        suggestion = f"Pass a non-negative {name}"
        super().__init__(message, suggestion, {name: value})


class DimensionMismatchError(ContractViolationError):
    """Raised when two compared solutions have different objective counts."""

    def __init__(self, expected: int, actual: int) -> None:
        message = f"Objective dimension mismatch: expected {expected}, got {actual}."
        suggestion = "All solutions stored together must come from the same problem"
        super().__init__(message, suggestion, {"expected": expected, "actual": actual})


class InvalidEpsilonError(ContractViolationError):
    """Raised when epsilon values are missing, non-positive or wrongly sized."""

    def __init__(self, message: str, epsilon: Any = None) -> None:
        suggestion = "Provide one strictly positive epsilon, or one per objective"
        super().__init__(message, suggestion, {"epsilon": epsilon})


class InvalidFitnessEvaluatorError(ContractViolationError):
    """Raised when an unknown fitness evaluator is requested."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        available = available or ["spea2", "crowding", "hypervolume", "epsilon"]
        message = f"Unknown fitness evaluator '{name}'."
        suggestion = f"Available fitness evaluators: {', '.join(available)}"
        super().__init__(message, suggestion, {"name": name, "available": available})


class EmptyReferenceSetError(ContractViolationError):
    """Raised when a normalizer is built from an empty reference set."""

    def __init__(self) -> None:
        message = "Reference set is empty; normalization bounds are undefined."
        suggestion = "Provide a nonempty reference set or explicit bounds"
        super().__init__(message, suggestion)


# =============================================================================
# Bounds faults
# =============================================================================


class DensityBoundsError(MoeCoreError, IndexError):
    """Raised when the density neighbour index k does not fit the population."""

    def __init__(self, k: int, size: int) -> None:
        message = f"Density parameter k={k} requires more than {k} solutions, population has {size}."
        suggestion = "Use k <= population size - 1, or k=None for the sqrt(n) default"
        super().__init__(message, suggestion, {"k": k, "size": size})


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Base
    "MoeCoreError",
    # Contract violations
    "ContractViolationError",
    "CapacityError",
    "DimensionMismatchError",
    "InvalidEpsilonError",
    "InvalidFitnessEvaluatorError",
    "EmptyReferenceSetError",
    # Bounds
    "DensityBoundsError",
]
