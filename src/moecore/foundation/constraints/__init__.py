"""Constraint-handling helpers."""
