"""Robust-point policies for segment relation.

- NoRescalePolicy: robust points are the raw points
- ExactRationalPolicy: robust points use exact Fraction coordinates
"""

from .policies import ExactRationalPolicy, NoRescalePolicy, RobustPolicy

__all__ = [
    "RobustPolicy",
    "NoRescalePolicy",
    "ExactRationalPolicy",
]
