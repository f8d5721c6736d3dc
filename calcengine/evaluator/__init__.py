"""
calcengine Evaluator Package

Reduces expression trees to a single float.

Author: xwest
"""

from .evaluator import Evaluator

__all__ = [
    "Evaluator",
]
