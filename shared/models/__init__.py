"""Shared models"""

from .exercise import Exercise, SecondaryMuscle, InstructionStep

__all__ = [
    "Exercise",
    "SecondaryMuscle",
    "InstructionStep",
]
