"""Shared module - 운동 카탈로그 서비스와 게이트웨이가 공유하는 모듈"""

from shared.models.exercise import Exercise, SecondaryMuscle, InstructionStep

__all__ = [
    "Exercise",
    "SecondaryMuscle",
    "InstructionStep",
]
