"""宠物状态：分级属性、照顾等级与状态变化。"""
from tamagotchi.status.attributes import (
    Behavior,
    CareLevel,
    CareScoreError,
    Discipline,
    GradedLevel,
    Health,
    Hunger,
    Light,
    Mood,
)
from tamagotchi.status.models import Status

__all__ = [
    "Behavior",
    "CareLevel",
    "CareScoreError",
    "Discipline",
    "GradedLevel",
    "Health",
    "Hunger",
    "Light",
    "Mood",
    "Status",
]
