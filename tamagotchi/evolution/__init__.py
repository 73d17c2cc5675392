"""成长形态与进化表。"""
from tamagotchi.evolution.forms import TEEN_BAD_CARE, TEEN_GOOD_CARE, Form, LifeStage
from tamagotchi.evolution.table import care_from_history, evolve, stage_duration

__all__ = [
    "Form",
    "LifeStage",
    "TEEN_BAD_CARE",
    "TEEN_GOOD_CARE",
    "care_from_history",
    "evolve",
    "stage_duration",
]
