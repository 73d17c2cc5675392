"""电子宠物核心：状态、照顾等级与成长进化。"""
from tamagotchi.evolution import Form, LifeStage, evolve
from tamagotchi.pet import Action, Gender, Pet, advance, new_pet, perform
from tamagotchi.status import Behavior, CareLevel, CareScoreError, Status

__version__ = "0.1.0"

__all__ = [
    "Action",
    "Behavior",
    "CareLevel",
    "CareScoreError",
    "Form",
    "Gender",
    "LifeStage",
    "Pet",
    "Status",
    "advance",
    "evolve",
    "new_pet",
    "perform",
]
