"""宠物：数据模型与互动动作。"""
from tamagotchi.pet.actions import (
    Action,
    advance,
    clean,
    discipline,
    duck,
    fall_asleep,
    feed,
    give_attention,
    give_medicine,
    new_pet,
    perform,
    play,
    toggle_light,
    wake_up,
)
from tamagotchi.pet.models import Gender, Pet

__all__ = [
    "Action",
    "Gender",
    "Pet",
    "advance",
    "clean",
    "discipline",
    "duck",
    "fall_asleep",
    "feed",
    "give_attention",
    "give_medicine",
    "new_pet",
    "perform",
    "play",
    "toggle_light",
    "wake_up",
]
