"""宠物状态数据模型。

Status 是不可变值：每个动作都返回一个新的 Status，只改动该动作涉及的字段，
其余字段原样复制。照顾等级（care）不单独存储，每次读取时由四项分数重新计算。
"""
from pydantic import BaseModel, ConfigDict, Field, computed_field

from tamagotchi.config import MAX_CARE_SCORE
from tamagotchi.status.attributes import (
    Behavior,
    CareLevel,
    CareScoreError,
    Discipline,
    Health,
    Hunger,
    Light,
    Mood,
)


class Status(BaseModel):
    """宠物在某一时刻的全部状态。"""
    hunger: Hunger = Field(Hunger.STARVING, description="饥饿程度")
    light: Light = Field(Light.ON, description="房间灯光")
    asleep: bool = Field(False, description="是否在睡觉")
    mood: Mood = Field(Mood.MISERABLE, description="心情")
    sick: bool = Field(False, description="是否生病")
    soiled: bool = Field(False, description="是否有便便没清理")
    health: Health = Field(Health.NEGLECTED, description="健康状况")
    discipline: Discipline = Field(Discipline.MODEL_ALIEN, description="纪律")

    model_config = ConfigDict(frozen=True)

    def care_score(self) -> int:
        """饥饿、心情、健康的爱心数加纪律槽，范围 0-16。"""
        parts = (self.hunger.hearts, self.mood.hearts, self.health.hearts, self.discipline.meter)
        for part in parts:
            if not 0 <= part <= 4:
                raise CareScoreError(f"attribute score {part} outside 0..4")
        score = sum(parts)
        if score > MAX_CARE_SCORE:
            raise CareScoreError(f"care score {score} exceeds {MAX_CARE_SCORE}")
        return score

    def care_level(self) -> CareLevel:
        return CareLevel.from_score(self.care_score())

    @computed_field
    @property
    def care(self) -> CareLevel:
        return self.care_level()

    def eat(self) -> "Status":
        return self.model_copy(update={"hunger": self.hunger.better()})

    def play(self) -> "Status":
        return self.model_copy(update={"mood": self.mood.better()})

    def sleep(self) -> "Status":
        """睡一觉：心情和健康各好一级。"""
        return self.model_copy(update={"mood": self.mood.better(), "health": self.health.better()})

    def toggle_light(self) -> "Status":
        return self.model_copy(update={"light": self.light.toggled()})

    def medicate(self) -> "Status":
        """吃药：生病时痊愈并且健康好一级；没生病时无效果。"""
        if not self.sick:
            return self
        return self.model_copy(update={"sick": False, "health": self.health.better()})

    def clean(self) -> "Status":
        if not self.soiled:
            return self
        return self.model_copy(update={"soiled": False})

    def attend(self) -> "Status":
        return self.model_copy(update={"mood": self.mood.better()})

    def discipline_with(self, behavior: Behavior) -> "Status":
        """管教：结果好则纪律好一级，结果坏则差一级。"""
        if behavior == Behavior.GOOD:
            return self.model_copy(update={"discipline": self.discipline.better()})
        return self.model_copy(update={"discipline": self.discipline.worse()})

    def fall_asleep(self) -> "Status":
        return self.model_copy(update={"asleep": True})

    def wake(self) -> "Status":
        return self.model_copy(update={"asleep": False})

    def decay(self) -> "Status":
        """清醒时时间流逝：饥饿和心情各差一级。"""
        return self.model_copy(update={"hunger": self.hunger.worse(), "mood": self.mood.worse()})

    def soil(self) -> "Status":
        """排便。上一次的便便还没清理时会生病，健康差一级。"""
        if self.soiled:
            return self.model_copy(update={"sick": True, "health": self.health.worse()})
        return self.model_copy(update={"soiled": True})
