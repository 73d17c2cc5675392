"""宠物数据模型：身份（名字、性别）、身体（年龄、体重、形态）与状态。"""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from tamagotchi.config import BASE_WEIGHT
from tamagotchi.evolution.forms import Form, LifeStage
from tamagotchi.status.attributes import CareLevel
from tamagotchi.status.models import Status


class Gender(str, Enum):
    """性别，创建时确定。"""
    MALE = "male"
    FEMALE = "female"


class Pet(BaseModel):
    """一只宠物。不可变：每个动作都产生新的 Pet。"""
    name: str = Field(..., description="宠物名字")
    gender: Gender = Field(..., description="性别")
    age: int = Field(0, ge=0, description="年龄（天）")
    weight: float = Field(BASE_WEIGHT, ge=0, description="体重（磅）")
    form: Form = Field(Form.TAMAGO, description="当前形态")
    status: Status = Field(default_factory=Status, description="当前状态")
    minutes_alive: int = Field(0, ge=0, description="出生以来的游戏分钟数")
    minutes_in_form: int = Field(0, ge=0, description="在当前形态停留的分钟数")
    minutes_asleep: int = Field(0, ge=0, description="累计睡眠分钟数")
    care_total: int = Field(0, ge=0, description="照顾分数按分钟累计之和（分数 × 分钟）")
    care_minutes: int = Field(0, ge=0, description="已计入照顾分数的分钟数（孵化后）")

    model_config = ConfigDict(frozen=True)

    @property
    def stage(self) -> LifeStage:
        return self.form.stage

    @property
    def care_level(self) -> CareLevel:
        return self.status.care_level()

    @property
    def hatched(self) -> bool:
        return self.stage != LifeStage.EGG
