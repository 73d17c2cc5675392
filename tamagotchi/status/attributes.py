"""分级属性：饥饿、心情、健康、纪律（五级，从差到好），以及灯光、照顾等级与行为。"""
from enum import Enum
from typing import List

from tamagotchi.config import MAX_CARE_SCORE


class CareScoreError(RuntimeError):
    """照顾总分超出 [0, 16]：属于程序缺陷，不应由任何合法状态产生。"""


class GradedLevel(str, Enum):
    """五级有序属性的基类。成员按从差到好的顺序声明。"""

    @classmethod
    def levels(cls) -> List["GradedLevel"]:
        return list(cls)

    @classmethod
    def worst(cls) -> "GradedLevel":
        return cls.levels()[0]

    @classmethod
    def best(cls) -> "GradedLevel":
        return cls.levels()[-1]

    @property
    def rank(self) -> int:
        """在量表中的位置，0（最差）到 4（最好）。"""
        return type(self).levels().index(self)

    @property
    def hearts(self) -> int:
        """爱心数，等于 rank。"""
        return self.rank

    def better(self) -> "GradedLevel":
        """好一级；已是最好时保持不变。"""
        levels = type(self).levels()
        return levels[min(self.rank + 1, len(levels) - 1)]

    def worse(self) -> "GradedLevel":
        """差一级；已是最差时保持不变。"""
        levels = type(self).levels()
        return levels[max(self.rank - 1, 0)]


class Hunger(GradedLevel):
    """饥饿程度。"""
    STARVING = "starving"
    FAMISHED = "famished"
    SNACKISH = "snackish"
    PECKISH = "peckish"
    FULL = "full"


class Mood(GradedLevel):
    """心情。"""
    MISERABLE = "miserable"
    PESSIMISTIC = "pessimistic"
    INDIFFERENT = "indifferent"
    OPTIMISTIC = "optimistic"
    CHEERFUL = "cheerful"


class Health(GradedLevel):
    """健康状况。"""
    NEGLECTED = "neglected"
    WEAK = "weak"
    NORMAL = "normal"
    STRONG = "strong"
    EGGCELLENT = "eggcellent"


class Discipline(GradedLevel):
    """纪律表现，显示为纪律槽而不是爱心。"""
    BRATTY = "bratty"
    SPOILED = "spoiled"
    AVERAGE = "average"
    GOODY_TWO_SHOES = "goody_two_shoes"
    MODEL_ALIEN = "model_alien"

    @property
    def meter(self) -> int:
        return self.rank


class Light(str, Enum):
    """房间灯光。"""
    ON = "on"
    OFF = "off"

    def toggled(self) -> "Light":
        return Light.OFF if self == Light.ON else Light.ON


class Behavior(str, Enum):
    """行为结果（好/坏），由调用方提供随机位，核心不自行生成。"""
    GOOD = "good"
    BAD = "bad"

    @classmethod
    def from_bit(cls, bit: bool) -> "Behavior":
        return cls.GOOD if bit else cls.BAD


class CareLevel(str, Enum):
    """照顾等级，由四项分数之和（0-16）分段得出。"""
    BAD = "bad"                      # 0-3
    BELOW_AVERAGE = "below_average"  # 4-7
    ABOVE_AVERAGE = "above_average"  # 8-11
    GOOD = "good"                    # 12-15
    PERFECT = "perfect"              # 16

    @property
    def rank(self) -> int:
        return list(CareLevel).index(self)

    def at_least(self, other: "CareLevel") -> bool:
        return self.rank >= other.rank

    @classmethod
    def from_score(cls, score: int) -> "CareLevel":
        if not 0 <= score <= MAX_CARE_SCORE:
            raise CareScoreError(f"care score {score} outside 0..{MAX_CARE_SCORE}")
        if score == MAX_CARE_SCORE:
            return cls.PERFECT
        return list(cls)[score // 4]
