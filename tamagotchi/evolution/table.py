"""进化表：由（当前形态、在该形态停留的分钟数、照顾等级、行为）决定下一个形态。

所有函数都是纯函数。需要随机性的分支由调用方传入 Behavior，核心不自行生成随机数。
分支结果都取自 FORM_TREE 中当前形态的子节点。
"""
from typing import Dict, Optional, Tuple

from tamagotchi.config import (
    ADULT_MINUTES,
    BABY_MINUTES,
    CHILD_MINUTES,
    EGG_MINUTES,
    GOOD_CARE_RATIO,
    MAX_CARE_SCORE,
    TEEN_MINUTES,
)
from tamagotchi.evolution.forms import TEEN_BAD_CARE, TEEN_GOOD_CARE, Form, LifeStage
from tamagotchi.status.attributes import Behavior, CareLevel

_DURATIONS = {
    LifeStage.EGG: EGG_MINUTES,
    LifeStage.BABY: BABY_MINUTES,
    LifeStage.CHILD: CHILD_MINUTES,
    LifeStage.TEEN: TEEN_MINUTES,
    LifeStage.ADULT: ADULT_MINUTES,
}

# 青年期分支线：12 分（满分 16 的 75%）正好是 GOOD 档的下限
GOOD_CARE_CUTOFF = CareLevel.from_score(int(MAX_CARE_SCORE * GOOD_CARE_RATIO))

# 青年 → 成年：(照顾是否达标, 行为) → 成年形态
ADULT_CARE_BAR: Dict[Form, CareLevel] = {
    TEEN_GOOD_CARE: CareLevel.GOOD,
    TEEN_BAD_CARE: CareLevel.ABOVE_AVERAGE,
}
ADULT_BRANCHES: Dict[Form, Dict[Tuple[bool, Behavior], Form]] = {
    TEEN_GOOD_CARE: {
        (True, Behavior.GOOD): Form.MIMITCHI,
        (True, Behavior.BAD): Form.POCHITCHI,
        (False, Behavior.GOOD): Form.ZUCCITCHI,
        (False, Behavior.BAD): Form.NYATCHI,
    },
    TEEN_BAD_CARE: {
        (True, Behavior.GOOD): Form.HASHIZOUTCHI,
        (True, Behavior.BAD): Form.TAKOTCHI,
        (False, Behavior.GOOD): Form.KUSATCHI,
        (False, Behavior.BAD): Form.TAKOTCHI,
    },
}

# 成年 → 特殊：(最低照顾等级, 要求的行为)
SPECIAL_BARS: Dict[Form, Tuple[CareLevel, Behavior]] = {
    Form.MIMITCHI: (CareLevel.PERFECT, Behavior.GOOD),
    Form.HASHIZOUTCHI: (CareLevel.GOOD, Behavior.GOOD),
    Form.TAKOTCHI: (CareLevel.GOOD, Behavior.BAD),
}


def stage_duration(form: Form) -> Optional[int]:
    """在该形态需要停留多少分钟才会进化；特殊形态是终态，返回 None。"""
    return _DURATIONS.get(form.stage)


def care_from_history(total: int, minutes: int, current: CareLevel) -> CareLevel:
    """把按时间加权的累计照顾分数换算成等级（平均值向下取整）；还没有记录时用当前等级。"""
    if minutes <= 0:
        return current
    return CareLevel.from_score(total // minutes)


def _teen_form(care: CareLevel) -> Form:
    if care.at_least(GOOD_CARE_CUTOFF):
        return TEEN_GOOD_CARE
    return TEEN_BAD_CARE


def _adult_form(teen: Form, care: CareLevel, behavior: Behavior) -> Form:
    return ADULT_BRANCHES[teen][(care.at_least(ADULT_CARE_BAR[teen]), behavior)]


def _special_form(adult: Form, care: CareLevel, behavior: Behavior) -> Form:
    bar = SPECIAL_BARS.get(adult)
    if bar is None:
        return adult
    min_care, required = bar
    if care.at_least(min_care) and behavior == required:
        return adult.children[0]
    return adult


def evolve(form: Form, minutes_in_form: int, care: CareLevel, behavior: Behavior) -> Form:
    """停留时间未满时返回原形态；满了则按进化表给出下一形态（可能仍是原形态）。"""
    duration = stage_duration(form)
    if duration is None or minutes_in_form < duration:
        return form
    stage = form.stage
    if stage in (LifeStage.EGG, LifeStage.BABY):
        return form.children[0]
    if stage == LifeStage.CHILD:
        return _teen_form(care)
    if stage == LifeStage.TEEN:
        return _adult_form(form, care, behavior)
    return _special_form(form, care, behavior)
