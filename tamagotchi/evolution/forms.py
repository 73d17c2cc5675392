"""成长形态：蛋 → 婴儿 → 幼年 → 青年 → 成年 → 特殊。"""
from enum import Enum
from typing import Dict, Optional, Tuple


class LifeStage(str, Enum):
    """成长阶段，按先后顺序声明。"""
    EGG = "egg"
    BABY = "baby"
    CHILD = "child"
    TEEN = "teen"
    ADULT = "adult"
    SPECIAL = "special"

    @property
    def rank(self) -> int:
        return list(LifeStage).index(self)


class Form(str, Enum):
    """具体形态。青年、成年、特殊阶段各有若干分支。"""
    TAMAGO = "tamago"                # 蛋
    SHIROBABYTCHI = "shirobabytchi"  # 婴儿，孵化后 5 分钟
    TONMARUTCHI = "tonmarutchi"      # 幼年，出生后 65 分钟
    # 青年
    TONGARITCHI = "tongaritchi"      # 照顾好
    HASHITAMATCHI = "hashitamatchi"  # 照顾差
    # 成年
    MIMITCHI = "mimitchi"
    ZUCCITCHI = "zuccitchi"
    POCHITCHI = "pochitchi"
    NYATCHI = "nyatchi"
    HASHIZOUTCHI = "hashizoutchi"
    KUSATCHI = "kusatchi"
    TAKOTCHI = "takotchi"
    # 特殊
    SEKITORITCHI = "sekitoritchi"
    CHARITCHI = "charitchi"
    ZATCHI = "zatchi"

    @classmethod
    def default(cls) -> "Form":
        return cls.TAMAGO

    @property
    def stage(self) -> LifeStage:
        return _STAGES[self]

    @property
    def children(self) -> Tuple["Form", ...]:
        """可以进化成的形态；终态返回空元组。"""
        return FORM_TREE.get(self, ())

    @property
    def parent(self) -> Optional["Form"]:
        return _PARENTS.get(self)


_STAGES = {
    Form.TAMAGO: LifeStage.EGG,
    Form.SHIROBABYTCHI: LifeStage.BABY,
    Form.TONMARUTCHI: LifeStage.CHILD,
    Form.TONGARITCHI: LifeStage.TEEN,
    Form.HASHITAMATCHI: LifeStage.TEEN,
    Form.MIMITCHI: LifeStage.ADULT,
    Form.ZUCCITCHI: LifeStage.ADULT,
    Form.POCHITCHI: LifeStage.ADULT,
    Form.NYATCHI: LifeStage.ADULT,
    Form.HASHIZOUTCHI: LifeStage.ADULT,
    Form.KUSATCHI: LifeStage.ADULT,
    Form.TAKOTCHI: LifeStage.ADULT,
    Form.SEKITORITCHI: LifeStage.SPECIAL,
    Form.CHARITCHI: LifeStage.SPECIAL,
    Form.ZATCHI: LifeStage.SPECIAL,
}

TEEN_GOOD_CARE = Form.TONGARITCHI
TEEN_BAD_CARE = Form.HASHITAMATCHI

# 进化树：每个形态只能进化为其子节点之一
FORM_TREE: Dict[Form, Tuple[Form, ...]] = {
    Form.TAMAGO: (Form.SHIROBABYTCHI,),
    Form.SHIROBABYTCHI: (Form.TONMARUTCHI,),
    Form.TONMARUTCHI: (TEEN_GOOD_CARE, TEEN_BAD_CARE),
    TEEN_GOOD_CARE: (Form.MIMITCHI, Form.ZUCCITCHI, Form.POCHITCHI, Form.NYATCHI),
    TEEN_BAD_CARE: (Form.HASHIZOUTCHI, Form.KUSATCHI, Form.TAKOTCHI),
    Form.MIMITCHI: (Form.SEKITORITCHI,),
    Form.HASHIZOUTCHI: (Form.CHARITCHI,),
    Form.TAKOTCHI: (Form.ZATCHI,),
}

_PARENTS = {child: parent for parent, kids in FORM_TREE.items() for child in kids}
