"""宠物动作：每个动作接收一只 Pet，返回新的 Pet，不修改原对象。

外层（菜单、计时器、存档）按顺序调用这里的函数；核心没有共享可变状态，也不自行生成随机数。
"""
from enum import Enum
from typing import Callable, Dict, Optional

from tamagotchi.config import (
    BABY_BASE_WEIGHT,
    CHILD_BASE_WEIGHT,
    DECAY_INTERVAL_MINUTES,
    FEED_WEIGHT_GAIN,
    MINUTES_PER_DAY,
    PLAY_WEIGHT_LOSS,
    SLEEP_STEP_MINUTES,
    SOIL_INTERVAL_MINUTES,
)
from tamagotchi.evolution.forms import Form, LifeStage
from tamagotchi.evolution.table import care_from_history, evolve, stage_duration
from tamagotchi.logs import get_logger
from tamagotchi.pet.models import Gender, Pet
from tamagotchi.status.attributes import Behavior
from tamagotchi.status.models import Status

logger = get_logger("pet")


class Action(str, Enum):
    """菜单上可选的互动。"""
    FEED = "feed"
    LIGHT = "light"
    PLAY = "play"
    MEDICINE = "medicine"
    DUCK = "duck"                  # 清理便便
    HEALTH_METER = "health_meter"  # 只查看，不改变状态
    ATTENTION = "attention"
    DISCIPLINE = "discipline"


def new_pet(name: str, gender: Gender) -> Pet:
    """创建一颗新蛋。"""
    pet = Pet(name=name, gender=gender)
    logger.info("New pet %s (%s)", pet.name, pet.gender.value)
    return pet


def _with_status(pet: Pet, status: Status, **changes) -> Pet:
    if status is pet.status and not changes:
        return pet
    return pet.model_copy(update={"status": status, **changes})


def feed(pet: Pet) -> Pet:
    """喂食：饥饿好一级，体重 +0.5。"""
    logger.debug("%s eats", pet.name)
    return _with_status(pet, pet.status.eat(), weight=pet.weight + FEED_WEIGHT_GAIN)


def play(pet: Pet) -> Pet:
    """玩耍：心情好一级，体重 -0.2（不低于 0）。"""
    logger.debug("%s plays", pet.name)
    return _with_status(pet, pet.status.play(), weight=max(0.0, pet.weight - PLAY_WEIGHT_LOSS))


def toggle_light(pet: Pet) -> Pet:
    """开关灯。是否因此入睡或醒来由外层根据 light/asleep 决定。"""
    logger.debug("%s light -> %s", pet.name, pet.status.light.toggled().value)
    return _with_status(pet, pet.status.toggle_light())


def give_medicine(pet: Pet) -> Pet:
    """吃药：只在生病时有效。"""
    if not pet.status.sick:
        logger.debug("%s is not sick, medicine has no effect", pet.name)
    return _with_status(pet, pet.status.medicate())


def clean(pet: Pet) -> Pet:
    return _with_status(pet, pet.status.clean())


duck = clean


def give_attention(pet: Pet) -> Pet:
    return _with_status(pet, pet.status.attend())


def discipline(pet: Pet, behavior: Behavior) -> Pet:
    """管教：behavior 为 GOOD 时纪律提升，BAD 时下降。"""
    logger.debug("%s disciplined (%s)", pet.name, behavior.value)
    return _with_status(pet, pet.status.discipline_with(behavior))


def fall_asleep(pet: Pet) -> Pet:
    return _with_status(pet, pet.status.fall_asleep())


def wake_up(pet: Pet) -> Pet:
    return _with_status(pet, pet.status.wake())


def _next_multiple(t: int, interval: int) -> int:
    return (t // interval + 1) * interval


def _weight_on_entering(form: Form, weight: float) -> float:
    if form.stage == LifeStage.BABY:
        return max(weight, BABY_BASE_WEIGHT)
    if form.stage == LifeStage.CHILD:
        return max(weight, CHILD_BASE_WEIGHT)
    return weight


def _evolution_due(form: Form, in_form: int) -> Optional[int]:
    """距离下一次进化判定还有多少分钟；没有待判定的进化时返回 None。"""
    duration = stage_duration(form)
    if duration is None:
        return None
    if in_form >= duration and form.stage == LifeStage.ADULT:
        return None
    return max(duration - in_form, 0)


def advance(pet: Pet, elapsed_minutes: int, behavior: Behavior) -> Pet:
    """推进游戏时间：睡眠恢复或清醒消耗、累计照顾分数、按进化表更新形态与年龄。

    按事件逐段推进（进化、消耗、排便、睡眠恢复），每段按时长累计照顾分数，
    因此一次推进 a+b 分钟与先推进 a 再推进 b 分钟结果相同。
    同一时刻先结算状态事件，再判定进化；蛋只在孵化之后才开始消耗和计分。
    成年形态只在停留时间到点时判定一次是否进化为特殊形态。
    """
    if elapsed_minutes < 0:
        raise ValueError("elapsed_minutes must be non-negative.")

    status, form, weight = pet.status, pet.form, pet.weight
    t, end = pet.minutes_alive, pet.minutes_alive + elapsed_minutes
    in_form, minutes_asleep = pet.minutes_in_form, pet.minutes_asleep
    care_total, care_minutes = pet.care_total, pet.care_minutes

    while True:
        hatched = form.stage != LifeStage.EGG
        due = _evolution_due(form, in_form)
        candidates = [end]
        if due is not None:
            candidates.append(t + due)
        if hatched and status.asleep:
            candidates.append(t + SLEEP_STEP_MINUTES - minutes_asleep % SLEEP_STEP_MINUTES)
        elif hatched:
            candidates.append(_next_multiple(t, DECAY_INTERVAL_MINUTES))
            candidates.append(_next_multiple(t, SOIL_INTERVAL_MINUTES))
        step_to = min(candidates)
        span = step_to - t

        if hatched:
            care_total += status.care_score() * span
            care_minutes += span
            if status.asleep:
                minutes_asleep += span
        in_form += span
        t = step_to

        if hatched and span > 0:
            if status.asleep:
                if minutes_asleep % SLEEP_STEP_MINUTES == 0:
                    status = status.sleep()
            else:
                if t % DECAY_INTERVAL_MINUTES == 0:
                    status = status.decay()
                if t % SOIL_INTERVAL_MINUTES == 0:
                    status = status.soil()

        if due is not None and span == due:
            care = care_from_history(care_total, care_minutes, status.care_level())
            nxt = evolve(form, in_form, care, behavior)
            if nxt != form:
                logger.info("%s evolves from %s to %s (care=%s)", pet.name, form.value, nxt.value, care.value)
                form, in_form = nxt, 0
                weight = _weight_on_entering(form, weight)

        if t >= end:
            break

    return pet.model_copy(update={
        "status": status,
        "form": form,
        "weight": weight,
        "age": t // MINUTES_PER_DAY,
        "minutes_alive": t,
        "minutes_in_form": in_form,
        "minutes_asleep": minutes_asleep,
        "care_total": care_total,
        "care_minutes": care_minutes,
    })


_HANDLERS: Dict[Action, Callable[[Pet], Pet]] = {
    Action.FEED: feed,
    Action.LIGHT: toggle_light,
    Action.PLAY: play,
    Action.MEDICINE: give_medicine,
    Action.DUCK: clean,
    Action.HEALTH_METER: lambda pet: pet,
    Action.ATTENTION: give_attention,
}


def perform(pet: Pet, action: Action, behavior: Optional[Behavior] = None) -> Pet:
    """按菜单动作分派；管教必须传入 behavior，其余动作忽略它。"""
    if action == Action.DISCIPLINE:
        if behavior is None:
            raise ValueError("discipline requires a behavior outcome.")
        return discipline(pet, behavior)
    return _HANDLERS[action](pet)
