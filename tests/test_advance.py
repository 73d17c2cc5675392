"""时间推进与进化测试。"""
import pytest

from tamagotchi.config import (
    ADULT_MINUTES,
    BABY_MINUTES,
    CHILD_BASE_WEIGHT,
    CHILD_MINUTES,
    DECAY_INTERVAL_MINUTES,
    EGG_MINUTES,
    MINUTES_PER_DAY,
    SLEEP_STEP_MINUTES,
    SOIL_INTERVAL_MINUTES,
    TEEN_MINUTES,
)
from tamagotchi.evolution.forms import Form, LifeStage
from tamagotchi.pet.actions import advance, fall_asleep, new_pet
from tamagotchi.pet.models import Gender, Pet
from tamagotchi.status.attributes import Behavior, CareLevel, Discipline, Health, Hunger, Mood
from tamagotchi.status.models import Status

GOOD, BAD = Behavior.GOOD, Behavior.BAD

PERFECT_STATUS = Status(
    hunger=Hunger.FULL,
    mood=Mood.CHEERFUL,
    health=Health.EGGCELLENT,
    discipline=Discipline.MODEL_ALIEN,
)


def _child(status: Status) -> Pet:
    return Pet(
        name="Tama",
        gender=Gender.FEMALE,
        form=Form.TONMARUTCHI,
        status=status,
        minutes_alive=EGG_MINUTES + BABY_MINUTES,
    )


def test_negative_elapsed_rejected() -> None:
    with pytest.raises(ValueError):
        advance(new_pet("Tama", Gender.MALE), -1, GOOD)


def test_egg_hatches_after_five_minutes() -> None:
    egg = new_pet("Tama", Gender.MALE)
    assert advance(egg, EGG_MINUTES - 1, GOOD).form == Form.TAMAGO
    baby = advance(egg, EGG_MINUTES, GOOD)
    assert baby.form == Form.SHIROBABYTCHI
    assert baby.minutes_in_form == 0


def test_egg_does_not_decay_or_sample_care() -> None:
    egg = new_pet("Tama", Gender.MALE)
    later = advance(egg, 4, GOOD)
    assert later.status == egg.status
    assert later.care_minutes == 0


def test_child_at_sixty_five_minutes_in_one_step() -> None:
    pet = advance(new_pet("Tama", Gender.MALE), EGG_MINUTES + BABY_MINUTES, GOOD)
    assert pet.form == Form.TONMARUTCHI
    assert pet.weight == CHILD_BASE_WEIGHT
    assert pet.minutes_alive == 65


def test_leftover_minutes_carry_into_next_form() -> None:
    pet = advance(new_pet("Tama", Gender.MALE), EGG_MINUTES + 10, GOOD)
    assert pet.form == Form.SHIROBABYTCHI
    assert pet.minutes_in_form == 10


def test_low_care_child_becomes_bad_care_teen() -> None:
    pet = advance(_child(Status()), CHILD_MINUTES, GOOD)
    assert pet.stage == LifeStage.TEEN
    assert pet.form == Form.HASHITAMATCHI


def test_well_cared_child_becomes_good_care_teen() -> None:
    pet = _child(PERFECT_STATUS)
    # 保持睡眠，状态不会下降
    for _ in range(CHILD_MINUTES // 30):
        pet = advance(fall_asleep(pet), 30, GOOD)
    assert pet.form == Form.TONGARITCHI


def test_teen_branch_uses_care_history() -> None:
    pet = _child(PERFECT_STATUS).model_copy(update={"care_total": 0, "care_minutes": 10 * CHILD_MINUTES})
    pet = advance(fall_asleep(pet), CHILD_MINUTES, GOOD)
    # 平均分远低于 12，即使当前满分也走差分支
    assert pet.status.care_level() == CareLevel.PERFECT
    assert pet.form == Form.HASHITAMATCHI


def test_teen_to_adult_uses_behavior() -> None:
    teen = Pet(name="x", gender=Gender.MALE, form=Form.HASHITAMATCHI, status=PERFECT_STATUS.fall_asleep())
    assert advance(teen, TEEN_MINUTES, BAD).form == Form.TAKOTCHI
    assert advance(teen, TEEN_MINUTES, GOOD).form == Form.HASHIZOUTCHI


def test_adult_special_check_happens_once() -> None:
    adult = Pet(name="x", gender=Gender.MALE, form=Form.MIMITCHI, status=PERFECT_STATUS.fall_asleep())
    stayed = advance(adult, ADULT_MINUTES, BAD)
    assert stayed.form == Form.MIMITCHI
    assert stayed.minutes_in_form == ADULT_MINUTES
    assert advance(stayed, 60, GOOD).form == Form.MIMITCHI
    assert advance(adult, ADULT_MINUTES, GOOD).form == Form.SEKITORITCHI


def test_forms_never_regress() -> None:
    pet = new_pet("Tama", Gender.FEMALE)
    ranks = []
    for i in range(200):
        pet = advance(pet, 97, Behavior.from_bit(i % 3 == 0))
        ranks.append(pet.stage.rank)
    assert ranks == sorted(ranks)
    assert pet.stage in (LifeStage.ADULT, LifeStage.SPECIAL)


def test_awake_pet_decays_and_soils() -> None:
    pet = Pet(
        name="x",
        gender=Gender.MALE,
        form=Form.SHIROBABYTCHI,
        status=Status(hunger=Hunger.FULL, mood=Mood.CHEERFUL, health=Health.NORMAL),
    )
    later = advance(pet, SOIL_INTERVAL_MINUTES, GOOD)
    steps = SOIL_INTERVAL_MINUTES // DECAY_INTERVAL_MINUTES
    assert later.status.hunger.rank == 4 - steps
    assert later.status.mood.rank == 4 - steps
    assert later.status.soiled
    assert not later.status.sick
    sicker = advance(later, SOIL_INTERVAL_MINUTES, GOOD)
    assert sicker.status.sick
    assert sicker.status.health == Health.WEAK


def test_asleep_pet_recovers() -> None:
    pet = Pet(name="x", gender=Gender.MALE, form=Form.SHIROBABYTCHI, status=Status(asleep=True))
    later = advance(pet, SLEEP_STEP_MINUTES * 2, GOOD)
    assert later.status.mood == Mood.INDIFFERENT
    assert later.status.health == Health.NORMAL
    assert later.status.hunger == Hunger.STARVING
    assert later.minutes_asleep == SLEEP_STEP_MINUTES * 2
    partial = advance(advance(pet, SLEEP_STEP_MINUTES // 2, GOOD), SLEEP_STEP_MINUTES // 2, GOOD)
    assert partial.status.mood == Mood.PESSIMISTIC


def test_age_in_days() -> None:
    pet = advance(new_pet("Tama", Gender.MALE), MINUTES_PER_DAY * 2 + 1, GOOD)
    assert pet.age == 2


def test_advance_is_deterministic() -> None:
    pet = new_pet("Tama", Gender.MALE)
    assert advance(pet, 5000, BAD) == advance(pet, 5000, BAD)


def _advance_in_chunks(pet: Pet, total: int, chunk: int, behavior: Behavior) -> Pet:
    done = 0
    while done < total:
        step = min(chunk, total - done)
        pet = advance(pet, step, behavior)
        done += step
    return pet


@pytest.mark.parametrize("chunk", [1, 7, 60, 97, 500])
def test_sleeping_child_same_result_however_time_is_split(chunk) -> None:
    child = _child(Status(asleep=True))
    whole = advance(child, CHILD_MINUTES, GOOD)
    assert _advance_in_chunks(child, CHILD_MINUTES, chunk, GOOD) == whole
    assert whole.stage == LifeStage.TEEN


@pytest.mark.parametrize("chunk", [1, 5, 60, 180, 333])
def test_new_egg_same_result_however_time_is_split(chunk) -> None:
    egg = new_pet("Tama", Gender.MALE)
    whole = advance(egg, 600, GOOD)
    assert _advance_in_chunks(egg, 600, chunk, GOOD) == whole


@pytest.mark.parametrize("a, b", [(4, 1), (5, 55), (59, 1), (100, 4000), (3000, 3000)])
def test_split_advance_matches_single_advance(a, b) -> None:
    for pet in (new_pet("Tama", Gender.FEMALE), _child(PERFECT_STATUS), _child(Status(asleep=True))):
        for behavior in Behavior:
            assert advance(advance(pet, a, behavior), b, behavior) == advance(pet, a + b, behavior)


def test_hatching_mid_advance_starts_the_clock() -> None:
    pet = advance(new_pet("Tama", Gender.MALE), 600, GOOD)
    assert pet.form == Form.TONMARUTCHI
    assert pet.care_minutes == 600 - EGG_MINUTES
    # 第 180 分钟排便，第 360 分钟再次排便时生病
    assert pet.status.soiled
    assert pet.status.sick


def test_care_is_weighted_by_time() -> None:
    pet = advance(_child(PERFECT_STATUS.fall_asleep()), 90, GOOD)
    assert pet.care_minutes == 90
    assert pet.care_total == 16 * 90
