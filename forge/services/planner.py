from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from forge.models.exercise import ExerciseRecord
from forge.models.intake import IntakeProfile
from forge.models.plan import DAYS_PER_WEEK, WeeklyWorkout, WorkoutDay, WorkoutExerciseSlot
from forge.services.catalog import CatalogFilter, ExerciseCatalog
from forge.services.rules import first_match

logger = logging.getLogger(__name__)

FOCUS_MUSCLES: Dict[str, Tuple[str, ...]] = {
    "push": ("chest", "shoulders", "triceps"),
    "pull": ("lats", "middle back", "biceps", "traps"),
    "legs": ("quadriceps", "hamstrings", "glutes", "calves"),
    "core": ("abdominals", "lower back"),
}

# (goal, rest seconds, rep range), highest priority first
VOLUME_RULES: Tuple[Tuple[str, Tuple[int, str]], ...] = (
    ("strength", (180, "4-6")),
    ("build_muscle", (90, "8-12")),
    ("lose_fat", (60, "12-15")),
    ("endurance", (45, "15-20")),
)
DEFAULT_VOLUME: Tuple[int, str] = (90, "8-12")

BASE_SETS = 3
PRIMARY_SET_BONUS = 1


@dataclass(frozen=True)
class DayTemplate:
    day: int
    name: str
    focuses: Tuple[str, ...]
    # first pool index per focus; slot k of that focus reads offsets[focus] + k
    offsets: Dict[str, int] = field(default_factory=dict)
    primary_bonus: bool = False


@dataclass(frozen=True)
class WeekTemplate:
    split: str
    levels: Tuple[str, ...]
    days: Tuple[DayTemplate, ...]

    @property
    def active_day_count(self) -> int:
        return len(self.days)


FULL_BODY_A = ("push", "pull", "legs", "push", "legs", "core")
FULL_BODY_B = ("legs", "push", "pull", "legs", "push", "core")
FULL_BODY_C = ("pull", "push", "legs", "pull", "legs", "core")
UPPER_A = ("push", "pull", "push", "pull", "push", "pull")
UPPER_B = ("pull", "push", "pull", "push", "pull", "push")

TEMPLATES: Dict[str, WeekTemplate] = {
    "beginner": WeekTemplate(
        split="full_body",
        levels=("beginner",),
        days=(
            DayTemplate(1, "Full Body A", FULL_BODY_A),
            DayTemplate(3, "Full Body B", FULL_BODY_B, {"legs": 2, "push": 2, "pull": 1, "core": 1}),
            DayTemplate(5, "Full Body C", FULL_BODY_C, {"pull": 2, "push": 4, "legs": 4, "core": 2}),
        ),
    ),
    "intermediate": WeekTemplate(
        split="upper_lower",
        levels=("intermediate", "beginner"),
        days=(
            DayTemplate(1, "Upper Body A", UPPER_A),
            DayTemplate(2, "Lower Body A", ("legs",) * 5),
            DayTemplate(4, "Upper Body B", UPPER_B, {"pull": 3, "push": 3}),
            DayTemplate(5, "Lower Body B", ("legs",) * 5, {"legs": 5}),
        ),
    ),
    "advanced": WeekTemplate(
        split="push_pull_legs",
        levels=("advanced", "intermediate", "beginner"),
        days=(
            DayTemplate(1, "Push Day", ("push",) * 5, primary_bonus=True),
            DayTemplate(2, "Pull Day", ("pull",) * 5, primary_bonus=True),
            DayTemplate(3, "Leg Day", ("legs",) * 5, primary_bonus=True),
            DayTemplate(5, "Upper Body", ("push", "pull", "push", "pull", "push"), {"push": 5, "pull": 5}),
            DayTemplate(6, "Lower Body", ("legs",) * 5, {"legs": 5}),
        ),
    ),
}


def volume_for_goals(goals: Sequence[str]) -> Tuple[int, str]:
    """Rest seconds and rep range shared by every slot of a plan."""
    return first_match(VOLUME_RULES, goals, default=DEFAULT_VOLUME)


def focus_pool(catalog: ExerciseCatalog, levels: Sequence[str], focus: str) -> List[ExerciseRecord]:
    pool = catalog.filter(CatalogFilter(levels=list(levels), primary_muscles=list(FOCUS_MUSCLES[focus])))
    # sorted() is stable, so catalog order survives inside each group
    return sorted(pool, key=lambda ex: 0 if ex.is_compound else 1)


def _pick(pool: Sequence[ExerciseRecord], position: int, k: int,
          picked: Sequence[ExerciseRecord]) -> Optional[ExerciseRecord]:
    if position < len(pool):
        return pool[position]
    if k < len(pool):
        return pool[k]
    if picked:
        return picked[k % len(picked)]
    return None


def assemble_day(
    template: DayTemplate,
    pools: Dict[str, List[ExerciseRecord]],
    rest_seconds: int,
    reps: str,
) -> WorkoutDay:
    seen = defaultdict(int)
    picked: Dict[str, List[ExerciseRecord]] = defaultdict(list)
    chosen: List[Optional[ExerciseRecord]] = []
    for focus in template.focuses:
        k = seen[focus]
        seen[focus] += 1
        ex = _pick(pools[focus], template.offsets.get(focus, 0) + k, k, picked[focus])
        if ex is not None and ex not in picked[focus]:
            picked[focus].append(ex)
        chosen.append(ex)

    slots: List[WorkoutExerciseSlot] = []
    for idx, ex in enumerate(chosen):
        if ex is None:
            continue
        sets = BASE_SETS + (PRIMARY_SET_BONUS if template.primary_bonus and idx == 0 else 0)
        slots.append(WorkoutExerciseSlot(exercise_id=ex.id, sets=sets, reps=reps, rest_seconds=rest_seconds))

    if len(slots) < len(template.focuses):
        logger.warning(
            "Day %d (%s) filled %d of %d slots; catalog has no match for the rest",
            template.day, template.name, len(slots), len(template.focuses),
        )
    return WorkoutDay(day=template.day, name=template.name, is_rest_day=False, exercises=slots)


def generate_weekly_plan(
    profile: IntakeProfile,
    catalog: ExerciseCatalog,
    created_at: datetime | None = None,
) -> WeeklyWorkout:
    """Build the seven-day schedule for ``profile`` from ``catalog``.

    Never raises on sparse catalogs: days that cannot be filled come back
    shorter (or empty) but keep their place as training days.
    """
    template = TEMPLATES[profile.experience_level]
    rest_seconds, reps = volume_for_goals(profile.goals)
    pools = {focus: focus_pool(catalog, template.levels, focus) for focus in FOCUS_MUSCLES}
    logger.debug(
        "Assembling %s plan (%s): pool sizes %s",
        profile.experience_level, template.split, {f: len(p) for f, p in pools.items()},
    )

    by_day = {t.day: t for t in template.days}
    days: List[WorkoutDay] = []
    for n in range(1, DAYS_PER_WEEK + 1):
        day_template = by_day.get(n)
        if day_template is None:
            days.append(WorkoutDay.rest(n))
        else:
            days.append(assemble_day(day_template, pools, rest_seconds, reps))

    if created_at is None:
        return WeeklyWorkout(days=days)
    return WeeklyWorkout(days=days, created_at=created_at)


def plan_summary(plan: WeeklyWorkout) -> str:
    return f"{len(plan.active_days)} days/week, {plan.total_exercises} total exercises"
