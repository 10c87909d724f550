from __future__ import annotations

from typing import Dict, List, Literal

from forge.models.checks import Issue, ValidationReport
from forge.models.plan import DAYS_PER_WEEK, WeeklyWorkout
from forge.services.catalog import ExerciseCatalog

Difficulty = Literal["easy", "moderate", "hard", "extreme"]


def validate_plan(plan: WeeklyWorkout, catalog: ExerciseCatalog | None = None) -> ValidationReport:
    """Structural checks for a generated or hand-edited plan.

    Reports problems instead of raising. An active day with no exercises is
    reported but the plan itself is left untouched.
    """
    issues: List[Dict[str, str]] = []
    if len(plan.days) != DAYS_PER_WEEK:
        issues.append({"code": "DAY_COUNT_MISMATCH", "message": f"Plan has {len(plan.days)} days, expected 7."})
    if [d.day for d in plan.days] != list(range(1, len(plan.days) + 1)):
        issues.append({"code": "DAY_NUMBERING", "message": "Days must be numbered 1..7 in order."})

    active = plan.active_days
    if not any(d.exercises for d in active):
        issues.append({"code": "NO_ACTIVE_DAYS", "message": "Plan has no training day with exercises."})

    known = {ex.id for ex in catalog} if catalog is not None else None
    for day in active:
        if not day.exercises:
            issues.append({"code": "EMPTY_ACTIVE_DAY", "message": f"Day {day.day} ({day.name}) has no exercises."})
            continue
        ids = [slot.exercise_id for slot in day.exercises]
        if len(ids) != len(set(ids)):
            dups = sorted({eid for eid in ids if ids.count(eid) > 1})
            issues.append({
                "code": "DUPLICATE_EXERCISE",
                "message": f"Day {day.day} has duplicate exercises: {', '.join(dups)}",
            })
        if known is not None:
            unknown = [eid for eid in ids if eid not in known]
            if unknown:
                issues.append({
                    "code": "UNKNOWN_EXERCISE",
                    "message": f"Day {day.day} references exercises not in the catalog: {', '.join(unknown)}",
                })
    return ValidationReport(ok=not issues, issues=issues)  # type: ignore[arg-type]


def workout_difficulty(plan: WeeklyWorkout) -> Difficulty:
    active = plan.active_days
    total_exercises = plan.total_exercises
    total_sets = sum(slot.sets for d in plan.days for slot in d.exercises)

    per_day = total_exercises / len(active) if active else 0
    sets_per_exercise = total_sets / total_exercises if total_exercises else 0

    score = 0
    if per_day >= 8:
        score += 3
    elif per_day >= 6:
        score += 2
    elif per_day >= 4:
        score += 1

    if sets_per_exercise >= 5:
        score += 2
    elif sets_per_exercise >= 4:
        score += 1

    if len(active) >= 6:
        score += 3
    elif len(active) >= 5:
        score += 2
    elif len(active) >= 4:
        score += 1

    if score >= 7:
        return "extreme"
    if score >= 5:
        return "hard"
    if score >= 3:
        return "moderate"
    return "easy"
