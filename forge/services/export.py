from __future__ import annotations

import csv
import io
from typing import Any, Dict, List

from forge.models.nutrition import NutritionTargets
from forge.models.plan import WeeklyWorkout
from forge.services.catalog import ExerciseCatalog


def to_payload(plan: WeeklyWorkout, targets: NutritionTargets | None = None) -> Dict[str, Any]:
    """JSON-ready values for whoever persists the plan."""
    payload: Dict[str, Any] = {"workout": plan.model_dump(mode="json")}
    if targets is not None:
        payload["nutrition"] = targets.model_dump(mode="json")
    return payload


def to_csv(plan: WeeklyWorkout, catalog: ExerciseCatalog) -> bytes:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow([
        "day",
        "day_name",
        "is_rest_day",
        "exercise_id",
        "exercise_name",
        "primary_muscles",
        "equipment",
        "sets",
        "reps",
        "rest_seconds",
    ])
    for day in plan.days:
        if not day.exercises:
            writer.writerow([day.day, day.name, day.is_rest_day, "", "", "", "", "", "", ""])
            continue
        for slot in day.exercises:
            ex = catalog.get(slot.exercise_id)
            writer.writerow([
                day.day,
                day.name,
                day.is_rest_day,
                slot.exercise_id,
                ex.name if ex else slot.exercise_id,
                ";".join(ex.primary_muscles) if ex else "",
                (ex.equipment or "") if ex else "",
                slot.sets,
                slot.reps,
                slot.rest_seconds,
            ])
    return output.getvalue().encode("utf-8")


def to_markdown(plan: WeeklyWorkout, catalog: ExerciseCatalog) -> str:
    lines: List[str] = []
    lines.append(f"# Weekly Plan ({len(plan.active_days)} training days)\n")
    for day in plan.days:
        lines.append(f"\n## Day {day.day}: {day.name}")
        if day.is_rest_day:
            lines.append("- Rest")
            continue
        for slot in day.exercises:
            ex = catalog.get(slot.exercise_id)
            name = ex.name if ex else slot.exercise_id
            musc = ", ".join(ex.primary_muscles) if ex else ""
            lines.append(f"- {name} - {slot.sets} x {slot.reps}, rest {slot.rest_seconds}s; {musc}")
    return "\n".join(lines) + "\n"
