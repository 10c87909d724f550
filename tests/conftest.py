from __future__ import annotations

from typing import List

import pytest

from forge.models import ExerciseRecord, IntakeProfile
from forge.services.catalog import ExerciseCatalog, load_catalog


def make_exercise(
    ex_id: str,
    primary: List[str],
    level: str = "beginner",
    mechanic: str | None = "compound",
    force: str | None = "push",
    equipment: str | None = "barbell",
    secondary: List[str] | None = None,
    category: str = "strength",
) -> ExerciseRecord:
    return ExerciseRecord(
        id=ex_id,
        name=ex_id.replace("_", " "),
        force=force,
        level=level,
        mechanic=mechanic,
        equipment=equipment,
        primary_muscles=primary,
        secondary_muscles=secondary or [],
        category=category,
    )


def build_profile(experience: str = "beginner", goals: List[str] | None = None, **overrides) -> IntakeProfile:
    data = dict(
        height_cm=180,
        weight_kg=80,
        age=30,
        sex="male",
        goals=["build_muscle"] if goals is None else goals,
        activity_level="moderate",
        diet_preferences=[],
        experience_level=experience,
    )
    data.update(overrides)
    return IntakeProfile(**data)


@pytest.fixture
def small_catalog() -> ExerciseCatalog:
    return ExerciseCatalog([
        make_exercise("Cable_Fly", ["chest"], mechanic="isolation", equipment="cable"),
        make_exercise("Bench_Press", ["chest"], secondary=["triceps", "shoulders"]),
        make_exercise("Overhead_Press", ["shoulders"], level="intermediate", secondary=["triceps"]),
        make_exercise("Barbell_Row", ["middle back"], force="pull", secondary=["biceps"]),
        make_exercise("Curl", ["biceps"], force="pull", mechanic="isolation", equipment="dumbbell"),
        make_exercise("Squat", ["quadriceps"], secondary=["glutes"]),
        make_exercise("Leg_Curl", ["hamstrings"], force="pull", mechanic="isolation", equipment="machine"),
        make_exercise("Plank", ["abdominals"], force=None, mechanic="isolation", equipment="body only"),
        make_exercise("Neck_Stretch", ["neck"], force=None, mechanic=None, equipment=None, category="stretching"),
        make_exercise("Snatch", ["hamstrings"], level="advanced", force="pull", category="olympic_weightlifting"),
    ])


@pytest.fixture
def bundled_catalog() -> ExerciseCatalog:
    return load_catalog()
