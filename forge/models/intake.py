from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from .exercise import ExerciseLevel


Sex = Literal["male", "female", "other"]

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "athlete"]

ExperienceLevel = ExerciseLevel

FitnessGoal = Literal[
    "lose_fat",
    "build_muscle",
    "maintain",
    "endurance",
    "strength",
    "general_health",
]

DietPreference = Literal[
    "high_protein",
    "balanced",
    "low_carb",
    "keto",
    "vegetarian",
    "vegan",
    "pescatarian",
    "gluten_free",
    "dairy_free",
]


class IntakeProfile(BaseModel):
    """One-time onboarding answers.

    Body metrics, sex and activity level may be missing while the onboarding
    form is incomplete; ``compute_targets`` is the place that insists on them.
    Goal order is meaningful: the first goal decides the calorie multiplier
    when neither ``lose_fat`` nor ``build_muscle`` is present.
    """

    model_config = ConfigDict(frozen=True)

    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    age: Optional[int] = None
    sex: Optional[Sex] = None
    body_fat_percent: Optional[float] = None
    goals: List[FitnessGoal] = Field(default_factory=list)
    activity_level: Optional[ActivityLevel] = None
    diet_preferences: List[DietPreference] = Field(default_factory=list)
    experience_level: ExperienceLevel = "beginner"
