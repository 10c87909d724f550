from .catalog import ExerciseCatalog, CatalogFilter, load_catalog
from .metabolic import (
    MissingField,
    bmr,
    tdee,
    target_calories,
    macros,
    compute_targets,
    bmi,
    bmi_category,
    estimate_body_fat,
    activity_description,
    goal_description,
)
from .planner import TEMPLATES, generate_weekly_plan, plan_summary
from .plan_checks import validate_plan, workout_difficulty
from .export import to_csv, to_markdown, to_payload

__all__ = [
    "ExerciseCatalog",
    "CatalogFilter",
    "load_catalog",
    "MissingField",
    "bmr",
    "tdee",
    "target_calories",
    "macros",
    "compute_targets",
    "bmi",
    "bmi_category",
    "estimate_body_fat",
    "activity_description",
    "goal_description",
    "TEMPLATES",
    "generate_weekly_plan",
    "plan_summary",
    "validate_plan",
    "workout_difficulty",
    "to_csv",
    "to_markdown",
    "to_payload",
]
