from .exercise import (
    ExerciseRecord,
    ExerciseLevel,
    ExerciseForce,
    ExerciseMechanic,
    ExerciseCategory,
)
from .intake import IntakeProfile, Sex, ActivityLevel, ExperienceLevel, FitnessGoal, DietPreference
from .nutrition import NutritionTargets, MacroRatios
from .plan import WorkoutExerciseSlot, WorkoutDay, WeeklyWorkout
from .checks import Issue, ValidationReport

__all__ = [
    "ExerciseRecord",
    "ExerciseLevel",
    "ExerciseForce",
    "ExerciseMechanic",
    "ExerciseCategory",
    "IntakeProfile",
    "Sex",
    "ActivityLevel",
    "ExperienceLevel",
    "FitnessGoal",
    "DietPreference",
    "NutritionTargets",
    "MacroRatios",
    "WorkoutExerciseSlot",
    "WorkoutDay",
    "WeeklyWorkout",
    "Issue",
    "ValidationReport",
]
