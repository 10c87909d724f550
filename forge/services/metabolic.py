"""Nutrition targets from an intake profile.

Uses:
- Mifflin-St Jeor equation for Basal Metabolic Rate (BMR)
- Activity multipliers for Total Daily Energy Expenditure (TDEE)
- Goal and diet-preference rule tables for calories and macro grams

Every rounding step rounds half away from zero. Out-of-range inputs are not
rejected; they flow through the arithmetic as-is.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from forge.models.intake import ActivityLevel, FitnessGoal, IntakeProfile, Sex
from forge.models.nutrition import MacroRatios, NutritionTargets
from forge.services.rules import first_match, round_half_away


class MissingField(ValueError):
    def __init__(self, fields: Sequence[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing required fields for calculation: {', '.join(self.fields)}")


# "other" shares the female offset. Changing it is a product decision.
SEX_OFFSETS: Dict[str, int] = {
    "male": 5,
    "female": -161,
    "other": -161,
}

ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.2,    # desk job, little exercise
    "light": 1.375,      # 1-3 days/week
    "moderate": 1.55,    # 3-5 days/week
    "active": 1.725,     # 6-7 days/week
    "athlete": 1.9,      # very hard exercise or physical job
}

GOAL_ADJUSTMENTS: Dict[str, float] = {
    "lose_fat": 0.8,
    "build_muscle": 1.15,
    "maintain": 1.0,
    "endurance": 1.1,
    "strength": 1.1,
    "general_health": 1.0,
}

# Checked top-down, first goal present wins; otherwise the first goal listed decides.
CALORIE_RULES: Tuple[Tuple[str, float], ...] = (
    ("lose_fat", GOAL_ADJUSTMENTS["lose_fat"]),
    ("build_muscle", GOAL_ADJUSTMENTS["build_muscle"]),
)

DEFAULT_MACROS = MacroRatios(protein_per_kg=1.6, carbs_percent=0.45, fats_percent=0.25)

GOAL_MACRO_RULES: Tuple[Tuple[str, MacroRatios], ...] = (
    ("build_muscle", MacroRatios(2.0, 0.50, 0.25)),
    ("lose_fat", MacroRatios(2.2, 0.30, 0.35)),
    ("strength", MacroRatios(1.8, 0.45, 0.30)),
    ("endurance", MacroRatios(1.4, 0.55, 0.25)),
)

# A matching diet preference replaces the goal ratios outright.
DIET_MACRO_RULES: Tuple[Tuple[str, MacroRatios], ...] = (
    ("keto", MacroRatios(1.8, 0.05, 0.70)),
    ("low_carb", MacroRatios(2.0, 0.20, 0.45)),
    ("high_protein", MacroRatios(2.2, 0.40, 0.25)),
)

KCAL_PER_GRAM = {"protein": 4, "carbs": 4, "fat": 9}

REQUIRED_FIELDS = ("weight_kg", "height_cm", "age", "sex", "activity_level")


def bmr(weight_kg: float, height_cm: float, age: float, sex: Sex) -> int:
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    return round_half_away(base + SEX_OFFSETS[sex])


def tdee(bmr_kcal: float, activity_level: ActivityLevel) -> int:
    return round_half_away(bmr_kcal * ACTIVITY_MULTIPLIERS[activity_level])


def target_calories(tdee_kcal: float, goals: Sequence[FitnessGoal]) -> int:
    if not goals:
        return round_half_away(tdee_kcal)
    multiplier = first_match(CALORIE_RULES, goals, default=GOAL_ADJUSTMENTS[goals[0]])
    return round_half_away(tdee_kcal * multiplier)


def macro_ratios(goals: Sequence[str], diet_preferences: Sequence[str]) -> MacroRatios:
    ratios = first_match(GOAL_MACRO_RULES, goals, default=DEFAULT_MACROS)
    return first_match(DIET_MACRO_RULES, diet_preferences, default=ratios)


def macros(
    calories: float,
    weight_kg: float,
    goals: Sequence[str],
    diet_preferences: Sequence[str],
) -> Dict[str, int]:
    """Daily gram targets for protein, fat and carbs.

    Protein scales with body weight, fat is a share of calories and carbs take
    whatever is left. Carbs never go below zero, even when protein and fat
    already exceed the calorie budget.
    """
    ratios = macro_ratios(goals, diet_preferences)
    protein = round_half_away(weight_kg * ratios.protein_per_kg)
    fat = round_half_away(calories * ratios.fats_percent / KCAL_PER_GRAM["fat"])
    remaining = calories - protein * KCAL_PER_GRAM["protein"] - fat * KCAL_PER_GRAM["fat"]
    carbs = max(0, round_half_away(remaining / KCAL_PER_GRAM["carbs"]))
    return {"protein": protein, "carbs": carbs, "fat": fat}


def missing_fields(profile: IntakeProfile) -> List[str]:
    # zero counts as absent, same as None
    return [name for name in REQUIRED_FIELDS if not getattr(profile, name)]


def compute_targets(profile: IntakeProfile) -> NutritionTargets:
    missing = missing_fields(profile)
    if missing:
        raise MissingField(missing)

    bmr_kcal = bmr(profile.weight_kg, profile.height_cm, profile.age, profile.sex)
    tdee_kcal = tdee(bmr_kcal, profile.activity_level)
    calories = target_calories(tdee_kcal, profile.goals)
    grams = macros(calories, profile.weight_kg, profile.goals, profile.diet_preferences)
    return NutritionTargets(
        bmr=bmr_kcal,
        tdee=tdee_kcal,
        target_calories=calories,
        protein_g=grams["protein"],
        carbs_g=grams["carbs"],
        fats_g=grams["fat"],
    )


def bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return round_half_away(weight_kg / (height_m * height_m) * 10) / 10


def bmi_category(value: float) -> str:
    if value < 18.5:
        return "Underweight"
    if value < 25:
        return "Normal weight"
    if value < 30:
        return "Overweight"
    return "Obese"


def estimate_body_fat(bmi_value: float, age: float, sex: Optional[Sex]) -> float:
    # Rough BMI-based estimate; only a stand-in when no measurement exists.
    offset = -16.2 if sex == "male" else -5.4
    return round_half_away((1.20 * bmi_value + 0.23 * age + offset) * 10) / 10


ACTIVITY_DESCRIPTIONS: Dict[str, str] = {
    "sedentary": "Desk job with little to no exercise",
    "light": "Light exercise 1-3 days per week",
    "moderate": "Moderate exercise 3-5 days per week",
    "active": "Hard exercise 6-7 days per week",
    "athlete": "Very intense exercise, physical job, or athlete",
}

GOAL_DESCRIPTIONS: Dict[str, str] = {
    "lose_fat": "Reduce body fat while preserving muscle",
    "build_muscle": "Gain muscle mass and strength",
    "maintain": "Maintain current weight and physique",
    "endurance": "Improve cardiovascular fitness",
    "strength": "Increase maximum strength",
    "general_health": "Improve overall health and wellness",
}


def activity_description(level: ActivityLevel) -> str:
    return ACTIVITY_DESCRIPTIONS[level]


def goal_description(goal: FitnessGoal) -> str:
    return GOAL_DESCRIPTIONS[goal]
