from __future__ import annotations

import pytest

from conftest import build_profile
from forge.services.metabolic import (
    SEX_OFFSETS,
    MissingField,
    bmi,
    activity_description,
    bmi_category,
    bmr,
    compute_targets,
    estimate_body_fat,
    goal_description,
    macros,
    target_calories,
    tdee,
)
from forge.services.rules import round_half_away


def test_reference_chain() -> None:
    assert bmr(70, 170, 25, "male") == 1643
    assert tdee(1643, "moderate") == 2547
    assert target_calories(2547, ["lose_fat"]) == 2038
    assert macros(2038, 70, ["lose_fat"], []) == {"protein": 154, "fat": 79, "carbs": 178}


def test_other_sex_uses_female_offset() -> None:
    assert SEX_OFFSETS["other"] == SEX_OFFSETS["female"]
    assert bmr(60, 165, 25, "other") == bmr(60, 165, 25, "female")
    # 600 + 1031.25 - 125 - 161 = 1345.25
    assert bmr(60, 165, 25, "female") == 1345


def test_rounding_is_half_away_from_zero() -> None:
    assert round_half_away(2.5) == 3
    assert round_half_away(3.5) == 4
    assert round_half_away(-2.5) == -3
    assert round_half_away(2.49) == 2


def test_target_calories_priority() -> None:
    assert target_calories(2000, []) == 2000
    # lose_fat wins regardless of position
    assert target_calories(2000, ["build_muscle", "lose_fat"]) == 1600
    assert target_calories(2000, ["strength", "build_muscle"]) == 2300
    # neither present: the first goal decides, so order matters
    assert target_calories(2000, ["endurance", "maintain"]) == 2200
    assert target_calories(2000, ["maintain", "endurance"]) == 2000


def test_goal_macro_priority_first_match_wins() -> None:
    # build_muscle outranks lose_fat: 2.0 g/kg protein, 25% fat
    m = macros(2500, 80, ["lose_fat", "build_muscle"], [])
    assert m["protein"] == 160
    assert m["fat"] == round_half_away(2500 * 0.25 / 9)


def test_diet_preference_replaces_goal_ratios() -> None:
    # keto overrides the build_muscle ratios entirely
    m = macros(2500, 80, ["build_muscle"], ["high_protein", "keto"])
    assert m["protein"] == 144
    assert m["fat"] == 194
    assert m["carbs"] == max(0, round_half_away((2500 - 144 * 4 - 194 * 9) / 4))

    low_carb = macros(2500, 80, [], ["low_carb", "high_protein"])
    assert low_carb["protein"] == 160
    assert low_carb["fat"] == 125


def test_defaults_without_goals_or_preferences() -> None:
    m = macros(2000, 70, [], ["vegan"])
    assert m["protein"] == 112
    assert m["fat"] == 56
    assert m["carbs"] == 262


@pytest.mark.parametrize("calories,weight", [(0, 80), (800, 150), (1200, 300), (3000, 40)])
def test_carbs_never_negative(calories: int, weight: int) -> None:
    for goals in ([], ["lose_fat"], ["build_muscle"], ["endurance"]):
        for diet in ([], ["keto"], ["high_protein"]):
            assert macros(calories, weight, goals, diet)["carbs"] >= 0


def test_compute_targets_end_to_end() -> None:
    targets = compute_targets(build_profile())
    # 800 + 1125 - 150 + 5
    assert targets.bmr == 1780
    assert targets.tdee == 2759
    assert targets.target_calories == 3173
    assert targets.protein_g == 160
    assert targets.fats_g == 88
    assert targets.carbs_g == 435


def test_compute_targets_missing_fields() -> None:
    profile = build_profile(weight_kg=None, activity_level=None)
    with pytest.raises(MissingField) as exc:
        compute_targets(profile)
    assert exc.value.fields == ["weight_kg", "activity_level"]
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("field", ["weight_kg", "age", "height_cm"])
def test_zero_counts_as_missing(field: str) -> None:
    with pytest.raises(MissingField) as exc:
        compute_targets(build_profile(**{field: 0}))
    assert exc.value.fields == [field]


def test_out_of_range_values_propagate() -> None:
    # no range validation: a negative age just feeds the formula
    assert bmr(70, 170, -10, "male") == 1818


def test_bmi_helpers() -> None:
    value = bmi(80, 180)
    assert value == 24.7
    assert bmi_category(value) == "Normal weight"
    assert bmi_category(17.0) == "Underweight"
    assert bmi_category(31.2) == "Obese"
    assert estimate_body_fat(value, 30, "male") == 20.3


def test_descriptions_cover_every_option() -> None:
    for level in ("sedentary", "light", "moderate", "active", "athlete"):
        assert activity_description(level)
    assert goal_description("lose_fat") == "Reduce body fat while preserving muscle"
