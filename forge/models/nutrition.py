from __future__ import annotations

from typing import NamedTuple
from pydantic import BaseModel


class MacroRatios(NamedTuple):
    protein_per_kg: float
    carbs_percent: float
    fats_percent: float


class NutritionTargets(BaseModel):
    bmr: int
    tdee: int
    target_calories: int
    protein_g: int
    carbs_g: int
    fats_g: int
