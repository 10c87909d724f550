from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional


ExerciseLevel = Literal["beginner", "intermediate", "advanced"]

ExerciseForce = Literal["push", "pull"]

ExerciseMechanic = Literal["compound", "isolation"]

ExerciseCategory = Literal[
    "strength",
    "cardio",
    "stretching",
    "olympic_weightlifting",
    "plyometrics",
    "powerlifting",
    "strongman",
]


class ExerciseRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "Barbell_Bench_Press",
                    "name": "Barbell Bench Press",
                    "force": "push",
                    "level": "beginner",
                    "mechanic": "compound",
                    "equipment": "barbell",
                    "primaryMuscles": ["chest"],
                    "secondaryMuscles": ["shoulders", "triceps"],
                    "category": "strength",
                    "instructions": ["Lie back on a flat bench."],
                }
            ]
        },
    )

    id: str = Field(..., description="Catalog ID, e.g., Barbell_Bench_Press")
    name: str
    force: Optional[ExerciseForce] = None
    level: ExerciseLevel
    mechanic: Optional[ExerciseMechanic] = None
    equipment: Optional[str] = None
    primary_muscles: List[str] = Field(default_factory=list, alias="primaryMuscles")
    secondary_muscles: List[str] = Field(default_factory=list, alias="secondaryMuscles")
    category: ExerciseCategory = "strength"
    instructions: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)

    @field_validator("primary_muscles", "secondary_muscles")
    @classmethod
    def _lower_tags(cls, v: List[str]) -> List[str]:
        return [m.strip().lower() for m in v]

    @property
    def is_compound(self) -> bool:
        return self.mechanic == "compound"
