from __future__ import annotations

from datetime import datetime, timezone
from typing import List
from pydantic import BaseModel, Field, model_validator

MAX_SLOTS_PER_DAY = 6
DAYS_PER_WEEK = 7


class WorkoutExerciseSlot(BaseModel):
    exercise_id: str
    sets: int = Field(..., ge=1)
    reps: str = Field(..., description='Rep range, e.g. "8-12"')
    rest_seconds: int = Field(..., ge=0)


class WorkoutDay(BaseModel):
    day: int = Field(..., ge=1, le=DAYS_PER_WEEK)
    name: str
    is_rest_day: bool = False
    exercises: List[WorkoutExerciseSlot] = Field(default_factory=list, max_length=MAX_SLOTS_PER_DAY)

    @model_validator(mode="after")
    def _rest_days_are_empty(self) -> "WorkoutDay":
        if self.is_rest_day and self.exercises:
            raise ValueError(f"rest day {self.day} cannot hold exercises")
        return self

    @classmethod
    def rest(cls, day: int) -> "WorkoutDay":
        return cls(day=day, name="Rest", is_rest_day=True, exercises=[])


class WeeklyWorkout(BaseModel):
    days: List[WorkoutDay] = Field(..., min_length=DAYS_PER_WEEK, max_length=DAYS_PER_WEEK)
    week_number: int = 1
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def active_days(self) -> List[WorkoutDay]:
        return [d for d in self.days if not d.is_rest_day]

    @property
    def total_exercises(self) -> int:
        return sum(len(d.exercises) for d in self.days)
