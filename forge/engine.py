from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from forge.config import get_settings
from forge.models import IntakeProfile, NutritionTargets, ValidationReport, WeeklyWorkout
from forge.services.catalog import ExerciseCatalog, load_catalog
from forge.services.metabolic import compute_targets
from forge.services.plan_checks import validate_plan
from forge.services.planner import generate_weekly_plan, plan_summary


@dataclass
class OnboardingResult:
    targets: NutritionTargets
    plan: WeeklyWorkout
    summary: str
    validation: ValidationReport


class FitnessEngine:
    """Entry point for the onboarding collaborator.

    The catalog is injected once and only read afterwards, so one engine can
    serve any number of profiles.
    """

    def __init__(self, catalog: ExerciseCatalog) -> None:
        self.catalog = catalog

    @classmethod
    def from_settings(cls) -> "FitnessEngine":
        settings = get_settings()
        return cls(load_catalog(settings.CATALOG_PATH))

    def compute_targets(self, profile: IntakeProfile) -> NutritionTargets:
        return compute_targets(profile)

    def generate_weekly_plan(self, profile: IntakeProfile, created_at: datetime | None = None) -> WeeklyWorkout:
        return generate_weekly_plan(profile, self.catalog, created_at=created_at)

    def plan_summary(self, plan: WeeklyWorkout) -> str:
        return plan_summary(plan)

    def build(self, profile: IntakeProfile) -> OnboardingResult:
        # MissingField surfaces before any plan work is done
        targets = self.compute_targets(profile)
        plan = self.generate_weekly_plan(profile)
        return OnboardingResult(
            targets=targets,
            plan=plan,
            summary=self.plan_summary(plan),
            validation=validate_plan(plan, self.catalog),
        )
