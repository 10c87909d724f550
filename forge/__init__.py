from .engine import FitnessEngine, OnboardingResult

__all__ = ["FitnessEngine", "OnboardingResult"]
