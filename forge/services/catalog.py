from __future__ import annotations

import json
import logging
import random as _random
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from pydantic import BaseModel

from forge.config import get_settings
from forge.models.exercise import ExerciseRecord

logger = logging.getLogger(__name__)

CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "exercises.json"

BODYWEIGHT_EQUIPMENT = "body only"


class CatalogFilter(BaseModel):
    """Conjunctive query; every field left as None is ignored."""

    level: Optional[str] = None
    levels: Optional[List[str]] = None
    muscle: Optional[str] = None
    primary_muscles: Optional[List[str]] = None
    equipment: Optional[str] = None
    category: Optional[str] = None
    force: Optional[str] = None
    mechanic: Optional[str] = None

    def matches(self, ex: ExerciseRecord) -> bool:
        if self.level and ex.level != self.level:
            return False
        if self.levels is not None and ex.level not in self.levels:
            return False
        if self.muscle:
            m = self.muscle.lower()
            if m not in ex.primary_muscles and m not in ex.secondary_muscles:
                return False
        if self.primary_muscles is not None:
            wanted = {m.lower() for m in self.primary_muscles}
            if wanted.isdisjoint(ex.primary_muscles):
                return False
        if self.equipment and (ex.equipment or "").lower() != self.equipment.lower():
            return False
        if self.category and ex.category != self.category:
            return False
        if self.force and ex.force != self.force:
            return False
        if self.mechanic and ex.mechanic != self.mechanic:
            return False
        return True


class ExerciseCatalog:
    """Immutable, in-memory exercise collection.

    Queries never raise: anything that matches nothing returns an empty list.
    Muscle tags compare case-insensitively but must match exactly.
    """

    def __init__(self, exercises: Iterable[ExerciseRecord]) -> None:
        self._exercises: tuple[ExerciseRecord, ...] = tuple(exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def __iter__(self) -> Iterator[ExerciseRecord]:
        return iter(self._exercises)

    @property
    def count(self) -> int:
        return len(self._exercises)

    def all(self) -> List[ExerciseRecord]:
        return list(self._exercises)

    def get(self, exercise_id: str) -> Optional[ExerciseRecord]:
        return next((ex for ex in self._exercises if ex.id == exercise_id), None)

    def by_level(self, level: str) -> List[ExerciseRecord]:
        return [ex for ex in self._exercises if ex.level == level]

    def by_primary_muscle(self, muscle: str) -> List[ExerciseRecord]:
        m = muscle.lower()
        return [ex for ex in self._exercises if m in ex.primary_muscles]

    def by_muscle(self, muscle: str) -> List[ExerciseRecord]:
        m = muscle.lower()
        return [ex for ex in self._exercises if m in ex.primary_muscles or m in ex.secondary_muscles]

    def by_equipment(self, equipment: str) -> List[ExerciseRecord]:
        eq = equipment.lower()
        return [ex for ex in self._exercises if (ex.equipment or "").lower() == eq]

    def by_category(self, category: str) -> List[ExerciseRecord]:
        return [ex for ex in self._exercises if ex.category == category]

    def by_force(self, force: str) -> List[ExerciseRecord]:
        return [ex for ex in self._exercises if ex.force == force]

    def by_mechanic(self, mechanic: str) -> List[ExerciseRecord]:
        return [ex for ex in self._exercises if ex.mechanic == mechanic]

    def bodyweight(self) -> List[ExerciseRecord]:
        return [ex for ex in self._exercises if ex.equipment in (None, BODYWEIGHT_EQUIPMENT)]

    def compound(self) -> List[ExerciseRecord]:
        return self.by_mechanic("compound")

    def isolation(self) -> List[ExerciseRecord]:
        return self.by_mechanic("isolation")

    def filter(self, options: CatalogFilter | None = None, **criteria) -> List[ExerciseRecord]:
        """Apply every supplied predicate as a logical AND.

        Accepts either a ``CatalogFilter`` or the same fields as keyword
        arguments; keywords override fields of ``options``.
        """
        if criteria:
            base = options.model_dump(exclude_none=True) if options else {}
            base.update({k: v for k, v in criteria.items() if v is not None})
            options = CatalogFilter(**base)
        if options is None:
            return self.all()
        return [ex for ex in self._exercises if options.matches(ex)]

    def search(self, query: str) -> List[ExerciseRecord]:
        q = query.lower()
        return [ex for ex in self._exercises if q in ex.name.lower()]

    def all_muscles(self) -> List[str]:
        muscles: set[str] = set()
        for ex in self._exercises:
            muscles.update(ex.primary_muscles)
            muscles.update(ex.secondary_muscles)
        return sorted(muscles)

    def all_equipment(self) -> List[str]:
        return sorted({ex.equipment for ex in self._exercises if ex.equipment})

    def random(
        self,
        count: int,
        options: CatalogFilter | None = None,
        rng: _random.Random | None = None,
    ) -> List[ExerciseRecord]:
        # Not part of plan assembly; results vary between calls.
        pool = self.filter(options)
        k = max(0, min(count, len(pool)))
        return (rng or _random).sample(pool, k)


def _resolve_path(path: str | Path | None) -> Path:
    if path is not None:
        return Path(path)
    configured = get_settings().CATALOG_PATH
    return Path(configured) if configured else CATALOG_PATH


@lru_cache(maxsize=4)
def _load_records(path: Path) -> tuple[ExerciseRecord, ...]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    records = tuple(ExerciseRecord.model_validate(item) for item in raw)
    logger.info("Loaded %d exercises from %s", len(records), path)
    return records


def load_catalog(path: str | Path | None = None) -> ExerciseCatalog:
    return ExerciseCatalog(_load_records(_resolve_path(path).resolve()))

