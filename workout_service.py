from __future__ import annotations
import datetime
import logging
import random
from typing import Iterable, Optional

from pydantic import ValidationError

from db import KeyValueRepository
from models import Equipment, ExerciseRecord, MuscleGroup, ProfileType, Workout
from routine_library import BUILT_IN_WORKOUTS

logger = logging.getLogger(__name__)

CUSTOM_WORKOUTS_KEY = "homestrength.custom_workouts"


class WorkoutService:
    """Built-in routines plus workouts the user designs or saves."""

    def __init__(
        self,
        store: KeyValueRepository | None = None,
        built_in: Iterable[Workout] = BUILT_IN_WORKOUTS,
    ) -> None:
        self.store = store
        self.built_in = tuple(built_in)
        self.custom: list[Workout] = []
        self._load()

    @property
    def workouts(self) -> list[Workout]:
        return list(self.built_in) + self.custom

    def _load(self) -> None:
        if self.store is None:
            return
        for item in self.store.load(CUSTOM_WORKOUTS_KEY) or []:
            try:
                self.custom.append(Workout.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unreadable workout: %s", e)

    def _save(self) -> None:
        if self.store is None:
            return
        self.store.save(
            CUSTOM_WORKOUTS_KEY, [w.model_dump(mode="json") for w in self.custom]
        )

    def fetch(self, workout_id: str) -> Optional[Workout]:
        for workout in self.workouts:
            if workout.id == workout_id:
                return workout
        return None

    def add_workout(self, workout: Workout) -> None:
        self.custom.append(workout)
        self._save()

    def update_workout(self, workout: Workout) -> None:
        for i, existing in enumerate(self.custom):
            if existing.id == workout.id:
                self.custom[i] = workout
                self._save()
                return
        logger.debug("No custom workout %s to update", workout.id)

    def delete_workout(self, workout_id: str) -> None:
        remaining = [w for w in self.custom if w.id != workout_id]
        if len(remaining) != len(self.custom):
            self.custom = remaining
            self._save()

    def workouts_for(
        self,
        profile_type: ProfileType,
        equipment: Iterable[Equipment] = (),
        focus: Optional[MuscleGroup] = None,
    ) -> list[Workout]:
        """Workouts for a profile, optionally limited by equipment and focus.

        With equipment given, every exercise of a workout must use one of the
        listed pieces.
        """
        allowed = set(equipment)
        result = [w for w in self.workouts if w.profile_type == profile_type]
        if allowed:
            result = [
                w for w in result if all(ex.equipment in allowed for ex in w.exercises)
            ]
        if focus is not None:
            result = [w for w in result if w.primary_focus == focus]
        return result

    @staticmethod
    def exercises_for_today(
        workout: Workout, today: datetime.date | None = None
    ) -> list[ExerciseRecord]:
        """A day-stable subset when the workout has more than its target count."""
        pool = list(workout.exercises)
        count = workout.target_exercise_count
        if count is None or len(pool) <= count:
            return pool
        day = today or datetime.date.today()
        rng = random.Random(day.toordinal())
        indices = rng.sample(range(len(pool)), count)
        return [pool[i] for i in indices]
