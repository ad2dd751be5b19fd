from __future__ import annotations
import logging
import random
from typing import Iterable, NamedTuple, Optional, Sequence

from algorithms import MathTools
from catalog import (
    ADULT_EXERCISE_POOL,
    KID_ACTIVITY_POOL,
    KidActivity,
    focus_for_exercise,
)
from models import (
    Equipment,
    ExerciseRecord,
    Intensity,
    KidDuration,
    KidEnergyLevel,
    MuscleFocus,
    ProfileType,
    Workout,
)

logger = logging.getLogger(__name__)

GENERATOR_DURATIONS = (10, 15, 20, 25, 30, 40, 45, 60)


class IntensityProfile(NamedTuple):
    sets_multiplier: float
    rest_multiplier: float
    floor: int
    divisor: int


INTENSITY_PROFILES: dict[Intensity, IntensityProfile] = {
    Intensity.EASY: IntensityProfile(0.8, 1.3, 4, 6),
    Intensity.MEDIUM: IntensityProfile(1.0, 1.0, 5, 5),
    Intensity.DIFFICULT: IntensityProfile(1.2, 0.75, 6, 4),
}

MIN_REST_SECONDS = 30
MAX_REST_SECONDS = 90
MIN_SETS = 2
KID_MAX_WORK_SECONDS = 45
KID_REST_SECONDS = 10


def minimum_exercise_count(intensity: Intensity, minutes: int) -> int:
    profile = INTENSITY_PROFILES[intensity]
    return max(profile.floor, minutes // profile.divisor)


def energy_compatible(activity: KidEnergyLevel, requested: KidEnergyLevel) -> bool:
    """Medium activities suit every energy level."""
    return activity == requested or activity == KidEnergyLevel.MEDIUM


class WorkoutGenerator:
    """Assemble randomized workouts from the static exercise pool.

    ``rng`` defaults to an unseeded ``random.Random`` so repeated calls with
    the same constraints give different workouts. Tests pass their own.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        exercise_pool: Sequence[ExerciseRecord] = ADULT_EXERCISE_POOL,
        kid_pool: Sequence[KidActivity] = KID_ACTIVITY_POOL,
    ) -> None:
        self.rng = rng or random.Random()
        self.exercise_pool = tuple(exercise_pool)
        self.kid_pool = tuple(kid_pool)

    def candidate_pool(
        self,
        equipment: Iterable[Equipment],
        focus: Optional[MuscleFocus] = None,
    ) -> list[ExerciseRecord]:
        """Apply the fallback ladder and return the exercises to sample from.

        equipment + focus, then equipment only, then bodyweight only. An
        empty result means the caller should use the placeholder workout.
        """
        allowed = set(equipment)
        pool = [ex for ex in self.exercise_pool if not allowed or ex.equipment in allowed]
        if not pool:
            logger.info("No exercises for %s; falling back to bodyweight", sorted(e.value for e in allowed))
            pool = self._bodyweight()
        if focus is not None and focus != MuscleFocus.FULL_BODY:
            focused = [ex for ex in pool if focus_for_exercise(ex.name) == focus]
            if focused:
                pool = focused
            else:
                logger.info("No %s exercises available; ignoring focus", focus.value)
        logger.debug("Candidate pool has %d exercises", len(pool))
        return pool

    def _bodyweight(self) -> list[ExerciseRecord]:
        return [ex for ex in self.exercise_pool if ex.equipment == Equipment.BODYWEIGHT]

    @staticmethod
    def rescale(exercise: ExerciseRecord, intensity: Intensity) -> ExerciseRecord:
        profile = INTENSITY_PROFILES[intensity]
        sets = max(MIN_SETS, MathTools.scale_floor(exercise.sets, profile.sets_multiplier))
        rest = int(
            MathTools.clamp(
                MathTools.scale_floor(exercise.rest_seconds, profile.rest_multiplier),
                MIN_REST_SECONDS,
                MAX_REST_SECONDS,
            )
        )
        reps = exercise.reps
        if intensity == Intensity.EASY and reps.strip().isdigit():
            count = int(reps.strip())
            if count > 8:
                reps = str(max(6, count - 2))
        return ExerciseRecord(
            name=exercise.name,
            equipment=exercise.equipment,
            instructions=exercise.instructions,
            sets=sets,
            reps=reps,
            rest_seconds=rest,
        )

    @staticmethod
    def estimate_minutes(exercises: Iterable[ExerciseRecord]) -> int:
        return sum(MathTools.set_minutes(ex.sets, ex.rest_seconds) for ex in exercises)

    def generate(
        self,
        equipment: Iterable[Equipment],
        duration: int,
        intensity: Intensity,
        focus: Optional[MuscleFocus],
        profile_type: ProfileType,
    ) -> Workout:
        equipment = set(equipment)
        pool = self.candidate_pool(equipment, focus)
        if not pool:
            logger.warning("Exercise pool exhausted; returning placeholder workout")
            return self.placeholder_workout(duration, profile_type)

        count = min(minimum_exercise_count(intensity, duration), len(pool))
        selected = self.rng.sample(pool, count)
        exercises = [self.rescale(ex, intensity) for ex in selected]
        estimated = max(duration, self.estimate_minutes(exercises))

        if equipment:
            equipment_label = ", ".join(sorted(e.value for e in equipment))
        else:
            equipment_label = "Any equipment"
        focus_label = focus.value if focus is not None else MuscleFocus.FULL_BODY.value
        summary = f"Generated · {intensity.value} · {focus_label} · {equipment_label}"
        return Workout(
            name=f"Generated {duration} min Workout",
            summary=summary,
            exercises=exercises,
            estimated_minutes=estimated,
            profile_type=profile_type,
        )

    @staticmethod
    def placeholder_workout(duration: int, profile_type: ProfileType) -> Workout:
        march = ExerciseRecord(
            name="March in place",
            equipment=Equipment.BODYWEIGHT,
            sets=1,
            reps=f"{duration} min",
            rest_seconds=0,
        )
        return Workout(
            name=f"Generated {duration} min Workout",
            summary="Bodyweight backup.",
            exercises=[march],
            estimated_minutes=duration,
            profile_type=profile_type,
        )

    def generate_kid_routine(
        self,
        duration: KidDuration,
        energy_level: KidEnergyLevel,
        profile_type: ProfileType,
    ) -> Workout:
        minutes = duration.approximate_minutes
        target_seconds = minutes * 60
        matching = [a for a in self.kid_pool if energy_compatible(a.energy, energy_level)]
        pool = matching or list(self.kid_pool)
        self.rng.shuffle(pool)

        total_seconds = 0
        activities: list[ExerciseRecord] = []
        for activity in pool:
            if total_seconds >= target_seconds:
                break
            work = min(activity.duration_seconds, KID_MAX_WORK_SECONDS)
            activities.append(
                ExerciseRecord(
                    name=activity.name,
                    equipment=Equipment.BODYWEIGHT,
                    instructions=activity.instructions,
                    sets=1,
                    reps=f"{work} sec",
                    rest_seconds=KID_REST_SECONDS,
                )
            )
            total_seconds += work + KID_REST_SECONDS
        logger.debug("Kid routine: %d activities, %d seconds", len(activities), total_seconds)
        return Workout(
            name=f"Fun Moves {duration.value}",
            summary=f"Generated fun routine · {duration.value} · {energy_level.value} energy",
            exercises=activities,
            estimated_minutes=max(minutes, total_seconds // 60),
            profile_type=profile_type,
        )
