from __future__ import annotations
import datetime
import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_id() -> str:
    return str(uuid.uuid4())


class Equipment(str, Enum):
    DUMBBELLS = "Dumbbells"
    RESISTANCE_BANDS = "Resistance Bands"
    HOME_GYM = "Home Gym"
    TREADMILL = "Treadmill"
    EXERCISE_BIKE = "Exercise Bike"
    BODYWEIGHT = "Bodyweight"
    YOGA_MAT = "Yoga Mat"


class MuscleFocus(str, Enum):
    """Coarse focus tag used to filter the generator pool."""

    FULL_BODY = "Full body"
    UPPER_BODY = "Upper body"
    LOWER_BODY = "Lower body"
    CORE = "Core"
    CARDIO = "Cardio"


class MuscleGroup(str, Enum):
    """Primary target of a built-in routine, used for browsing."""

    FULL_BODY = "Full Body"
    UPPER_BODY = "Upper Body"
    LEGS = "Legs"
    GLUTES = "Glutes"
    BACK = "Back"
    CHEST = "Chest"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    CORE = "Core"
    CARDIO = "Cardio"


class Intensity(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    DIFFICULT = "Difficult"


class KidDuration(str, Enum):
    SHORT = "Short (5–8 min)"
    MEDIUM = "Medium (10–12 min)"
    LONG = "Long (15 min)"

    @property
    def approximate_minutes(self) -> int:
        return {
            KidDuration.SHORT: 6,
            KidDuration.MEDIUM: 11,
            KidDuration.LONG: 15,
        }[self]


class KidEnergyLevel(str, Enum):
    CHILL = "Chill"
    MEDIUM = "Medium"
    SUPER = "Super!"


class ProfileType(str, Enum):
    """The five fixed identities the application supports."""

    MOM = "Mom"
    DAUGHTER_MS = "DaughterMS"
    CHILD7 = "Child7"
    CHILD5 = "Child5"
    GROUP_FITNESS = "GroupFitness"

    @property
    def stable_id(self) -> str:
        index = list(ProfileType).index(self) + 1
        return f"00000000-0000-0000-0000-{index:012d}"

    @property
    def display_name(self) -> str:
        return {
            ProfileType.MOM: "Mom",
            ProfileType.DAUGHTER_MS: "Middle School Daughter",
            ProfileType.CHILD7: "7-Year-Old",
            ProfileType.CHILD5: "5-Year-Old",
            ProfileType.GROUP_FITNESS: "Group Fitness Classes",
        }[self]

    @property
    def subtitle(self) -> str:
        return {
            ProfileType.MOM: "At-home strength · Beginner-friendly",
            ProfileType.DAUGHTER_MS: "Volleyball · Jump & serve",
            ProfileType.CHILD7: "Fun movement & games",
            ProfileType.CHILD5: "Super fun moves & play",
            ProfileType.GROUP_FITNESS: "Lead bodyweight classes · No equipment",
        }[self]

    @property
    def is_young_kid(self) -> bool:
        return self in (ProfileType.CHILD7, ProfileType.CHILD5)

    @classmethod
    def from_stable_id(cls, user_id: str) -> Optional["ProfileType"]:
        for profile in cls:
            if profile.stable_id == user_id:
                return profile
        return None


PROFILE_IDS = frozenset(p.stable_id for p in ProfileType)


class ExerciseRecord(BaseModel):
    """A single exercise as it appears in a workout."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    equipment: Equipment
    instructions: Optional[str] = None
    sets: int = Field(ge=0)
    # e.g. "10", "8–12" or "30 sec"
    reps: str
    rest_seconds: int = Field(default=60, ge=0)


class Workout(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    summary: str
    exercises: list[ExerciseRecord]
    estimated_minutes: int
    profile_type: ProfileType = ProfileType.MOM
    primary_focus: Optional[MuscleGroup] = None
    # Size of the daily subset shown from ``exercises``; None shows all.
    target_exercise_count: Optional[int] = 6


class LoggedSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    reps: str
    # pounds
    weight: Optional[float] = None


class LoggedExercise(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_id: Optional[str] = None
    exercise_name: str
    sets: list[LoggedSet] = Field(default_factory=list)


class CompletedWorkout(BaseModel):
    """One finished session for one user. Never mutated once logged."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    user_id: str
    workout_id: str
    workout_name: str
    completed_at: datetime.datetime = Field(default_factory=datetime.datetime.now)
    duration_minutes: Optional[int] = None
    logged_exercises: list[LoggedExercise] = Field(default_factory=list)
    vertical_jump_inches: Optional[float] = None
    notes: Optional[str] = None

    @field_validator("user_id")
    @classmethod
    def _known_profile(cls, value: str) -> str:
        if value not in PROFILE_IDS:
            raise ValueError(f"unknown profile id: {value}")
        return value
