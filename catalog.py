"""Static exercise content shared by the generator and the built-in routines.

Everything here is built once at import time and treated as read-only.
"""
from __future__ import annotations
from typing import Iterable, NamedTuple

from models import Equipment, ExerciseRecord, KidEnergyLevel, MuscleFocus


def _ex(
    name: str,
    equipment: Equipment,
    sets: int,
    reps: str,
    instructions: str | None = None,
    rest_seconds: int = 60,
) -> ExerciseRecord:
    return ExerciseRecord(
        name=name,
        equipment=equipment,
        instructions=instructions,
        sets=sets,
        reps=reps,
        rest_seconds=rest_seconds,
    )


EXERCISE_LIBRARY: tuple[ExerciseRecord, ...] = (
    _ex("Goblet Squat", Equipment.DUMBBELLS, 3, "10", "Hold one dumbbell at chest. Squat down, keep chest up."),
    _ex("Dumbbell Row", Equipment.DUMBBELLS, 3, "10 each", "Support on bench or chair. Row to hip."),
    _ex("Dumbbell Floor Press", Equipment.DUMBBELLS, 3, "10", "On back, press dumbbells up from floor."),
    _ex("Dumbbell Shoulder Press", Equipment.DUMBBELLS, 3, "10"),
    _ex("Dumbbell Romanian Deadlift", Equipment.DUMBBELLS, 3, "10", "Slight bend in knees, hinge at hips."),
    _ex("Dumbbell Bicep Curl", Equipment.DUMBBELLS, 3, "10"),
    _ex("Tricep Extension", Equipment.DUMBBELLS, 3, "10", "One dumbbell overhead or use band."),
    _ex("Dumbbell Lunge", Equipment.DUMBBELLS, 3, "8 each", "Alternate legs."),
    _ex("Band Pull-Apart", Equipment.RESISTANCE_BANDS, 3, "15", "Hold band in front, pull apart squeezing shoulder blades."),
    _ex("Band Chest Stretch / Push", Equipment.RESISTANCE_BANDS, 2, "12"),
    _ex("Band Glute Bridge", Equipment.RESISTANCE_BANDS, 3, "12"),
    _ex("Leg Press", Equipment.HOME_GYM, 3, "10–12", "Feet shoulder-width. Push through heels."),
    _ex("Chest Press", Equipment.HOME_GYM, 3, "10"),
    _ex("Glute Bridge", Equipment.BODYWEIGHT, 3, "12", "Feet flat, lift hips. Optional: band above knees."),
    _ex("Plank", Equipment.BODYWEIGHT, 3, "30 sec"),
    _ex("Calf Raises", Equipment.BODYWEIGHT, 3, "15"),
    _ex("Treadmill Walk/Jog", Equipment.TREADMILL, 1, "20–25 min", "5 min warm-up walk, then 15–20 min jog or brisk walk."),
    _ex("Exercise Bike", Equipment.EXERCISE_BIKE, 1, "15–20 min", "Steady pace 15–20 min, or intervals."),
    _ex("Superman", Equipment.BODYWEIGHT, 3, "10", "Lie face down, lift arms and legs off the floor. Hold 2 sec."),
    _ex("Dead Bug", Equipment.BODYWEIGHT, 3, "8 each side", "On back, extend opposite arm and leg. Keep low back pressed down."),
    _ex("Bird Dog", Equipment.BODYWEIGHT, 3, "8 each side", "On all fours, extend one arm and opposite leg. Hold 2 sec."),
    _ex("Push-ups (or knee push-ups)", Equipment.BODYWEIGHT, 3, "8–10", "Hands under shoulders, lower and push back up."),
    _ex("Squats", Equipment.BODYWEIGHT, 3, "12", "Bodyweight squats, chest up."),
)

YOGA_MAT_EXERCISES: tuple[ExerciseRecord, ...] = (
    _ex("Cat-Cow", Equipment.YOGA_MAT, 2, "8", "On all fours, round spine then arch. Breathe with the movement.", 15),
    _ex("Child's Pose", Equipment.YOGA_MAT, 2, "30 sec", "Knees under hips, fold forward, arms extended. Hold and breathe.", 20),
    _ex("Downward Dog", Equipment.YOGA_MAT, 2, "30 sec", "Hips up, heels toward floor. Stretch hamstrings and shoulders.", 20),
    _ex("Hip Stretch", Equipment.YOGA_MAT, 2, "30 sec", "Seated or supine hip opener. Hold 20–30 sec each side.", 15),
)

ADULT_EXERCISE_POOL: tuple[ExerciseRecord, ...] = EXERCISE_LIBRARY + YOGA_MAT_EXERCISES

_UPPER = MuscleFocus.UPPER_BODY
_LOWER = MuscleFocus.LOWER_BODY
_CORE = MuscleFocus.CORE
_CARDIO = MuscleFocus.CARDIO

# Names missing from this table count as full body.
FOCUS_MAP: dict[str, MuscleFocus] = {
    "Goblet Squat": _LOWER,
    "Dumbbell Row": _UPPER,
    "Dumbbell Floor Press": _UPPER,
    "Dumbbell Shoulder Press": _UPPER,
    "Dumbbell Romanian Deadlift": _LOWER,
    "Dumbbell Bicep Curl": _UPPER,
    "Tricep Extension": _UPPER,
    "Dumbbell Lunge": _LOWER,
    "Band Pull-Apart": _UPPER,
    "Band Chest Stretch / Push": _UPPER,
    "Band Glute Bridge": _LOWER,
    "Leg Press": _LOWER,
    "Chest Press": _UPPER,
    "Leg Press (Machine)": _LOWER,
    "Calf Raises (Leg Press)": _LOWER,
    "Glute Bridge": _LOWER,
    "Plank": _CORE,
    "Calf Raises": _LOWER,
    "Treadmill Walk/Jog": _CARDIO,
    "Exercise Bike": _CARDIO,
    "Jump Squats": _LOWER,
    "Bicep Curl": _UPPER,
    "Romanian Deadlift": _LOWER,
    "Superman": _CORE,
    "Dead Bug": _CORE,
    "Bird Dog": _CORE,
    "Push-ups (or knee push-ups)": _UPPER,
    "Squats": _LOWER,
    "Cat-Cow": _CORE,
    "Child's Pose": _CORE,
    "Downward Dog": MuscleFocus.FULL_BODY,
    "Hip Stretch": _LOWER,
}


class KidActivity(NamedTuple):
    name: str
    instructions: str
    duration_seconds: int
    energy: KidEnergyLevel


KID_ACTIVITY_POOL: tuple[KidActivity, ...] = (
    KidActivity("Frog jumps", "Squat and jump like a frog! Land softly.", 30, KidEnergyLevel.MEDIUM),
    KidActivity("Bear crawl", "Walk on hands and feet like a bear.", 25, KidEnergyLevel.MEDIUM),
    KidActivity("Bunny hops", "Hop in place or forward like a bunny.", 20, KidEnergyLevel.CHILL),
    KidActivity("Star jumps", "Jump and spread arms and legs like a star!", 25, KidEnergyLevel.SUPER),
    KidActivity("Dance party", "Put on music and dance any way you want!", 60, KidEnergyLevel.SUPER),
    KidActivity("Reach for the sky", "Reach your arms up high and stretch.", 20, KidEnergyLevel.CHILL),
    KidActivity("March in place", "March like a soldier. Lift those knees!", 30, KidEnergyLevel.MEDIUM),
    KidActivity("Flap like a bird", "Flap your arms like wings. Fly around!", 25, KidEnergyLevel.MEDIUM),
    KidActivity("Crab walk", "Walk on hands and feet like a crab.", 25, KidEnergyLevel.MEDIUM),
    KidActivity("One-foot balance", "Stand on one foot. Can you count to 10?", 20, KidEnergyLevel.CHILL),
    KidActivity("Butterfly stretch", "Sit, feet together, flap knees like butterfly wings.", 30, KidEnergyLevel.CHILL),
    KidActivity("Spin slowly", "Spin in a circle. Stop if you feel dizzy!", 15, KidEnergyLevel.MEDIUM),
    KidActivity("Clap and jump", "Clap once, jump once. Repeat!", 25, KidEnergyLevel.SUPER),
)


def focus_for_exercise(name: str) -> MuscleFocus:
    return FOCUS_MAP.get(name, MuscleFocus.FULL_BODY)


def exercises_using(
    equipment: Iterable[Equipment],
    library: Iterable[ExerciseRecord] = EXERCISE_LIBRARY,
) -> list[ExerciseRecord]:
    """Return library exercises for the given equipment; empty means all."""
    allowed = set(equipment)
    if not allowed:
        return list(library)
    return [ex for ex in library if ex.equipment in allowed]
