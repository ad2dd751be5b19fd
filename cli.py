import argparse
import logging
import random
from typing import Optional

from algorithms import WeightConverter
from config import load_settings
from db import KeyValueRepository
from generator_service import GENERATOR_DURATIONS, WorkoutGenerator
from group_fitness_service import (
    GroupClassFormat,
    GroupClassLog,
    GroupFitnessService,
    exercise_summary,
    scale_routine,
)
from models import (
    CompletedWorkout,
    Equipment,
    Intensity,
    KidDuration,
    KidEnergyLevel,
    LoggedExercise,
    LoggedSet,
    MuscleFocus,
    ProfileType,
    Workout,
)
from progress_service import ProgressService
from user_service import UserService
from workout_service import WorkoutService


KID_DURATIONS = {
    "short": KidDuration.SHORT,
    "medium": KidDuration.MEDIUM,
    "long": KidDuration.LONG,
}


def print_workout(workout: Workout) -> None:
    print(f"{workout.name} (~{workout.estimated_minutes} min)")
    print(f"  {workout.summary}")
    for ex in workout.exercises:
        rest = f", rest {ex.rest_seconds}s" if ex.rest_seconds else ""
        print(f"  - {ex.name}: {ex.sets} x {ex.reps}{rest} [{ex.equipment.value}]")


def parse_set(raw: str, unit: str) -> tuple[str, LoggedSet]:
    """Parse ``Exercise:reps[@weight]`` into an exercise name and a set in pounds."""
    name, sep, rest = raw.rpartition(":")
    if not sep or not name.strip():
        raise ValueError(f"expected Exercise:reps[@weight], got {raw!r}")
    reps, _, weight = rest.partition("@")
    pounds = None
    if weight:
        value = float(weight)
        pounds = WeightConverter.kg_to_lb(value) if unit == "kg" else value
    return name.strip(), LoggedSet(reps=reps.strip(), weight=pounds)


def group_sets(raw_sets: list[str], unit: str) -> list[LoggedExercise]:
    grouped: dict[str, list[LoggedSet]] = {}
    for raw in raw_sets:
        name, logged = parse_set(raw, unit)
        grouped.setdefault(name, []).append(logged)
    return [LoggedExercise(exercise_name=name, sets=sets) for name, sets in grouped.items()]


def resolve_profile(raw: Optional[str], users: UserService) -> Optional[ProfileType]:
    if raw:
        return users.parse_profile(raw)
    return users.current_user


def show_profiles(users: UserService) -> None:
    for profile in users.available_profiles():
        marker = "*" if profile == users.current_user else " "
        print(f"{marker} {profile.value:<13} {profile.display_name} · {profile.subtitle}")


def show_stats(progress: ProgressService, profile: ProfileType) -> None:
    uid = profile.stable_id
    print(f"{profile.display_name}")
    print(f"  Total workouts:  {progress.total_workouts_count(uid)}")
    print(f"  This week:       {progress.workouts_this_week(uid)}")
    print(f"  This month:      {progress.workouts_this_month(uid)}")
    print(f"  Current streak:  {progress.current_streak_days(uid)} days")
    print(f"  Record streak:   {progress.record_streak_days(uid)} days")


def show_classes(
    service: GroupFitnessService,
    class_format: Optional[GroupClassFormat],
    minutes: Optional[int],
) -> None:
    for routine in service.routines(class_format):
        target = minutes or routine.estimated_minutes
        scaled = scale_routine(routine, target)
        print(f"{routine.name} · {routine.format.value} · {scaled.display_minutes} min")
        for section in [scaled.warm_up, *scaled.main_sections, scaled.cool_down]:
            bpm = f" @ {section.bpm_suggested} bpm" if section.bpm_suggested else ""
            print(f"  {section.name} ({section.duration_minutes} min{bpm})")
            for item in section.exercises:
                print(
                    f"    - {item.exercise.name}: {item.work_seconds}s on / "
                    f"{item.rest_seconds}s off"
                )
                summary = exercise_summary(item.exercise)
                if summary:
                    print(f"      {summary}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Family home workouts")
    parser.add_argument("--settings", default="settings.yaml")
    parser.add_argument("--debug", action="store_true")
    sub = parser.add_subparsers(dest="cmd", required=True)

    prof = sub.add_parser("profiles")
    prof.add_argument("--select", choices=[p.value for p in ProfileType])
    prof.add_argument("--sign-out", action="store_true")

    gen = sub.add_parser("generate")
    gen.add_argument("--equipment", action="append", default=[], choices=[e.value for e in Equipment])
    gen.add_argument("--minutes", type=int, default=30, choices=GENERATOR_DURATIONS)
    gen.add_argument("--intensity", default=Intensity.MEDIUM.value, choices=[i.value for i in Intensity])
    gen.add_argument("--focus", choices=[f.value for f in MuscleFocus])
    gen.add_argument("--profile")
    gen.add_argument("--seed", type=int)
    gen.add_argument("--save", action="store_true")

    kid = sub.add_parser("kid")
    kid.add_argument("--duration", default="medium", choices=sorted(KID_DURATIONS))
    kid.add_argument("--energy", default=KidEnergyLevel.MEDIUM.value, choices=[e.value for e in KidEnergyLevel])
    kid.add_argument("--profile")
    kid.add_argument("--seed", type=int)

    log = sub.add_parser("log")
    log.add_argument("--profile")
    log.add_argument("--workout", required=True, help="Workout id or name")
    log.add_argument("--minutes", type=int)
    log.add_argument("--set", dest="sets", action="append", default=[], help="Exercise:reps[@weight]")
    log.add_argument("--jump", type=float, help="Vertical jump in inches")
    log.add_argument("--notes")

    stats = sub.add_parser("stats")
    stats.add_argument("--profile")

    weights = sub.add_parser("weights")
    weights.add_argument("--profile")
    weights.add_argument("--exercise", required=True)

    jumps = sub.add_parser("jumps")
    jumps.add_argument("--profile")

    classes = sub.add_parser("classes")
    classes.add_argument("--format", dest="class_format", choices=[f.value for f in GroupClassFormat])
    classes.add_argument("--minutes", type=int)
    classes.add_argument("--log", dest="log_routine", help="Record a class led for this routine name")
    classes.add_argument("--participants", type=int)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.settings)
    except ValueError as e:
        parser.error(f"invalid settings: {e}")
    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = KeyValueRepository(settings.db_path)
    users = UserService(store)
    unit = settings.weight_unit

    if args.cmd == "profiles":
        if args.sign_out:
            users.sign_out()
        elif args.select:
            users.select_user(ProfileType(args.select))
        show_profiles(users)
        return

    if args.cmd == "classes":
        service = GroupFitnessService(store)
        class_format = GroupClassFormat(args.class_format) if args.class_format else None
        if args.log_routine:
            match = [r for r in service.all_routines if r.name == args.log_routine]
            if not match:
                parser.error(f"unknown routine: {args.log_routine}")
            routine = match[0]
            service.log_class(
                GroupClassLog(
                    user_id=ProfileType.GROUP_FITNESS.stable_id,
                    routine_id=routine.id,
                    routine_name=routine.name,
                    class_format=routine.format,
                    participant_count=args.participants,
                    duration_minutes=args.minutes,
                )
            )
            print(f"Logged class {routine.name}")
            return
        show_classes(service, class_format, args.minutes)
        return

    profile = resolve_profile(args.profile, users)
    if profile is None:
        if args.profile:
            parser.error(f"unknown profile: {args.profile}")
        parser.error("no profile given and none selected")

    if args.cmd == "generate":
        generator = WorkoutGenerator(random.Random(args.seed) if args.seed is not None else None)
        workout = generator.generate(
            [Equipment(e) for e in args.equipment],
            args.minutes,
            Intensity(args.intensity),
            MuscleFocus(args.focus) if args.focus else None,
            profile,
        )
        print_workout(workout)
        if args.save:
            WorkoutService(store).add_workout(workout)
            print(f"Saved as {workout.id}")
    elif args.cmd == "kid":
        generator = WorkoutGenerator(random.Random(args.seed) if args.seed is not None else None)
        workout = generator.generate_kid_routine(
            KID_DURATIONS[args.duration], KidEnergyLevel(args.energy), profile
        )
        print_workout(workout)
    elif args.cmd == "log":
        workouts = WorkoutService(store)
        workout = workouts.fetch(args.workout)
        if workout is None:
            named = [w for w in workouts.workouts_for(profile) if w.name == args.workout]
            workout = named[0] if named else None
        if workout is None:
            parser.error(f"unknown workout: {args.workout}")
        try:
            logged = group_sets(args.sets, unit)
        except ValueError as e:
            parser.error(str(e))
        progress = ProgressService(store, settings.tzinfo(), settings.week_start)
        progress.log_workout(
            CompletedWorkout(
                user_id=profile.stable_id,
                workout_id=workout.id,
                workout_name=workout.name,
                completed_at=progress.now(),
                duration_minutes=args.minutes,
                logged_exercises=logged,
                vertical_jump_inches=args.jump,
                notes=args.notes,
            )
        )
        print(f"Logged {workout.name} for {profile.display_name}")
    elif args.cmd == "stats":
        progress = ProgressService(store, settings.tzinfo(), settings.week_start)
        show_stats(progress, profile)
    elif args.cmd == "weights":
        progress = ProgressService(store, settings.tzinfo(), settings.week_start)
        for ts, pounds in progress.weight_history(profile.stable_id, args.exercise):
            print(f"{ts:%Y-%m-%d}  {WeightConverter.from_pounds(pounds, unit)} {unit}")
    elif args.cmd == "jumps":
        progress = ProgressService(store, settings.tzinfo(), settings.week_start)
        for ts, inches in progress.vertical_jump_history(profile.stable_id):
            print(f"{ts:%Y-%m-%d}  {inches} in")


if __name__ == "__main__":
    main()
