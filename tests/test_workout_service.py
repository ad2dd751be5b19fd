import datetime
import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from db import KeyValueRepository
from models import Equipment, ExerciseRecord, MuscleGroup, ProfileType, Workout
from routine_library import BUILT_IN_WORKOUTS, mom_workouts
from workout_service import WorkoutService


def _custom(name: str = "My Routine", count: int = 3) -> Workout:
    exercises = [
        ExerciseRecord(name=f"Move {i}", equipment=Equipment.BODYWEIGHT, sets=3, reps="10")
        for i in range(count)
    ]
    return Workout(name=name, summary="Mine", exercises=exercises, estimated_minutes=20)


class WorkoutServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = "test_workouts.db"
        if os.path.exists(self.db):
            os.remove(self.db)
        self.store = KeyValueRepository(self.db)
        self.service = WorkoutService(self.store)

    def tearDown(self) -> None:
        if os.path.exists(self.db):
            os.remove(self.db)

    def test_built_in_ids_are_stable(self) -> None:
        self.assertEqual([w.id for w in mom_workouts()], [w.id for w in mom_workouts()])
        ids = [w.id for w in BUILT_IN_WORKOUTS]
        self.assertEqual(len(ids), len(set(ids)))

    def test_every_profile_but_group_has_routines(self) -> None:
        for profile in ProfileType:
            found = self.service.workouts_for(profile)
            if profile == ProfileType.GROUP_FITNESS:
                self.assertEqual(found, [])
            else:
                self.assertTrue(found, profile)

    def test_add_update_delete(self) -> None:
        workout = _custom()
        self.service.add_workout(workout)
        self.assertEqual(self.service.fetch(workout.id), workout)

        renamed = workout.model_copy(update={"name": "Renamed"})
        self.service.update_workout(renamed)
        reloaded = WorkoutService(self.store)
        self.assertEqual(reloaded.fetch(workout.id).name, "Renamed")

        reloaded.delete_workout(workout.id)
        self.assertIsNone(WorkoutService(self.store).fetch(workout.id))

    def test_built_ins_are_read_only(self) -> None:
        built_in = BUILT_IN_WORKOUTS[0]
        self.service.update_workout(built_in.model_copy(update={"name": "Hacked"}))
        self.service.delete_workout(built_in.id)
        self.assertEqual(self.service.fetch(built_in.id).name, built_in.name)
        self.service.delete_workout("missing")
        self.assertEqual(len(self.service.workouts), len(BUILT_IN_WORKOUTS))

    def test_filter_by_equipment_and_focus(self) -> None:
        bodyweight = self.service.workouts_for(ProfileType.MOM, [Equipment.BODYWEIGHT])
        self.assertEqual([w.name for w in bodyweight], ["Bodyweight Only", "Core"])
        core = self.service.workouts_for(ProfileType.MOM, focus=MuscleGroup.CORE)
        self.assertEqual([w.name for w in core], ["Core"])
        cardio = self.service.workouts_for(
            ProfileType.MOM, [Equipment.TREADMILL, Equipment.EXERCISE_BIKE]
        )
        self.assertEqual([w.name for w in cardio], ["Cardio"])

    def test_exercises_for_today(self) -> None:
        workout = _custom(count=9)
        day = datetime.date(2024, 3, 1)
        first = WorkoutService.exercises_for_today(workout, day)
        self.assertEqual(len(first), 6)
        self.assertEqual(first, WorkoutService.exercises_for_today(workout, day))
        for ex in first:
            self.assertIn(ex, workout.exercises)

    def test_short_workout_shown_whole(self) -> None:
        workout = _custom(count=4)
        self.assertEqual(WorkoutService.exercises_for_today(workout), workout.exercises)
        unlimited = _custom(count=9).model_copy(update={"target_exercise_count": None})
        self.assertEqual(len(WorkoutService.exercises_for_today(unlimited)), 9)


if __name__ == "__main__":
    unittest.main()
