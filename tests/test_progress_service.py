import datetime
import os
import sys
import unittest

import tzlocal
from pydantic import ValidationError

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
import progress_service
from db import KeyValueRepository
from models import CompletedWorkout, LoggedExercise, LoggedSet, ProfileType
from progress_service import COMPLETED_WORKOUTS_KEY, ProgressService

UTC = datetime.timezone.utc
MOM = ProfileType.MOM.stable_id
TEEN = ProfileType.DAUGHTER_MS.stable_id


def _at(month: int, day: int, hour: int = 9) -> datetime.datetime:
    return datetime.datetime(2024, month, day, hour, tzinfo=UTC)


def _done(when: datetime.datetime, user_id: str = MOM, **kwargs) -> CompletedWorkout:
    return CompletedWorkout(
        user_id=user_id, workout_id="w1", workout_name="Full Body A", completed_at=when, **kwargs
    )


class StreakTestCase(unittest.TestCase):
    def test_consecutive_days(self) -> None:
        log = [_done(_at(1, 10)), _done(_at(1, 9)), _done(_at(1, 8))]
        self.assertEqual(progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), UTC), 3)

    def test_gap_breaks_streak(self) -> None:
        log = [_done(_at(1, 10)), _done(_at(1, 8))]
        self.assertEqual(progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), UTC), 1)

    def test_no_workout_today(self) -> None:
        log = [_done(_at(1, 9)), _done(_at(1, 8))]
        self.assertEqual(progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), UTC), 0)

    def test_several_workouts_one_day(self) -> None:
        log = [_done(_at(1, 10, 7)), _done(_at(1, 10, 18)), _done(_at(1, 9))]
        self.assertEqual(progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), UTC), 2)

    def test_record_streak(self) -> None:
        log = [_done(_at(1, d)) for d in (1, 2, 3, 4, 8, 9, 20)]
        self.assertEqual(progress_service.record_streak_days(log, MOM, UTC), 4)
        self.assertEqual(progress_service.record_streak_days([], MOM, UTC), 0)

    def test_other_users_ignored(self) -> None:
        log = [_done(_at(1, 10), TEEN), _done(_at(1, 9))]
        self.assertEqual(progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), UTC), 0)

    def test_day_uses_reporting_timezone(self) -> None:
        plus_ten = datetime.timezone(datetime.timedelta(hours=10))
        # 20:00 UTC on the 9th is the 10th at UTC+10
        log = [_done(datetime.datetime(2024, 1, 9, 20, tzinfo=UTC))]
        self.assertEqual(
            progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), plus_ten), 1
        )
        self.assertEqual(progress_service.current_streak_days(log, MOM, datetime.date(2024, 1, 10), UTC), 0)


class HistoryTestCase(unittest.TestCase):
    def test_weight_history(self) -> None:
        squat = LoggedExercise(
            exercise_name="Goblet Squat",
            sets=[LoggedSet(reps="10", weight=20.0), LoggedSet(reps="10", weight=None)],
        )
        row = LoggedExercise(exercise_name="Dumbbell Row", sets=[LoggedSet(reps="10", weight=15.0)])
        log = [
            _done(_at(1, 1), logged_exercises=[squat, row]),
            _done(_at(1, 5), logged_exercises=[
                LoggedExercise(exercise_name="Goblet Squat", sets=[LoggedSet(reps="8", weight=25.0)] * 2)
            ]),
            _done(_at(1, 6), TEEN, logged_exercises=[squat]),
        ]
        history = progress_service.weight_history(log, MOM, "Goblet Squat", UTC)
        self.assertEqual([w for _, w in history], [25.0, 25.0, 20.0])
        stamps = [ts for ts, _ in history]
        self.assertEqual(stamps, sorted(stamps, reverse=True))

    def test_vertical_jump_history(self) -> None:
        log = [
            _done(_at(2, 1), TEEN, vertical_jump_inches=14.5),
            _done(_at(3, 1), TEEN, vertical_jump_inches=16.0),
            _done(_at(2, 15), TEEN),
            _done(_at(2, 20), MOM, vertical_jump_inches=9.0),
        ]
        history = progress_service.vertical_jump_history(log, TEEN, UTC)
        self.assertEqual(history, [(_at(3, 1), 16.0), (_at(2, 1), 14.5)])

    def test_empty_log(self) -> None:
        self.assertEqual(progress_service.total_count([], MOM), 0)
        self.assertEqual(progress_service.current_streak_days([], MOM, datetime.date(2024, 1, 1)), 0)
        self.assertEqual(progress_service.weight_history([], MOM, "Plank"), [])


class ProgressServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = "test_progress.db"
        if os.path.exists(self.db):
            os.remove(self.db)
        self.store = KeyValueRepository(self.db)
        # Wednesday
        self.now = _at(5, 15, 12)

    def tearDown(self) -> None:
        if os.path.exists(self.db):
            os.remove(self.db)

    def _service(self, week_start: str = "monday") -> ProgressService:
        return ProgressService(self.store, UTC, week_start, clock=lambda: self.now)

    def _seed(self, service: ProgressService) -> None:
        for day in (15, 14, 13, 12, 11, 1):
            service.log_workout(_done(_at(5, day)))
        service.log_workout(_done(_at(4, 30)))
        service.log_workout(_done(_at(5, 15), TEEN))

    def test_aggregates(self) -> None:
        service = self._service()
        self._seed(service)
        self.assertEqual(service.total_workouts_count(MOM), 7)
        self.assertEqual(service.workouts_this_week(MOM), 3)
        self.assertEqual(service.workouts_this_month(MOM), 6)
        self.assertEqual(service.current_streak_days(MOM), 5)
        self.assertEqual(service.record_streak_days(MOM), 5)
        self.assertEqual(service.total_workouts_count(TEEN), 1)

    def test_sunday_week_start(self) -> None:
        service = self._service("sunday")
        self._seed(service)
        self.assertEqual(service.start_of_week(), _at(5, 12, 0))
        self.assertEqual(service.workouts_this_week(MOM), 4)

    def test_bad_week_start(self) -> None:
        with self.assertRaises(ValueError):
            ProgressService(week_start="friday")

    def test_naive_timestamp_is_local(self) -> None:
        service = self._service()
        service.log_workout(_done(datetime.datetime(2024, 5, 15, 1)))
        self.assertEqual(service.current_streak_days(MOM), 1)
        self.assertEqual(service.workouts_this_week(MOM), 1)

    def test_completed_for_user_newest_first(self) -> None:
        service = self._service()
        self._seed(service)
        dates = [cw.completed_at for cw in service.completed_for_user(MOM)]
        self.assertEqual(dates, sorted(dates, reverse=True))
        self.assertEqual(len(dates), 7)

    def test_log_persists(self) -> None:
        service = self._service()
        self._seed(service)
        reloaded = self._service()
        self.assertEqual(len(reloaded.completed_workouts), 8)
        self.assertEqual(reloaded.current_streak_days(MOM), 5)

    def test_unreadable_records_skipped(self) -> None:
        good = _done(_at(5, 15)).model_dump(mode="json")
        self.store.save(COMPLETED_WORKOUTS_KEY, [good, {"user_id": "nobody"}])
        service = self._service()
        self.assertEqual(len(service.completed_workouts), 1)

    def test_unknown_user_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _done(_at(5, 15), "not-a-profile")


class TestDefaultTimezone:
    def test_days_follow_local_zone(self, monkeypatch):
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: "America/New_York")
        service = ProgressService(clock=lambda: datetime.datetime(2024, 1, 9, 21, 30))
        assert str(service.tz) == "America/New_York"
        # 21:00 on the 9th in New York
        service.log_workout(_done(datetime.datetime(2024, 1, 10, 2, tzinfo=UTC)))
        assert service.today() == datetime.date(2024, 1, 9)
        assert service.current_streak_days(MOM) == 1
        assert service.workouts_this_month(MOM) == 1

    def test_window_start_in_local_zone(self, monkeypatch):
        monkeypatch.setattr(tzlocal, "get_localzone_name", lambda: "America/New_York")
        # Thursday 1 Feb, 20:00 in New York
        service = ProgressService(clock=lambda: datetime.datetime(2024, 2, 1, 20))
        # 23:30 on 31 Jan in New York belongs to January
        service.log_workout(_done(datetime.datetime(2024, 2, 1, 4, 30, tzinfo=UTC)))
        assert service.workouts_this_month(MOM) == 0
        assert service.workouts_this_week(MOM) == 1


if __name__ == "__main__":
    unittest.main()
