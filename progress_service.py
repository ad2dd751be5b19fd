"""Completed-workout log and the metrics derived from it.

The module-level functions are pure: they read a log snapshot and never
mutate it. :class:`ProgressService` owns the live log and is the only place
that appends to it.
"""
from __future__ import annotations
import datetime
import logging
from typing import Callable, Iterable, Optional, Sequence
from zoneinfo import ZoneInfo

import tzlocal
from pydantic import ValidationError

from db import KeyValueRepository
from models import CompletedWorkout

logger = logging.getLogger(__name__)

COMPLETED_WORKOUTS_KEY = "homestrength.completed_workouts"


def _aware(ts: datetime.datetime, tz: Optional[datetime.tzinfo]) -> datetime.datetime:
    """Naive timestamps are taken to be in the reporting timezone."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=tz) if tz is not None else ts.astimezone()
    return ts


def local_zone() -> datetime.tzinfo:
    return ZoneInfo(tzlocal.get_localzone_name())


def local_day(ts: datetime.datetime, tz: Optional[datetime.tzinfo] = None) -> datetime.date:
    if ts.tzinfo is None:
        return ts.date()
    # astimezone(None) converts to the system local zone
    return ts.astimezone(tz).date()


def for_user(log: Iterable[CompletedWorkout], user_id: str) -> list[CompletedWorkout]:
    return [cw for cw in log if cw.user_id == user_id]


def total_count(log: Iterable[CompletedWorkout], user_id: str) -> int:
    return len(for_user(log, user_id))


def count_since(
    log: Iterable[CompletedWorkout],
    user_id: str,
    window_start: datetime.datetime,
    tz: Optional[datetime.tzinfo] = None,
) -> int:
    start = _aware(window_start, tz)
    return sum(1 for cw in for_user(log, user_id) if _aware(cw.completed_at, tz) >= start)


def active_days(
    log: Iterable[CompletedWorkout],
    user_id: str,
    tz: Optional[datetime.tzinfo] = None,
) -> set[datetime.date]:
    return {local_day(cw.completed_at, tz) for cw in for_user(log, user_id)}


def current_streak_days(
    log: Iterable[CompletedWorkout],
    user_id: str,
    today: datetime.date,
    tz: Optional[datetime.tzinfo] = None,
) -> int:
    """Consecutive days with at least one workout, counting back from ``today``."""
    days = active_days(log, user_id, tz)
    streak = 0
    day = today
    while day in days:
        streak += 1
        day -= datetime.timedelta(days=1)
    return streak


def record_streak_days(
    log: Iterable[CompletedWorkout],
    user_id: str,
    tz: Optional[datetime.tzinfo] = None,
) -> int:
    """Longest run of consecutive active days the user has ever had."""
    dates = sorted(active_days(log, user_id, tz))
    if not dates:
        return 0
    record = 1
    current = 1
    for i in range(1, len(dates)):
        if (dates[i] - dates[i - 1]).days == 1:
            current += 1
        else:
            record = max(record, current)
            current = 1
    return max(record, current)


def _newest_first(
    points: list[tuple[datetime.datetime, float]],
    tz: Optional[datetime.tzinfo],
) -> list[tuple[datetime.datetime, float]]:
    return sorted(points, key=lambda p: _aware(p[0], tz), reverse=True)


def weight_history(
    log: Iterable[CompletedWorkout],
    user_id: str,
    exercise_name: str,
    tz: Optional[datetime.tzinfo] = None,
) -> list[tuple[datetime.datetime, float]]:
    """Every weighted set of ``exercise_name``, most recent first."""
    points: list[tuple[datetime.datetime, float]] = []
    for cw in for_user(log, user_id):
        for logged in cw.logged_exercises:
            if logged.exercise_name != exercise_name:
                continue
            for s in logged.sets:
                if s.weight is not None:
                    points.append((cw.completed_at, s.weight))
    return _newest_first(points, tz)


def vertical_jump_history(
    log: Iterable[CompletedWorkout],
    user_id: str,
    tz: Optional[datetime.tzinfo] = None,
) -> list[tuple[datetime.datetime, float]]:
    points = [
        (cw.completed_at, cw.vertical_jump_inches)
        for cw in for_user(log, user_id)
        if cw.vertical_jump_inches is not None
    ]
    return _newest_first(points, tz)


class ProgressService:
    """Persist completed workouts and provide metrics per user."""

    def __init__(
        self,
        store: KeyValueRepository | None = None,
        tz: datetime.tzinfo | None = None,
        week_start: str = "monday",
        clock: Callable[[], datetime.datetime] | None = None,
    ) -> None:
        if week_start not in ("monday", "sunday"):
            raise ValueError("week_start must be 'monday' or 'sunday'")
        self.store = store
        self.tz = tz if tz is not None else local_zone()
        self.week_start = week_start
        self._clock = clock or (lambda: datetime.datetime.now(self.tz))
        self._completed: list[CompletedWorkout] = []
        self._load()

    @property
    def completed_workouts(self) -> Sequence[CompletedWorkout]:
        return tuple(self._completed)

    def _load(self) -> None:
        if self.store is None:
            return
        raw = self.store.load(COMPLETED_WORKOUTS_KEY)
        if not raw:
            return
        for item in raw:
            try:
                self._completed.append(CompletedWorkout.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unreadable completed workout: %s", e)

    def _save(self) -> None:
        if self.store is None:
            return
        self.store.save(
            COMPLETED_WORKOUTS_KEY,
            [cw.model_dump(mode="json") for cw in self._completed],
        )

    def log_workout(self, completed: CompletedWorkout) -> None:
        self._completed.append(completed)
        self._save()
        logger.info("Logged %s for %s", completed.workout_name, completed.user_id)

    def now(self) -> datetime.datetime:
        return _aware(self._clock(), self.tz)

    def today(self) -> datetime.date:
        return local_day(self.now(), self.tz)

    def completed_for_user(self, user_id: str) -> list[CompletedWorkout]:
        return sorted(
            for_user(self._completed, user_id),
            key=lambda cw: _aware(cw.completed_at, self.tz),
            reverse=True,
        )

    def total_workouts_count(self, user_id: str) -> int:
        return total_count(self._completed, user_id)

    def start_of_week(self) -> datetime.datetime:
        today = self.today()
        if self.week_start == "sunday":
            offset = (today.weekday() + 1) % 7
        else:
            offset = today.weekday()
        start = today - datetime.timedelta(days=offset)
        return datetime.datetime.combine(start, datetime.time.min, tzinfo=self.now().tzinfo)

    def start_of_month(self) -> datetime.datetime:
        start = self.today().replace(day=1)
        return datetime.datetime.combine(start, datetime.time.min, tzinfo=self.now().tzinfo)

    def workouts_this_week(self, user_id: str) -> int:
        return count_since(self._completed, user_id, self.start_of_week(), self.tz)

    def workouts_this_month(self, user_id: str) -> int:
        return count_since(self._completed, user_id, self.start_of_month(), self.tz)

    def current_streak_days(self, user_id: str) -> int:
        return current_streak_days(self._completed, user_id, self.today(), self.tz)

    def record_streak_days(self, user_id: str) -> int:
        return record_streak_days(self._completed, user_id, self.tz)

    def weight_history(self, user_id: str, exercise_name: str) -> list[tuple[datetime.datetime, float]]:
        return weight_history(self._completed, user_id, exercise_name, self.tz)

    def vertical_jump_history(self, user_id: str) -> list[tuple[datetime.datetime, float]]:
        return vertical_jump_history(self._completed, user_id, self.tz)
