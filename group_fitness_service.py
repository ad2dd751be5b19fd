from __future__ import annotations
import datetime
import logging
from enum import Enum
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from algorithms import MathTools
from db import KeyValueRepository
from exercise_details import detail_for
from models import PROFILE_IDS, new_id

logger = logging.getLogger(__name__)

CLASS_LOGS_KEY = "homestrength.group_class_logs"
CUSTOM_ROUTINES_KEY = "homestrength.group_custom_routines"


class GroupClassFormat(str, Enum):
    FULL_BODY = "Full-body"
    UPPER_BODY = "Upper body focus"
    LOWER_BODY = "Lower body (pelvic floor safe)"
    CORE_REBUILDING = "Core rebuilding (postpartum-friendly)"
    CARDIO_HIIT = "Cardio / high-intensity"
    LOW_IMPACT = "Low-impact / gentle (postpartum)"


class GroupFitnessExercise(BaseModel):
    """One class exercise with an option for each level."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    low_key_option: str
    intermediate_option: str
    pro_option: str
    duration_seconds: int = 30
    rest_seconds: int = 15
    postpartum_safe: bool = False
    form_notes: Optional[str] = None
    motivational_cues: list[str] = Field(default_factory=list)
    steps: list[str] = Field(default_factory=list)
    summary: Optional[str] = None
    tips: list[str] = Field(default_factory=list)


class GroupFitnessSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    duration_minutes: int
    exercises: list[GroupFitnessExercise] = Field(default_factory=list)
    bpm_suggested: Optional[int] = None
    instructor_cues: list[str] = Field(default_factory=list)


class GroupFitnessRoutine(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    name: str
    format: GroupClassFormat
    estimated_minutes: int
    warm_up: GroupFitnessSection
    main_sections: list[GroupFitnessSection]
    cool_down: GroupFitnessSection
    space_requirements: str
    general_notes: Optional[str] = None
    scaling_notes: Optional[str] = None


class GroupClassLog(BaseModel):
    """A class the instructor led."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_id)
    user_id: str
    routine_id: str
    routine_name: str
    class_format: GroupClassFormat
    date: datetime.datetime = Field(default_factory=datetime.datetime.now)
    participant_count: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    duration_minutes: Optional[int] = None

    @field_validator("user_id")
    @classmethod
    def _known_profile(cls, value: str) -> str:
        if value not in PROFILE_IDS:
            raise ValueError(f"unknown profile id: {value}")
        return value


class ScaledExercise(NamedTuple):
    exercise: GroupFitnessExercise
    work_seconds: int
    rest_seconds: int


class ScaledSection(NamedTuple):
    name: str
    duration_minutes: int
    exercises: list[ScaledExercise]
    bpm_suggested: Optional[int]
    instructor_cues: list[str]


class ScaledRoutine(NamedTuple):
    warm_up: ScaledSection
    main_sections: list[ScaledSection]
    cool_down: ScaledSection
    display_minutes: int


def scale_routine(routine: GroupFitnessRoutine, target_minutes: int) -> ScaledRoutine:
    """Scale section and interval lengths proportionally to ``target_minutes``."""
    base = routine.estimated_minutes
    scale = target_minutes / base if base > 0 else 1.0

    def scale_section(section: GroupFitnessSection) -> ScaledSection:
        return ScaledSection(
            name=section.name,
            duration_minutes=MathTools.round_minutes(section.duration_minutes * scale),
            exercises=[
                ScaledExercise(
                    exercise=ex,
                    work_seconds=MathTools.round_interval_seconds(ex.duration_seconds * scale),
                    rest_seconds=MathTools.round_interval_seconds(ex.rest_seconds * scale),
                )
                for ex in section.exercises
            ],
            bpm_suggested=section.bpm_suggested,
            instructor_cues=list(section.instructor_cues),
        )

    return ScaledRoutine(
        warm_up=scale_section(routine.warm_up),
        main_sections=[scale_section(s) for s in routine.main_sections],
        cool_down=scale_section(routine.cool_down),
        display_minutes=target_minutes,
    )


def exercise_steps(exercise: GroupFitnessExercise) -> list[str]:
    if exercise.steps:
        return list(exercise.steps)
    detail = detail_for(exercise.name)
    return list(detail.steps) if detail else []


def exercise_summary(exercise: GroupFitnessExercise) -> Optional[str]:
    if exercise.summary:
        return exercise.summary
    detail = detail_for(exercise.name)
    return detail.summary if detail else None


def exercise_tips(exercise: GroupFitnessExercise) -> list[str]:
    if exercise.tips:
        return list(exercise.tips)
    detail = detail_for(exercise.name)
    return list(detail.tips) if detail else []


def _full_body_mix() -> GroupFitnessRoutine:
    return GroupFitnessRoutine(
        name="Full-Body Mix (35 min)",
        format=GroupClassFormat.FULL_BODY,
        estimated_minutes=35,
        warm_up=GroupFitnessSection(
            name="Warm-up",
            duration_minutes=5,
            bpm_suggested=100,
            instructor_cues=[
                "2 minutes: light march in place, arm circles.",
                "2 minutes: dynamic stretches—leg swings, torso twists.",
                "1 minute: deep breaths and shoulder rolls.",
            ],
        ),
        main_sections=[
            GroupFitnessSection(
                name="Lower body",
                duration_minutes=10,
                bpm_suggested=120,
                exercises=[
                    GroupFitnessExercise(
                        name="Squats",
                        low_key_option="Chair squat or small range; hold chair back if needed.",
                        intermediate_option="Bodyweight squat, full range.",
                        pro_option="Jump squat or pulse at bottom.",
                        duration_seconds=45,
                        rest_seconds=15,
                        postpartum_safe=True,
                        form_notes="Knees over toes, chest up.",
                        motivational_cues=["Breathe out as you stand.", "Modify to chair squat anytime."],
                    ),
                    GroupFitnessExercise(
                        name="Glute bridge",
                        low_key_option="Feet flat, small range; focus on pelvic floor engagement.",
                        intermediate_option="Hold at top 2 sec, lower slowly.",
                        pro_option="Single-leg bridge or hold at top with pulse.",
                        duration_seconds=45,
                        rest_seconds=15,
                        postpartum_safe=True,
                        form_notes="Squeeze glutes at top; don’t over-arch lower back.",
                    ),
                ],
                instructor_cues=["Offer chair for anyone who needs support."],
            ),
            GroupFitnessSection(
                name="Upper body & core",
                duration_minutes=10,
                bpm_suggested=110,
                exercises=[
                    GroupFitnessExercise(
                        name="Push-ups",
                        low_key_option="Wall push-up or hands on chair; knees down if needed.",
                        intermediate_option="Knee or full push-up, controlled.",
                        pro_option="Full push-up, narrow hands or decline.",
                        duration_seconds=30,
                        rest_seconds=15,
                        form_notes="Core tight, don’t let hips sag.",
                    ),
                    GroupFitnessExercise(
                        name="Plank",
                        low_key_option="From knees; or 10 sec on / 10 sec rest.",
                        intermediate_option="Forearm or high plank 30 sec.",
                        pro_option="Full plank 45 sec or alternating shoulder tap.",
                        duration_seconds=30,
                        rest_seconds=15,
                        form_notes="Neutral spine; stop if you feel coning.",
                    ),
                ],
                instructor_cues=["15 seconds rest between exercises."],
            ),
        ],
        cool_down=GroupFitnessSection(
            name="Cool-down & stretch",
            duration_minutes=5,
            instructor_cues=[
                "2 minutes: slow walk or march.",
                "3 minutes: static stretches—quads, hamstrings, chest, shoulders.",
            ],
        ),
        space_requirements="Open floor space; enough room for everyone to extend arms and lie down.",
        general_notes="Mixed levels; cue all three options so everyone can choose.",
        scaling_notes="If energy is low, reduce reps or hold times. If group is strong, add pulses or longer holds.",
    )


def _core_rebuilding() -> GroupFitnessRoutine:
    return GroupFitnessRoutine(
        name="Core Rebuilding (Postpartum-Friendly) (25 min)",
        format=GroupClassFormat.CORE_REBUILDING,
        estimated_minutes=25,
        warm_up=GroupFitnessSection(
            name="Warm-up",
            duration_minutes=4,
            instructor_cues=["Breathing focus, gentle march, cat-cow, pelvic tilts."],
        ),
        main_sections=[
            GroupFitnessSection(
                name="Core (no coning)",
                duration_minutes=14,
                exercises=[
                    GroupFitnessExercise(
                        name="Dead bug",
                        low_key_option="Small range; one limb at a time.",
                        intermediate_option="Alternating arm/leg, controlled.",
                        pro_option="Full range, slow.",
                        duration_seconds=45,
                        rest_seconds=20,
                        postpartum_safe=True,
                        form_notes="Low back pressed to floor; if belly domes, reduce range.",
                    ),
                    GroupFitnessExercise(
                        name="Glute bridge with breath",
                        low_key_option="Lift on exhale, lower on inhale.",
                        intermediate_option="Hold at top, kegel-friendly cue.",
                        pro_option="Single-leg or march at top.",
                        duration_seconds=45,
                        rest_seconds=20,
                        postpartum_safe=True,
                    ),
                    GroupFitnessExercise(
                        name="Bird dog",
                        low_key_option="From tabletop; extend one limb at a time, short hold.",
                        intermediate_option="Alternate, 3 sec hold.",
                        pro_option="Add pulse or longer hold.",
                        duration_seconds=40,
                        rest_seconds=20,
                        postpartum_safe=True,
                        form_notes="Keep spine neutral; no sagging.",
                    ),
                ],
                instructor_cues=["Focus on breathing and control over intensity."],
            ),
        ],
        cool_down=GroupFitnessSection(
            name="Stretch",
            duration_minutes=5,
            instructor_cues=["Child’s pose, hip flexor stretch, breathing."],
        ),
        space_requirements="Enough floor space for everyone to lie on back and all fours.",
        general_notes="Pelvic floor and core rebuilding focus. Avoid sit-ups and heavy planks.",
        scaling_notes="If anyone reports pressure or coning, offer tabletop or supine only options.",
    )


LIBRARY_ROUTINES: tuple[GroupFitnessRoutine, ...] = (_full_body_mix(), _core_rebuilding())


class GroupFitnessService:
    """Class routines and the log of classes led."""

    def __init__(self, store: KeyValueRepository | None = None) -> None:
        self.store = store
        self.class_logs: list[GroupClassLog] = []
        self.custom_routines: list[GroupFitnessRoutine] = []
        self._load()

    @property
    def all_routines(self) -> list[GroupFitnessRoutine]:
        return list(LIBRARY_ROUTINES) + self.custom_routines

    def _load(self) -> None:
        if self.store is None:
            return
        for item in self.store.load(CLASS_LOGS_KEY) or []:
            try:
                self.class_logs.append(GroupClassLog.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unreadable class log: %s", e)
        for item in self.store.load(CUSTOM_ROUTINES_KEY) or []:
            try:
                self.custom_routines.append(GroupFitnessRoutine.model_validate(item))
            except ValidationError as e:
                logger.warning("Skipping unreadable routine: %s", e)

    def _save(self) -> None:
        if self.store is None:
            return
        self.store.save(CLASS_LOGS_KEY, [log.model_dump(mode="json") for log in self.class_logs])
        self.store.save(
            CUSTOM_ROUTINES_KEY, [r.model_dump(mode="json") for r in self.custom_routines]
        )

    def routines(self, class_format: Optional[GroupClassFormat] = None) -> list[GroupFitnessRoutine]:
        if class_format is None:
            return self.all_routines
        return [r for r in self.all_routines if r.format == class_format]

    def log_class(self, log: GroupClassLog) -> None:
        self.class_logs.append(log)
        self.class_logs.sort(key=lambda entry: entry.date, reverse=True)
        self._save()

    def logs_for_user(self, user_id: str) -> list[GroupClassLog]:
        return sorted(
            (entry for entry in self.class_logs if entry.user_id == user_id),
            key=lambda entry: entry.date,
            reverse=True,
        )

    def add_custom_routine(self, routine: GroupFitnessRoutine) -> None:
        self.custom_routines.append(routine)
        self._save()

    def update_custom_routine(self, routine: GroupFitnessRoutine) -> None:
        for i, existing in enumerate(self.custom_routines):
            if existing.id == routine.id:
                self.custom_routines[i] = routine
                self._save()
                return

    def delete_custom_routine(self, routine_id: str) -> None:
        self.custom_routines = [r for r in self.custom_routines if r.id != routine_id]
        self._save()

    def duplicate_routine(self, routine: GroupFitnessRoutine) -> GroupFitnessRoutine:
        """Copy ``routine`` with fresh ids and keep it as a custom routine."""

        def fresh(section: GroupFitnessSection) -> GroupFitnessSection:
            return section.model_copy(
                update={
                    "id": new_id(),
                    "exercises": [ex.model_copy(update={"id": new_id()}) for ex in section.exercises],
                }
            )

        copy = routine.model_copy(
            update={
                "id": new_id(),
                "name": routine.name + " (Copy)",
                "warm_up": fresh(routine.warm_up),
                "main_sections": [fresh(s) for s in routine.main_sections],
                "cool_down": fresh(routine.cool_down),
            }
        )
        self.add_custom_routine(copy)
        return copy
