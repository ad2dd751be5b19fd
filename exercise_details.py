"""Instructor detail (steps, summary, tips) for group class exercises.

Routines name exercises loosely ("Squat (modified)", "Rest / walk"), so
:func:`detail_for` tries a fixed sequence of name normalizations and returns
the first hit.
"""
from __future__ import annotations
from typing import Callable, NamedTuple, Optional


class ExerciseDetail(NamedTuple):
    steps: tuple[str, ...]
    summary: Optional[str]
    tips: tuple[str, ...]
    image_placeholder_name: Optional[str] = None


DETAILS: dict[str, ExerciseDetail] = {
    "Squats": ExerciseDetail(
        (
            "Stand with feet hip- to shoulder-width apart; toes can point slightly out.",
            "Send hips back and bend knees to lower into a squat (aim for thighs at least parallel to the floor).",
            "Keep knees in line with toes; chest up, core braced.",
            "Drive through the whole foot to stand back up; squeeze glutes at the top.",
            "Repeat for the work interval. Offer chair squat or hold the back of a chair for balance if needed.",
        ),
        "Lower into a squat by hinging at the hips and bending the knees, then stand back up. "
        "Scale with chair squat; progress to jump squat or pulse at the bottom.",
        ("Cue “knees over toes” and “chest up.”", "Exhale as you stand.", "Modify to chair squat anytime."),
        "GobletSquat",
    ),
    "Glute bridge": ExerciseDetail(
        (
            "Lie on your back with knees bent, feet flat on the floor hip-width apart, arms by your sides.",
            "Press through the feet and squeeze the glutes to lift the hips toward the ceiling.",
            "Hold the top briefly without over-arching the lower back.",
            "Lower with control and repeat for the work interval.",
        ),
        "Lift the hips by driving through the feet and squeezing the glutes. "
        "Scale range or add single-leg for progression.",
        ("Squeeze glutes at top; avoid over-arching the lower back.", "Exhale as you lift."),
        "GluteBridge",
    ),
    "Push-ups": ExerciseDetail(
        (
            "Start in a high plank or from knees, wall or incline.",
            "Lower the chest toward the floor with elbows about 45° from the body; keep hips level.",
            "Push back up to the start position and repeat for the work interval.",
        ),
        "Lower chest toward the floor with control, then push back up. Scale to wall or chair; "
        "progress to full, decline, or narrow-hand push-ups.",
        ("Keep core tight; don’t let hips sag or pike.", "Scale to wall or chair anytime."),
    ),
    "Plank": ExerciseDetail(
        (
            "Start in a high or forearm plank; body in a straight line from head to heels.",
            "Engage the core and keep the hips level.",
            "Hold for the work interval (e.g. 15–45 seconds).",
            "Scale from knees or with shorter holds; progress with shoulder taps.",
        ),
        "Hold a high or forearm plank with a neutral spine and engaged core.",
        ("Neutral spine; stop if you feel coning or strain.", "Cue “squeeze belly to spine.”"),
        "Plank",
    ),
    "Calf raises": ExerciseDetail(
        (
            "Stand with feet hip-width apart; hold a wall or chair for balance if needed.",
            "Rise onto the balls of the feet, hold briefly, then lower with control.",
            "Repeat for the work interval.",
        ),
        "Rise onto the balls of the feet, hold briefly, then lower with control.",
        ("Control the way down to build strength.", "Pelvic floor safe."),
        "CalfRaises",
    ),
    "Leg lift (side)": ExerciseDetail(
        (
            "Stand on one leg (or sit for a gentler option); keep hips square and core engaged.",
            "Lift the other leg out to the side, leading with the heel.",
            "Lower with control and repeat, then switch legs if time.",
        ),
        "Lift one leg out to the side while keeping hips square.",
        ("Keep hips square; don’t lean into the standing leg.", "Use chair for balance if needed."),
    ),
    "Dead bug": ExerciseDetail(
        (
            "Lie on your back with arms toward the ceiling and knees bent at 90°.",
            "Press the low back gently into the floor and keep it there.",
            "Extend one arm overhead and the opposite leg toward the floor, then alternate.",
        ),
        "On your back, alternate extending opposite arm and leg while keeping the low back down.",
        ("Low back pressed to floor the whole time.", "If you see coning, make the move smaller."),
    ),
    "Bird dog": ExerciseDetail(
        (
            "Start on hands and knees; wrists under shoulders, knees under hips.",
            "Reach one arm forward and the opposite leg back, keeping the torso still.",
            "Hold for 2–3 seconds, return and switch sides.",
        ),
        "From tabletop, extend one arm and the opposite leg, hold briefly, then switch.",
        ("Keep spine neutral; avoid arching or rounding.", "Pelvic floor safe."),
    ),
    "Superman": ExerciseDetail(
        (
            "Lie face down with arms extended in front and legs straight.",
            "Lift the chest, arms, and legs off the floor (or arms only / legs only).",
            "Hold for 2–3 seconds, then lower with control.",
        ),
        "Lying face down, lift arms and legs off the floor and hold.",
        ("Keep the neck in line; don’t look up sharply.", "Great for lower back and glutes."),
    ),
    "Wall push-up": ExerciseDetail(
        (
            "Stand facing a wall; place hands on the wall at shoulder height.",
            "Walk the feet back until the body is at an angle.",
            "Bend the elbows to bring the chest toward the wall, then push back.",
        ),
        "Perform push-ups with hands on the wall. Adjust difficulty by hand height.",
        ("Hands high = easier; lower hands or step back = harder.", "Pelvic floor safe."),
    ),
    "March in place": ExerciseDetail(
        (
            "Stand tall; lift one knee toward hip height while the opposite arm swings.",
            "Lower the foot and alternate legs in a steady march.",
            "Keep the core engaged and march for the work interval.",
        ),
        "March in place, driving the knees up and swinging the arms.",
        ("Steady rhythm; breathe naturally.", "Add arm drive for more intensity."),
    ),
    "High knees": ExerciseDetail(
        (
            "Stand tall; drive one knee up toward hip height while hopping on the other foot.",
            "Switch legs quickly in a running-in-place motion.",
            "Pump the arms naturally; land softly.",
        ),
        "Run in place driving the knees up. Scale to a march.",
        ("Land softly; quick feet.", "Offer march as the low-impact option."),
    ),
    "Rest": ExerciseDetail(
        (
            "Use this block for active recovery: walk, light jog, or stand and breathe.",
            "Encourage participants to hydrate and prepare for the next exercise.",
        ),
        "Active recovery interval: walk, light jog, or rest.",
        ("Use to reset before the next round.",),
    ),
}

ALIASES: dict[str, str] = {
    "Glute bridge (hold)": "Glute bridge",
    "Glute bridge with breath": "Glute bridge",
    "Jump squat / squat": "Squats",
    "Squat (modified)": "Squats",
    "Speed squats": "Squats",
    "Superman (modified)": "Superman",
    "Standing leg lift (side)": "Leg lift (side)",
    "Rest / walk": "Rest",
    "High knees / march": "High knees",
    "Wall push-up or arm raises": "Wall push-up",
    "Mountain climbers / knee drive": "Plank",
}

MODIFIED_SUFFIX = " (modified)"


def _exact(key: str) -> str:
    return key


def _before_slash(key: str) -> str:
    return key.split("/", 1)[0].strip()


def _before_paren(key: str) -> str:
    return key.split("(", 1)[0].strip()


def _strip_modified(key: str) -> str:
    if key.endswith(MODIFIED_SUFFIX):
        return key[: -len(MODIFIED_SUFFIX)]
    return key


def _alias(key: str) -> str:
    return ALIASES.get(key, key)


NORMALIZERS: tuple[Callable[[str], str], ...] = (
    _exact,
    _before_slash,
    _before_paren,
    _strip_modified,
    _alias,
)


def detail_for(
    exercise_name: str, details: dict[str, ExerciseDetail] = DETAILS
) -> Optional[ExerciseDetail]:
    key = exercise_name.strip()
    for normalize in NORMALIZERS:
        candidate = normalize(key)
        if candidate in details:
            return details[candidate]
    return None
