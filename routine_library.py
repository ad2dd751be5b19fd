"""Built-in routines for each profile.

Ids are derived from profile and name so logs can keep referring to a routine
across restarts.
"""
import uuid

from models import Equipment, ExerciseRecord, MuscleGroup, ProfileType, Workout

_NAMESPACE = uuid.UUID("6f1c2a52-5d0e-4a57-9a39-3c1e0b0c7a10")

DB = Equipment.DUMBBELLS
RB = Equipment.RESISTANCE_BANDS
HG = Equipment.HOME_GYM
BW = Equipment.BODYWEIGHT


def _ex(name, equipment, sets, reps, instructions=None, rest_seconds=60):
    return ExerciseRecord(
        name=name,
        equipment=equipment,
        instructions=instructions,
        sets=sets,
        reps=reps,
        rest_seconds=rest_seconds,
    )


def _workout(profile, name, summary, minutes, exercises, focus=None):
    return Workout(
        id=str(uuid.uuid5(_NAMESPACE, f"{profile.value}:{name}")),
        name=name,
        summary=summary,
        exercises=exercises,
        estimated_minutes=minutes,
        profile_type=profile,
        primary_focus=focus,
    )


def mom_workouts() -> list[Workout]:
    p = ProfileType.MOM
    return [
        _workout(p, "Full Body A", "Dumbbells + bands. Great for building a base.", 35, [
            _ex("Goblet Squat", DB, 3, "10", "Hold one dumbbell at chest. Squat down, keep chest up."),
            _ex("Dumbbell Row", DB, 3, "10 each", "Support on bench or chair. Row to hip."),
            _ex("Dumbbell Floor Press", DB, 3, "10", "On back, press dumbbells up from floor."),
            _ex("Band Pull-Apart", RB, 3, "15", "Hold band in front, pull apart squeezing shoulder blades."),
            _ex("Dumbbell Shoulder Press", DB, 3, "10"),
            _ex("Glute Bridge", BW, 3, "12", "Feet flat, lift hips. Optional: band above knees."),
        ], MuscleGroup.FULL_BODY),
        _workout(p, "Upper Body", "Dumbbells, bands, and home gym.", 35, [
            _ex("Chest Press", HG, 3, "10"),
            _ex("Dumbbell Row", DB, 3, "10 each"),
            _ex("Dumbbell Shoulder Press", DB, 3, "10"),
            _ex("Band Chest Stretch / Push", RB, 2, "12"),
            _ex("Bicep Curl", DB, 3, "10"),
            _ex("Tricep Extension", DB, 3, "10"),
        ], MuscleGroup.UPPER_BODY),
        _workout(p, "Lower Body", "Legs with home gym, dumbbells, and bands.", 40, [
            _ex("Leg Press", HG, 3, "10–12"),
            _ex("Goblet Squat", DB, 3, "10"),
            _ex("Dumbbell Lunge", DB, 3, "8 each", "Alternate legs."),
            _ex("Romanian Deadlift", DB, 3, "10"),
            _ex("Band Glute Bridge", RB, 3, "12"),
            _ex("Calf Raises", BW, 3, "15"),
        ], MuscleGroup.LEGS),
        _workout(p, "Cardio", "Treadmill and exercise bike. Ease in, then push.", 45, [
            _ex("Treadmill Walk/Jog", Equipment.TREADMILL, 1, "20–25 min", "5 min warm-up walk, then 15–20 min jog or brisk walk."),
            _ex("Exercise Bike", Equipment.EXERCISE_BIKE, 1, "15–20 min", "Steady pace 15–20 min, or intervals."),
        ], MuscleGroup.CARDIO),
        _workout(p, "Bodyweight Only", "No equipment needed. Strength and core at home.", 25, [
            _ex("Glute Bridge", BW, 3, "12", "Feet flat, lift hips."),
            _ex("Plank", BW, 3, "30 sec"),
            _ex("Calf Raises", BW, 3, "15"),
            _ex("Squats", BW, 3, "12", "Bodyweight squats, chest up."),
            _ex("Push-ups (or knee push-ups)", BW, 3, "8–10", "Hands under shoulders, lower and push back up."),
        ], MuscleGroup.FULL_BODY),
        _workout(p, "Core", "Abs and stability. Planks and anti-rotation.", 22, [
            _ex("Plank", BW, 3, "30 sec"),
            _ex("Glute Bridge", BW, 3, "12", "Feet flat, lift hips. Engages core."),
            _ex("Dead Bug", BW, 3, "8 each side", "On back, extend opposite arm and leg. Keep low back pressed down."),
            _ex("Bird Dog", BW, 3, "8 each side", "On all fours, extend one arm and opposite leg. Hold 2 sec."),
        ], MuscleGroup.CORE),
    ]


def daughter_workouts() -> list[Workout]:
    p = ProfileType.DAUGHTER_MS
    return [
        _workout(p, "Jump & Leg Power", "Build vertical jump and explosive legs for serving and spiking.", 25, [
            _ex("Jump Squats", BW, 3, "8", "Squat down then jump up. Land softly.", 45),
            _ex("Box Step-Ups (or stairs)", BW, 3, "10 each", "Step up and down, drive through the standing leg.", 45),
            _ex("Lateral Bounds", BW, 3, "8 each", "Jump side to side, land on one foot.", 45),
            _ex("Calf Raises", BW, 3, "15", "Rise onto toes; control the way down.", 30),
            _ex("High Knees", BW, 3, "20 sec", "Run in place, drive knees up quickly.", 30),
        ]),
        _workout(p, "Arm & Shoulder for Serving", "Shoulder stability and arm strength for jump serves and overhead work.", 20, [
            _ex("Band Pull-Apart", RB, 3, "15", "Hold band in front, pull apart. Good for shoulder health.", 45),
            _ex("Dumbbell Shoulder Press", DB, 3, "10", "Light weight. Press overhead with control.", 45),
            _ex("Tricep Dips (chair)", BW, 3, "8", "Hands on chair, lower and push back up.", 45),
            _ex("Arm Circles", BW, 2, "30 sec each", "Small then large circles forward and back.", 20),
        ]),
        _workout(p, "Volleyball Agility & Conditioning", "Quick feet and conditioning for matches.", 25, [
            _ex("High Knees", BW, 3, "25 sec", "Fast feet, drive knees up.", 30),
            _ex("Lateral Shuffles", BW, 3, "20 sec", "Shuffle side to side low and quick.", 30),
            _ex("Jump Squats", BW, 3, "8", rest_seconds=45),
            _ex("Plank", BW, 3, "20 sec", rest_seconds=30),
            _ex("Cool-down Jog in Place", BW, 1, "2 min", "Easy pace 2 min."),
        ]),
    ]


def kid7_workouts() -> list[Workout]:
    p = ProfileType.CHILD7
    return [
        _workout(p, "Animal Moves", "Jump like a frog, crawl like a bear, and more!", 12, [
            _ex("Frog jumps", BW, 1, "8 jumps", "Pretend you're a frog! Squat down and jump forward. Land softly.", 20),
            _ex("Bear crawl", BW, 1, "30 sec", "On hands and feet, crawl like a bear. Keep your knees off the floor!", 20),
            _ex("Bunny hops", BW, 1, "20 sec", "Hop around the room like a bunny. Small, quick hops!", 15),
            _ex("Crab walk", BW, 1, "20 sec", "Sit, put hands behind you, and walk on hands and feet like a crab.", 20),
        ]),
        _workout(p, "Dance & Stretch", "Fun music moves and gentle stretching.", 8, [
            _ex("Free dance", BW, 1, "2 min", "Put on your favorite song and dance however you like!", 0),
            _ex("Reach for the sky", BW, 1, "30 sec", "Stand tall and reach your arms up high. Stretch side to side.", 10),
            _ex("Toe touches", BW, 1, "30 sec", "Gently bend and try to touch your toes. No bouncing!", 10),
            _ex("Butterfly stretch", BW, 1, "30 sec", "Sit, put feet together, and gently flap your knees like butterfly wings.", 0),
        ]),
        _workout(p, "Balance & Coordination", "Practice balance and have fun!", 10, [
            _ex("One-foot balance", BW, 1, "10 sec each foot", "Stand on one foot. Can you count to 10? Switch feet!", 10),
            _ex("Heel-to-toe walk", BW, 1, "20 sec", "Walk in a line, putting one foot right in front of the other.", 15),
            _ex("Star jumps", BW, 1, "8", "Jump and spread arms and legs out like a star. Land softly!", 15),
        ]),
    ]


def kid5_workouts() -> list[Workout]:
    p = ProfileType.CHILD5
    return [
        _workout(p, "Super Simple Moves", "Easy, fun moves. You've got this!", 8, [
            _ex("Bunny hops", BW, 1, "10 sec", "Hop like a bunny! Small hops are perfect.", 15),
            _ex("Reach up high", BW, 1, "10 sec", "Reach your arms up to the sky. Stretch!", 10),
            _ex("March in place", BW, 1, "20 sec", "March like a soldier. Lift those knees!", 15),
            _ex("Sit and stand", BW, 1, "5", "Sit on the floor, then stand up. Do it a few times!", 10),
        ]),
        _workout(p, "Animal Fun", "Move like animals. So much fun!", 6, [
            _ex("Frog jump", BW, 1, "5", "Squat and give a little jump. You're a frog!", 15),
            _ex("Bear walk", BW, 1, "15 sec", "Walk on hands and feet like a bear. Roar!", 15),
            _ex("Flap like a bird", BW, 1, "15 sec", "Flap your arms like wings. Fly around the room!", 0),
        ]),
        _workout(p, "Dance Party", "Dance to the music. You're awesome!", 5, [
            _ex("Dance!", BW, 1, "1 min", "Play a song and dance. Any way you want!", 0),
            _ex("Spin slowly", BW, 1, "3 spins", "Spin in a circle slowly. Stop if you feel dizzy!", 10),
            _ex("Clap and jump", BW, 1, "8", "Clap once, jump once. Clap, jump! Repeat.", 0),
        ]),
    ]


BUILT_IN_WORKOUTS: tuple[Workout, ...] = tuple(
    mom_workouts() + daughter_workouts() + kid7_workouts() + kid5_workouts()
)
