import io
import os
import sys
import unittest
from contextlib import redirect_stderr, redirect_stdout

import yaml

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
import cli
from db import KeyValueRepository
from models import ProfileType
from progress_service import ProgressService


class CLITestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = "test_cli.db"
        self.yaml = "test_cli.yaml"
        for path in (self.db, self.yaml):
            if os.path.exists(path):
                os.remove(path)
        with open(self.yaml, "w", encoding="utf-8") as f:
            yaml.safe_dump({"db_path": self.db, "timezone": "UTC", "weight_unit": "kg"}, f)

    def tearDown(self) -> None:
        for path in (self.db, self.yaml):
            if os.path.exists(path):
                os.remove(path)

    def run_cli(self, *args: str) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main(["--settings", self.yaml, *args])
        return out.getvalue()

    def test_parse_set(self) -> None:
        name, logged = cli.parse_set("Goblet Squat:10@20", "lb")
        self.assertEqual(name, "Goblet Squat")
        self.assertEqual((logged.reps, logged.weight), ("10", 20.0))
        _, kg = cli.parse_set("Row:8@10", "kg")
        self.assertAlmostEqual(kg.weight, 22.05)
        _, bodyweight = cli.parse_set("Plank:30 sec", "lb")
        self.assertIsNone(bodyweight.weight)
        with self.assertRaises(ValueError):
            cli.parse_set("no reps", "lb")

    def test_select_profile(self) -> None:
        out = self.run_cli("profiles", "--select", "Child5")
        self.assertIn("* Child5", out)
        self.assertIn("5-Year-Old", out)

    def test_generate_with_seed(self) -> None:
        out = self.run_cli(
            "generate", "--profile", "Mom", "--equipment", "Bodyweight",
            "--minutes", "20", "--focus", "Core", "--seed", "3",
        )
        self.assertIn("Generated 20 min Workout", out)
        self.assertIn("Generated · Medium · Core · Bodyweight", out)

    def test_kid_routine(self) -> None:
        out = self.run_cli("kid", "--profile", "Child7", "--duration", "short", "--energy", "Chill")
        self.assertIn("Fun Moves Short (5–8 min)", out)

    def test_log_then_stats_and_weights(self) -> None:
        self.run_cli("profiles", "--select", "Mom")
        self.run_cli("log", "--workout", "Full Body A", "--set", "Goblet Squat:10@10", "--minutes", "30")
        progress = ProgressService(KeyValueRepository(self.db))
        self.assertEqual(progress.total_workouts_count(ProfileType.MOM.stable_id), 1)

        stats = self.run_cli("stats")
        self.assertIn("Total workouts:  1", stats)
        self.assertIn("Current streak:  1 days", stats)

        weights = self.run_cli("weights", "--exercise", "Goblet Squat")
        self.assertIn("10.0 kg", weights)

    def test_jumps(self) -> None:
        self.run_cli("log", "--profile", "DaughterMS", "--workout", "Jump & Leg Power", "--jump", "15.5")
        self.assertIn("15.5 in", self.run_cli("jumps", "--profile", "DaughterMS"))

    def test_unknown_workout_exits(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli("log", "--profile", "Mom", "--workout", "Nope")

    def test_no_profile_exits(self) -> None:
        with self.assertRaises(SystemExit):
            self.run_cli("stats")

    def test_unknown_profile_named_in_error(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err), self.assertRaises(SystemExit):
            self.run_cli("stats", "--profile", "Bogus")
        self.assertIn("unknown profile: Bogus", err.getvalue())

    def test_legacy_profile_value_accepted(self) -> None:
        self.assertIn("Middle School Daughter", self.run_cli("stats", "--profile", "Daughter"))

    def test_classes_scaled_and_logged(self) -> None:
        out = self.run_cli("classes", "--format", "Full-body", "--minutes", "17")
        self.assertIn("Full-Body Mix (35 min) · Full-body · 17 min", out)
        self.assertIn("Squats: 20s on / 5s off", out)
        self.assertNotIn("Core Rebuilding", out)
        logged = self.run_cli("classes", "--log", "Full-Body Mix (35 min)", "--participants", "9")
        self.assertIn("Logged class", logged)


if __name__ == "__main__":
    unittest.main()
