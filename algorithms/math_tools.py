import math


class MathTools:
    """Small numeric helpers shared by the generator and class scaling."""

    WORK_SECONDS_PER_SET: int = 90

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        return max(min_value, min(value, max_value))

    @staticmethod
    def scale_floor(value: int, factor: float) -> int:
        """Return ``value * factor`` truncated toward zero."""
        return int(value * factor)

    @classmethod
    def set_minutes(cls, sets: int, rest_seconds: int) -> int:
        """Whole minutes spent on one exercise assuming fixed work per set."""
        return sets * (rest_seconds + cls.WORK_SECONDS_PER_SET) // 60

    @staticmethod
    def round_minutes(minutes: float) -> int:
        """Round to the nearest whole minute, never below one."""
        return max(1, int(math.floor(minutes + 0.5)))

    @staticmethod
    def round_interval_seconds(seconds: float) -> int:
        """Round an interval length to a multiple of five seconds.

        Values that round to zero or less become 5 and values up to 10 are
        kept at 5 or more so short intervals never disappear.
        """
        s = int(math.floor(seconds + 0.5))
        if s <= 0:
            return 5
        if s <= 10:
            return max(5, (s // 5) * 5)
        return (s // 5) * 5
