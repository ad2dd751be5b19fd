class WeightConverter:
    """Convert logged weights (stored in pounds) for display."""

    KG_TO_LB = 2.20462

    @staticmethod
    def kg_to_lb(kg: float) -> float:
        return round(kg * WeightConverter.KG_TO_LB, 2)

    @staticmethod
    def lb_to_kg(lb: float) -> float:
        return round(lb / WeightConverter.KG_TO_LB, 2)

    @classmethod
    def from_pounds(cls, lb: float, unit: str) -> float:
        if unit == "lb":
            return lb
        if unit == "kg":
            return cls.lb_to_kg(lb)
        raise ValueError(f"unsupported unit: {unit}")
