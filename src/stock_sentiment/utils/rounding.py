import math

def round_half_up(value: float, decimals: int = 1) -> float:
    """
    Round after scaling, with ties going up: 0.15 -> 0.2, -0.05 -> -0.0.
    A result of zero keeps the sign of the input so -0.04 formats as "-0.0".
    """
    multiplier = 10 ** decimals
    rounded = math.floor(value * multiplier + 0.5) / multiplier
    if rounded == 0:
        return math.copysign(0.0, value)
    return rounded
