from geometrykernel.config import PRECISION


def nearly_equal(value_a: float, value_b: float, epsilon: float = PRECISION) -> bool:
    """Compare two scalars with a tolerance relative to the larger magnitude."""
    return abs(value_a - value_b) <= epsilon * max(abs(value_a), abs(value_b))

def clamp(value: float, low: float, high: float) -> float:
    """Restrict value to the closed interval [low, high]."""
    return max(low, min(high, value))
