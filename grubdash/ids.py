"""
Identifier allocation and comparison.
"""
import math
import uuid


def next_id() -> str:
    """Fresh 128-bit random id as 32 hex chars."""
    return uuid.uuid4().hex


def _as_number(value) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


def loosely_equal(a, b) -> bool:
    """
    Coercing equality: same-type values compare directly, a number and a string
    compare numerically ("1" matches 1, "01" matches 1).
    """
    if type(a) is type(b):
        return a == b
    if a is None or b is None:
        return False
    left, right = _as_number(a), _as_number(b)
    if left is None or right is None:
        return str(a) == str(b)
    return left == right
