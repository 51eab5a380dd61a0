"""
Extract the `data` envelope from a JSON request body.
"""
import json
import math
from typing import Any

from fastapi import Request

from grubdash.errors import InvalidInput


def _reject_constant(token: str):
    raise InvalidInput("Request body must be valid JSON")


def _finite_float(token: str) -> float:
    # "1e999" parses to inf
    value = float(token)
    if not math.isfinite(value):
        raise InvalidInput("Request body must be valid JSON")
    return value


async def read_data(request: Request) -> dict[str, Any]:
    """
    Body's `data` object, or {} when the body is empty or has no `data` object.
    NaN and infinite numbers are rejected: responses cannot render them.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        body = json.loads(raw, parse_constant=_reject_constant, parse_float=_finite_float)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInput("Request body must be valid JSON") from e
    if not isinstance(body, dict):
        return {}
    data = body.get("data")
    return data if isinstance(data, dict) else {}
