"""
Load seed records from JSON files into plain dicts.
"""
import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """Seed file missing, unreadable, or holding invalid records."""


def load_records(path: str | Path, model: type[BaseModel]) -> list[dict]:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SeedError(f"Cannot read seed file {path}: {e}") from e
    if not isinstance(raw, list):
        raise SeedError(f"Seed file {path} must hold a JSON array")

    records = []
    for index, item in enumerate(raw):
        try:
            records.append(model.model_validate(item).model_dump(exclude_none=True))
        except ValidationError as e:
            raise SeedError(f"Invalid {model.__name__} at index {index} in {path}: {e}") from e
    logger.info("Loaded %d %s record(s) from %s", len(records), model.__name__, path)
    return records
