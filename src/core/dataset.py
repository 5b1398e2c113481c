"""Loader for the advocate roster.

The roster is read once at startup from a JSON seed file and shared read-only
for the life of the process.
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter

from src.core.schemas import Advocate

logger = logging.getLogger(__name__)

_ROSTER_ADAPTER = TypeAdapter(list[Advocate])


def load_advocates(path: str | Path) -> tuple[Advocate, ...]:
    """Load and validate the roster from a JSON array of camelCase records.

    Raises FileNotFoundError if the file is missing, ValueError if the document
    is not a JSON array, and pydantic.ValidationError for an invalid record.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Advocate data file not found: {path}"
        raise FileNotFoundError(msg)
    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, list):
        msg = f"Advocate data must be a JSON array: {path}"
        raise ValueError(msg)
    advocates = tuple(_ROSTER_ADAPTER.validate_python(raw))
    logger.info("Loaded %d advocates from %s", len(advocates), path)
    return advocates
