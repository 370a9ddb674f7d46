"""JSON file helpers for pydantic models."""

import json
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('golfleague.utils')


def load_model(path: Path | str, schema: type[T]) -> T:
    """
    Read a JSON file and validate it into a schema instance.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file isn't valid JSON
        ValueError: If the content doesn't match the schema
    """
    path = Path(path)
    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    with open(path, encoding='utf-8') as f:
        data = json.load(f)

    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def save_model(path: Path | str, model: BaseModel) -> None:
    """Write a schema instance as indented UTF-8 JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(model.model_dump(), f, indent=2, ensure_ascii=False)
    logger.debug(f'Saved {type(model).__name__} to {path}')
