"""JSON file I/O for the QB snapshot and quiz config."""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('nflquiz.utils')


def load_json(path: Path | str, schema: type[T] | None = None) -> Any | T:
    """
    Read a JSON file, validating it against `schema` when one is given.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the JSON is malformed
        ValueError: If schema validation fails
    """
    path = Path(path)
    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    with open(path, encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
            raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema is None:
        return data
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.error(f'Schema validation failed for {path}: {e}')
        raise ValueError(f'Schema validation failed for {path}:\n{e}') from e


def save_json(path: Path | str, data: Any) -> None:
    """Write `data` (a pydantic model or plain JSON value) with 2-space indent."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(data, BaseModel):
        data = data.model_dump()

    logger.debug(f'Saving JSON to: {path}')
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write('\n')


def validate_json_file(path: Path | str, schema: type[T]) -> tuple[T | None, str | None]:
    """
    Load and validate a JSON file without raising.

    Returns:
        (model, None) on success, (None, error_message) otherwise
    """
    try:
        return load_json(path, schema=schema), None
    except FileNotFoundError:
        return None, f'File not found: {path}'
    except json.JSONDecodeError as e:
        return None, f'Invalid JSON: {e.msg} at position {e.pos}'
    except ValueError as e:
        return None, str(e)
