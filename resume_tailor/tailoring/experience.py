"""Loading experience records from YAML or JSON files."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError

from resume_tailor.errors import ValidationError
from resume_tailor.tailoring.models import ExperienceRecord


def load_experience(path: Path | str) -> ExperienceRecord:
    """Load an ExperienceRecord from a YAML or JSON file.

    The file is a mapping with optional ``company``, ``title`` (or
    ``job_title``), ``location``, ``period`` (or ``time``) and ``bullets``
    (a list, or a multi-line ``details`` block).

    Raises:
        FileNotFoundError: If the file does not exist.
        ValidationError: If the file is not a valid experience mapping.
    """
    experience_path = Path(path)
    if not experience_path.exists():
        raise FileNotFoundError(f"Experience file not found: {experience_path}")

    raw = experience_path.read_text(encoding="utf-8")
    if experience_path.suffix.lower() == ".json":
        data = _parse_json(raw, experience_path)
    else:
        data = _parse_yaml(raw, experience_path)

    try:
        return ExperienceRecord.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid experience file {experience_path}: {e}", e) from e


def _parse_json(raw: str, path: Path) -> dict:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON experience file: {path}", e) from e
    return _ensure_mapping(data, path)


def _parse_yaml(raw: str, path: Path) -> dict:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML experience file: {path}", e) from e
    return _ensure_mapping(data, path)


def _ensure_mapping(data: object, path: Path) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(f"Experience file must be a mapping/dict: {path}")
    return data
