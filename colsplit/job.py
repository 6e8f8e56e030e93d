"""Split job files: one separate() call described in YAML.

Example job file:

```yaml
column: address
into: [street, number]
sep: "\\s+(?=\\d)"
extra: merge
fill: right
remove: true
convert: false
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator

from colsplit.config import DEFAULT_SEPARATOR
from colsplit.errors import JobConfigError
from colsplit.models import ExtraPolicy, FillPolicy, resolve_separator

JOB_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["column", "into"],
    "additionalProperties": False,
    "properties": {
        "column": {"type": ["string", "integer"]},
        "into": {
            "type": "array",
            "minItems": 1,
            "items": {"type": ["string", "integer"]},
        },
        "sep": {
            "oneOf": [
                {"type": "string"},
                {"type": "integer"},
                {"type": "array", "items": {"type": "integer"}},
            ]
        },
        "extra": {"enum": [m.value for m in ExtraPolicy] + ["error"]},
        "fill": {"enum": [m.value for m in FillPolicy]},
        "remove": {"type": "boolean"},
        "convert": {"type": "boolean"},
    },
}


@dataclass
class SplitJob:
    """Arguments for one separate() call."""

    column: str | int
    into: list[str | int]
    sep: str | list[int] = DEFAULT_SEPARATOR
    extra: ExtraPolicy = ExtraPolicy.WARN
    fill: FillPolicy = FillPolicy.WARN
    remove: bool = True
    convert: bool = False
    source: str = field(default="<job>", compare=False)

    def separate_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for colsplit.separate."""
        return {
            "col": self.column,
            "into": list(self.into),
            "sep": self.sep,
            "remove": self.remove,
            "convert": self.convert,
            "extra": self.extra,
            "fill": self.fill,
        }


def parse_job(data: Any, source: str = "<job>") -> SplitJob:
    """Validate a loaded job document and build a SplitJob.

    Args:
        data: Parsed YAML document
        source: Name used in error messages

    Raises:
        JobConfigError: If the document doesn't match JOB_SCHEMA
    """
    validator = Draft7Validator(JOB_SCHEMA)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        first = errors[0]
        location = "/".join(str(p) for p in first.path) or "<root>"
        raise JobConfigError(source, f"{location}: {first.message}")

    sep = data.get("sep", DEFAULT_SEPARATOR)
    # Fail on a bad separator now rather than when the job runs
    resolve_separator(sep)

    return SplitJob(
        column=data["column"],
        into=list(data["into"]),
        sep=sep,
        extra=ExtraPolicy.parse(data.get("extra", ExtraPolicy.WARN.value)),
        fill=FillPolicy.parse(data.get("fill", FillPolicy.WARN.value)),
        remove=data.get("remove", True),
        convert=data.get("convert", False),
        source=source,
    )


def load_job(path: Path) -> SplitJob:
    """Load and validate a YAML job file.

    Raises:
        JobConfigError: If the file can't be read, parsed or validated
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise JobConfigError(str(path), str(e)) from e
    return parse_job(data, source=str(path))
