"""Data format tools - JSON inspection and JSON/CSV conversion."""
from typing import Any
import json
import re

from ...tool_decorator import Tool
from .._helpers import num_str
from . import CATEGORY

MAX_FORMATTED_LENGTH = 2000

_MISSING = object()


def _json_type(value: Any) -> str:
    if isinstance(value, list):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    # null reports as "object", like JavaScript's typeof
    return "object"


def _count_keys(value: Any) -> int:
    """Keys (or array indices) at every nesting level."""
    if isinstance(value, dict):
        return len(value) + sum(_count_keys(v) for v in value.values())
    if isinstance(value, list):
        return len(value) + sum(_count_keys(v) for v in value)
    return 0


def _extract(data: Any, path: str) -> Any:
    current = data
    for key in path.split("."):
        if isinstance(current, dict) and current:
            current = current.get(key, _MISSING)
        elif isinstance(current, list) and current and key.isdigit() and int(key) < len(current):
            current = current[int(key)]
        else:
            return _MISSING
    return current


@Tool(
    "parse_json",
    CATEGORY,
    "Parse, validate, and analyze JSON data",
    {
        "type": "object",
        "properties": {
            "json_string": {"type": "string"},
            "path": {"type": "string", "description": "Dot notation path to extract, e.g. user.name"},
        },
        "required": ["json_string"],
    },
)
def parse_json(json_string: str, path: str | None = None) -> dict[str, Any]:
    """Validate JSON and describe it.

    ``extracted_value`` is only present when ``path`` is given and resolves.
    Invalid JSON is reported as ``{"valid": false, "error": ...}``.
    """
    try:
        data = json.loads(json_string)
    except json.JSONDecodeError as e:
        return {"valid": False, "error": str(e)}

    if isinstance(data, dict):
        top_level_keys = list(data)
    elif isinstance(data, list):
        top_level_keys = [str(i) for i in range(len(data))]
    else:
        top_level_keys = []

    result = {
        "valid": True,
        "root_type": _json_type(data),
        "total_keys": _count_keys(data),
        "top_level_keys": top_level_keys,
    }
    if path:
        extracted = _extract(data, path)
        if extracted is not _MISSING:
            result["extracted_value"] = extracted
    result["formatted"] = json.dumps(data, indent=2, ensure_ascii=False)[:MAX_FORMATTED_LENGTH]
    return result


def _csv_cell(value: Any, delimiter: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return f'"{value}"' if delimiter in value else value
    if isinstance(value, (bool, int, float)):
        return num_str(value)
    return json.dumps(value, ensure_ascii=False)


@Tool(
    "json_to_csv",
    CATEGORY,
    "Convert JSON array to CSV format",
    {
        "type": "object",
        "properties": {
            "json_array": {"type": "string", "description": "JSON array string"},
            "delimiter": {"type": "string", "default": ","},
        },
        "required": ["json_array"],
    },
)
def json_to_csv(json_array: str, delimiter: str = ",") -> dict[str, Any]:
    """Columns are the union of all object keys, in first-seen order.

    Bad JSON or a non-array root is returned as an "error" field.
    """
    try:
        data = json.loads(json_array)
    except json.JSONDecodeError as e:
        return {"error": str(e)}
    if not isinstance(data, list):
        return {"error": "Input must be a JSON array"}

    headers = list(dict.fromkeys(key for row in data if isinstance(row, dict) for key in row))
    rows = [
        delimiter.join(
            _csv_cell(row.get(h) if isinstance(row, dict) else None, delimiter) for h in headers
        )
        for row in data
    ]
    csv = "\n".join([delimiter.join(headers), *rows])
    return {"csv": csv, "rows": len(data), "columns": len(headers), "headers": headers}


def _unquote(cell: str) -> str:
    return re.sub(r'^"|"$', "", cell.strip())


@Tool(
    "csv_to_json",
    CATEGORY,
    "Convert CSV to JSON array",
    {
        "type": "object",
        "properties": {
            "csv": {"type": "string"},
            "delimiter": {"type": "string", "default": ","},
        },
        "required": ["csv"],
    },
)
def csv_to_json(csv: str, delimiter: str = ",") -> dict[str, Any]:
    """Naive split on the delimiter; quoted delimiters are not supported. Missing cells become ""."""
    lines = csv.strip().split("\n")
    headers = [_unquote(h) for h in lines[0].split(delimiter)]
    data = []
    for line in lines[1:]:
        values = [_unquote(v) for v in line.split(delimiter)]
        data.append({h: values[i] if i < len(values) else "" for i, h in enumerate(headers)})
    return {
        "json": json.dumps(data, indent=2, ensure_ascii=False),
        "rows": len(data),
        "columns": len(headers),
        "headers": headers,
    }
