"""Text transformation tools - slugs, case conversion, find/replace, truncation, encodings."""
from typing import Any, Callable
from urllib.parse import quote, unquote
import base64
import re
import logging

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from . import CATEGORY

logger = logging.getLogger(__name__)

_HTML_ENCODE = {"&": "&amp;", "<": "&lt;", ">": "&gt;", '"': "&quot;", "'": "&#39;"}
_HTML_DECODE = {entity: char for char, entity in _HTML_ENCODE.items()}
_HTML_ENTITY = re.compile("|".join(re.escape(entity) for entity in _HTML_DECODE))

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"

CASE_TYPES = ("upper", "lower", "title", "camel", "snake", "kebab", "pascal", "sentence")
ENCODE_OPERATIONS = (
    "encode_base64",
    "decode_base64",
    "encode_uri",
    "decode_uri",
    "encode_html",
    "decode_html",
)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


@Tool(
    "text_to_slug",
    CATEGORY,
    "Convert text to URL-friendly slug",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "separator": {"type": "string", "default": "-"},
        },
        "required": ["text"],
    },
)
def text_to_slug(text: str, separator: str = "-") -> dict[str, Any]:
    slug = re.sub(r"[^\w\s-]", "", text.lower().strip(), flags=re.ASCII)
    slug = re.sub(r"[\s_-]+", lambda _: separator, slug)
    slug = re.sub(r"^-+|-+$", "", slug)
    return {"slug": slug}


@Tool(
    "text_case_converter",
    CATEGORY,
    "Convert text between cases: upper, lower, title, camel, snake, kebab, pascal",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "case_type": {"type": "string", "enum": list(CASE_TYPES)},
        },
        "required": ["text", "case_type"],
    },
)
def text_case_converter(text: str, case_type: str) -> dict[str, Any]:
    words = re.split(r"\s+", re.sub(r"[-_]", " ", text))
    conversions: dict[str, Callable[[], str]] = {
        "upper": text.upper,
        "lower": text.lower,
        "title": lambda: " ".join(_capitalize(w) for w in words),
        "camel": lambda: "".join(w.lower() if i == 0 else _capitalize(w) for i, w in enumerate(words)),
        "snake": lambda: "_".join(w.lower() for w in words),
        "kebab": lambda: "-".join(w.lower() for w in words),
        "pascal": lambda: "".join(_capitalize(w) for w in words),
        "sentence": lambda: _capitalize(text),
    }
    convert = conversions.get(case_type)
    if convert is None:
        raise HandlerError(
            f"Unknown case type: {case_type}",
            hint=f"Use one of: {', '.join(CASE_TYPES)}",
        )
    return {"result": convert(), "case_type": case_type}


@Tool(
    "find_replace",
    CATEGORY,
    "Find and replace text with optional regex support",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "find": {"type": "string"},
            "replace": {"type": "string"},
            "use_regex": {"type": "boolean", "default": False},
            "case_sensitive": {"type": "boolean", "default": True},
        },
        "required": ["text", "find", "replace"],
    },
)
def find_replace(
    text: str,
    find: str,
    replace: str,
    use_regex: bool = False,
    case_sensitive: bool = True,
) -> dict[str, Any]:
    """Replace every match. The replacement is always literal, even in regex mode.

    An invalid pattern raises re.error, reported to the client as a tool error.
    """
    pattern = find if use_regex else re.escape(find)
    flags = 0 if case_sensitive else re.IGNORECASE
    result, count = re.subn(pattern, lambda _: replace, text, flags=flags)
    return {"result": result, "replacements_made": count}


@Tool(
    "truncate_text",
    CATEGORY,
    "Truncate text to specified length with ellipsis",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "max_length": {"type": "number"},
            "ellipsis": {"type": "string", "default": "..."},
            "break_on_word": {"type": "boolean", "default": True},
        },
        "required": ["text", "max_length"],
    },
)
def truncate_text(
    text: str,
    max_length: int,
    ellipsis: str = "...",
    break_on_word: bool = True,
) -> dict[str, Any]:
    if len(text) <= max_length:
        return {"result": text, "truncated": False}

    truncated = text[: int(max_length) - len(ellipsis)]
    if break_on_word:
        # rfind() returning -1 drops the last character, same as a word cut
        truncated = truncated[: truncated.rfind(" ")]
    return {"result": truncated + ellipsis, "truncated": True, "original_length": len(text)}


def _decode_base64(text: str) -> str:
    padded = text.strip() + "=" * (-len(text.strip()) % 4)
    return base64.b64decode(padded).decode("utf-8", errors="replace")


@Tool(
    "text_encode_decode",
    CATEGORY,
    "Encode or decode text: base64, URI, HTML entities",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "operation": {"type": "string", "enum": list(ENCODE_OPERATIONS)},
        },
        "required": ["text", "operation"],
    },
)
def text_encode_decode(text: str, operation: str) -> dict[str, Any]:
    """Failures (bad base64, bad percent-encoding) come back as an "error" field."""
    operations: dict[str, Callable[[], str]] = {
        "encode_base64": lambda: base64.b64encode(text.encode("utf-8")).decode("ascii"),
        "decode_base64": lambda: _decode_base64(text),
        "encode_uri": lambda: quote(text, safe=_URI_SAFE),
        "decode_uri": lambda: unquote(text, errors="strict"),
        "encode_html": lambda: "".join(_HTML_ENCODE.get(ch, ch) for ch in text),
        "decode_html": lambda: _HTML_ENTITY.sub(lambda m: _HTML_DECODE[m.group(0)], text),
    }
    run = operations.get(operation)
    if run is None:
        return {"error": f"Unknown operation: {operation}", "operation": operation}
    try:
        return {"result": run(), "operation": operation}
    except ValueError as e:
        logger.debug("text_encode_decode %s failed: %s", operation, e)
        return {"error": str(e), "operation": operation}
