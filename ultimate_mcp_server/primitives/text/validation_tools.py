"""Validation tools - email and URL checks, palindromes and anagrams."""
from typing import Any
from urllib.parse import parse_qsl, urlsplit
import re

from ...tool_decorator import Tool
from . import CATEGORY

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")

# Schemes that must carry a host, with their default ports
_HOST_SCHEMES = {"http": 80, "https": 443, "ftp": 21, "ws": 80, "wss": 443}


@Tool(
    "validate_email",
    CATEGORY,
    "Validate email address format",
    {"type": "object", "properties": {"email": {"type": "string"}}, "required": ["email"]},
)
def validate_email(email: str) -> dict[str, Any]:
    valid = _EMAIL.fullmatch(email) is not None
    parts = email.split("@")
    return {
        "is_valid": valid,
        "email": email,
        "local_part": parts[0],
        "domain": parts[1] if len(parts) > 1 else "",
        "issues": [] if valid else ["Invalid email format"],
    }


@Tool(
    "validate_url",
    CATEGORY,
    "Validate and parse a URL",
    {"type": "object", "properties": {"url": {"type": "string"}}, "required": ["url"]},
)
def validate_url(url: str) -> dict[str, Any]:
    """Parse an absolute URL. Anything unparseable returns is_valid False with an "error"."""
    invalid = {"is_valid": False, "url": url, "error": "Invalid URL format"}
    try:
        parts = urlsplit(url.strip())
        port = parts.port
    except ValueError:
        return invalid

    scheme = parts.scheme.lower()
    if not _SCHEME.fullmatch(scheme) or (scheme in _HOST_SCHEMES and not parts.hostname):
        return invalid

    default_port = _HOST_SCHEMES.get(scheme)
    path = parts.path or ("/" if scheme in _HOST_SCHEMES else "")
    return {
        "is_valid": True,
        "protocol": f"{scheme}:",
        "hostname": parts.hostname or "",
        "port": str(port) if port is not None and port != default_port else "default",
        "pathname": path,
        "search": f"?{parts.query}" if parts.query else "",
        "hash": f"#{parts.fragment}" if parts.fragment else "",
        "params": dict(parse_qsl(parts.query, keep_blank_values=True)),
    }


@Tool(
    "palindrome_check",
    CATEGORY,
    "Check if text is a palindrome",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "ignore_spaces": {"type": "boolean", "default": True},
            "ignore_case": {"type": "boolean", "default": True},
        },
        "required": ["text"],
    },
)
def palindrome_check(text: str, ignore_spaces: bool = True, ignore_case: bool = True) -> dict[str, Any]:
    cleaned = text
    if ignore_spaces:
        cleaned = re.sub(r"\s", "", cleaned)
    if ignore_case:
        cleaned = cleaned.lower()
    cleaned = re.sub(r"[^a-z0-9]", "", cleaned, flags=re.IGNORECASE | re.ASCII)
    reversed_text = cleaned[::-1]
    return {"is_palindrome": cleaned == reversed_text, "cleaned_text": cleaned, "reversed": reversed_text}


@Tool(
    "anagram_checker",
    CATEGORY,
    "Check if two words are anagrams of each other",
    {
        "type": "object",
        "properties": {"word1": {"type": "string"}, "word2": {"type": "string"}},
        "required": ["word1", "word2"],
    },
)
def anagram_checker(word1: str, word2: str) -> dict[str, Any]:
    def letters(word: str) -> str:
        return "".join(sorted(re.sub(r"\s", "", word.lower())))

    return {
        "is_anagram": letters(word1) == letters(word2),
        "word1_sorted": letters(word1),
        "word2_sorted": letters(word2),
    }
