"""Extraction tools - pull emails, URLs and phone numbers out of free text."""
from typing import Any
import re

from ...tool_decorator import Tool
from . import CATEGORY

_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_URL = re.compile(r"https?://[^\s<>\"{}|\\^`\[\]]+")
_PHONE = re.compile(r"(\+?1?\s?)?(\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4})", re.ASCII)

_TEXT_ONLY_SCHEMA = {
    "type": "object",
    "properties": {"text": {"type": "string"}},
    "required": ["text"],
}


def _unique(items: list[str]) -> list[str]:
    """De-duplicate, keeping first-seen order."""
    return list(dict.fromkeys(items))


@Tool("extract_emails", CATEGORY, "Extract all email addresses from text", _TEXT_ONLY_SCHEMA)
def extract_emails(text: str) -> dict[str, Any]:
    emails = _unique(_EMAIL.findall(text))
    return {"emails": emails, "count": len(emails)}


@Tool("extract_urls", CATEGORY, "Extract all URLs from text", _TEXT_ONLY_SCHEMA)
def extract_urls(text: str) -> dict[str, Any]:
    urls = _unique(_URL.findall(text))
    return {"urls": urls, "count": len(urls)}


@Tool("extract_phone_numbers", CATEGORY, "Extract phone numbers from text", _TEXT_ONLY_SCHEMA)
def extract_phone_numbers(text: str) -> dict[str, Any]:
    phones = _unique([m.group(0).strip() for m in _PHONE.finditer(text)])
    return {"phones": phones, "count": len(phones)}
