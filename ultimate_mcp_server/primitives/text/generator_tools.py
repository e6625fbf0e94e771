"""Generator tools - placeholder text, passwords and usernames.

Output is random by nature. Everything draws from _runtime.rng().
"""
from typing import Any
import re

from ...tool_decorator import Tool
from .. import _runtime
from . import CATEGORY

MAX_PASSWORDS = 20
MAX_PASSWORD_LENGTH = 128
MAX_USERNAMES = 20
MAX_LOREM_PARAGRAPHS = 20
MAX_LOREM_SENTENCES = 20

_LOREM_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod tempor incididunt ut "
    "labore et dolore magna aliqua enim ad minim veniam quis nostrud exercitation ullamco laboris "
    "nisi aliquip ex ea commodo consequat duis aute irure reprehenderit in voluptate velit esse "
    "cillum fugiat nulla pariatur excepteur sint occaecat cupidatat non proident sunt culpa qui "
    "officia deserunt mollit anim id est laborum"
).split()

_LOWER = "abcdefghijklmnopqrstuvwxyz"
_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"
_SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

_ADJECTIVES = ("cool", "super", "mega", "ultra", "ninja", "epic", "turbo", "alpha", "prime", "ace")
_SUFFIXES = ("pro", "dev", "hq", "io", "hub", "lab", "kit", "box", "app", "ai")


@Tool(
    "generate_lorem_ipsum",
    CATEGORY,
    "Generate Lorem Ipsum placeholder text",
    {
        "type": "object",
        "properties": {
            "paragraphs": {"type": "number", "default": 1},
            "sentences_per_paragraph": {"type": "number", "default": 5},
        },
    },
)
def generate_lorem_ipsum(paragraphs: int = 1, sentences_per_paragraph: int = 5) -> dict[str, Any]:
    """At most 20 paragraphs of at most 20 sentences each."""
    rng = _runtime.rng()

    def sentence() -> str:
        words = [rng.choice(_LOREM_WORDS) for _ in range(8 + rng.randrange(10))]
        words[0] = words[0].capitalize()
        return " ".join(words) + "."

    paragraphs = max(min(int(paragraphs), MAX_LOREM_PARAGRAPHS), 0)
    sentences_per_paragraph = min(int(sentences_per_paragraph), MAX_LOREM_SENTENCES)
    paras = [" ".join(sentence() for _ in range(sentences_per_paragraph)) for _ in range(paragraphs)]
    return {
        "text": "\n\n".join(paras),
        "paragraphs": paragraphs,
        "word_count": len(" ".join(paras).split(" ")),
    }


@Tool(
    "generate_password",
    CATEGORY,
    "Generate secure random passwords",
    {
        "type": "object",
        "properties": {
            "length": {"type": "number", "default": 16},
            "include_uppercase": {"type": "boolean", "default": True},
            "include_numbers": {"type": "boolean", "default": True},
            "include_symbols": {"type": "boolean", "default": True},
            "count": {"type": "number", "default": 1},
        },
    },
)
def generate_password(
    length: int = 16,
    include_uppercase: bool = True,
    include_numbers: bool = True,
    include_symbols: bool = True,
    count: int = 1,
) -> dict[str, Any]:
    rng = _runtime.rng()
    length = max(min(int(length), MAX_PASSWORD_LENGTH), 0)
    chars = _LOWER
    if include_uppercase:
        chars += _UPPER
    if include_numbers:
        chars += _DIGITS
    if include_symbols:
        chars += _SYMBOLS

    passwords = [
        "".join(rng.choice(chars) for _ in range(length))
        for _ in range(min(int(count), MAX_PASSWORDS))
    ]
    if length >= 16 and include_uppercase and include_numbers and include_symbols:
        strength = "Strong"
    elif length >= 12:
        strength = "Medium"
    else:
        strength = "Weak"
    return {"passwords": passwords, "strength": strength, "length": length}


@Tool(
    "generate_username",
    CATEGORY,
    "Generate creative usernames from a name or keyword",
    {
        "type": "object",
        "properties": {
            "base_word": {"type": "string"},
            "count": {"type": "number", "default": 5},
        },
        "required": ["base_word"],
    },
)
def generate_username(base_word: str, count: int = 5) -> dict[str, Any]:
    rng = _runtime.rng()
    base = re.sub(r"\s+", "", base_word.lower())

    suggestions = []
    for _ in range(min(int(count), MAX_USERNAMES)):
        roll = rng.random()
        if roll < 0.33:
            suggestions.append(f"{rng.choice(_ADJECTIVES)}_{base}")
        elif roll < 0.66:
            suggestions.append(f"{base}_{rng.choice(_SUFFIXES)}")
        else:
            suggestions.append(f"{base}{rng.randrange(9999)}")

    # Collisions are dropped rather than re-rolled
    unique = list(dict.fromkeys(suggestions))
    return {"suggestions": unique[:max(int(count), 0)]}
