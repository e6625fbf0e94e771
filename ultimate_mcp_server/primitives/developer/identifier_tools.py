"""Identifier tools - random UUIDs and non-cryptographic string hashes."""
from typing import Any, Callable
import uuid

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .. import _runtime
from . import CATEGORY

MAX_UUIDS = 50

_MASK32 = 0xFFFFFFFF


@Tool(
    "generate_uuid",
    CATEGORY,
    "Generate UUIDs (v4)",
    {"type": "object", "properties": {"count": {"type": "number", "default": 1}}},
)
def generate_uuid(count: int = 1) -> dict[str, Any]:
    rng = _runtime.rng()
    n = max(int(min(count, MAX_UUIDS)), 0)
    uuids = [str(uuid.UUID(int=rng.getrandbits(128), version=4)) for _ in range(n)]
    return {"uuids": uuids, "count": len(uuids)}


# ------------------------------------------------------------------------------
# String hashes
# ------------------------------------------------------------------------------
# All four work on UTF-16 code units, so a hash matches the value a browser
# computes for the same string. Intermediate shifts wrap to signed 32 bits and
# the final value is read as unsigned 32 bits.
# ------------------------------------------------------------------------------
def _code_units(text: str) -> list[int]:
    data = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


def _int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _simple32(text: str) -> str:
    h = 0
    for c in _code_units(text):
        h = (31 * h + c) & _MASK32
    return format(h, "08x")


def _djb2(text: str) -> str:
    h = 5381
    for c in _code_units(text):
        h = _int32(h << 5) + h + c
    return format(h & _MASK32, "x")


def _sdbm(text: str) -> str:
    h = 0
    for c in _code_units(text):
        h = c + _int32(h << 6) + _int32(h << 16) - h
    return format(h & _MASK32, "x")


def _adler32(text: str) -> str:
    a, b = 1, 0
    for c in _code_units(text):
        a = (a + c) % 65521
        b = (b + a) % 65521
    return format((b << 16) | a, "x")


HASH_ALGORITHMS: dict[str, Callable[[str], str]] = {
    "simple32": _simple32,
    "djb2": _djb2,
    "sdbm": _sdbm,
    "adler32": _adler32,
}


@Tool(
    "hash_generator",
    CATEGORY,
    "Generate checksums and hashes (CRC32, basic hashes)",
    {
        "type": "object",
        "properties": {
            "text": {"type": "string"},
            "algorithm": {"type": "string", "enum": list(HASH_ALGORITHMS)},
        },
        "required": ["text", "algorithm"],
    },
)
def hash_generator(text: str, algorithm: str) -> dict[str, Any]:
    func = HASH_ALGORITHMS.get(algorithm)
    if func is None:
        raise HandlerError(
            f"Unknown algorithm: {algorithm}",
            hint=f"Use one of: {', '.join(HASH_ALGORITHMS)}",
        )
    return {
        "text": text,
        "algorithm": algorithm,
        "hash": func(text),
        "note": "For cryptographic hashing use SHA-256 (hashlib.sha256)",
    }
