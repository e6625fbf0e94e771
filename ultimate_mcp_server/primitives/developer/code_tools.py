"""Code tools - regex catalog, complexity metrics, cron explanations and commit messages."""
from typing import Any
import re

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import round_half_up
from . import CATEGORY

# Patterns are given in /.../ literal form, ready to paste into JavaScript
REGEX_PATTERNS = {
    "email": (r"/^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$/", "Standard email validation"),
    "phone_us": (r"/^(\+1)?[-.\s]?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}$/", "US phone number"),
    "url": (
        r"/https?:\/\/(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b([-a-zA-Z0-9()@:%_+.~#?&\/=]*)/",
        "URL with http/https",
    ),
    "ip_address": (
        r"/^((25[0-5]|2[0-4]\d|[01]?\d\d?)\.){3}(25[0-5]|2[0-4]\d|[01]?\d\d?)$/",
        "IPv4 address",
    ),
    "credit_card": (
        r"/^(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|3[47][0-9]{13}|3(?:0[0-5]|[68][0-9])[0-9]{11})$/",
        "Visa, MC, Amex, Discover",
    ),
    "zip_code": (r"/^\d{5}(-\d{4})?$/", "US ZIP code"),
    "date_us": (r"/^(0[1-9]|1[0-2])\/(0[1-9]|[12]\d|3[01])\/(19|20)\d{2}$/", "US date MM/DD/YYYY"),
    "date_iso": (r"/^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])$/", "ISO date YYYY-MM-DD"),
    "hex_color": (r"/^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$/", "Hexadecimal color"),
    "username": (r"/^[a-zA-Z0-9_]{3,20}$/", "Username 3-20 chars, letters, numbers, underscore"),
    "strong_password": (
        r"/^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$/",
        "Min 8 chars, upper, lower, number, special char",
    ),
    "ssn": (r"/^\d{3}-\d{2}-\d{4}$/", "US Social Security Number"),
    "mac_address": (r"/^([0-9A-Fa-f]{2}[:-]){5}([0-9A-Fa-f]{2})$/", "MAC address"),
}


@Tool(
    "generate_regex",
    CATEGORY,
    "Generate common regex patterns",
    {
        "type": "object",
        "properties": {"pattern_type": {"type": "string", "enum": list(REGEX_PATTERNS)}},
        "required": ["pattern_type"],
    },
)
def generate_regex(pattern_type: str) -> dict[str, Any]:
    if pattern_type not in REGEX_PATTERNS:
        raise HandlerError(
            f"Unknown pattern type: {pattern_type}",
            hint=f"Use one of: {', '.join(REGEX_PATTERNS)}",
        )
    pattern, description = REGEX_PATTERNS[pattern_type]
    return {"pattern_type": pattern_type, "pattern": pattern, "description": description}


_FUNCTION_DEF = re.compile(r"function\s+\w+|def\s+\w+|const\s+\w+\s*=\s*(?:async\s*)?\(", re.ASCII)
_BRANCH_KEYWORD = re.compile(r"\b(?:if|else|switch|case|while|for|catch)\b", re.ASCII)
_COMMENT_PREFIXES = ("//", "#", "*")


@Tool(
    "code_complexity",
    CATEGORY,
    "Analyze code complexity metrics",
    {
        "type": "object",
        "properties": {
            "code": {"type": "string"},
            "language": {"type": "string", "enum": ["javascript", "python", "java", "generic"]},
        },
        "required": ["code"],
    },
)
def code_complexity(code: str, language: str = "generic") -> dict[str, Any]:
    """Line counts plus a keyword-count approximation of cyclomatic complexity.

    The heuristics are the same for every language; ``language`` is echoed.
    """
    lines = code.split("\n")
    blank = [line for line in lines if not line.strip()]
    code_lines = [
        line for line in lines
        if line.strip() and not line.strip().startswith(_COMMENT_PREFIXES)
    ]
    complexity = 1 + len(_BRANCH_KEYWORD.findall(code))
    if complexity <= 5:
        level = "Low"
    elif complexity <= 10:
        level = "Medium"
    elif complexity <= 20:
        level = "High"
    else:
        level = "Very High"

    return {
        "language": language,
        "total_lines": len(lines),
        "code_lines": len(code_lines),
        "blank_lines": len(blank),
        "comment_lines": len(lines) - len(code_lines) - len(blank),
        "functions_detected": len(_FUNCTION_DEF.findall(code)),
        "cyclomatic_complexity": complexity,
        "complexity_level": level,
        "avg_line_length": round_half_up(sum(len(line) for line in lines) / len(lines)),
        "recommendation": (
            "Consider refactoring complex functions" if complexity > 10 else "Code complexity is acceptable"
        ),
    }


_CRON_MONTHS = {
    "1": "January", "2": "February", "3": "March", "4": "April", "5": "May", "6": "June",
    "7": "July", "8": "August", "9": "September", "10": "October", "11": "November", "12": "December",
}
_CRON_WEEKDAYS = {
    "0": "Sunday", "1": "Monday", "2": "Tuesday", "3": "Wednesday",
    "4": "Thursday", "5": "Friday", "6": "Saturday",
}
_COMMON_SCHEDULES = {
    "* * * * *": "Every minute",
    "0 * * * *": "Every hour",
    "0 9 * * 1-5": "Every weekday at 9 AM",
    "0 0 * * *": "Daily at midnight",
    "0 0 * * 0": "Weekly on Sunday",
    "0 0 1 * *": "Monthly on 1st",
}


def _explain_field(value: str, name: str, names: dict[str, str] | None = None) -> str:
    if value == "*":
        return f"Every {name}"
    if "-" in value:
        return f"{name}s {value}"
    if "/" in value:
        return f"Every {value.split('/')[1]} {name}s"
    if "," in value:
        return f"{name}s: {value}"
    if names is not None:
        return f"{name} {value} ({names.get(value, '')})"
    return f"{name} {value}"


@Tool(
    "cron_expression_parser",
    CATEGORY,
    "Parse and explain cron expressions",
    {
        "type": "object",
        "properties": {"expression": {"type": "string", "description": "Cron expression e.g. '0 9 * * 1-5'"}},
        "required": ["expression"],
    },
)
def cron_expression_parser(expression: str) -> dict[str, Any]:
    parts = expression.split()
    if len(parts) != 5:
        return {"error": "Cron must have 5 parts: minute hour day month weekday"}

    minute, hour, day, month, weekday = parts
    breakdown = {
        "minute": _explain_field(minute, "minute"),
        "hour": _explain_field(hour, "hour"),
        "day": _explain_field(day, "day"),
        "month": _explain_field(month, "month", _CRON_MONTHS),
        "weekday": _explain_field(weekday, "weekday", _CRON_WEEKDAYS),
    }
    human = _COMMON_SCHEDULES.get(expression) or "At " + " | ".join(breakdown.values())
    return {
        "expression": expression,
        "human_readable": human,
        "breakdown": breakdown,
        "common_patterns": [
            "* * * * * (Every minute)",
            "0 * * * * (Every hour)",
            "0 9 * * 1-5 (Weekdays 9AM)",
            "0 0 * * * (Daily midnight)",
            "0 0 1 * * (Monthly)",
        ],
    }


COMMIT_TYPES = {
    "feat": "New feature",
    "fix": "Bug fix",
    "docs": "Documentation",
    "style": "Formatting",
    "refactor": "Code restructure",
    "test": "Tests",
    "chore": "Maintenance",
    "perf": "Performance",
    "ci": "CI/CD",
    "build": "Build system",
}


@Tool(
    "git_commit_message",
    CATEGORY,
    "Generate conventional git commit messages",
    {
        "type": "object",
        "properties": {
            "type": {"type": "string", "enum": list(COMMIT_TYPES)},
            "scope": {"type": "string"},
            "description": {"type": "string"},
            "breaking_change": {"type": "boolean", "default": False},
            "body": {"type": "string"},
        },
        "required": ["type", "description"],
    },
)
def git_commit_message(
    type: str,
    description: str,
    scope: str | None = None,
    breaking_change: bool = False,
    body: str | None = None,
) -> dict[str, Any]:
    """Conventional Commits header, optional body and BREAKING CHANGE footer.

    Sections are separated by blank lines.
    """
    header = f"{type}{f'({scope})' if scope else ''}{'!' if breaking_change else ''}: {description}"
    sections = [header]
    if body:
        sections.append(body)
    if breaking_change:
        sections.append("BREAKING CHANGE: This is a breaking change")
    return {
        "commit_message": "\n\n".join(sections),
        "header": header,
        "conventional_commits_compliant": True,
        "type_description": COMMIT_TYPES.get(type),
    }
