"""Arithmetic tools - expression calculator, percentages, statistics and number theory."""
from typing import Any, Callable
import ast
import math
import operator
import re
import logging

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import locale_string, num_str, plain_number, round_half_up, to_exponential, to_fixed, to_int
from . import CATEGORY

logger = logging.getLogger(__name__)

MAX_FIBONACCI_TERMS = 50
MAX_EXPONENT = 1000

_EXPRESSION_CHARS = re.compile(r"[^0-9+\-*/().%\s^]")


# ------------------------------------------------------------------------------
# Expression evaluation
# ------------------------------------------------------------------------------
# The calculator never calls eval(). The cleaned expression is parsed with the
# ast module and walked here; only numeric literals, unary +/- and the binary
# operators below are accepted. "^" means power. "%" is the remainder with the
# sign of the dividend.
# ------------------------------------------------------------------------------
def _power(base: float, exponent: float) -> float:
    if abs(exponent) > MAX_EXPONENT:
        raise OverflowError("exponent too large")
    result = operator.pow(base, exponent)
    if isinstance(result, complex):
        raise ValueError("fractional power of a negative number")
    return result


_BINARY_OPS: dict[type, Callable[[Any, Any], Any]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.Mod: math.fmod,
    ast.Pow: _power,
}

_UNARY_OPS: dict[type, Callable[[Any], Any]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


def _evaluate(node: ast.AST) -> Any:
    if isinstance(node, ast.Expression):
        return _evaluate(node.body)
    if isinstance(node, ast.Constant) and type(node.value) in (int, float):
        return node.value
    if isinstance(node, ast.BinOp) and type(node.op) in _BINARY_OPS:
        return _BINARY_OPS[type(node.op)](_evaluate(node.left), _evaluate(node.right))
    if isinstance(node, ast.UnaryOp) and type(node.op) in _UNARY_OPS:
        return _UNARY_OPS[type(node.op)](_evaluate(node.operand))
    raise ValueError(f"Unsupported expression element: {type(node).__name__}")


@Tool(
    "calculator",
    CATEGORY,
    "Evaluate mathematical expressions safely",
    {
        "type": "object",
        "properties": {
            "expression": {"type": "string", "description": "Math expression, e.g. '2 + 2 * 10'"},
        },
        "required": ["expression"],
    },
)
def calculator(expression: str) -> dict[str, Any]:
    """Evaluate an arithmetic expression.

    Characters other than digits, whitespace and ``+ - * / % ( ) . ^`` are
    stripped first. Anything that still fails to evaluate (syntax, division by
    zero, overflow) is reported in an "error" field, not raised.
    """
    cleaned = _EXPRESSION_CHARS.sub("", expression).replace("^", "**")
    try:
        result = plain_number(_evaluate(ast.parse(cleaned.strip(), mode="eval")))
        if isinstance(result, float) and not math.isfinite(result):
            raise OverflowError("result is not finite")
    except (SyntaxError, ValueError, ArithmeticError) as e:
        logger.debug("calculator rejected %r: %s", expression, e)
        return {"expression": expression, "error": "Invalid expression"}
    return {"expression": expression, "result": result, "formatted": locale_string(result)}


PERCENTAGE_OPERATIONS = ("percent_of", "what_percent", "percent_change", "add_percent", "subtract_percent")


@Tool(
    "percentage_calculator",
    CATEGORY,
    "Various percentage calculations",
    {
        "type": "object",
        "properties": {
            "operation": {"type": "string", "enum": list(PERCENTAGE_OPERATIONS)},
            "value1": {"type": "number"},
            "value2": {"type": "number"},
        },
        "required": ["operation", "value1", "value2"],
    },
)
def percentage_calculator(operation: str, value1: float, value2: float) -> dict[str, Any]:
    v1, v2 = num_str(value1), num_str(value2)
    match operation:
        case "percent_of":
            result = (value2 / 100) * value1
            description = f"{v1}% of {v2} = {num_str(result)}"
        case "what_percent" if not value2:
            result = None
            description = f"{v1} is not a percentage of 0"
        case "what_percent":
            result = (value1 / value2) * 100
            description = f"{v1} is {to_fixed(result)}% of {v2}"
        case "percent_change" if not value1:
            result = None
            description = f"Change from 0 to {v2} is undefined"
        case "percent_change":
            result = ((value2 - value1) / value1) * 100
            description = f"Change from {v1} to {v2} = {to_fixed(result)}%"
        case "add_percent":
            result = value1 + (value1 * value2 / 100)
            description = f"{v1} + {v2}% = {num_str(result)}"
        case "subtract_percent":
            result = value1 - (value1 * value2 / 100)
            description = f"{v1} - {v2}% = {num_str(result)}"
        case _:
            raise HandlerError(
                f"Unknown operation: {operation}",
                hint=f"Use one of: {', '.join(PERCENTAGE_OPERATIONS)}",
            )
    return {"result": round_half_up(result, 2) if result is not None else None, "description": description}


@Tool(
    "statistics_calculator",
    CATEGORY,
    "Calculate mean, median, mode, std dev, variance from a list of numbers",
    {
        "type": "object",
        "properties": {"numbers": {"type": "array", "items": {"type": "number"}}},
        "required": ["numbers"],
    },
)
def statistics_calculator(numbers: list[float]) -> dict[str, Any]:
    n = len(numbers)
    if not n:
        return {"error": "Empty array"}

    ordered = sorted(numbers)
    total = sum(numbers)
    mean = total / n
    median = (ordered[n // 2 - 1] + ordered[n // 2]) / 2 if n % 2 == 0 else ordered[n // 2]

    freq: dict[float, int] = {}
    for x in numbers:
        freq[x] = freq.get(x, 0) + 1
    max_freq = max(freq.values())
    mode = sorted(plain_number(x) for x, count in freq.items() if count == max_freq)

    variance = sum((x - mean) ** 2 for x in numbers) / n
    return {
        "count": n,
        "sum": plain_number(total),
        "mean": round_half_up(mean, 3),
        "median": plain_number(median),
        "mode": mode,
        "min": ordered[0],
        "max": ordered[-1],
        "range": plain_number(ordered[-1] - ordered[0]),
        "variance": round_half_up(variance, 3),
        "std_deviation": round_half_up(math.sqrt(variance), 3),
        "q1": ordered[math.floor(n * 0.25)],
        "q3": ordered[math.floor(n * 0.75)],
    }


@Tool(
    "prime_checker",
    CATEGORY,
    "Check if a number is prime and find factors",
    {"type": "object", "properties": {"number": {"type": "number"}}, "required": ["number"]},
)
def prime_checker(number: float) -> dict[str, Any]:
    n = abs(math.floor(number))
    root = math.isqrt(n)
    is_prime = n > 1 and not any(n % i == 0 for i in range(2, root + 1))

    # Divisors come in pairs around the square root
    small = [i for i in range(1, root + 1) if n % i == 0]
    large = [n // i for i in reversed(small) if n // i != i]
    factors = small + large
    return {"number": n, "is_prime": is_prime, "factors": factors, "factor_count": len(factors)}


@Tool(
    "fibonacci",
    CATEGORY,
    "Generate Fibonacci sequence up to N terms",
    {
        "type": "object",
        "properties": {"terms": {"type": "number", "description": "Number of terms (max 50)"}},
        "required": ["terms"],
    },
)
def fibonacci(terms: int) -> dict[str, Any]:
    n = max(int(min(terms, MAX_FIBONACCI_TERMS)), 0)
    seq = [0, 1]
    while len(seq) < n:
        seq.append(seq[-1] + seq[-2])
    seq = seq[:n]
    return {"sequence": seq, "terms": n, "last_value": seq[-1] if seq else None}


@Tool(
    "roman_numeral_converter",
    CATEGORY,
    "Convert between Roman numerals and integers",
    {
        "type": "object",
        "properties": {
            "value": {"type": "string", "description": "Integer or Roman numeral"},
            "to": {"type": "string", "enum": ["roman", "integer"]},
        },
        "required": ["value", "to"],
    },
)
def roman_numeral_converter(value: Any, to: str) -> dict[str, Any]:
    if to == "roman":
        n = to_int(value)
        roman = ""
        for amount, numeral in _ROMAN_VALUES:
            while n >= amount:
                roman += numeral
                n -= amount
        return {"input": value, "result": roman}

    symbols = str(value).upper()
    unknown = sorted({ch for ch in symbols if ch not in _ROMAN_DIGITS})
    if unknown:
        raise HandlerError(
            "Invalid Roman numeral",
            hint="Use only the letters I, V, X, L, C, D and M",
            value=value,
        )
    result = 0
    for i, ch in enumerate(symbols):
        current = _ROMAN_DIGITS[ch]
        following = _ROMAN_DIGITS.get(symbols[i + 1], 0) if i + 1 < len(symbols) else 0
        result += -current if current < following else current
    return {"input": value, "result": result}


_ROMAN_VALUES = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)
_ROMAN_DIGITS = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen",
    "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
_SCALES = ((10**9, "billion"), (10**6, "million"), (1000, "thousand"))


def number_to_words(n: int) -> str:
    """English words for an integer: 1234 -> "one thousand two hundred thirty-four"."""
    if n == 0:
        return "zero"
    if n < 0:
        return "negative " + number_to_words(-n)
    if n < 20:
        return _ONES[n]
    if n < 100:
        return _TENS[n // 10] + (f"-{_ONES[n % 10]}" if n % 10 else "")
    if n < 1000:
        return f"{_ONES[n // 100]} hundred" + (f" {number_to_words(n % 100)}" if n % 100 else "")
    for scale, word in _SCALES:
        if n >= scale:
            rest = n % scale
            return f"{number_to_words(n // scale)} {word}" + (f" {number_to_words(rest)}" if rest else "")
    raise AssertionError("unreachable")


def _in_base(n: int, spec: str) -> str:
    return ("-" if n < 0 else "") + format(abs(n), spec)


NUMBER_FORMATS = ("commas", "scientific", "binary", "hex", "octal", "words")


@Tool(
    "number_formatter",
    CATEGORY,
    "Format numbers with commas, decimals, and convert to words",
    {
        "type": "object",
        "properties": {
            "number": {"type": "number"},
            "format": {"type": "string", "enum": list(NUMBER_FORMATS)},
        },
        "required": ["number", "format"],
    },
)
def number_formatter(number: float, format: str) -> dict[str, Any]:
    match format:
        case "commas":
            result = locale_string(number)
        case "scientific":
            result = to_exponential(number, 4)
        case "binary":
            result = _in_base(math.floor(number), "b")
        case "hex":
            result = _in_base(math.floor(number), "X")
        case "octal":
            result = _in_base(math.floor(number), "o")
        case "words":
            result = number_to_words(math.floor(number))
        case _:
            raise HandlerError(f"Unknown format: {format}", hint=f"Use one of: {', '.join(NUMBER_FORMATS)}")
    return {"number": number, "format": format, "result": result}
