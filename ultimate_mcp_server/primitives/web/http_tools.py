"""HTTP and browser tools - status codes, user agents, QR links and colour conversion."""
from typing import Any
from urllib.parse import quote
import re

from ...tool_decorator import Tool
from .._helpers import num_str, parse_hex_color, round_half_up
from . import CATEGORY

QR_API_URL = "https://api.qrserver.com/v1/create-qr-code/"

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"

HTTP_STATUS_NAMES = {
    100: "Continue", 101: "Switching Protocols", 200: "OK", 201: "Created",
    202: "Accepted", 204: "No Content", 301: "Moved Permanently", 302: "Found",
    304: "Not Modified", 400: "Bad Request", 401: "Unauthorized", 403: "Forbidden",
    404: "Not Found", 405: "Method Not Allowed", 409: "Conflict", 422: "Unprocessable Entity",
    429: "Too Many Requests", 500: "Internal Server Error", 501: "Not Implemented",
    502: "Bad Gateway", 503: "Service Unavailable", 504: "Gateway Timeout",
}

# First substring match wins
_BROWSERS = ("Chrome", "Firefox", "Safari", "Edge", "Opera")
_OPERATING_SYSTEMS = (("Windows", "Windows"), ("Mac OS", "macOS"), ("Linux", "Linux"), ("Android", "Android"), ("iOS", "iOS"))
_VERSION_PATTERNS = (r"Chrome/([\d.]+)", r"Firefox/([\d.]+)", r"Version/([\d.]+)")
_BOT = re.compile(r"bot|crawler|spider|crawl", re.IGNORECASE)

_RGB_COLOR = re.compile(r"(\d+),\s*(\d+),\s*(\d+)")


def _status_category(code: float) -> str:
    if code < 200:
        return "Informational"
    if code < 300:
        return "Success"
    if code < 400:
        return "Redirection"
    if code < 500:
        return "Client Error"
    return "Server Error"


@Tool(
    "http_status_lookup",
    CATEGORY,
    "Look up HTTP status code meaning",
    {"type": "object", "properties": {"code": {"type": "number"}}, "required": ["code"]},
)
def http_status_lookup(code: int) -> dict[str, Any]:
    name = HTTP_STATUS_NAMES.get(code)
    return {
        "code": code,
        "name": name or "Unknown",
        "category": _status_category(code),
        "description": f"{num_str(code)} {name}" if name else "Unknown status code",
    }


@Tool(
    "parse_user_agent",
    CATEGORY,
    "Parse and analyze a User-Agent string",
    {"type": "object", "properties": {"user_agent": {"type": "string"}}, "required": ["user_agent"]},
)
def parse_user_agent(user_agent: str) -> dict[str, Any]:
    """Substring heuristics. Chrome-based browsers report as Chrome."""
    ua = user_agent
    browser = next((name for name in _BROWSERS if name in ua), "Unknown")
    os_name = next((label for token, label in _OPERATING_SYSTEMS if token in ua), "Unknown")
    if "Mobile" in ua:
        device = "Mobile"
    elif "Tablet" in ua:
        device = "Tablet"
    else:
        device = "Desktop"

    version = "Unknown"
    for pattern in _VERSION_PATTERNS:
        match = re.search(pattern, ua)
        if match:
            version = match.group(1)
            break

    return {
        "browser": browser,
        "browser_version": version,
        "os": os_name,
        "device_type": device,
        "is_bot": _BOT.search(ua) is not None,
        "raw": ua,
    }


@Tool(
    "generate_qr_data",
    CATEGORY,
    "Generate QR code URL using public API",
    {
        "type": "object",
        "properties": {
            "data": {"type": "string"},
            "size": {"type": "number", "default": 200},
            "error_correction": {"type": "string", "enum": ["L", "M", "Q", "H"], "default": "M"},
        },
        "required": ["data"],
    },
)
def generate_qr_data(data: str, size: int = 200, error_correction: str = "M") -> dict[str, Any]:
    """Build an image URL for a public QR service. No request is made."""
    px = num_str(size)
    qr_url = f"{QR_API_URL}?data={quote(data, safe=_URI_SAFE)}&size={px}x{px}&ecc={error_correction}"
    return {
        "qr_image_url": qr_url,
        "data": data,
        "size": size,
        "error_correction": error_correction,
        "embed_html": f'<img src="{qr_url}" alt="QR Code" width="{px}" height="{px}">',
    }


def _parse_rgb(color: str) -> tuple[int, int, int] | None:
    match = _RGB_COLOR.search(color)
    if match is None:
        return None
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def _to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    rn, gn, bn = r / 255, g / 255, b / 255
    high, low = max(rn, gn, bn), min(rn, gn, bn)
    lightness = (high + low) / 2
    if high == low:
        return 0, 0, lightness

    spread = high - low
    saturation = spread / (high + low) if lightness < 0.5 else spread / (2 - high - low)
    if high == rn:
        hue = ((gn - bn) / spread + 6) % 6
    elif high == gn:
        hue = (bn - rn) / spread + 2
    else:
        hue = (rn - gn) / spread + 4
    return hue * 60, saturation, lightness


@Tool(
    "color_converter",
    CATEGORY,
    "Convert colors between HEX, RGB, HSL",
    {
        "type": "object",
        "properties": {
            "color": {
                "type": "string",
                "description": "Color value e.g. #FF5733 or rgb(255,87,51) or hsl(11,100%,60%)",
            },
            "from": {"type": "string", "enum": ["hex", "rgb", "hsl"]},
        },
        "required": ["color", "from"],
    },
)
def color_converter(color: str, from_: str) -> dict[str, Any]:
    """Convert a hex or rgb() colour into all three notations.

    HSL input is not supported yet and, like an unparseable colour, comes back
    as an "error" field.
    """
    if from_ == "hex":
        rgb = parse_hex_color(color)
    elif from_ == "rgb":
        rgb = _parse_rgb(color)
    else:
        return {"error": "HSL input conversion coming soon"}
    if rgb is None:
        return {"error": f"Invalid {from_} color: {color}"}

    r, g, b = rgb
    hue, saturation, lightness = _to_hsl(r, g, b)
    h, s, l = round_half_up(hue), round_half_up(saturation * 100), round_half_up(lightness * 100)
    return {
        "hex": "#" + "".join(format(x, "02x") for x in rgb).upper(),
        "rgb": f"rgb({r}, {g}, {b})",
        "hsl": f"hsl({h}, {s}%, {l}%)",
        "values": {"r": r, "g": g, "b": b, "h": h, "s": s, "l": l},
    }
