"""Colour palette tool - monochromatic, complementary, triadic and analogous sets."""
from typing import Any

from ...tool_decorator import Tool
from ...handler_wrappers import HandlerError
from .._helpers import parse_hex_color, round_half_up
from . import CATEGORY

PALETTE_TYPES = ("monochromatic", "complementary", "triadic", "analogous")


def _to_hex(r: float, g: float, b: float) -> str:
    channels = (min(255, max(0, round_half_up(x))) for x in (r, g, b))
    return "#" + "".join(format(int(x), "02X") for x in channels)


def _tint(channel: int, amount: float) -> float:
    return channel + (255 - channel) * amount


@Tool(
    "color_palette_generator",
    CATEGORY,
    "Generate color palettes from a base color",
    {
        "type": "object",
        "properties": {
            "base_hex": {"type": "string", "description": "Base color in hex e.g. #3B82F6"},
            "palette_type": {"type": "string", "enum": list(PALETTE_TYPES), "default": "monochromatic"},
        },
        "required": ["base_hex"],
    },
)
def color_palette_generator(base_hex: str, palette_type: str = "monochromatic") -> dict[str, Any]:
    rgb = parse_hex_color(base_hex)
    if rgb is None:
        raise HandlerError(f"Invalid hex color: {base_hex}", hint="Use a hex colour such as #3B82F6 or #38F")
    r, g, b = rgb
    base = base_hex.upper()

    match palette_type:
        case "monochromatic":
            palette = [
                {"name": "Darkest", "hex": _to_hex(r * 0.3, g * 0.3, b * 0.3)},
                {"name": "Dark", "hex": _to_hex(r * 0.6, g * 0.6, b * 0.6)},
                {"name": "Base", "hex": base},
                {"name": "Light", "hex": _to_hex(_tint(r, 0.4), _tint(g, 0.4), _tint(b, 0.4))},
                {"name": "Lightest", "hex": _to_hex(_tint(r, 0.8), _tint(g, 0.8), _tint(b, 0.8))},
            ]
        case "complementary":
            palette = [
                {"name": "Primary", "hex": base},
                {"name": "Complement", "hex": _to_hex(255 - r, 255 - g, 255 - b)},
            ]
        case "triadic":
            # Rotating the channels moves the hue by a third of the wheel
            palette = [
                {"name": "Color 1", "hex": base},
                {"name": "Color 2", "hex": _to_hex(g, b, r)},
                {"name": "Color 3", "hex": _to_hex(b, r, g)},
            ]
        case "analogous":
            palette = [
                {"name": "Analogous 1", "hex": _to_hex(r, g * 0.8, b * 1.2)},
                {"name": "Base", "hex": base},
                {"name": "Analogous 2", "hex": _to_hex(r * 1.2, g, b * 0.8)},
            ]
        case _:
            raise HandlerError(
                f"Unknown palette type: {palette_type}",
                hint=f"Use one of: {', '.join(PALETTE_TYPES)}",
            )
    return {"base_color": base_hex, "palette_type": palette_type, "palette": palette}
