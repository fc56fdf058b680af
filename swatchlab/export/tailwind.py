import re
from typing import Sequence
from ..colors.color import Color
from ..conversions.wrapper import to_hex_token

_JS_IDENTIFIER = re.compile(r'[A-Za-z_$][A-Za-z0-9_$]*')


def _js_key(name: str) -> str:
    if _JS_IDENTIFIER.fullmatch(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def export_tailwind_config(colors: Sequence[Color], palette_name: str) -> str:
    """A ``tailwind.config.js`` module mapping ``color-{i}`` to hex under ``palette_name``."""
    entries = [
        f"          'color-{index}': '{to_hex_token(color)}'"
        for index, color in enumerate(colors, start=1)
    ]
    body = ",\n".join(entries)
    return (
        "export default {\n"
        "  theme: {\n"
        "    extend: {\n"
        "      colors: {\n"
        f"        {_js_key(palette_name)}: {{\n"
        f"{body}\n"
        "        },\n"
        "      },\n"
        "    },\n"
        "  },\n"
        "};"
    )
