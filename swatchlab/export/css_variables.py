from typing import List, Sequence
from ..colors.color import Color
from ..conversions.css import color_to_css


def export_css_variables(colors: Sequence[Color], palette_name: str) -> str:
    """
    ``:root`` custom properties plus one utility class per color, 1-indexed::

        :root {
          --brand-color-1: #ff0000;
        }

        .brand-color-1 {
          color: var(--brand-color-1);
        }
    """
    declarations: List[str] = [":root {"]
    selectors: List[str] = []

    for index, color in enumerate(colors, start=1):
        var_name = f"--{palette_name}-color-{index}"
        declarations.append(f"  {var_name}: {color_to_css(color)};")
        selectors.append(f".{palette_name}-color-{index} {{")
        selectors.append(f"  color: var({var_name});")
        selectors.append("}")

    declarations.append("}")
    return "\n".join(declarations) + "\n\n" + "\n".join(selectors)
