# Paramparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Color names and the rich theme used by the paramparse console."""
from rich.theme import Theme


class OneColors:
    """One Dark inspired color palette."""

    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    YELLOW = "#E5C07B"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"
    COMMENT_GREY = "#5C6370"

    BLUE_b = f"bold {BLUE}"
    DARK_RED_b = f"bold {DARK_RED}"


def get_theme() -> Theme:
    return Theme(
        {
            "positional": OneColors.CYAN,
            "named": OneColors.BLUE_b,
            "option": OneColors.MAGENTA,
            "value": OneColors.GREEN,
            "muted": OneColors.COMMENT_GREY,
            "error": OneColors.DARK_RED_b,
        }
    )
