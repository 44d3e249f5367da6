from typing import List, Sequence

BANNER_WIDTH = 48


def generate_banner(lines: Sequence[str], width: int = BANNER_WIDTH) -> str:
    """
    Frame some centered lines between two rules of '='.

    Args:
        lines: Text lines, each centered to `width`.
        width: Width of the rules.

    Returns:
        str: The banner, without a trailing newline.
    """
    rule = "=" * width
    return "\n".join([rule, *(line.center(width) for line in lines), rule])


def generate_menu(options: Sequence[str], start: int = 1) -> List[str]:
    """Number the options: ["Admin", "User"] -> ["1. Admin", "2. User"]."""
    return [f"{i}. {option}" for i, option in enumerate(options, start)]
