"""
Display ordering shared by the card transformers
"""
from typing import Callable, Sequence, Tuple


def ordered_by(names: Sequence[str]) -> Callable[[str], Tuple]:
    """
    Sort key placing known names first, in list order

    Args:
        names: Names in the order they should be shown

    Returns:
        Key function; unknown names sort alphabetically after every known one
    """
    positions = {name: index for index, name in enumerate(names)}

    def key(name: str) -> Tuple:
        if name in positions:
            return (0, positions[name], '')
        return (1, 0, name)

    return key
