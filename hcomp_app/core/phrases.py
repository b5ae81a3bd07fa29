"""
Random phrase selection.
"""

import random
from typing import Sequence

from hcomp_app.config import PHRASES


def random_phrase(phrases: Sequence[str] = PHRASES) -> str:
    """
    Pick one phrase uniformly at random.

    Args:
        phrases: Non-empty sequence of candidate phrases.

    Returns:
        The selected phrase.

    Raises:
        ValueError: If phrases is empty.
    """
    if not phrases:
        raise ValueError("phrases must not be empty")

    return phrases[random.randrange(len(phrases))]
