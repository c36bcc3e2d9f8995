"""Random pad identifiers."""

from __future__ import annotations

import numpy as np

from domain.pads.value_objects import ID_ALPHABET, ID_LENGTH


def generate_id(rng: np.random.Generator | None = None) -> str:
    """Return a 13-character identifier drawn uniformly from [a-z0-9].

    Each character is an independent draw. No uniqueness registry is kept;
    collisions (1 in 36**13 per pair) are accepted.

    Args:
        rng: Random source. A fresh unseeded generator is used when omitted.
    """
    if rng is None:
        rng = np.random.default_rng()
    indices = rng.integers(0, len(ID_ALPHABET), size=ID_LENGTH)
    return "".join(ID_ALPHABET[i] for i in indices)
