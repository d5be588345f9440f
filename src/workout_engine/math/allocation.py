"""Integer apportionment of a time budget (largest-remainder method)."""

from __future__ import annotations

import math
from collections.abc import Sequence


def apportion(weights: Sequence[float], total: int) -> list[int]:
    """Split ``total`` into integers proportional to ``weights``.

    Each part gets the floor of its exact share; the leftover units go to
    the parts with the largest fractional remainders, ties broken by
    position. The result always sums to ``total``. Zero total weight
    splits evenly.

    Args:
        weights: Non-negative weights, one per part.
        total: Non-negative integer to distribute.

    Returns:
        One integer per weight.
    """
    if not weights:
        return []
    if any(w < 0 for w in weights):
        raise ValueError("weights must be non-negative")
    weight_sum = float(sum(weights))
    if weight_sum <= 0:
        weights = [1.0] * len(weights)
        weight_sum = float(len(weights))

    exact = [w / weight_sum * total for w in weights]
    parts = [math.floor(x) for x in exact]
    leftover = total - sum(parts)
    order = sorted(range(len(exact)), key=lambda i: (-(exact[i] - parts[i]), i))
    for i in order[:leftover]:
        parts[i] += 1
    return parts
