"""Vector similarity calculation utilities."""

import math
from collections.abc import Sequence

from ..errors import DegenerateVectorError


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Calculate cosine similarity between two vectors.

    Vectors of unequal length are compared as if the shorter one were
    padded with trailing zeros: padded positions add nothing to the dot
    product, but the longer vector's extra components still count towards
    its own magnitude.

    Each vector is divided by its largest absolute component before the
    sums are taken, so any finite input (1e200 or 1e-200 alike) stays
    within float range. Cosine is invariant under that scaling.

    Args:
        vec1: First vector
        vec2: Second vector

    Returns:
        Raw cosine similarity in [-1, 1]

    Raises:
        DegenerateVectorError: If either vector is all-zero
            (this includes empty vectors)
    """
    len1, len2 = len(vec1), len(vec2)
    scale1 = max((abs(x) for x in vec1), default=0.0)
    scale2 = max((abs(x) for x in vec2), default=0.0)

    if scale1 == 0 or scale2 == 0:
        degenerate = [
            side for side, scale in (("first", scale1), ("second", scale2))
            if scale == 0
        ]
        raise DegenerateVectorError(
            details={"degenerate": degenerate, "dimensions": [len1, len2]}
        )

    dot_product = 0.0
    sum_sq1 = 0.0
    sum_sq2 = 0.0
    for k in range(max(len1, len2)):
        if k >= len1:
            sum_sq2 += (vec2[k] / scale2) ** 2
            continue
        if k >= len2:
            sum_sq1 += (vec1[k] / scale1) ** 2
            continue
        a = vec1[k] / scale1
        b = vec2[k] / scale2
        dot_product += a * b
        sum_sq1 += a * a
        sum_sq2 += b * b

    return dot_product / (math.sqrt(sum_sq1) * math.sqrt(sum_sq2))
