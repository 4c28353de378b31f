from typing import List, Sequence, Tuple

from .bounded import NonNegative


def budget(available: float, desired: Sequence[float]) -> Tuple[NonNegative, List[NonNegative]]:
    """
    Ration ``available`` across ``desired`` amounts.

    Returns (total_granted, granted). When everything fits, every request is
    granted in full. Otherwise every request is scaled by the same factor,
    available / sum(desired), and the total is ``available``.
    """
    available = NonNegative(available)
    desired = [NonNegative(d) for d in desired]
    total_desired = sum(desired, NonNegative(0.0))

    if total_desired == 0.0:
        return NonNegative(0.0), [NonNegative(0.0) for _ in desired]
    if total_desired <= available:
        return total_desired, desired

    factor = float(available) / float(total_desired)
    return available, [NonNegative.clipped(float(d) * factor) for d in desired]
