"""Constants and utility values for the hanoi engine."""


class ConstUtils:
    """Ring-count limits and peg constants."""

    MIN_RINGS = 1
    """Smallest tower the engine accepts."""

    MAX_RINGS = 63
    """Largest tower the engine accepts.
    With 63 rings the step count 2**63 - 1 still fits a 63-bit unsigned value."""

    PEG_COUNT = 3
    """Number of pegs, and the length of every move-pattern table."""


def total_steps_for(rings_count: int) -> int:
    """Return the length of the optimal solution for ``rings_count`` rings.

    This is also the number of steps needed to relocate any isolated
    sub-tower of that many rings.
    """
    return (1 << rings_count) - 1
