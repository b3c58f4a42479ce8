"""Peg roles and the move value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Peg(IntEnum):
    """Fixed role of one of the three pegs.

    The integer values double as indices into the engine's peg storage.
    """

    FROM = 0
    """Peg holding the whole tower at step 0."""

    BUFFER = 1
    """Intermediate peg."""

    TO = 2
    """Peg holding the whole tower once the puzzle is solved."""

    @classmethod
    def third(cls, first: Peg, second: Peg) -> Peg:
        """Return the peg that is neither ``first`` nor ``second``.

        Raises:
            ValueError: if both arguments name the same peg
        """
        if first == second:
            raise ValueError(f"No single third peg for {first.name}/{second.name}")
        return cls(3 - int(first) - int(second))


@dataclass(frozen=True)
class Move:
    """Source and target pegs of a single step.

    A move whose source equals its target never relocates a ring; the engine
    returns one from ``next``/``prev`` at the end/begin boundary. Such no-op
    moves are falsy, so ``if engine.next():`` tests whether a ring moved.
    """

    source: Peg
    target: Peg

    @property
    def is_noop(self) -> bool:
        return self.source == self.target

    def __bool__(self) -> bool:
        return not self.is_noop

    def __str__(self) -> str:
        return f"{self.source.name}->{self.target.name}"


NOOP_AT_END = Move(Peg.TO, Peg.TO)
"""Returned by ``next()`` once the tower sits on ``Peg.TO``."""

NOOP_AT_BEGIN = Move(Peg.FROM, Peg.FROM)
"""Returned by ``prev()`` at step 0."""
