"""Engine interface consumed by host layers (views, loggers, scripts)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from hanoi.interfaces.pegs import Move, Peg


class IHanoiEngine(ABC):
    """Read and step contract of a Tower of Hanoi move engine."""

    @property
    @abstractmethod
    def rings_count(self) -> int:
        """Number of rings in the tower."""
        ...

    @property
    @abstractmethod
    def total_steps(self) -> int:
        """Length of the optimal solution, 2**rings_count - 1."""
        ...

    @property
    @abstractmethod
    def current_step(self) -> int:
        """Index of the step the pegs currently reflect."""
        ...

    @abstractmethod
    def is_begin(self) -> bool:
        """True when the whole tower still sits on the FROM peg."""
        ...

    @abstractmethod
    def is_end(self) -> bool:
        """True when the whole tower sits on the TO peg."""
        ...

    @abstractmethod
    def peg_contents(self, peg: Peg) -> tuple[int, ...]:
        """Rings on ``peg``, bottom to top."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Return to step 0."""
        ...

    @abstractmethod
    def next(self) -> Move:
        """Advance one step and return the move performed."""
        ...

    @abstractmethod
    def prev(self) -> Move:
        """Undo one step and return the move performed."""
        ...

    @abstractmethod
    def jump_to_step(self, target: int) -> int:
        """Jump straight to ``target`` and return the resulting step."""
        ...
