"""Tower of Hanoi move engine.

The engine walks the unique optimal solution one step at a time in either
direction, and can jump to any step index without replaying the moves
before it.
"""

from __future__ import annotations

import logging
from typing import Optional, override

from hanoi.core.exceptions import InvalidRingsCount
from hanoi.interfaces.engine import IHanoiEngine
from hanoi.interfaces.pegs import NOOP_AT_BEGIN, NOOP_AT_END, Move, Peg
from hanoi.utils.config_loader import EngineConfig, get_config
from hanoi.utils.consts import ConstUtils, total_steps_for

logger = logging.getLogger(__name__)

ODD_MOVES: tuple[Move, ...] = (
    Move(Peg.FROM, Peg.TO),
    Move(Peg.FROM, Peg.BUFFER),
    Move(Peg.BUFFER, Peg.TO),
)
"""Move cycle for an odd ring count: the smallest ring heads for TO first."""

EVEN_MOVES: tuple[Move, ...] = (
    Move(Peg.FROM, Peg.BUFFER),
    Move(Peg.FROM, Peg.TO),
    Move(Peg.BUFFER, Peg.TO),
)
"""Move cycle for an even ring count: the smallest ring heads for BUFFER first."""


class HanoiEngine(IHanoiEngine):
    """Deterministic state machine over the FROM, BUFFER and TO pegs.

    Stepping uses a 3-entry cyclic move table chosen by the parity of the
    ring count. Each table entry only names a pair of pegs; the ring that
    actually moves is the smaller of the two exposed tops, which reproduces
    the recursive solution without materializing it.

    THREAD SAFETY: Not thread-safe. Serialize calls on a shared instance.

    Attributes:
        _rings_count: Number of rings, fixed for the engine's lifetime.
        _table: Move table selected by ring-count parity.
        _pegs: Ring stacks indexed by Peg, bottom ring first.
        _current_step: Step the pegs currently reflect.
    """

    def __init__(self, rings_count: int, config: Optional[EngineConfig] = None) -> None:
        """Initialize the engine at step 0.

        Args:
            rings_count: Number of rings in the tower.
            config: Ring-count limits. Defaults to the bundled config.

        Raises:
            InvalidRingsCount: if rings_count is not an integer within the
                configured limits.
        """
        cfg = config or get_config()
        limits = cfg.limits
        if (
            not isinstance(rings_count, int)
            or isinstance(rings_count, bool)
            or not limits.min_rings <= rings_count <= limits.max_rings
        ):
            logger.error(f"Rejected rings count {rings_count!r}")
            raise InvalidRingsCount(rings_count, limits.min_rings, limits.max_rings)

        self._rings_count = rings_count
        self._table = ODD_MOVES if rings_count & 1 else EVEN_MOVES
        self._pegs: list[list[int]] = [[] for _ in Peg]
        self._current_step = 0
        self._stack_source()
        logger.debug(f"Created engine with {rings_count} rings")

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(rings_count={self._rings_count}, "
            f"step={self._current_step}/{self.total_steps})"
        )

    @staticmethod
    def max_rings() -> int:
        """Largest ring count any configuration may allow."""
        return ConstUtils.MAX_RINGS

    # ==========================================================
    # Accessors
    # ==========================================================

    @property
    @override
    def rings_count(self) -> int:
        return self._rings_count

    @property
    @override
    def total_steps(self) -> int:
        return total_steps_for(self._rings_count)

    @property
    @override
    def current_step(self) -> int:
        return self._current_step

    @property
    def progress(self) -> float:
        """Fraction of the solution already played, in [0, 1]."""
        return self._current_step / self.total_steps

    @property
    def from_peg(self) -> tuple[int, ...]:
        return self.peg_contents(Peg.FROM)

    @property
    def buffer_peg(self) -> tuple[int, ...]:
        return self.peg_contents(Peg.BUFFER)

    @property
    def to_peg(self) -> tuple[int, ...]:
        return self.peg_contents(Peg.TO)

    @override
    def is_begin(self) -> bool:
        return not self._pegs[Peg.BUFFER] and not self._pegs[Peg.TO]

    @override
    def is_end(self) -> bool:
        return not self._pegs[Peg.BUFFER] and not self._pegs[Peg.FROM]

    def has_next(self) -> bool:
        return not self.is_end()

    def has_prev(self) -> bool:
        return not self.is_begin()

    @override
    def peg_contents(self, peg: Peg) -> tuple[int, ...]:
        return tuple(self._pegs[peg])

    def snapshot(self) -> dict[Peg, tuple[int, ...]]:
        """Return the contents of every peg keyed by role."""
        return {peg: self.peg_contents(peg) for peg in Peg}

    # ==========================================================
    # Stepping
    # ==========================================================

    @override
    def reset(self) -> None:
        for rings in self._pegs:
            rings.clear()
        self._stack_source()
        self._current_step = 0

    @override
    def next(self) -> Move:
        """Advance one step.

        Returns:
            The move performed, or NOOP_AT_END if the puzzle is already solved.
        """
        if self.is_end():
            return NOOP_AT_END

        candidate = self._table[self._current_step % ConstUtils.PEG_COUNT]
        self._current_step += 1
        return self._apply(candidate)

    @override
    def prev(self) -> Move:
        """Undo one step.

        Returns:
            The move performed, or NOOP_AT_BEGIN if already at step 0.
        """
        if self.is_begin():
            return NOOP_AT_BEGIN

        self._current_step -= 1
        return self._apply(self._table[self._current_step % ConstUtils.PEG_COUNT])

    @override
    def jump_to_step(self, target: int) -> int:
        """Rebuild the peg configuration at ``target`` directly.

        Costs O(rings_count) peg operations however large ``target`` is.
        Non-integer targets and targets outside [0, total_steps] leave the
        engine untouched.

        Returns:
            The current step after the call.
        """
        if not self._in_range(target):
            logger.debug(f"Ignoring jump to out-of-range step {target}")
            return self._current_step

        self.reset()
        self._current_step = self._slice(target)
        logger.debug(f"Jumped to step {target} of {self.total_steps}")
        return self._current_step

    def walk_to_step(self, target: int) -> int:
        """Reach ``target`` by stepping one move at a time.

        Linear in the distance from the current step. Out-of-range targets
        are ignored the same way jump_to_step ignores them.
        """
        if not self._in_range(target):
            return self._current_step

        while self._current_step < target:
            self.next()
        while self._current_step > target:
            self.prev()
        return self._current_step

    # ==========================================================
    # Internals
    # ==========================================================

    def _in_range(self, target: object) -> bool:
        """True for integer step indices within [0, total_steps]."""
        if not isinstance(target, int) or isinstance(target, bool):
            return False
        return 0 <= target <= self.total_steps

    def _stack_source(self) -> None:
        self._pegs[Peg.FROM].extend(range(self._rings_count - 1, -1, -1))

    def _apply(self, candidate: Move) -> Move:
        """Move the smaller exposed ring between the candidate's two pegs."""
        source, target = candidate.source, candidate.target
        source_rings = self._pegs[source]
        target_rings = self._pegs[target]
        if not source_rings or (target_rings and target_rings[-1] < source_rings[-1]):
            source, target = target, source

        self._pegs[target].append(self._pegs[source].pop())
        return Move(source, target)

    def _transfer(self, source: Peg, target: Peg, count: int) -> None:
        """Move the top ``count`` rings of source onto target, order kept."""
        if count == 0:
            return
        source_rings = self._pegs[source]
        self._pegs[target].extend(source_rings[-count:])
        del source_rings[-count:]

    def _slice(self, target_step: int) -> int:
        """Lay out the pegs for ``target_step`` starting from step 0.

        Tracks the active sub-tower (the ``active`` smallest rings) sitting on
        ``source`` and bound for ``dest``. A sub-tower whose whole relocation
        fits before the target is moved in bulk, followed by the one ring it
        uncovered; otherwise the sub-tower shrinks by its largest ring, whose
        own destination becomes the third peg.
        """
        step = 0
        active = self._rings_count
        source, dest = Peg.FROM, Peg.TO

        while True:
            block = total_steps_for(active)
            if step + block > target_step:
                active -= 1
                dest = Peg.third(source, dest)
                continue

            self._transfer(source, dest, active)
            step += block
            if step == target_step:
                return step

            spare = Peg.third(source, dest)
            if self._pegs[source]:
                self._pegs[spare].append(self._pegs[source].pop())
            step += 1
            source, dest = dest, spare
