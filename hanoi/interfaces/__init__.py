"""Interfaces and value types shared by the engine and its hosts."""

from hanoi.interfaces.engine import IHanoiEngine
from hanoi.interfaces.pegs import NOOP_AT_BEGIN, NOOP_AT_END, Move, Peg

__all__ = [
    "IHanoiEngine",
    "Move",
    "Peg",
    "NOOP_AT_BEGIN",
    "NOOP_AT_END",
]
