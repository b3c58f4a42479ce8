"""Tower of Hanoi move engine.

This package provides a deterministic engine over the three pegs of the
puzzle, able to step through the optimal solution in either direction and
to jump straight to any step of it.

Getting started:
    from hanoi import HanoiEngine, Peg

    engine = HanoiEngine(3)
    engine.next()
    engine.jump_to_step(5)
    engine.peg_contents(Peg.TO)
"""

from hanoi.core.engine import HanoiEngine
from hanoi.core.exceptions import ConfigurationError, HanoiError, InvalidRingsCount
from hanoi.interfaces.engine import IHanoiEngine
from hanoi.interfaces.pegs import NOOP_AT_BEGIN, NOOP_AT_END, Move, Peg
from hanoi.utils.config_loader import EngineConfig, get_config, load_config

__all__ = [
    # Engine
    "HanoiEngine",
    "IHanoiEngine",
    # Value types
    "Move",
    "Peg",
    "NOOP_AT_BEGIN",
    "NOOP_AT_END",
    # Errors
    "HanoiError",
    "ConfigurationError",
    "InvalidRingsCount",
    # Configuration
    "EngineConfig",
    "get_config",
    "load_config",
]
