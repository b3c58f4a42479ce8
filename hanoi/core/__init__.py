"""Core modules for the hanoi engine.

- engine: HanoiEngine state machine and direct step jumps
- exceptions: error hierarchy rooted at HanoiError
"""

from hanoi.core.engine import HanoiEngine
from hanoi.core.exceptions import ConfigurationError, HanoiError, InvalidRingsCount

__all__ = [
    "HanoiEngine",
    "HanoiError",
    "ConfigurationError",
    "InvalidRingsCount",
]
