"""fixtrig public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .engines.cyclic import (
    sin,
    cos,
    explain,
    decompose,
)
from .core.fixed import (
    SCALE,
    PI,
    TWO_PI,
    PI_OVER_TWO,
    to_fixed,
    from_fixed,
)
from .core.types import CyclicPhase

__all__ = [
    "sin",
    "cos",
    "explain",
    "decompose",
    "SCALE",
    "PI",
    "TWO_PI",
    "PI_OVER_TWO",
    "to_fixed",
    "from_fixed",
    "CyclicPhase",
]
