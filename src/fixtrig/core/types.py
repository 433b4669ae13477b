from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class CyclicPhase:
    """An angle reduced to the 30-bit cycle and split into table coordinates."""
    angle: int                 # unsigned word the reduction started from
    cycle: int                 # [0, 2**30), one full turn = 2**30
    quadrant: int              # 0..3, bits 29 and 28 of cycle
    is_odd_quadrant: bool      # quadrants 0 and 2 walk the table upward
    is_negative_quadrant: bool # quadrants 2 and 3
    index: int                 # 0..255, already mirrored for even quadrants
    interp: int                # 0..2**16-1, position between index and index+1
