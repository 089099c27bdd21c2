"""
Global / experimental configuration flags.
"""

from dataclasses import dataclass


@dataclass
class GSConfig:
    # Re-verify structural invariants after mutations (slow).
    debug: bool = False


config = GSConfig()
