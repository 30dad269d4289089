"""Exception taxonomy for the dungeon simulation.

Two failure classes exist:

- **InvalidArgument**: a caller asked for something that cannot be
  satisfied (e.g. sampling more points than a region holds).  Raised
  immediately, never silently reduced.
- **InvariantViolation**: the engine's own state is broken (e.g. a mob
  standing outside the floor).  This is a defect, so it should abort the
  run rather than be caught and papered over.
"""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for all simulation errors."""


class InvalidArgument(SimulationError, ValueError):
    """Raised when an operation is called with unsatisfiable arguments."""


class InvariantViolation(SimulationError, RuntimeError):
    """Raised when simulation state breaks one of its invariants."""
