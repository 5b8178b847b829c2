# src/day_planner/core/errors.py

from __future__ import annotations


class PlannerError(Exception):
    """Base class for planner errors."""


class ValidationError(PlannerError, ValueError):
    """
    Required input is empty or malformed.

    Raised before any state change, so callers can simply report the rejection.
    """


class PersistenceError(PlannerError, RuntimeError):
    """
    The persistence gateway could not store a value (disk full, locked db, ...).

    Stores roll back their in-memory change before letting this propagate.
    """
