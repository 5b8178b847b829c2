# src/day_planner/__init__.py

"""Single-user day planner: day-keyed tasks, calendar projections, emotions and birthdays."""

__version__ = "0.1.0"
