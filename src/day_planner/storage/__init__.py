# src/day_planner/storage/__init__.py

from .json_gateway import JsonFileGateway
from .sqlite_gateway import SqliteGateway

__all__ = ["JsonFileGateway", "SqliteGateway"]
