"""Pydantic schemas for battle configuration and reports."""

from .config import BattleConfig
from .reports import BattleReport

__all__ = ["BattleConfig", "BattleReport"]
