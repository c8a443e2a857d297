"""
CLI Commands
"""

from . import account, entities

__all__ = ["account", "entities"]
