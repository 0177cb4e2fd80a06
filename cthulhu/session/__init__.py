"""
Session Module - Keeps track of the games being played.

Games are EPHEMERAL:
- Created by an external setup step, then registered
- No persistence to database
- Dropped when the caller is done with them
"""

from .manager import GameManager

__all__ = [
    "GameManager",
]
