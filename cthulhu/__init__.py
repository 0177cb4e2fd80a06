"""
Cthulhu - Rules engine for a hidden-role card-revealing party game.

Investigators hunt for Elder Signs while cultists try to awaken Cthulhu.
The engine takes a proposed action and a game and provides:
- Validation of PlayCard / RevealCard actions
- Card effect resolution
- Round and game end detection
- Investigator hand-off, including Paranoia and Prescient Vision
"""

__version__ = "0.1.0"
