"""
Frontline - Rules engine for a two-player tactical card game.

Two five-slot front lines face off; units wait in a three-slot
reinforcement row until their delay expires, trigger abilities from their
board position, and fight column by column against health and morale.
The engine provides:
- State management
- Legal action generation
- Deterministic end-of-turn resolution
- An in-memory session layer and HTTP API
"""

__version__ = "0.1.0"
