"""
Tessera - Tile-Drafting Game Engine

A deterministic engine for a two-player tile-drafting board game.
Given a seed, the engine provides:
- State management with explicit random-state threading
- Draft, placement and round-end rules
- Legal action generation
- A thin session/API layer for a presentation client
"""

__version__ = "0.1.0"
