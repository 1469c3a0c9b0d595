"""
Hexgame - Hex Board Game Engine

A turn-based engine for playing Hex between two contestants, human or scripted.
The engine provides:
- Board model with connectivity-based win detection
- Turn state machine with pie-rule swap and move history
- Registry of named, concurrently tracked game sessions
- Bot policies for scripted opponents (BogoAI, HeroAI)
"""

__version__ = "0.1.0"
