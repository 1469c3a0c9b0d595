"""
Bots module - Scripted opponent implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- BogoPolicy: Heuristic opponent (win, block, swap, mirror)
- HeroPolicy: Pathfinding opponent (win, block, shortest path)
- create_policy: Factory keyed by the reserved AI names
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .policy import BotPolicy, BotDecision, DecisionRule, convert_move_to_command
from .bogo import BogoPolicy
from .hero import HeroPolicy

if TYPE_CHECKING:
    from ..session.manager import GameManager


POLICIES: dict[str, type[BotPolicy]] = {
    BogoPolicy.NAME: BogoPolicy,
    HeroPolicy.NAME: HeroPolicy,
}

AI_NAMES = tuple(POLICIES)


def create_policy(name: str, manager: GameManager) -> BotPolicy | None:
    """Policy for a reserved AI name, or None for a human player."""
    policy_class = POLICIES.get(name)
    if policy_class is None:
        return None
    return policy_class(manager)


__all__ = [
    "BotPolicy",
    "BotDecision",
    "DecisionRule",
    "convert_move_to_command",
    "BogoPolicy",
    "HeroPolicy",
    "POLICIES",
    "AI_NAMES",
    "create_policy",
]
