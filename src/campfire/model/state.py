"""
Game State (Data Model)
=======================
This module defines the central data structure of a running game session.

Why is this file needed?
------------------------
1. State Management: It holds the fire, the player and the recipes of one
   session in one place.
2. Dependency Injection: The recipe set is constructed once per session and
   handed to the player, instead of being reached for as a global.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from campfire.crafting.recipe import RecipeSet
from campfire.model import assets
from campfire.model.player import Player
from campfire.simulation.fire import Fire

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    """Holds the entire state of one game session."""
    recipe_set: RecipeSet = field(default_factory=assets.default_recipe_set)
    fire: Fire = field(default_factory=Fire.init)
    player: Player = field(init=False)

    def __post_init__(self) -> None:
        self.player = Player.init(self.recipe_set)

    def reset(self) -> None:
        """Start a new session with the same recipes."""
        self.fire = Fire.init()
        self.player = Player.init(self.recipe_set)
        logger.info("Game state has been reset.")
