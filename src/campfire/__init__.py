"""
Campfire
========
Thermal simulation of a survival-game campfire fed by discrete fuel items,
and the time-driven crafting that consumes the fire's time.
"""
from campfire.simulation.burning_item import BurnedState, BurningItem
from campfire.simulation.fire import Fire, FireConstants
from campfire.crafting.craft import InProgressCraft, Pending, Ready
from campfire.crafting.recipe import Recipe, RecipeSet
from campfire.model.bounded import BoundedFloat
from campfire.model.items import ItemId

__all__ = [
    "BoundedFloat",
    "BurnedState",
    "BurningItem",
    "Fire",
    "FireConstants",
    "InProgressCraft",
    "ItemId",
    "Pending",
    "Ready",
    "Recipe",
    "RecipeSet",
]
