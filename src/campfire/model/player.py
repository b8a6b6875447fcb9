from __future__ import annotations

from typing import Optional
import logging

from campfire import config
from campfire.crafting.craft import InProgressCraft
from campfire.crafting.recipe import RecipeSet
from campfire.model import assets
from campfire.model.bounded import BoundedFloat
from campfire.model.errors import MissingIngredients, MissingItems, NoRecipe
from campfire.model.inventory import Inventory
from campfire.model.items import ItemId

logger = logging.getLogger(__name__)


class Player:
    """The player that plays the game."""

    def __init__(
        self,
        max_hp: float,
        inventory_capacity: float,
        recipe_set: Optional[RecipeSet] = None,
    ) -> None:
        """
        Args:
            max_hp: Maximum (and starting) hit points.
            inventory_capacity: Capacity of the inventory in grams.
            recipe_set: Recipes the player can craft from. Defaults to the
                recipes shipped with the game.
        """
        self.hit_points = BoundedFloat.new_zero_min(max_hp, max_hp)
        # Kelvin
        self.body_temperature = config.STARTING_BODY_TEMPERATURE
        self.inventory = Inventory(inventory_capacity)
        self.recipe_set = recipe_set if recipe_set is not None else assets.default_recipe_set()
        self.craft_speed = config.CRAFT_SPEED
        self.uncraft_speed = config.UNCRAFT_MULTIPLIER

    @classmethod
    def init(cls, recipe_set: Optional[RecipeSet] = None) -> Player:
        """A player with the default starting parameters."""
        return cls(config.DEFAULT_MAX_HIT_POINTS, config.DEFAULT_INVENTORY_CAPACITY, recipe_set)

    def damage(self, hp: float) -> None:
        self.hit_points -= hp

    def heal(self, hp: float) -> None:
        self.hit_points += hp

    def craft(self, item: ItemId) -> InProgressCraft:
        """
        Start crafting `item`, taking the first recipe for it whose ingredients
        are all in the inventory. Those ingredients are removed at once.

        Raises:
            NoRecipe: No recipe produces `item`.
            MissingIngredients: Recipes exist, but none can be afforded. Lists
                the shortfall of the last recipe tried.
        """
        compatible_recipes = self.recipe_set.filter_product(item)

        if not compatible_recipes:
            logger.warning(f"No recipe produces {item}.")
            raise NoRecipe(item)

        missing_items = []
        for recipe in compatible_recipes:
            try:
                self.inventory.take_items_if_enough(recipe.ingredients)
            except MissingItems as e:
                missing_items = e.missing
                continue

            logger.info(f"Started crafting {item} ({recipe.craft_time:.0f}).")
            return InProgressCraft.from_recipe(
                recipe,
                craft_speed=self.craft_speed,
                uncraft_multiplier=self.uncraft_speed,
            )

        logger.warning(f"Cannot craft {item}, missing: {missing_items}")
        raise MissingIngredients(missing_items)
