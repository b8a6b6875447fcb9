"""
In-Progress Crafts
==================
A craft is paid for with fire time. Once a recipe has been accepted (its
ingredients already taken from the inventory), the caller drives it by
handing it the fire and a time budget, much like polling a future:

    result = craft.progress(fire, 30.0)
    while isinstance(result, Pending):
        result = result.craft.progress(fire, 30.0)
    products = result.items

Every call consumes the craft it was called on. A Pending result carries the
craft to call next; calling the old one again raises CraftConsumed.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Union
import logging

from campfire import config
from campfire.crafting.recipe import ItemStack
from campfire.model.errors import CraftConsumed

if TYPE_CHECKING:
    from campfire.crafting.recipe import Recipe
    from campfire.simulation.fire import Fire

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ready:
    """The craft (or uncraft) has finished. Contained are the items it returned."""
    items: tuple[ItemStack, ...]


@dataclass(frozen=True)
class Pending:
    """More time is needed. Contained is the craft to poll next."""
    craft: InProgressCraft


CraftResult = Union[Ready, Pending]


@dataclass
class InProgressCraft:
    """
    A recipe being crafted.

    ingredients: What cancelling the craft gives back.
    products: What finishing the craft gives.
    recipe_time: Total forward work the recipe takes.
    time_remaining: Forward work left. Uncrafting pushes it back up toward
        recipe_time.
    craft_speed: Forward work done per unit of fire time.
    uncraft_multiplier: How many times faster undoing work is than doing it.
    """
    ingredients: tuple[ItemStack, ...]
    products: tuple[ItemStack, ...]
    recipe_time: float
    time_remaining: float
    craft_speed: float = config.CRAFT_SPEED
    uncraft_multiplier: float = config.UNCRAFT_MULTIPLIER
    _consumed: bool = field(default=False, init=False, repr=False, compare=False)

    @classmethod
    def from_recipe(
        cls,
        recipe: Recipe,
        craft_speed: float = config.CRAFT_SPEED,
        uncraft_multiplier: float = config.UNCRAFT_MULTIPLIER,
    ) -> InProgressCraft:
        """Start a craft of `recipe` from scratch."""
        return cls(
            ingredients=recipe.ingredients,
            products=recipe.products,
            recipe_time=recipe.craft_time,
            time_remaining=recipe.craft_time,
            craft_speed=craft_speed,
            uncraft_multiplier=uncraft_multiplier,
        )

    def time_needed(self) -> float:
        """Fire time needed to finish the craft."""
        return self.time_remaining / self.craft_speed

    def uncraft_time(self) -> float:
        """
        Fire time needed to reverse the craft. Faster than crafting, and faster
        still the less work has been put in.
        """
        return (self.recipe_time - self.time_remaining) / self.uncraft_multiplier

    def complete(self, fire: Fire) -> tuple[ItemStack, ...]:
        """
        Finish the craft now, ticking the fire for however long it has left.

        Raises:
            BurntOut: The fire burnt out while crafting.
        """
        return self.progress(fire, self.time_needed()).items

    def progress(self, fire: Fire, max_time: float) -> CraftResult:
        """
        Progress the craft by at most `max_time` of fire time. Only the time
        necessary to finish is taken.

        Returns:
            Ready with the products, or Pending with the craft to poll next.

        Raises:
            BurntOut: The fire burnt out while crafting.
        """
        self._consume()
        time_needed = self.time_needed()

        if max_time >= time_needed - config.TIME_TOLERANCE:
            fire.tick_time(min(max_time, time_needed))
            logger.info(f"Craft finished: {self.products}")
            return Ready(self.products)

        fire.tick_time(max_time)
        craft = replace(self, time_remaining=self.time_remaining - max_time * self.craft_speed)
        logger.debug(f"Craft pending, {craft.time_remaining:.2f} of {self.recipe_time:.2f} remaining.")
        return Pending(craft)

    def cancel(self, fire: Fire) -> tuple[ItemStack, ...]:
        """
        Reverse the craft completely, ticking the fire for the uncraft time,
        and return the ingredients.

        Raises:
            BurntOut: The fire burnt out while uncrafting.
        """
        self._consume()
        fire.tick_time(self.uncraft_time())
        logger.info(f"Craft cancelled, returned: {self.ingredients}")
        return self.ingredients

    def progress_cancel(self, fire: Fire, max_time: float) -> CraftResult:
        """
        Reverse the craft by at most `max_time` of fire time. Only the time
        necessary to finish the uncraft is taken.

        Returns:
            Ready with the ingredients, or Pending with the craft to poll next.

        Raises:
            BurntOut: The fire burnt out while uncrafting.
        """
        self._consume()
        time_left = self.uncraft_time()

        if max_time >= time_left - config.TIME_TOLERANCE:
            fire.tick_time(min(max_time, time_left))
            logger.info(f"Craft cancelled, returned: {self.ingredients}")
            return Ready(self.ingredients)

        fire.tick_time(max_time)
        # Undoing work puts forward work back on the clock
        craft = replace(
            self,
            time_remaining=min(self.recipe_time, self.time_remaining + max_time * self.uncraft_multiplier),
        )
        logger.debug(f"Uncraft pending, {craft.uncraft_time():.2f} left to undo.")
        return Pending(craft)

    def _consume(self) -> None:
        if self._consumed:
            raise CraftConsumed()
        self._consumed = True
