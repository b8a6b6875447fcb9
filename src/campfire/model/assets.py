"""
Asset Definitions (Catalog)
===========================
Static, read-only item data: base data for every item, fuel data for
flammable items, weapon data for items that can be swung, and the default
crafting recipes.

All lookups are pure and total over `ItemId`; "not every item is fuel" is
modelled as `None` (or `AssetNotFound` from the strict accessors).
"""
from __future__ import annotations

from functools import lru_cache
from typing import Dict, List, Optional

from campfire.crafting.recipe import Recipe, RecipeSet
from campfire.model.errors import AssetNotFound
from campfire.model.items import FuelItem, Item, ItemId, WeaponItem
from campfire.utils import celsius_to_kelvin


# ------------------------------------------------------------------------------
# Fuel profiles
# ------------------------------------------------------------------------------
def _wood(burn_energy: float) -> FuelItem:
    """Plain dry wood: burns at 600 °C once it has been held above 260 °C."""
    return FuelItem(
        burn_energy=burn_energy,
        burn_temperature=celsius_to_kelvin(600.0),
        activation_coefficient=0.5,
        minimum_activation_temperature=celsius_to_kelvin(260.0),
    )


# ------------------------------------------------------------------------------
# Tables
# ------------------------------------------------------------------------------
ITEMS: Dict[ItemId, Item] = {
    ItemId.TWIG: Item("twig", "A small twig.", 25.0),
    ItemId.SMALL_STICK: Item("small stick", "A small stick.", 300.0),
    ItemId.MEDIUM_STICK: Item("medium stick", "A medium-sized stick.", 1000.0),
    ItemId.LARGE_STICK: Item("large stick", "A large stick.", 2000.0),
    ItemId.MEDIUM_LOG: Item("medium log", "A medium-sized log.", 3500.0),
    ItemId.LARGE_LOG: Item("large log", "A large log.", 5000.0),
    ItemId.LEAVES: Item("dry leaf handful", "A medium-sized handful of dry leaves.", 100.0),
    ItemId.SMALL_BUNDLE: Item(
        "small stick bundle",
        "A bundle of small sticks compressed together to ensure a lesser surface area. "
        "This will burn slower than small sticks on their own.",
        1000.0,
    ),
    ItemId.MEDIUM_BUNDLE: Item(
        "medium stick bundle",
        "A bundle of medium sticks compressed together to ensure a lesser surface area. "
        "This will burn slower than medium sticks on their own.",
        2000.0,
    ),
    ItemId.STONE: Item("stone", "A fist-sized stone. It will not burn.", 500.0),
}

FUELS: Dict[ItemId, FuelItem] = {
    ItemId.TWIG: _wood(25.0),
    ItemId.SMALL_STICK: _wood(300.0),
    ItemId.MEDIUM_STICK: _wood(1000.0),
    ItemId.LARGE_STICK: _wood(2000.0),
    ItemId.MEDIUM_LOG: _wood(3500.0),
    ItemId.LARGE_LOG: _wood(5000.0),
    ItemId.LEAVES: FuelItem(
        burn_energy=100.0,
        burn_temperature=celsius_to_kelvin(500.0),
        activation_coefficient=1.5,
        minimum_activation_temperature=celsius_to_kelvin(400.0),
    ),
}
# Bundles burn like the stick they are as heavy as
FUELS[ItemId.SMALL_BUNDLE] = FUELS[ItemId.MEDIUM_STICK]
FUELS[ItemId.MEDIUM_BUNDLE] = FUELS[ItemId.LARGE_STICK]

WEAPONS: Dict[ItemId, WeaponItem] = {
    ItemId.SMALL_STICK: WeaponItem(hit_chance=0.35, hit_damage=(2.0, 4.0)),
    ItemId.MEDIUM_STICK: WeaponItem(hit_chance=0.4, hit_damage=(4.0, 6.0)),
    ItemId.LARGE_STICK: WeaponItem(hit_chance=0.5, hit_damage=(8.0, 15.0)),
    ItemId.MEDIUM_LOG: WeaponItem(hit_chance=0.3, hit_damage=(6.0, 17.5)),
    ItemId.LARGE_LOG: WeaponItem(hit_chance=0.2, hit_damage=(8.0, 20.0)),
    ItemId.STONE: WeaponItem(hit_chance=0.25, hit_damage=(3.0, 7.0)),
}


# ------------------------------------------------------------------------------
# Lookups
# ------------------------------------------------------------------------------
def item(item_id: ItemId) -> Item:
    """Base data of any item."""
    return ITEMS[item_id]


def item_mass(item_id: ItemId) -> float:
    """Mass of one item in grams."""
    return ITEMS[item_id].mass


def fuel_parameters(item_id: ItemId) -> Optional[FuelItem]:
    """Fuel data of an item, or None if the item does not burn."""
    return FUELS.get(item_id)


def fuel(item_id: ItemId) -> FuelItem:
    """Fuel data of an item. Raises AssetNotFound if the item does not burn."""
    parameters = fuel_parameters(item_id)
    if parameters is None:
        raise AssetNotFound(item_id, "fuel")
    return parameters


def weapon(item_id: ItemId) -> WeaponItem:
    """Weapon data of an item. Raises AssetNotFound if the item is not a weapon."""
    if item_id not in WEAPONS:
        raise AssetNotFound(item_id, "weapon")
    return WEAPONS[item_id]


@lru_cache(maxsize=1)
def default_recipe_set() -> RecipeSet:
    """
    The recipes shipped with the game. Built once and shared for the lifetime
    of the process; inject a different RecipeSet where one is needed.
    """
    recipe_set = RecipeSet()
    recipe_set.push(Recipe(
        ingredients=((ItemId.SMALL_STICK, 3),),
        products=((ItemId.SMALL_BUNDLE, 1),),
        craft_time=100.0,
    ))
    recipe_set.push(Recipe(
        ingredients=((ItemId.MEDIUM_STICK, 2),),
        products=((ItemId.MEDIUM_BUNDLE, 1),),
        craft_time=100.0,
    ))
    return recipe_set


def recipes_for_product(item_id: ItemId, recipe_set: Optional[RecipeSet] = None) -> List[Recipe]:
    """All recipes that produce `item_id`, in definition order."""
    if recipe_set is None:
        recipe_set = default_recipe_set()
    return recipe_set.filter_product(item_id)
