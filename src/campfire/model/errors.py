"""
Error Taxonomy
==============
Typed exceptions raised by the simulation.

Construction-time validation (bounds, non-flammable fuel) raises; runtime
updates of valid values (damage, healing, capacity bookkeeping) saturate
instead. Data-carrying errors keep their payload as attributes so a caller
can present it to a user or a planner.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from campfire.model.bounded import BoundedFloat
    from campfire.model.items import ItemId


def _format_items(items: Sequence[tuple[ItemId, int]]) -> str:
    return ", ".join(f"{count}x {item}" for item, count in items)


# ------------------------------------------------------------------------------
# BoundedFloat
# ------------------------------------------------------------------------------
class BoundedFloatError(ValueError):
    """Invalid construction or rebinding of a BoundedFloat."""


class InvalidBounds(BoundedFloatError):
    def __init__(self, minimum: float, maximum: float):
        super().__init__(f"Invalid bounds: max {maximum} is below min {minimum}.")
        self.minimum = minimum
        self.maximum = maximum


class TooLow(BoundedFloatError):
    def __init__(self, value: float, minimum: float):
        super().__init__(f"Value {value} is below the minimum {minimum}.")
        self.value = value
        self.minimum = minimum


class TooHigh(BoundedFloatError):
    def __init__(self, value: float, maximum: float):
        super().__init__(f"Value {value} is above the maximum {maximum}.")
        self.value = value
        self.maximum = maximum


# ------------------------------------------------------------------------------
# Assets
# ------------------------------------------------------------------------------
class AssetNotFound(LookupError):
    def __init__(self, item: ItemId, kind: str):
        super().__init__(f"Asset not found: no {kind} data for {item}.")
        self.item = item
        self.kind = kind


# ------------------------------------------------------------------------------
# Fire
# ------------------------------------------------------------------------------
class BurnItemError(Exception):
    """An item could not be put into a fire."""


class NotFlammable(BurnItemError):
    def __init__(self, item: ItemId):
        super().__init__(f"{item} is not a flammable item.")
        self.item = item


class ItemNotFresh(RuntimeError):
    """Activation data was requested from an item that is not heating up."""


class FireError(Exception):
    """An operation on a fire could not be carried out."""


class BurntOut(FireError):
    def __init__(self) -> None:
        super().__init__("Can not tick the fire after it has died.")


# ------------------------------------------------------------------------------
# Inventory
# ------------------------------------------------------------------------------
class InventoryError(Exception):
    """An inventory operation could not be carried out."""


class ItemNotFound(InventoryError):
    def __init__(self, item: ItemId):
        super().__init__(f"The item {item} does not exist in the inventory.")
        self.item = item


class NotEnough(InventoryError):
    def __init__(self, item: ItemId, available: int):
        super().__init__(
            f"Not enough of the item {item} to take from the inventory. "
            f"Count {available} are currently available."
        )
        self.item = item
        self.available = available


class NoCapacity(InventoryError):
    """The inventory could never hold the items, even when empty."""

    def __init__(self, item: ItemId, count: int, max_capacity: float):
        super().__init__(
            f"Could never store count {count} of item {item}, even when empty. "
            f"Total capacity: {max_capacity}"
        )
        self.item = item
        self.count = count
        self.max_capacity = max_capacity


class NoAvailableCapacity(InventoryError):
    """The inventory could hold the items, but not with what it already holds."""

    def __init__(self, item: ItemId, count: int, used_capacity: BoundedFloat):
        super().__init__(
            f"Not enough available capacity to store count {count} of item {item}. "
            f"Used capacity: {used_capacity.current} "
            f"Total capacity: {used_capacity.max}"
        )
        self.item = item
        self.count = count
        self.used_capacity = used_capacity


class MissingItems(InventoryError):
    def __init__(self, missing: Sequence[tuple[ItemId, int]]):
        super().__init__(f"The following items are missing: {_format_items(missing)}")
        self.missing = list(missing)


# ------------------------------------------------------------------------------
# Crafting
# ------------------------------------------------------------------------------
class CraftError(Exception):
    """A craft could not be started."""


class NoRecipe(CraftError):
    def __init__(self, item: ItemId):
        super().__init__(f"No compatible recipe found to craft: {item}.")
        self.item = item


class MissingIngredients(CraftError):
    def __init__(self, missing: Sequence[tuple[ItemId, int]]):
        super().__init__(f"Insufficient ingredients to craft: {_format_items(missing)}.")
        self.missing = list(missing)


class CraftConsumed(RuntimeError):
    """An in-progress craft was used again after it had been consumed."""

    def __init__(self) -> None:
        super().__init__("This craft has already been consumed; use the craft returned by the last call.")
