from __future__ import annotations

from collections import Counter
from typing import Dict, List, Sequence
import logging

from campfire.model import assets
from campfire.model.bounded import BoundedFloat
from campfire.model.errors import (
    ItemNotFound, MissingItems, NoAvailableCapacity, NoCapacity, NotEnough
)
from campfire.model.items import ItemId

logger = logging.getLogger(__name__)


def _totals(wanted_items: Sequence[tuple[ItemId, int]]) -> Counter[ItemId]:
    """Total wanted count per item, in order of first mention."""
    totals: Counter[ItemId] = Counter()
    for item, amount in wanted_items:
        totals[item] += amount
    return totals


class Inventory:
    """
    An inventory of items, limited by the total mass it can carry.

    The used capacity is a BoundedFloat in grams with a minimum of 0.0.
    """

    def __init__(self, capacity: float) -> None:
        """
        Args:
            capacity: The capacity of the inventory in grams.
        """
        self._items: Dict[ItemId, int] = {}
        self._used_capacity = BoundedFloat.new_zero_min(0.0, capacity)

    @property
    def used_capacity(self) -> BoundedFloat:
        return self._used_capacity

    @property
    def items(self) -> Dict[ItemId, int]:
        return dict(self._items)

    def set_max_capacity(self, value: float) -> None:
        """
        Set the capacity of the inventory in grams.

        Raises:
            InvalidBounds: The capacity was set below 0.0.
        """
        self._used_capacity = self._used_capacity.with_max(value)

    def count(self, item: ItemId) -> int:
        return self._items.get(item, 0)

    def insert(self, item: ItemId, count: int) -> None:
        """
        Insert `count` of `item` into the inventory.

        Raises:
            NoCapacity: The inventory could never hold that many, even empty.
            NoAvailableCapacity: The inventory cannot hold that many on top of
                what it already holds.
        """
        mass_of_insertion = assets.item_mass(item) * count

        if self._used_capacity.max < mass_of_insertion:
            raise NoCapacity(item, count, self._used_capacity.max)

        if self._used_capacity.max_diff() < mass_of_insertion:
            raise NoAvailableCapacity(item, count, self._used_capacity)

        self._used_capacity += mass_of_insertion
        self._items[item] = self._items.get(item, 0) + count

    def take_one(self, item: ItemId) -> None:
        """Take 1 `item` from the inventory."""
        self.take_amount(item, 1)

    def take_amount(self, item: ItemId, count: int) -> None:
        """
        Take `count` of `item` from the inventory.

        Raises:
            ItemNotFound: None of the item is in the inventory.
            NotEnough: Fewer than `count` of the item are in the inventory.
        """
        if item not in self._items:
            raise ItemNotFound(item)

        available = self._items[item]
        if available < count:
            raise NotEnough(item, available)

        self._used_capacity -= assets.item_mass(item) * count
        self._items[item] = available - count

        if self._items[item] == 0:
            del self._items[item]

    def take_all(self, item: ItemId) -> int:
        """
        Take every `item` from the inventory.

        Returns:
            The number of items taken.

        Raises:
            ItemNotFound: None of the item is in the inventory.
        """
        if item not in self._items:
            raise ItemNotFound(item)

        amount = self._items.pop(item)
        self._used_capacity -= assets.item_mass(item) * amount
        return amount

    def contains(self, item: ItemId, amount: int) -> bool:
        """Does the inventory hold at least `amount` of `item`?"""
        return self._items.get(item, 0) >= amount

    def missing_items(self, wanted_items: Sequence[tuple[ItemId, int]]) -> List[tuple[ItemId, int]]:
        """
        The shortfall of each wanted item the inventory does not hold enough of.
        Empty if everything is present.
        """
        missing = []
        for item, amount in _totals(wanted_items).items():
            shortfall = amount - self._items.get(item, 0)
            if shortfall > 0:
                missing.append((item, shortfall))
        return missing

    def take_items_if_enough(self, wanted_items: Sequence[tuple[ItemId, int]]) -> None:
        """
        Take `wanted_items` from the inventory, only if all of them are present.

        Raises:
            MissingItems: Something is missing. Nothing has been removed.
        """
        missing = self.missing_items(wanted_items)
        if missing:
            raise MissingItems(missing)

        for item, amount in _totals(wanted_items).items():
            if amount > 0:
                self.take_amount(item, amount)
