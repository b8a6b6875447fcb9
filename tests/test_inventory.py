"""Tests for the mass-limited inventory."""

import pytest

from campfire.model.errors import (
    InvalidBounds, ItemNotFound, MissingItems, NoAvailableCapacity, NoCapacity, NotEnough
)
from campfire.model.inventory import Inventory
from campfire.model.items import ItemId


@pytest.fixture
def inventory():
    """Room for four twigs."""
    return Inventory(100.0)


class TestInsert:
    """Capacity checks on insertion."""

    def test_insert(self, inventory):
        """Items and their mass are recorded."""
        inventory.insert(ItemId.TWIG, 3)
        assert inventory.count(ItemId.TWIG) == 3
        assert inventory.used_capacity.current == 75.0

    def test_no_available_capacity(self, inventory):
        """Fits when empty, but not on top of what is held."""
        inventory.insert(ItemId.TWIG, 3)
        with pytest.raises(NoAvailableCapacity) as excinfo:
            inventory.insert(ItemId.TWIG, 2)
        assert excinfo.value.used_capacity.current == 75.0
        assert inventory.count(ItemId.TWIG) == 3

    def test_no_capacity(self, inventory):
        """Would not fit even when empty."""
        inventory.insert(ItemId.TWIG, 3)
        with pytest.raises(NoCapacity) as excinfo:
            inventory.insert(ItemId.TWIG, 8)
        assert excinfo.value.max_capacity == 100.0

    def test_set_max_capacity(self, inventory):
        """Capacity can change, but not below zero."""
        inventory.set_max_capacity(300.0)
        inventory.insert(ItemId.SMALL_STICK, 1)
        with pytest.raises(InvalidBounds):
            inventory.set_max_capacity(-1.0)


class TestTake:
    """Removing items."""

    def test_take_one(self, inventory):
        """Taking frees the item's mass."""
        inventory.insert(ItemId.TWIG, 3)
        inventory.take_one(ItemId.TWIG)
        assert inventory.count(ItemId.TWIG) == 2
        assert inventory.used_capacity.current == 50.0

    def test_take_last(self, inventory):
        """Taking the last one removes the entry."""
        inventory.insert(ItemId.TWIG, 1)
        inventory.take_one(ItemId.TWIG)
        assert inventory.items == {}
        with pytest.raises(ItemNotFound):
            inventory.take_one(ItemId.TWIG)

    def test_not_enough(self, inventory):
        """Asking for more than held reports what is available."""
        inventory.insert(ItemId.TWIG, 2)
        with pytest.raises(NotEnough) as excinfo:
            inventory.take_amount(ItemId.TWIG, 3)
        assert excinfo.value.available == 2

    def test_take_all(self, inventory):
        """take_all empties the item and says how many there were."""
        inventory.insert(ItemId.TWIG, 4)
        assert inventory.take_all(ItemId.TWIG) == 4
        assert inventory.used_capacity.current == 0.0
        with pytest.raises(ItemNotFound):
            inventory.take_all(ItemId.TWIG)


class TestBulk:
    """Checking and taking several items at once."""

    def test_missing_items(self, inventory):
        """Only shortfalls are listed."""
        inventory.insert(ItemId.TWIG, 2)
        wanted = [(ItemId.TWIG, 1), (ItemId.LEAVES, 1)]
        assert inventory.missing_items(wanted) == [(ItemId.LEAVES, 1)]
        assert inventory.contains(ItemId.TWIG, 2)
        assert not inventory.contains(ItemId.TWIG, 3)

    def test_take_items_if_enough(self, inventory):
        """Everything present is taken."""
        inventory.insert(ItemId.TWIG, 2)
        inventory.take_items_if_enough([(ItemId.TWIG, 2)])
        assert inventory.count(ItemId.TWIG) == 0

    def test_take_items_is_atomic(self, inventory):
        """Nothing is taken if anything is missing."""
        inventory.insert(ItemId.TWIG, 2)
        with pytest.raises(MissingItems) as excinfo:
            inventory.take_items_if_enough([(ItemId.TWIG, 1), (ItemId.LEAVES, 1)])
        assert excinfo.value.missing == [(ItemId.LEAVES, 1)]
        assert inventory.count(ItemId.TWIG) == 2

    def test_repeated_entries_are_summed(self, inventory):
        """Wanting the same item twice asks for the sum of both."""
        inventory.insert(ItemId.TWIG, 3)
        wanted = [(ItemId.TWIG, 2), (ItemId.TWIG, 2)]
        assert inventory.missing_items(wanted) == [(ItemId.TWIG, 1)]
        with pytest.raises(MissingItems):
            inventory.take_items_if_enough(wanted)
        assert inventory.count(ItemId.TWIG) == 3

    def test_repeated_entries_taken_together(self, inventory):
        """Repeated entries are all taken when there are enough."""
        inventory.insert(ItemId.TWIG, 4)
        inventory.take_items_if_enough([(ItemId.TWIG, 2), (ItemId.TWIG, 2)])
        assert inventory.count(ItemId.TWIG) == 0
