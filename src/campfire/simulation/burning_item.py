from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import Optional
import logging

from campfire.model import assets
from campfire.model.errors import ItemNotFresh, NotFlammable
from campfire.model.items import FuelItem, Item, ItemId

logger = logging.getLogger(__name__)


class BurnedState(StrEnum):
    FRESH = "fresh"
    BURNING = "burning"
    SPENT = "spent"


@dataclass
class BurningItem:
    """
    An item that is burning (or is about to be burning) in a fire.

    The fuel parameters are copied in when the item is created and never looked
    up again. `activation_progress` is a float exactly while the item is
    FRESH, and None otherwise.
    """
    item_id: ItemId
    item: Item
    fuel: FuelItem
    remaining_energy: float
    activation_progress: Optional[float]
    burned_state: BurnedState

    @classmethod
    def new(cls, item_id: ItemId) -> BurningItem:
        """
        Create an item that has not started to burn, with all of its energy.

        Raises:
            NotFlammable: The item has no fuel data.
        """
        fuel = cls._lookup_fuel(item_id)
        return cls(
            item_id=item_id,
            item=assets.item(item_id),
            fuel=fuel,
            remaining_energy=fuel.burn_energy,
            activation_progress=0.0,
            burned_state=BurnedState.FRESH,
        )

    @classmethod
    def new_already_burning(cls, item_id: ItemId, remaining_fraction: float) -> BurningItem:
        """
        Create an item that is already burning with `remaining_fraction` (0.0 to
        1.0) of its energy left. Used to seed the embers of a new fire.

        Raises:
            NotFlammable: The item has no fuel data.
        """
        if not 0.0 <= remaining_fraction <= 1.0:
            raise ValueError(f"remaining_fraction must be within [0, 1], got {remaining_fraction}.")

        fuel = cls._lookup_fuel(item_id)
        return cls(
            item_id=item_id,
            item=assets.item(item_id),
            fuel=fuel,
            remaining_energy=fuel.burn_energy * remaining_fraction,
            activation_progress=None,
            burned_state=BurnedState.BURNING,
        )

    @staticmethod
    def _lookup_fuel(item_id: ItemId) -> FuelItem:
        fuel = assets.fuel_parameters(item_id)
        if fuel is None:
            logger.warning(f"Rejected non-flammable item as fuel: {item_id}")
            raise NotFlammable(item_id)
        return fuel

    @property
    def activation_threshold(self) -> float:
        return self.fuel.activation_threshold

    def activation_percentage(self) -> float:
        """
        How far the item is toward igniting, as a fraction of its activation
        threshold. Only defined while the item is FRESH.
        """
        if self.burned_state != BurnedState.FRESH or self.activation_progress is None:
            raise ItemNotFresh(f"{self.item_id} is {self.burned_state}; it has no activation progress.")
        return self.activation_progress / self.activation_threshold

    def remaining_percentage(self) -> float:
        """Remaining energy as a fraction of the fuel's full burn energy."""
        return self.remaining_energy / self.fuel.burn_energy

    def copy(self) -> BurningItem:
        return replace(self)

    # --- State transitions ---

    def ignite(self) -> None:
        self.activation_progress = None
        self.burned_state = BurnedState.BURNING

    def extinguish(self) -> None:
        """Go back out: the item is FRESH again and must be reheated from scratch."""
        self.activation_progress = 0.0
        self.burned_state = BurnedState.FRESH

    def spend(self) -> None:
        self.remaining_energy = 0.0
        self.burned_state = BurnedState.SPENT
