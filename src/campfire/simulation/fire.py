"""
Fire Thermal Model
==================
The fire is kept alive solely by the fuel the player throws in, and keeps
burning while they sleep.

Each fuel item is FRESH until it has been held above its minimum activation
temperature long enough to absorb its activation threshold, then BURNING until
its energy runs out (SPENT, removed from the fire). A burning item whose fire
cools below its minimum activation temperature goes back out to FRESH.

The fire's temperature is never set directly. Each tick it relaxes toward a
target: the mean of the ambient air and every item's temperature contribution,
weighted by the air's pseudo-energy and each item's remaining energy. Cold
fresh fuel therefore steals heat from the fire, and a fire with too much cold
fuel thrown in at once can go out.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence
import logging

import numpy as np

from campfire import config
from campfire.model.errors import BurntOut
from campfire.model.items import ItemId
from campfire.simulation.burning_item import BurnedState, BurningItem
from campfire.utils import weighted_mean

logger = logging.getLogger(__name__)


@dataclass
class FireConstants:
    """Tunable coupling constants of the thermal model."""
    heat_gain_rate: float = config.HEAT_GAIN_RATE
    decay_rate: float = config.DECAY_RATE
    burn_rate: float = config.BURN_RATE
    relaxation_constant: float = config.RELAXATION_CONSTANT


class Fire:
    """
    A campfire: an ordered collection of fuel items plus the fire-wide
    temperature they share.

    Iteration order of the items never changes the physics of a tick; it only
    decides which items a summary lists first.
    """

    def __init__(
        self,
        items: Optional[Sequence[BurningItem]] = None,
        temperature: float = config.STARTING_FIRE_TEMPERATURE,
        ambient_temperature: float = config.DEFAULT_AMBIENT_TEMPERATURE,
        tick_resolution: float = config.DEFAULT_TICK_RESOLUTION,
        fresh_fuel_radiates: bool = False,
        weight_of_ambient: float = config.DEFAULT_WEIGHT_OF_AMBIENT,
        constants: Optional[FireConstants] = None,
    ) -> None:
        """
        Args:
            items: Initial fuel items, in order.
            temperature: Starting temperature of the fire in Kelvin.
            ambient_temperature: Temperature of the surrounding air in Kelvin.
            tick_resolution: Time that passes in one tick. Must be positive.
            fresh_fuel_radiates: Whether FRESH items above their minimum
                activation temperature heat the fire in proportion to their
                activation progress.
            weight_of_ambient: Pseudo-energy of the ambient air in the weighted
                mean of temperature. Simulates heat escaping into the atmosphere.
            constants: Coupling constants. Defaults to the values in `config`.
        """
        self._items: List[BurningItem] = list(items) if items is not None else []
        self._temperature = temperature
        self._ambient_temperature = ambient_temperature
        self.tick_resolution = tick_resolution
        self.fresh_fuel_radiates = fresh_fuel_radiates
        self.weight_of_ambient = weight_of_ambient
        self.constants = constants if constants is not None else FireConstants()

        self._temperature_delta = 0.0
        self._ambient_temperature_delta = 0.0
        self._energy_remaining_delta = 0.0
        self._time_alive = 0.0

    @classmethod
    def init(cls) -> Fire:
        """Create the fire the player starts the game with: a few embers of medium sticks."""
        embers = [
            BurningItem.new_already_burning(ItemId.MEDIUM_STICK, config.STARTING_EMBER_FRACTION)
            for _ in range(config.STARTING_EMBER_COUNT)
        ]
        fire = cls(items=embers)
        logger.info(f"Fire started with {len(embers)} embers at {fire.temperature:.2f} K.")
        return fire

    # --- Getters and setters ---

    @property
    def items(self) -> tuple[BurningItem, ...]:
        """The items in the fire, including ones not burning yet."""
        return tuple(self._items)

    @property
    def temperature(self) -> float:
        """Current temperature of the fire. Only a tick moves it."""
        return self._temperature

    @property
    def ambient_temperature(self) -> float:
        return self._ambient_temperature

    @ambient_temperature.setter
    def ambient_temperature(self, value: float) -> None:
        self._ambient_temperature = value

    @property
    def tick_resolution(self) -> float:
        """Time that passes per tick. Coarser resolution means less precision."""
        return self._tick_resolution

    @tick_resolution.setter
    def tick_resolution(self, value: float) -> None:
        if value <= 0:
            raise ValueError(f"tick_resolution must be positive, got {value}.")
        self._tick_resolution = value

    @property
    def weight_of_ambient(self) -> float:
        return self._weight_of_ambient

    @weight_of_ambient.setter
    def weight_of_ambient(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"weight_of_ambient must not be negative, got {value}.")
        self._weight_of_ambient = value

    @property
    def temperature_delta(self) -> float:
        """Change in temperature during the last tick."""
        return self._temperature_delta

    @property
    def ambient_temperature_delta(self) -> float:
        """Change in ambient temperature during the last tick."""
        return self._ambient_temperature_delta

    @property
    def energy_remaining_delta(self) -> float:
        """Change in energy remaining during the last tick."""
        return self._energy_remaining_delta

    @property
    def time_alive(self) -> float:
        """Total time the fire has been ticked for."""
        return self._time_alive

    # --- Fuel ---

    def add_item(self, item_id: ItemId) -> Fire:
        """
        Add a fresh, unburning item to the fire.

        Raises:
            NotFlammable: The item does not burn. The fire is left unchanged.
        """
        self._items.append(BurningItem.new(item_id))
        logger.debug(f"Added {item_id} to the fire.")
        return self

    def add_items(self, item_id: ItemId, count: int) -> Fire:
        """
        Add `count` of the same fresh item to the fire.

        Raises:
            NotFlammable: The item does not burn. No items are added.
        """
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}.")
        new_items = [BurningItem.new(item_id) for _ in range(count)]
        self._items.extend(new_items)
        logger.debug(f"Added {count}x {item_id} to the fire.")
        return self

    # --- Queries ---

    def burning_items(self) -> Iterator[BurningItem]:
        return (item for item in self._items if item.burned_state == BurnedState.BURNING)

    def fresh_items(self) -> Iterator[BurningItem]:
        return (item for item in self._items if item.burned_state == BurnedState.FRESH)

    def energy_remaining(self) -> float:
        """Total energy in the fire, burning and unburning items alike."""
        return sum((item.remaining_energy for item in self._items), 0.0)

    def burning_energy_remaining(self) -> float:
        """Energy remaining in exclusively the burning items."""
        return sum((item.remaining_energy for item in self.burning_items()), 0.0)

    def fresh_energy_remaining(self) -> float:
        """Energy remaining in exclusively the fresh items."""
        return sum((item.remaining_energy for item in self.fresh_items()), 0.0)

    def is_alive(self) -> bool:
        """True while at least one item is burning."""
        return any(item.burned_state == BurnedState.BURNING for item in self._items)

    def has_fresh_items(self) -> bool:
        """
        Does the fire hold fresh items?

        Note: this stays True after the fire has burnt out if fuel that never
        ignited is left in it.
        """
        return any(item.burned_state == BurnedState.FRESH for item in self._items)

    def target_temperature(self) -> float:
        """
        The temperature the fire would burn at, given its current items, if it
        had no thermal inertia. `tick_temperature` relaxes toward this value.
        """
        weighted_data = [(self._ambient_temperature, self._weight_of_ambient)]

        for item in self._items:
            weighted_data.append((self._item_temperature(item), item.remaining_energy))

        return weighted_mean(weighted_data)

    def _item_temperature(self, item: BurningItem) -> float:
        if item.burned_state == BurnedState.BURNING:
            return item.fuel.burn_temperature

        if (
            self.fresh_fuel_radiates
            and item.burned_state == BurnedState.FRESH
            and self._temperature >= item.fuel.minimum_activation_temperature
        ):
            # Ambient plus the share of the fuel's heat it has already absorbed
            potential = item.fuel.burn_temperature - self._ambient_temperature
            return self._ambient_temperature + potential * item.activation_percentage()

        return self._ambient_temperature

    # --- Time ---

    def ticks_for(self, duration: float) -> int:
        """Number of ticks `tick_time` needs to cover at least `duration`."""
        return max(0, int(np.ceil(duration / self._tick_resolution - config.TIME_TOLERANCE)))

    def tick(self) -> None:
        """
        Pass one tick of time, progressing every item in the fire.

        Raises:
            BurntOut: No item in the fire is burning. The fire is left unchanged.
        """
        if not self.is_alive():
            logger.warning(f"Tried to tick a fire that burnt out after {self._time_alive:.1f}.")
            raise BurntOut()

        ambient_temperature_before = self._ambient_temperature
        temperature_before = self._temperature
        energy_remaining_before = self.energy_remaining()

        self.tick_items()
        self.tick_temperature()

        self._ambient_temperature_delta = self._ambient_temperature - ambient_temperature_before
        self._temperature_delta = self._temperature - temperature_before
        self._energy_remaining_delta = self.energy_remaining() - energy_remaining_before

        self._time_alive += self._tick_resolution

        if not self.is_alive():
            logger.info(f"The fire went out after {self._time_alive:.1f}.")

    def tick_multiple(self, count: int) -> None:
        """Tick `count` times."""
        for _ in range(count):
            self.tick()

    def tick_time(self, time: float) -> None:
        """
        Tick for at least `time`. The overshoot is the quantisation error of the
        tick resolution: a coarse resolution overshoots more.
        """
        self.tick_multiple(self.ticks_for(time))

    def tick_temperature(self) -> None:
        """
        Move the temperature one tick toward the target. The step is large when
        far from the target and asymptotic near it. With no items left the
        fire is dead and the temperature drops straight to ambient.
        """
        if self._items:
            temperature_difference = self.target_temperature() - self._temperature
            self._temperature += (
                temperature_difference / self.constants.relaxation_constant * self._tick_resolution
            )
        else:
            self._temperature = self._ambient_temperature

    def tick_items(self) -> None:
        """
        Tick every item, then remove the ones that are spent.

        Every next state is computed from the same pre-tick fire temperature
        into a new list, so no item sees another item's update of this tick.
        """
        next_items: List[BurningItem] = []
        for item in self._items:
            if item.burned_state == BurnedState.FRESH:
                next_items.append(self.heat_item_tick(item))
            elif item.burned_state == BurnedState.BURNING:
                next_items.append(self.burn_item_tick(item))
            else:
                next_items.append(item.copy())

        self._items = [item for item in next_items if item.burned_state != BurnedState.SPENT]

    def heat_item_tick(self, item: BurningItem) -> BurningItem:
        """Next state of an unburning item. Items heat up faster in a hotter fire."""
        item = item.copy()
        fuel = item.fuel
        hot_enough = self._temperature >= fuel.minimum_activation_temperature

        if hot_enough:
            item.activation_progress += (
                self._temperature * self.constants.heat_gain_rate * self._tick_resolution
            )
        else:
            # Decay in proportion to the progress already made and the fuel's potential
            item.activation_progress -= (
                (fuel.burn_temperature - self._ambient_temperature)
                * item.activation_percentage()
                * self.constants.decay_rate
                * self._tick_resolution
            )

        if item.activation_progress >= item.activation_threshold and hot_enough:
            item.ignite()
            logger.debug(f"{item.item_id} caught fire at {self._temperature:.2f} K.")

        return item

    def burn_item_tick(self, item: BurningItem) -> BurningItem:
        """
        Next state of a burning item. Items burn faster in a hotter fire.

        Running out of energy makes the item SPENT; a fire colder than the
        item's minimum activation temperature puts it back out to FRESH. Both
        checks run in that order on the same tick, so going out wins and leaves
        a FRESH item with no energy.
        """
        item = item.copy()
        item.remaining_energy -= self._temperature * self.constants.burn_rate * self._tick_resolution

        if item.remaining_energy <= 0.0:
            item.spend()
            logger.debug(f"{item.item_id} burnt up.")

        if self._temperature < item.fuel.minimum_activation_temperature:
            item.extinguish()
            logger.debug(f"{item.item_id} went out at {self._temperature:.2f} K.")

        return item
