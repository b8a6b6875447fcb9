"""
Item Data Structures
====================
Base item data present for every item in the game, plus the optional
specialisations (fuel, weapon). Static values live in `campfire.model.assets`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ItemId(StrEnum):
    """All item identifiers in the game. Item data itself is looked up, never stored here."""
    TWIG = "twig"
    SMALL_STICK = "small_stick"
    MEDIUM_STICK = "medium_stick"
    LARGE_STICK = "large_stick"
    MEDIUM_LOG = "medium_log"
    LARGE_LOG = "large_log"
    LEAVES = "leaves"
    SMALL_BUNDLE = "small_bundle"
    MEDIUM_BUNDLE = "medium_bundle"
    STONE = "stone"


@dataclass(frozen=True)
class Item:
    name: str
    description: str
    mass: float  # g


@dataclass(frozen=True)
class FuelItem:
    """
    Burn parameters of a flammable item.

    burn_energy: Total energy of the fuel, in no particular unit. It sets how
        long the fuel burns, how long it takes to ignite (together with
        activation_coefficient) and its weight in the fire's temperature.
    burn_temperature: Temperature the fuel burns at, in Kelvin.
    activation_coefficient: Fraction of burn_energy that must be absorbed as
        activation progress before the fuel ignites.
    minimum_activation_temperature: Fire temperature, in Kelvin, needed for the
        fuel to gain activation progress (and to keep burning).
    """
    burn_energy: float
    burn_temperature: float
    activation_coefficient: float
    minimum_activation_temperature: float

    def __post_init__(self) -> None:
        if self.burn_energy <= 0:
            raise ValueError(f"burn_energy must be positive, got {self.burn_energy}.")
        if self.burn_temperature <= 0:
            raise ValueError(f"burn_temperature must be positive, got {self.burn_temperature}.")
        if self.activation_coefficient <= 0:
            raise ValueError(f"activation_coefficient must be positive, got {self.activation_coefficient}.")

    @property
    def activation_threshold(self) -> float:
        return self.burn_energy * self.activation_coefficient


@dataclass(frozen=True)
class WeaponItem:
    hit_chance: float
    hit_damage: tuple[float, float]
