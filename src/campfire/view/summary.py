from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List

from campfire import config
from campfire.simulation.burning_item import BurningItem

if TYPE_CHECKING:
    from campfire.simulation.fire import Fire

SEPARATOR = "==========================="


def _percentage(part: float, whole: float) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


def _item_lines(
    items: Iterable[BurningItem],
    label: str,
    limit: int,
    fraction: Callable[[BurningItem], float],
) -> List[str]:
    lines = []
    for i, item in enumerate(items):
        if i >= limit:
            lines.append("...")
            break

        lines.append(f"{label} {item.item.name.upper()}: {fraction(item) * 100.0:.0f}%")
    return lines


def fire_summary(fire: Fire, ticks: int = 1, limit: int = config.SUMMARY_ITEM_LIMIT) -> str:
    """
    Summary of a fire for printing to the player.

    Args:
        fire: The fire to describe.
        ticks: Deltas of the last tick are scaled by this, to approximate the
            change over a turn of several ticks.
        limit: Maximum number of items listed per category.
    """
    energy = fire.energy_remaining()
    burning_energy = fire.burning_energy_remaining()
    fresh_energy = fire.fresh_energy_remaining()

    lines = [
        f"TEMPERATURE: {fire.temperature:.0f}K ({fire.temperature_delta * ticks:.2f})",
        f"BURNING ENERGY: {burning_energy:.0f} ({_percentage(burning_energy, energy):.0f}%) "
        f"({fire.energy_remaining_delta * ticks:.2f})",
        f"FRESH ENERGY: {fresh_energy:.0f} ({_percentage(fresh_energy, energy):.0f}%)",
        SEPARATOR,
        *_item_lines(fire.fresh_items(), "HEATING", limit, BurningItem.activation_percentage),
        SEPARATOR,
        *_item_lines(fire.burning_items(), "BURNING", limit, BurningItem.remaining_percentage),
    ]
    return "\n".join(lines) + "\n"
