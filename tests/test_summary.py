"""Tests for the player-facing fire summary."""

from campfire.model.items import ItemId
from campfire.simulation.fire import Fire
from campfire.view.summary import SEPARATOR, fire_summary


class TestFireSummary:
    """The text shown between turns."""

    def test_starting_fire(self, fire):
        """Header lines and one line per ember."""
        lines = fire_summary(fire).splitlines()
        assert lines[0] == "TEMPERATURE: 873K (0.00)"
        assert lines[1] == "BURNING ENERGY: 2400 (100%) (0.00)"
        assert lines[2] == "FRESH ENERGY: 0 (0%)"
        assert lines.count(SEPARATOR) == 2
        assert lines.count("BURNING MEDIUM STICK: 80%") == 3

    def test_heating_items(self, fire):
        """Fresh items are listed with their activation progress."""
        fire.add_item(ItemId.TWIG)
        assert "HEATING TWIG: 0%" in fire_summary(fire).splitlines()

    def test_list_is_limited(self, fire):
        """Long lists are cut off with an ellipsis."""
        fire.add_items(ItemId.TWIG, 20)
        lines = fire_summary(fire, limit=15).splitlines()
        assert lines.count("HEATING TWIG: 0%") == 15
        assert "..." in lines

    def test_deltas_scaled_by_ticks(self, fire):
        """Per-tick deltas are scaled to the length of a turn."""
        fire.tick()
        summary = fire_summary(fire, ticks=5)
        assert f"({fire.temperature_delta * 5:.2f})" in summary

    def test_empty_fire(self):
        """A fire with nothing in it has no energy to divide."""
        lines = fire_summary(Fire()).splitlines()
        assert lines[1].startswith("BURNING ENERGY: 0 (0%)")
        assert lines[2] == "FRESH ENERGY: 0 (0%)"
