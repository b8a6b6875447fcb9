"""Shared fixtures."""

import pytest

from campfire.model.player import Player
from campfire.simulation.fire import Fire


@pytest.fixture
def fire():
    """The fire a new game starts with."""
    return Fire.init()


@pytest.fixture
def player():
    """A player with the default recipes and an empty inventory."""
    return Player.init()
