"""Tests for the game session state."""

from campfire.crafting.recipe import RecipeSet
from campfire.model import assets
from campfire.model.state import GameState


class TestGameState:
    """One session's fire, player and recipes."""

    def test_defaults(self):
        """A new session uses the shipped recipes and a starting fire."""
        state = GameState()
        assert state.recipe_set is assets.default_recipe_set()
        assert state.player.recipe_set is state.recipe_set
        assert len(state.fire.items) == 3

    def test_injected_recipes(self):
        """A custom recipe set reaches the player."""
        recipes = RecipeSet()
        state = GameState(recipe_set=recipes)
        assert state.player.recipe_set is recipes

    def test_reset(self):
        """Reset starts a new fire and player."""
        state = GameState()
        state.fire.tick()
        state.player.damage(10.0)
        state.reset()
        assert state.fire.time_alive == 0.0
        assert state.player.hit_points.current == 100.0
