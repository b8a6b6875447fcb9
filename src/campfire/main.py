"""
Application Entry Point
=======================
Runs a scripted session against the fire: feeds it, crafts a bundle while it
burns, then lets it die, printing the fire's summary every turn.

It acts as the "Dependency Injection" root: it sets up logging, builds the
GameState and hands its pieces to each other.
"""
import logging

from campfire.logging_config import setup_logging
from campfire.model.errors import BurntOut
from campfire.model.items import ItemId
from campfire.model.state import GameState
from campfire.view.summary import fire_summary

logger = logging.getLogger(__name__)

# Fuel thrown in at the start of each turn, by turn number
FEEDING_PLAN = {
    0: (ItemId.TWIG, 4),
    2: (ItemId.SMALL_STICK, 2),
    5: (ItemId.MEDIUM_STICK, 1),
}


def main(ticks_per_turn: int = 5, max_turns: int = 2000, level: int = logging.INFO) -> float:
    """
    Returns:
        The time the fire stayed alive.
    """
    setup_logging(level=level)

    state = GameState()
    fire, player = state.fire, state.player

    # Something to craft while the fire burns
    player.inventory.insert(ItemId.SMALL_STICK, 3)
    craft = player.craft(ItemId.SMALL_BUNDLE)
    products = craft.complete(fire)
    for item, count in products:
        player.inventory.insert(item, count)

    for turn in range(max_turns):
        if turn in FEEDING_PLAN:
            item, count = FEEDING_PLAN[turn]
            fire.add_items(item, count)

        print(fire_summary(fire, ticks=ticks_per_turn))

        try:
            fire.tick_multiple(ticks_per_turn)
        except BurntOut:
            break

    logger.info(f"The fire lasted {fire.time_alive:.0f}.")
    print(f"The fire lasted {fire.time_alive:.0f}.")
    return fire.time_alive


if __name__ == "__main__":
    main()
