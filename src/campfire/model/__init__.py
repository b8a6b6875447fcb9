"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the text rendering.
It deals with items, assets, inventories, the player and the session state.
"""
