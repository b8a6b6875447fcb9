"""
The VIEW layer turns simulation state into text for the player.
It only reads from the model; it never ticks or mutates it.
"""
