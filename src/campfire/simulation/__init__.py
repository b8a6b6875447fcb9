"""
Fire Simulation
===============
The thermal model of the campfire.

Why is this package needed?
---------------------------
1. Physics: It advances every fuel item's combustion state each tick and
   relaxes the fire's temperature toward the weighted mean of its fuel.
2. Time: Everything that takes time in the game (crafting, waiting, sleeping)
   is paid for by ticking the fire.
"""
