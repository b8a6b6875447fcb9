"""
Crafting
========
Recipes and the time-driven crafts that consume a fire's time.
"""
