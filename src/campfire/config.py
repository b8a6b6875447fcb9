"""
Configuration & Tuning Constants
================================
This module serves as the central registry for the global constants of the
simulation.

Why is this file needed?
------------------------
1. Tuning: The fire model is driven by a handful of hand-tuned rates. Keeping
   them in one place means balancing the game never touches the physics code.
2. Defaults: Starting conditions of a new session (the embers the player
   starts with, ambient air, the player's body) are defined here once.

Exports:
    HEAT_GAIN_RATE, DECAY_RATE, BURN_RATE, RELAXATION_CONSTANT (float):
        Coupling constants of the thermal model.
    CRAFT_SPEED, UNCRAFT_MULTIPLIER (float): Crafting rates.
    TIME_TOLERANCE (float): Slack when comparing durations.
"""
from campfire.utils import celsius_to_kelvin

# ------------------------------------------------------------------------------
# Thermal model
# ------------------------------------------------------------------------------
# Activation progress gained per kelvin of fire temperature per unit of time
HEAT_GAIN_RATE: float = 0.005
# Activation progress lost per kelvin of fuel potential per unit of time
DECAY_RATE: float = 0.03
# Energy burned per kelvin of fire temperature per unit of time
BURN_RATE: float = 0.001
# Thermal inertia of the fire. Higher is slower to react.
RELAXATION_CONSTANT: float = 50.0

# ------------------------------------------------------------------------------
# Starting fire
# ------------------------------------------------------------------------------
STARTING_FIRE_TEMPERATURE: float = celsius_to_kelvin(600.0)
DEFAULT_AMBIENT_TEMPERATURE: float = celsius_to_kelvin(22.0)
DEFAULT_TICK_RESOLUTION: float = 1.0
# Pseudo-energy of the surrounding air in the weighted mean of temperature
DEFAULT_WEIGHT_OF_AMBIENT: float = 3000.0
STARTING_EMBER_COUNT: int = 3
STARTING_EMBER_FRACTION: float = 0.8
# Durations closer than this count as equal, so float error never costs a tick
TIME_TOLERANCE: float = 1e-9

# ------------------------------------------------------------------------------
# Crafting
# ------------------------------------------------------------------------------
CRAFT_SPEED: float = 1.0
# Uncrafting is this many times faster than crafting
UNCRAFT_MULTIPLIER: float = 4.0

# ------------------------------------------------------------------------------
# Player
# ------------------------------------------------------------------------------
DEFAULT_MAX_HIT_POINTS: float = 100.0
STARTING_BODY_TEMPERATURE: float = celsius_to_kelvin(37.0)
DEFAULT_INVENTORY_CAPACITY: float = 10000.0  # g

# ------------------------------------------------------------------------------
# Presentation
# ------------------------------------------------------------------------------
SUMMARY_ITEM_LIMIT: int = 15
