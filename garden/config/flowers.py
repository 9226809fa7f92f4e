"""Flower growth configuration constants."""

# Flower Length Rules
FLOWER_MIN_LENGTH = 1  # Withering never takes a flower below this
FLOWER_MATURE_LENGTH = 5  # Mature once strictly longer than this
FLOWER_FAST_GROWTH_LENGTH = 10  # Above this a flower grows faster

# Flower Growth Steps
FLOWER_GROWTH_STEP = 1  # Increase per grow() up to FLOWER_FAST_GROWTH_LENGTH
FLOWER_FAST_GROWTH_STEP = 2  # Increase per grow() beyond it
FLOWER_WITHER_STEP = 1

# Demonstration Run
DEMO_SPECIES = "Tulip"
DEMO_INITIAL_LENGTH = 1
DEMO_GROW_STEPS = 2
DEMO_WITHER_STEPS = 2
