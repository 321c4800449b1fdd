"""
Shipping Limits Configuration

Package Express acceptance limits. Fixed at build time.
"""

MAX_WEIGHT_LBS = 50               # Heaviest accepted package (pounds)
MAX_TOTAL_DIMENSIONS_IN = 50      # Largest accepted width + height + length

# Fields summed into total dimensions
DIMENSION_FIELDS = ["width_in", "height_in", "length_in"]
