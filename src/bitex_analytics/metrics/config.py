"""Configuration constants for the metrics engine."""

import math

# Length of the ranked item lists (profit leaders, most ordered, contribution)
TOP_N = 5

HOURS_IN_DAY = 24

# Basket-size buckets by order total: (label, min inclusive, max exclusive)
BASKET_BUCKETS = [
    ("₹0-500", 0, 500),
    ("₹500-1k", 500, 1000),
    ("₹1k-2k", 1000, 2000),
    ("₹2k-3k", 2000, 3000),
    ("₹3k+", 3000, math.inf),
]

# Party sizes 1-5 map one-to-one; 6 and above share the last bucket
PARTY_SIZE_BUCKETS = 6

# Trailing days in the week-over-week AOV comparison
COMPARISON_DAYS = 7

# Share of the current day's AOV substituted when the prior-week day has no orders
PREV_WEEK_FALLBACK_RATIO = 0.95

# Menu-engineering quadrants
STAR = "Star"
PLOWHORSE = "Plowhorse"
PUZZLE = "Puzzle"
DOG = "Dog"
QUADRANTS = [STAR, PLOWHORSE, PUZZLE, DOG]

# English weekday abbreviations (Monday through Sunday)
DAY_ABBREVIATIONS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
