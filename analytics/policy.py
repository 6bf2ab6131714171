"""Product policy thresholds for insights and course intelligence.

These encode product intent. Change them here, not at the call sites.
"""

# --- Insight narrative ---
NEGATIVE_HELPFUL_RATIO = 0.5      # helpful fraction below this -> adjust advice
POSITIVE_HELPFUL_RATIO = 0.7      # helpful fraction at/above this -> keep advice
POSITIVE_MIN_HELPFUL = 2
ROUGH_MIN_GROUP_SHOTS = 2

# --- Tricky holes ---
TRICKY_SCORE_SCALE = 2.0          # avgOverPar = scale * off / total feedback
TRICKY_MIN_OFF = 2

# --- Course summaries ---
MOST_PLAYED_LIMIT = 10
HOLE_DETAIL_LIMIT = 5

# --- Club fit ---
# Placeholder until per-player club profiles exist; not derived from any player.
REFERENCE_DISTANCE = 150.0
CLUB_DISTANCE_TOLERANCE = 10.0

# --- AI notes ---
SOFT_FAIRWAY_MIN_ROUGH = 3
WIND_MIN_SHOTS = 3
WIND_KEYWORDS = ("into", "strong")
UPHILL_MIN_DISTINCT = 2
TREND_POSITIVE_MULTIPLIER = 2
TREND_POSITIVE_MIN_HELPFUL = 5
TREND_NEGATIVE_MIN_OFF = 3

ROUGH_SURFACE = "rough"
