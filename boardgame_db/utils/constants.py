"""Catalog constants for the board game database."""

# Ratings
MIN_RATING = 1
MAX_RATING = 5
NO_RATING = 0.0

# Two games compare equal when their averages differ by less than this
RATING_EPSILON = 0.001

# Match results
MISSING_RESULT = -1.0

# Game defaults
DEFAULT_MIN_PLAYERS = 1
DEFAULT_MAX_PLAYERS = 1

# Pseudo-feature keys understood by FeatureFilter
FEATURE_MIN_PLAYERS = "minPlayers"
FEATURE_MAX_PLAYERS = "maxPlayers"
FEATURE_PLAYERS = "players"

# Store error kinds
ERROR_DUPLICATE_KEY = "duplicate_key"
ERROR_NOT_FOUND = "not_found"
ERROR_OUT_OF_RANGE = "out_of_range"
ERROR_REFERENTIAL_VIOLATION = "referential_violation"
ERROR_INVALID_INPUT = "invalid_input"
