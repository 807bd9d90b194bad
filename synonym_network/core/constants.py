"""Constants for synonym graph operations."""

# Source parsing
DEFAULT_DELIMITER = ","
SOURCE_ENCODING = "utf-8-sig"  # strips a leading byte-order mark

# Synonym sampling
DEFAULT_SYNONYM_CAP = 4

# Random walks
DEFAULT_MAX_WALK_ATTEMPTS = 100

# Query sentinels
NO_CONNECTION = -1
NOT_IN_DICTIONARY = "This word is not currently in our dictionary."

# Default data locations (relative to the working directory)
DEFAULT_SOURCE_PATH = "data/synonyms.txt"
