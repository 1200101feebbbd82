"""High-value constants for the suggest-mcp package."""

# Package metadata
PACKAGE_VERSION = "0.3.0"
SERVER_NAME = "suggest-mcp"

# Ranking contract consts
MAX_SUGGESTIONS = 5
MIN_SIMILARITY_SCORE = 0.3

# Memoized rankings kept per service
RANKING_CACHE_SIZE = 256

# Module path lookups use a stricter bar for short specifiers
MODULE_PATH_LONG_QUERY = 10
MODULE_PATH_MIN_SCORE_LONG = 0.33
MODULE_PATH_MIN_SCORE_SHORT = 0.35

# Jaro-Winkler consts
WINKLER_PREFIX_CAP = 4
WINKLER_SCALING = 0.1

# Composite score weights
WEIGHT_JARO_WINKLER = 0.5
WEIGHT_JACCARD = 0.3
WEIGHT_CONTAINMENT = 0.1
WEIGHT_PREFIX = 0.1
PREFIX_BONUS_CAP = 4
LENGTH_PENALTY_PER_CHAR = 0.01
LENGTH_PENALTY_CAP = 0.15

# Filesystem lookup consts
MODULE_FILE_EXTENSIONS = (".pyi", ".pyx", ".pyd", ".py", ".so")
PACKAGE_INIT_FILES = ("__init__.py", "__init__.pyi")
