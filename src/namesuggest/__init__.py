"""namesuggest: edit distance and 'did you mean?' suggestions for identifiers."""

from namesuggest.infrastructure.config import (
    DEFAULT_CONFIG,
    ConfigError,
    MatchConfig,
    default_threshold,
)
from namesuggest.infrastructure.similarity import (
    find_best_match,
    find_similar_names,
    lev_distance,
    sort_by_words,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "MatchConfig",
    "__version__",
    "default_threshold",
    "find_best_match",
    "find_similar_names",
    "lev_distance",
    "sort_by_words",
]
