"""Match configuration.

Holds the tunable settings of the best-match search: the word separator
used by the sorted-word fallback and the parameters of the default edit
distance threshold.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigError",
    "MatchConfig",
    "default_threshold",
]


class ConfigError(Exception):
    """Raised when match configuration is invalid."""


@dataclass(frozen=True)
class MatchConfig:
    """Immutable settings for best-match search.

    Attributes:
        word_separator: Separator splitting a name into words for the
            sorted-word fallback.
        threshold_floor: Lookup length below which the default threshold
            stops shrinking.
        threshold_divisor: Lookup characters allowed per edit in the
            default threshold.
    """

    word_separator: str = "_"
    threshold_floor: int = 3
    threshold_divisor: int = 3

    def __post_init__(self) -> None:
        if not self.word_separator:
            raise ConfigError("word_separator must not be empty")
        if self.threshold_floor < 0:
            msg = f"threshold_floor must be non-negative, got {self.threshold_floor}"
            raise ConfigError(msg)
        if self.threshold_divisor <= 0:
            msg = f"threshold_divisor must be positive, got {self.threshold_divisor}"
            raise ConfigError(msg)


DEFAULT_CONFIG = MatchConfig()


def default_threshold(lookup: str, config: MatchConfig | None = None) -> int:
    """Compute the default maximum edit distance for a lookup.

    With the default config this is max(len(lookup), 3) // 3, so lookups
    of up to five characters tolerate one edit.

    Args:
        lookup: The name being looked up.
        config: Match settings (defaults to DEFAULT_CONFIG).

    Returns:
        The threshold as a non-negative integer.
    """
    if config is None:
        config = DEFAULT_CONFIG
    return max(len(lookup), config.threshold_floor) // config.threshold_divisor
