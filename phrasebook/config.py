"""
Configuration for the phrasebook matching engine.

The thresholds used by the matcher and the result processor live in a
single value object so callers (and tests) can vary them without
touching module-level constants.
"""

from dataclasses import dataclass

from phrasebook.exceptions import ConfigurationError


@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for dictionary matching and result processing.

    All options have sensible defaults. Create a config only
    if you need to customize behavior.

    Example:
        >>> config = EngineConfig(match_threshold=0.7, max_suggestions=5)
        >>> result = phrasebook.translate("helo", "english", "klingon", entries, config)
    """

    # Matcher: entries must score strictly above this to be returned
    match_threshold: float = 0.6

    # Result processor: minimum confidence for a "successful" translation
    success_threshold: float = 0.5

    # Number of runner-up entries attached to a result
    max_suggestions: int = 3

    # Tier scores pinned above the edit-distance scale
    exact_match_score: float = 1.0
    partial_match_score: float = 0.9

    def __post_init__(self):
        """Validate configuration."""
        for name in (
            "match_threshold",
            "success_threshold",
            "exact_match_score",
            "partial_match_score",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be between 0.0 and 1.0, got {value}")

        if self.max_suggestions < 0:
            raise ConfigurationError(f"max_suggestions must be >= 0, got {self.max_suggestions}")

        if self.partial_match_score > self.exact_match_score:
            raise ConfigurationError(
                f"partial_match_score ({self.partial_match_score}) must not exceed "
                f"exact_match_score ({self.exact_match_score})"
            )


DEFAULT_CONFIG = EngineConfig()
