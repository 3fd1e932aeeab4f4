"""
Exception classes for phrasebook.

All phrasebook exceptions inherit from PhrasebookError,
making it easy to catch all library errors.

Translation itself never raises: empty, unknown and unsupported
inputs are reported through the shape of the TranslationResult.
Exceptions are reserved for invalid configuration and malformed
dictionary sources.

Example:
    >>> try:
    ...     entries = phrasebook.load_dictionary("broken.yaml")
    ... except phrasebook.DictionaryError as e:
    ...     print(f"Bad dictionary: {e}")
    ... except phrasebook.PhrasebookError as e:
    ...     print(f"phrasebook error: {e}")
"""


class PhrasebookError(Exception):
    """
    Base exception for all phrasebook errors.

    Catch this to handle any phrasebook-specific error.
    """

    pass


class ConfigurationError(PhrasebookError, ValueError):
    """
    Raised for invalid engine configuration.

    Example:
        >>> EngineConfig(match_threshold=1.5)
        ConfigurationError: match_threshold must be between 0.0 and 1.0, got 1.5
    """

    pass


class DictionaryError(PhrasebookError):
    """
    Raised when a dictionary source cannot be loaded.

    This covers malformed YAML, a missing ``entries`` list, and
    (in strict mode) entries lacking a required field.
    """

    pass
