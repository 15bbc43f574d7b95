"""Errors raised by ptstem."""


class ConfigurationError(ValueError):
    """Invalid call configuration (algorithm, complete flag, ignore rules).

    Raised before any text is processed, so callers never get partial output.
    """
