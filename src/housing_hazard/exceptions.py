"""Exception hierarchy for housing-hazard."""


class HazardError(Exception):
    """Base exception for all housing-hazard errors."""


class IndicatorPackError(HazardError):
    """Raised when an indicator pack is malformed (non-list phrase lists, non-string phrases)."""


class LexiconLoadError(HazardError):
    """Raised when a lexicon file cannot be parsed into indicator packs."""

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


__all__ = ["HazardError", "IndicatorPackError", "LexiconLoadError"]
