"""
Storm Date-of-Loss Engine

This package scores meteorological events (hail reports, wind reports, storm
warnings) against an insured property and recommends the most plausible date
of loss with ranked supporting evidence and a confidence score.
"""

__version__ = "0.1.0"
__description__ = "Weather event scoring and date-of-loss selection"


def __getattr__(name):
    """Lazy import to avoid importing the whole pipeline when not needed."""
    if name == "DOLAnalyzer":
        from .analyzer import DOLAnalyzer
        return DOLAnalyzer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DOLAnalyzer",
]
