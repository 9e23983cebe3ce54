"""scholarmatch - résumé and Scholar profile to project suggestion workflow."""

__version__ = "0.1.0"
