"""whatcanidelete - read-only advisor for what files can be deleted."""

__version__ = "0.1.0"
