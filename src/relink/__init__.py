"""relink - repair media library tracks whose files have moved."""

__version__ = "0.1.0"
