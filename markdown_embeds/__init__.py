"""Rich provider embeds for the pandoc markdown pipeline."""

__version__ = "0.1.0"
