class InvalidSplitConfiguration(ValueError):
    """Split data that cannot be turned into per-participant amounts."""
