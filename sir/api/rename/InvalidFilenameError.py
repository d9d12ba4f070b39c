class InvalidFilenameError(ValueError):
    """A requested name is empty once sanitized."""
