"""Smart image renamer: name pasted images after their note and keep image links consistent."""

__version__ = "0.3.0"
