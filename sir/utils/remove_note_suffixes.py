def remove_note_suffixes(basename: str, suffixes: list[str]) -> str:
    """Remove the first matching suffix (case-insensitive) from a note base name.

    Used so that ``Drawing.excalidraw`` names its images after ``Drawing``.
    """
    for suffix in suffixes:
        if suffix and basename.lower().endswith(suffix.lower()):
            return basename[: -len(suffix)]
    return basename
