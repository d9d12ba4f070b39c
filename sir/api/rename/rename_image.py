"""Single image rename (UNO: single function)."""

from ...utils.sanitize_filename import sanitize_filename
from ..vault._AbstractBackend import _AbstractBackend
from .InvalidFilenameError import InvalidFilenameError


def rename_image(backend: _AbstractBackend, path: str, new_name: str, aggressive: bool = False) -> str:
    """Rename the image at ``path`` to ``new_name`` in the same folder, keeping its extension.

    Returns:
        The new file name, extension included

    Raises:
        InvalidFilenameError: ``new_name`` is empty once sanitized
        FileNotFoundError: No file at ``path``
        FileExistsError: The new name is taken
    """
    sanitized = sanitize_filename(new_name, aggressive)
    if not sanitized:
        raise InvalidFilenameError(f"Invalid filename: {new_name!r}")

    file = backend.get_file(path)
    if file is None:
        raise FileNotFoundError(f"Image not found: {path}")

    file_name = f"{sanitized}.{file.extension}" if file.extension else sanitized
    new_path = f"{file.parent}/{file_name}" if file.parent else file_name
    if new_path != file.path:
        backend.rename(file.path, new_path)
    return file_name
