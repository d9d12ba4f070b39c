"""Vault-relative path normalization for user-supplied paths."""

from pathlib import Path


def to_vault_path(path: str, vault_path: Path) -> str:
    """Convert a CLI path argument to a vault-relative POSIX path.

    Absolute paths (and paths relative to the current directory that exist
    inside the vault) are made relative to the vault root; anything else is
    taken as already vault-relative.

    Raises:
        ValueError: An absolute path lies outside the vault
    """
    candidate = Path(path).expanduser()
    root = vault_path.resolve()
    if candidate.is_absolute():
        try:
            return candidate.resolve().relative_to(root).as_posix()
        except ValueError:
            raise ValueError(f"Path is outside the vault: {path}") from None
    if candidate.exists():
        try:
            return candidate.resolve().relative_to(root).as_posix()
        except ValueError:
            pass
    return candidate.as_posix().lstrip("/")
