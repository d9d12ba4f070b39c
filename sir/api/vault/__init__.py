"""Vault host: file primitives, link resolution and backlinks over a note collection."""

from .Vault import Vault
from .VaultFile import VaultFile
from .ensure_folder_exists import ensure_folder_exists
from .get_attachment_folder import get_attachment_folder
from .to_vault_path import to_vault_path

__all__ = ["Vault", "VaultFile", "ensure_folder_exists", "get_attachment_folder", "to_vault_path"]
