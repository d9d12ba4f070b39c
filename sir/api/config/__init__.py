"""Configuration models."""

from .LogConfig import LogConfig
from .RenameConfig import RenameConfig
from .SirConfig import SirConfig
from .TrackerConfig import TrackerConfig
from .VaultConfig import VaultConfig

__all__ = ["LogConfig", "RenameConfig", "SirConfig", "TrackerConfig", "VaultConfig"]
