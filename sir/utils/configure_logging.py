import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(sir_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified SIR logging.

    Args:
        sir_home: Path to SIR home directory. If None, derived from environment.
        level: Level name applied to the ``sir`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if sir_home is None:
        from .get_home_dir import get_home_dir

        sir_home = get_home_dir()

    sir_home.mkdir(parents=True, exist_ok=True)
    log_file = sir_home / "sir.log"

    root_logger = logging.getLogger("sir")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
