# investor_quote/storage/artifact_manager.py

"""Naming and placement of screenshot artifacts."""

import logging
import time
from pathlib import Path

from investor_quote.config.settings import Settings

logger = logging.getLogger("investor_quote.storage")


class ArtifactManager:
    """Hands out screenshot paths inside the artifacts directory."""

    def __init__(self, screenshots_dir: Path | None = None) -> None:
        self.screenshots_dir: Path = (
            screenshots_dir or Settings.SCREENSHOTS_DIR
        )
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(
            "ArtifactManager initialised, screenshots_dir=%s",
            self.screenshots_dir,
        )

    def screenshot_path(self, prefix: str = "microsoft-stock") -> Path:
        """Return ``<dir>/<prefix>-<epoch_ms>.png``."""
        epoch_ms = int(time.time() * 1000)
        return self.screenshots_dir / f"{prefix}-{epoch_ms}.png"
