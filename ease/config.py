"""Environment-driven configuration.

Reads from a ``.env`` file and ``EASE_*`` environment variables.  Every value
here is a default for the CLI; options passed on the command line win.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from ease.core.attacher import DEFAULT_SIGNATURE_SUFFIX, SourceLayout


class EaseConfig(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export EASE_LOG_LEVEL=DEBUG
        export EASE_ARTIFACT_SOURCE_DIR=/release/staging
        export EASE_MANIFEST_PATH=/release/staging/bundle-1.0-artifacts.txt

    Pattern lists are JSON arrays::

        export EASE_EXCLUDES='["org.example:docs", ":::tests:"]'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EASE_",
        env_file_encoding="utf-8",
    )

    # Runtime
    log_level: str = "INFO"
    debug: bool = False

    # Aggregate
    includes: list[str] = []
    excludes: list[str] = []

    # Attach
    manifest_path: Path | None = None
    artifact_source_dir: Path = Path("target/release-artifacts")
    layout: SourceLayout = SourceLayout.FLAT
    signature_suffix: str = DEFAULT_SIGNATURE_SUFFIX

    @property
    def effective_log_level(self) -> str:
        """``DEBUG`` when debug is on, otherwise ``log_level``."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Module-level singleton, import as `from ease.config import config`
config = EaseConfig()
