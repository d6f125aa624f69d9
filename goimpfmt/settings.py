"""
goimpfmt environment settings

Configuration overrides read from environment variables with the
GOIMPFMT_ prefix, using pydantic settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field
from typing import List, Literal, Optional


class Settings(BaseSettings):
    """
    Environment overrides for the command line.

    Environment variables:
    - GOIMPFMT_PROJECT_RAW: Comma-separated project import prefixes
    - GOIMPFMT_IGNORE_RAW: Comma-separated paths to skip
    - GOIMPFMT_NO_COLOR: Disable ANSI colours in the diff report (default: false)
    - GOIMPFMT_LOG_LEVEL: Logging level for stderr diagnostics (optional)
    """

    model_config = SettingsConfigDict(
        env_prefix="GOIMPFMT_",
        extra="ignore",
    )

    # Raw string fields for comma-separated values
    project_raw: str = ""
    ignore_raw: str = ""

    no_color: bool = False

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR"]] = None

    @computed_field
    @property
    def project(self) -> List[str]:
        """Parse comma-separated project prefixes into list."""
        if not self.project_raw:
            return []
        return [v.strip() for v in self.project_raw.split(",") if v.strip()]

    @computed_field
    @property
    def ignore(self) -> List[str]:
        """Parse comma-separated ignore paths into list."""
        if not self.ignore_raw:
            return []
        return [v.strip() for v in self.ignore_raw.split(",") if v.strip()]
