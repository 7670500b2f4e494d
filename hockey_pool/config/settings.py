import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # NHL API Configuration
    nhl_api_base_url: str = Field(
        "https://api-web.nhle.com/v1", description="Base URL of the public NHL web API."
    )
    skater_leaders_limit: int = Field(
        600,
        gt=0,
        description="Number of goal leaders to request; should cover every drafted skater.",
    )
    zero_fill_missing_skaters: bool = Field(
        False,
        description="Count drafted skaters missing from the leaders feed as 0 goals.",
    )
    request_timeout: float = Field(
        30.0, gt=0, description="HTTP timeout in seconds for API and roster requests."
    )

    # Roster Source Configuration
    github_owner: str = Field("mattb", description="Owner of the roster repository.")
    github_repo: str = Field("hockey_pools", description="Roster repository name.")
    github_branch: str = Field("main", description="Branch holding the roster CSVs.")
    github_token: Optional[str] = Field(
        None, description="Token for private roster repositories (optional)."
    )
    skaters_roster_path: str = Field(
        "data/player_skaters.csv",
        description="Roster CSV for the skater pool (local path, repo path or URL).",
    )
    teams_roster_path: str = Field(
        "data/player_teams.csv",
        description="Roster CSV for the team pool (local path, repo path or URL).",
    )

    # Output Configuration
    output_dir: str = Field("output", description="Directory for standings CSV files.")

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def github_raw_base_url(self) -> str:
        return (
            f"https://raw.githubusercontent.com/"
            f"{self.github_owner}/{self.github_repo}/{self.github_branch}"
        )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
