from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RULES_FILE = "PROFANITY"


class RulesSettings(BaseSettings):
    """Settings for locating rule-definition files."""

    model_config = SettingsConfigDict(
        env_prefix="RULES_",
    )

    file_name: str = Field(
        default=DEFAULT_RULES_FILE,
        min_length=1,
        description="Name of the per-directory rule-definition file",
    )


class ScanSettings(BaseSettings):
    """Global settings for a scan."""

    model_config = SettingsConfigDict(
        env_prefix="PROFANITY_",
    )

    rules: RulesSettings = Field(default_factory=RulesSettings)
    include_patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns a file must match to be considered at all",
    )
    exclude_patterns: list[str] = Field(
        default_factory=list,
        description="Glob patterns that remove a file from consideration",
    )
    skip_dir_patterns: list[str] = Field(
        default_factory=lambda: ["*.git", "*_bin"],
        description="Glob patterns of directory names the walk never enters",
    )
    fail_fast: bool = Field(
        default=True,
        description="Stop the whole scan at the first violation",
    )


# Global settings instance that can be accessed throughout the application
_settings: ScanSettings | None = None


def get_settings() -> ScanSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = ScanSettings()
    return _settings


def set_settings(settings: ScanSettings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings
