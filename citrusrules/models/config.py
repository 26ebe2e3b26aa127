"""
Pydantic model for application configuration.
Provides robust validation for all settings.
"""

from pydantic import BaseModel, field_validator

DEFAULT_BASE_URL = (
    "https://raw.githubusercontent.com/citrusrules/citrusrules/main/templates"
)
DEFAULT_DEST_DIR = ".cursor/rules"


class FetchConfig(BaseModel):
    """A validated configuration model for the application."""

    # Remote source
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0
    max_workers: int = 4

    # Local destination
    dest_dir: str = DEFAULT_DEST_DIR

    class Config:
        """Pydantic model configuration."""

        validate_assignment = True
        str_strip_whitespace = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Ensures the template source is an absolute HTTP(S) URL."""
        if not v:
            raise ValueError("Base URL for templates is not set.")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://: {v}")
        return v.rstrip("/")

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be greater than 0 seconds.")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        """Ensures a reasonable number of workers."""
        if v < 1 or v > 16:
            raise ValueError("Max workers must be between 1 and 16.")
        return v

    @field_validator("dest_dir")
    @classmethod
    def validate_dest_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("Destination directory cannot be empty.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        return set(cls.model_fields)
