"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from petspace.models.delivery import DeliveryState


class Config(BaseSettings):
    """Root configuration for petspace.

    Values come from the config file, keyword arguments or PETSPACE_*
    environment variables.
    """

    model_config = SettingsConfigDict(
        env_prefix="PETSPACE_",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_file: Path | None = None
    verbose: bool = False

    preset_rooms: list[str] = Field(default_factory=lambda: ["CtrlCat", "Dogorithm"])
    default_delivery_state: DeliveryState = DeliveryState.AVAILABLE

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("default_delivery_state", mode="before")
    @classmethod
    def _state_from_label(cls, value: object) -> object:
        # Accept "busy" or "DEFERRED" as well as the exact "Busy" value
        if isinstance(value, str):
            return DeliveryState.from_label(value)
        return value
