# app\shared\config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

from app.core.domain.models import ClassicalOptions, Gender, PossessiveStyle


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.

    These values only seed the process-wide default engine. Engines built
    with `Engine()` or restored with `reset()` always start from hard defaults.
    """

    # --- Application Meta ---
    APP_NAME: str = "English Inflection Engine"

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Default Engine: pronoun & possessive behaviour ---
    DEFAULT_GENDER: Gender = Gender.THEY
    POSSESSIVE_STYLE: PossessiveStyle = PossessiveStyle.MODERN

    # --- Default Engine: classical modes ---
    # CLASSICAL_ALL wins over the individual switches when set.
    CLASSICAL_ALL: bool = False
    CLASSICAL_ZERO: bool = False
    CLASSICAL_HERD: bool = False
    CLASSICAL_NAMES: bool = False
    CLASSICAL_ANCIENT: bool = False
    CLASSICAL_PERSONS: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def CLASSICAL_OPTIONS(self) -> ClassicalOptions:
        """The classical switches folded into one engine-ready snapshot."""
        if self.CLASSICAL_ALL:
            return ClassicalOptions(
                mode=True, all=True, zero=True, herd=True,
                names=True, ancient=True, persons=True,
            )
        return ClassicalOptions(
            mode=self.CLASSICAL_ANCIENT,
            zero=self.CLASSICAL_ZERO,
            herd=self.CLASSICAL_HERD,
            names=self.CLASSICAL_NAMES,
            ancient=self.CLASSICAL_ANCIENT,
            persons=self.CLASSICAL_PERSONS,
        )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
