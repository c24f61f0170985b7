"""Application configuration using Pydantic Settings.

Environment variables are automatically mapped to Settings fields.
"""

import codecs
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def lookup_text_encoding(name: str) -> str:
    """Return the canonical name of a bytes-to-str codec.

    Raises:
        LookupError: If the codec is unknown or is not a text encoding
            (``zlib``, ``rot13``, ``hex`` and friends).

    """
    info = codecs.lookup(name)
    if not info._is_text_encoding:
        msg = f"{info.name!r} is not a text encoding"
        raise LookupError(msg)
    return info.name


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Every field has a default, so the library works without any environment.
    Invalid values fail early with a ValidationError.
    """

    # --- Diagnostics ---
    htmlsieve_debug: bool = False

    # --- Decoding ---
    # Forced input encoding. When unset, it is sniffed from the byte order
    # mark or a declared <meta charset>, then falls back to the default.
    htmlsieve_encoding: str | None = None
    htmlsieve_default_encoding: str = "utf-8"
    htmlsieve_encoding_errors: str = "strict"

    # --- Tokenizer input ---
    htmlsieve_read_chunk_size: int = 65536

    @field_validator("htmlsieve_encoding", "htmlsieve_default_encoding")
    @classmethod
    def validate_encoding(cls, value: str | None) -> str | None:
        """Reject codec names that are unknown or not text encodings.

        Raises:
            ValueError: If the codec cannot decode bytes to text.

        """
        if value is None:
            return value
        try:
            return lookup_text_encoding(value)
        except LookupError as err:
            msg = f"Unknown encoding: {value!r} ({err})"
            raise ValueError(msg) from err

    @field_validator("htmlsieve_encoding_errors")
    @classmethod
    def validate_encoding_errors(cls, value: str) -> str:
        """Reject unregistered codec error handlers."""
        try:
            codecs.lookup_error(value)
        except LookupError as err:
            msg = f"Unknown encoding error handler: {value!r}"
            raise ValueError(msg) from err
        return value

    @field_validator("htmlsieve_read_chunk_size")
    @classmethod
    def validate_chunk_size(cls, value: int) -> int:
        """Chunks must hold at least one byte."""
        if value <= 0:
            msg = "HTMLSIEVE_READ_CHUNK_SIZE must be positive"
            raise ValueError(msg)
        return value

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance.

    Uses lru_cache to ensure the .env file is only parsed once
    and all modules share the same settings instance.

    Returns:
        Settings instance with library configuration.

    Raises:
        ValidationError: If an environment variable holds an invalid value.

    """
    return Settings()


settings = get_settings()
