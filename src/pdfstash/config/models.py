"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pdfstash.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from pdfstash.domain.names import MAX_NAME_LENGTH

DEFAULT_STORE_DIRECTORY = "~/Documents/pdfstash"


class StoreConfig(BaseModel):
    """[store] section."""

    model_config = {"frozen": True}

    directory: str = DEFAULT_STORE_DIRECTORY
    max_name_length: int = Field(default=MAX_NAME_LENGTH, ge=16)
    max_collision_retries: int = Field(default=5, ge=1)


class StashConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    store: StoreConfig = Field(default_factory=StoreConfig)
