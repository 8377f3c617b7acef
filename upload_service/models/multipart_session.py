from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SignedPartTarget(BaseModel):
    """Pre-signed URL accepting a single PUT of up to `PART_SIZE` bytes."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)

    @field_validator("url")
    @classmethod
    def require_absolute_https(cls, value: str) -> str:
        try:
            parsed = httpx.URL(value)
        except httpx.InvalidURL as exception:
            raise ValueError(f"Invalid part URL: {exception}") from exception
        if parsed.scheme != "https" or not parsed.host:
            raise ValueError("Part URL must be an absolute https:// URL")
        return value


class MultipartSession(BaseModel):
    """Descriptor returned by `multipart/start/`.

    The order of `parts` defines which byte range each target accepts.
    """

    uuid: str = Field(min_length=1)
    parts: list[SignedPartTarget]

    @field_validator("parts", mode="before")
    @classmethod
    def wrap_plain_urls(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"url": item} if isinstance(item, str) else item for item in value]
        return value
