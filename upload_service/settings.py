from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.store_directive import StoreDirective
from .schemas import UPLOAD_BASE_URL, UploadServiceConfig


class UploadServiceSettings(BaseSettings):
    public_key: str
    upload_base_url: str = UPLOAD_BASE_URL
    default_store: str = StoreDirective.AUTO.value
    timeout_sec: float = 30.0
    signature: Optional[str] = None
    expire: Optional[int] = None
    user_agent: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="UPLOADCARE_", env_file=".env")

    def to_config(self) -> UploadServiceConfig:
        headers = {"User-Agent": self.user_agent} if self.user_agent else {}
        return UploadServiceConfig(
            public_key=self.public_key,
            upload_base_url=self.upload_base_url,
            default_store=StoreDirective.from_value(self.default_store),
            headers=headers,
            timeout_sec=self.timeout_sec,
            signature=self.signature,
            expire=self.expire,
        )


@lru_cache()  # settings are read from the environment once per process
def get_settings() -> UploadServiceSettings:
    return UploadServiceSettings()  # type: ignore[call-arg]
