import logging
from typing import Any, Optional

import httpx

from .exceptions import UploadTransportError
from .models.store_directive import StoreDirective
from .models.upload_status import UploadPhase
from .response_decoder import ResponseDecoder
from .schemas import UploadServiceConfig
from .utils import resolve_url

logger = logging.getLogger("upload_service")

UPLOADCARE_PUB_KEY_KEY = "UPLOADCARE_PUB_KEY"
UPLOADCARE_STORE_KEY = "UPLOADCARE_STORE"


class BaseUploadClient:
    def __init__(
        self,
        config: UploadServiceConfig,
        client: httpx.Client,
        decoder: Optional[ResponseDecoder] = None,
    ) -> None:
        self.config = config
        self.client = client
        self.decoder = decoder or ResponseDecoder()

    def default_fields(self) -> dict[str, Any]:
        fields: dict[str, Any] = {UPLOADCARE_PUB_KEY_KEY: self.config.public_key}
        if self.config.signature is not None and self.config.expire is not None:
            fields["signature"] = self.config.signature
            fields["expire"] = self.config.expire
        return fields

    def resolve_store(self, store: Optional[StoreDirective]) -> StoreDirective:
        return store if store is not None else self.config.default_store

    @staticmethod
    def form_fields(fields: dict[str, Any]) -> dict[str, tuple[None, str]]:
        """Plain fields as multipart form parts, without a filename."""
        return {
            name: (None, value.value if isinstance(value, StoreDirective) else str(value))
            for name, value in fields.items()
        }

    def send(
        self,
        method: str,
        uri: str,
        phase: UploadPhase,
        headers: Optional[dict[str, str]] = None,
        **kwargs: Any,
    ) -> httpx.Response:
        url = resolve_url(self.config.upload_base_url, uri)
        try:
            logger.debug(
                "Sending upload request.",
                extra={"method": method, "url": url, "phase": phase.value},
            )
            response = self.client.request(method, url, headers=headers, **kwargs)
            response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exception:
            logger.exception(
                "Upload request failed.",
                extra={"method": method, "url": url, "phase": phase.value},
            )
            raise UploadTransportError(
                f"Upload to {url} failed", phase=phase, target_url=url
            ) from exception
        return response
