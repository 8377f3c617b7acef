from typing import Optional

from .models.upload_status import UploadErrorKind, UploadPhase


class UploadError(Exception):
    """Base class for every failure surfaced by the uploader."""

    kind: UploadErrorKind

    def __init__(
        self,
        message: str = "",
        phase: Optional[UploadPhase] = None,
        target_url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.phase = phase
        self.target_url = target_url


class InvalidInputError(UploadError):
    """Byte source or upload arguments rejected before any network activity."""

    kind = UploadErrorKind.INVALID_INPUT


class UploadTransportError(UploadError):
    """Connection, timeout or HTTP status failure while talking to the Upload API."""

    kind = UploadErrorKind.TRANSPORT_FAILURE


class MalformedResponseError(UploadError):
    """Response body does not decode into the expected shape."""

    kind = UploadErrorKind.MALFORMED_RESPONSE
