from enum import Enum


class UploadStrategy(Enum):
    DIRECT = "direct"
    MULTIPART = "multipart"


class UploadPhase(Enum):
    DIRECT = "direct"
    START = "multipart_start"
    TRANSFER = "multipart_transfer"
    COMPLETE = "multipart_complete"


class UploadErrorKind(Enum):
    INVALID_INPUT = "invalid_input"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
