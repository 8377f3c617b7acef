import json
import logging
from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from .exceptions import MalformedResponseError
from .models.upload_status import UploadPhase

logger = logging.getLogger("upload_service")

T = TypeVar("T", bound=BaseModel)


def _phase_name(phase: Optional[UploadPhase]) -> Optional[str]:
    return phase.value if phase is not None else None


class ResponseDecoder:
    """Turns raw Upload API response bodies into models or identifiers."""

    def decode(
        self, body: bytes | str, model: type[T], phase: Optional[UploadPhase] = None
    ) -> T:
        try:
            return model.model_validate_json(body)
        except ValidationError as exception:
            logger.exception(
                "Response does not match expected shape.",
                extra={"model": model.__name__, "phase": _phase_name(phase)},
            )
            raise MalformedResponseError(
                f"Unable to get {model.__name__} from response", phase=phase
            ) from exception

    def decode_mapping(
        self, body: bytes | str, phase: Optional[UploadPhase] = None
    ) -> dict[str, Any]:
        try:
            result = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as exception:
            logger.exception("JSON Decode error.", extra={"phase": _phase_name(phase)})
            raise MalformedResponseError(
                "Response body is not valid JSON", phase=phase
            ) from exception
        if not isinstance(result, dict):
            raise MalformedResponseError(
                "Response body is not a JSON object", phase=phase
            )
        return result

    def extract_identifier(
        self, body: bytes | str, key: str, phase: Optional[UploadPhase] = None
    ) -> str:
        result = self.decode_mapping(body, phase=phase)
        if result.get(key) is None:
            logger.error(
                "Identifier missing from response.",
                extra={"key": key, "phase": _phase_name(phase)},
            )
            raise MalformedResponseError(
                f"Unable to get '{key}' key from response", phase=phase
            )
        return str(result[key])
