import logging
from typing import Any

from .base_upload_client import BaseUploadClient, UPLOADCARE_STORE_KEY
from .models.upload_request import UploadRequest
from .models.upload_status import UploadPhase

logger = logging.getLogger("upload_service")

DIRECT_UPLOAD_URI = "base/"


class DirectUpload(BaseUploadClient):
    def upload(self, request: UploadRequest) -> str:
        """Upload the whole source in one form POST and return the file id.

        The source is closed once the request has been issued, whatever the outcome.
        """
        fields = self.default_fields()
        fields[UPLOADCARE_STORE_KEY] = self.resolve_store(request.store)
        files: dict[str, Any] = dict(self.form_fields(fields))
        files["file"] = (request.filename, request.source, request.mime_type)

        try:
            request.source.seek(0)
            logger.debug(
                "Uploading file directly",
                extra={"file_name": request.filename, "mime_type": request.mime_type},
            )
            response = self.send(
                "POST",
                DIRECT_UPLOAD_URI,
                UploadPhase.DIRECT,
                headers=self.config.headers,
                files=files,
            )
        finally:
            request.source.close()

        file_id = self.decoder.extract_identifier(
            response.content, "file", phase=UploadPhase.DIRECT
        )
        logger.info(
            "Uploaded file directly",
            extra={"file_name": request.filename, "file_id": file_id},
        )
        return file_id
