import logging
from typing import BinaryIO, Optional

from .base_upload_client import (
    BaseUploadClient,
    UPLOADCARE_PUB_KEY_KEY,
    UPLOADCARE_STORE_KEY,
)
from .models.multipart_session import MultipartSession
from .models.store_directive import StoreDirective
from .models.upload_request import UploadRequest
from .models.upload_status import UploadPhase
from .part_planner import PART_SIZE

logger = logging.getLogger("upload_service")

MULTIPART_START_URI = "multipart/start/"
MULTIPART_COMPLETE_URI = "multipart/complete/"


class MultipartUpload(BaseUploadClient):
    def upload(self, request: UploadRequest, size: int) -> str:
        """Upload a large file by parts: start, transfer each part, complete."""
        session = self.start(
            size=size,
            mime_type=request.mime_type,
            filename=request.filename,
            store=request.store,
        )
        self.transfer(session, request.source)
        return self.complete(session)

    def start(
        self,
        size: int,
        mime_type: str,
        filename: str,
        store: Optional[StoreDirective] = None,
    ) -> MultipartSession:
        """Open a multipart session and receive the signed part URLs."""
        fields = self.default_fields()
        fields.update(
            {
                "filename": filename,
                "size": size,
                "content_type": mime_type,
                UPLOADCARE_STORE_KEY: self.resolve_store(store),
            }
        )
        logger.debug(
            "Initiating upload in parts",
            extra={"file_name": filename, "size": size, "mime_type": mime_type},
        )
        response = self.send(
            "POST",
            MULTIPART_START_URI,
            UploadPhase.START,
            headers=self.config.headers,
            files=self.form_fields(fields),
        )
        session = self.decoder.decode(
            response.content, MultipartSession, phase=UploadPhase.START
        )
        logger.debug(
            "Upload initiated",
            extra={
                "file_name": filename,
                "session_uuid": session.uuid,
                "parts": len(session.parts),
            },
        )
        return session

    def transfer(self, session: MultipartSession, source: BinaryIO) -> int:
        """PUT consecutive chunks of the source to the signed URLs, in order.

        Stops without error once the source is exhausted, even if targets remain.
        Returns the number of parts sent.
        """
        source.seek(0)
        sent = 0
        for part_number, target in enumerate(session.parts, start=1):
            part = source.read(PART_SIZE)
            if not part:
                logger.warning(
                    "Source exhausted before all parts were sent",
                    extra={
                        "session_uuid": session.uuid,
                        "parts_sent": sent,
                        "parts_total": len(session.parts),
                    },
                )
                break

            logger.debug(
                "Uploading part",
                extra={
                    "session_uuid": session.uuid,
                    "part_number": part_number,
                    "part_size": len(part),
                },
            )
            self.send("PUT", target.url, UploadPhase.TRANSFER, content=part)
            sent += 1
        return sent

    def complete(self, session: MultipartSession) -> str:
        """Ask the server to assemble the parts and return the file id."""
        fields = {
            UPLOADCARE_PUB_KEY_KEY: self.config.public_key,
            "uuid": session.uuid,
        }
        logger.debug("Completing upload in parts", extra={"session_uuid": session.uuid})
        response = self.send(
            "POST",
            MULTIPART_COMPLETE_URI,
            UploadPhase.COMPLETE,
            headers=self.config.headers,
            files=self.form_fields(fields),
        )
        file_id = self.decoder.extract_identifier(
            response.content, "uuid", phase=UploadPhase.COMPLETE
        )
        logger.info(
            "Upload completed in parts",
            extra={"session_uuid": session.uuid, "file_id": file_id},
        )
        return file_id
