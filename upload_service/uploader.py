import io
import logging
import mimetypes
import os
from typing import Any, BinaryIO, Optional

import httpx

from .direct_upload import DirectUpload
from .exceptions import InvalidInputError
from .models.store_directive import StoreDirective
from .models.upload_request import DEFAULT_MIME_TYPE, UploadRequest
from .models.upload_status import UploadStrategy
from .multipart_upload import MultipartUpload
from .part_planner import decide_strategy
from .response_decoder import ResponseDecoder
from .schemas import UploadServiceConfig
from .utils import check_source, probe_size

logger = logging.getLogger("upload_service")


class Uploader:
    """
    Entry point for file ingestion.

    Holds read-only configuration and the HTTP client only, so one instance can
    serve independent uploads concurrently as long as each has its own source.
    """

    def __init__(
        self,
        config: UploadServiceConfig,
        client: Optional[httpx.Client] = None,
        decoder: Optional[ResponseDecoder] = None,
    ) -> None:
        self.config = config
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=config.timeout_sec)
        decoder = decoder or ResponseDecoder()
        self.direct = DirectUpload(config, self.client, decoder)
        self.multipart = MultipartUpload(config, self.client, decoder)
        logger.info(
            "Initiated uploader", extra={"upload_base_url": config.upload_base_url}
        )

    def __enter__(self) -> "Uploader":
        return self

    def __exit__(self, *_exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()
            logger.info("Uploader client closed.")

    def upload(self, request: UploadRequest) -> str:
        """
        Upload the request's source and return the stored file identifier.

        :param request: source and metadata of the file
        :return: file uuid assigned by the Upload API
        :raises InvalidInputError: the source cannot be read from the start
        :raises UploadTransportError: any HTTP-level failure
        :raises MalformedResponseError: unexpected response body
        """
        try:
            check_source(request.source)
        except InvalidInputError:
            logger.exception("Wrong source passed to upload.")
            raise

        request.source.seek(0)
        size = probe_size(request.source)
        strategy = decide_strategy(size)
        logger.debug(
            "Upload strategy selected",
            extra={
                "file_name": request.filename,
                "size": size,
                "strategy": strategy.value,
            },
        )

        if strategy is UploadStrategy.MULTIPART:
            return self.multipart.upload(request, size)
        return self.direct.upload(request)

    def from_resource(
        self,
        source: BinaryIO,
        mime_type: Optional[str] = None,
        filename: Optional[str] = None,
        store: Optional[StoreDirective | str | bool] = None,
    ) -> str:
        request = UploadRequest(
            source=source,
            mime_type=mime_type or DEFAULT_MIME_TYPE,
            filename=filename,
            store=StoreDirective.from_value(store) if store is not None else None,
        )
        return self.upload(request)

    def from_path(
        self,
        path: str | os.PathLike[str],
        mime_type: Optional[str] = None,
        filename: Optional[str] = None,
        store: Optional[StoreDirective | str | bool] = None,
    ) -> str:
        if not os.path.isfile(path):
            logger.error("File not found.", extra={"path": str(path)})
            raise InvalidInputError(f"Unable to read {path}")

        if mime_type is None:
            mime_type = mimetypes.guess_type(str(path))[0]
        try:
            fobj = open(path, "rb")  # pylint: disable=consider-using-with
        except OSError as exception:
            logger.exception("Failed to open file.", extra={"path": str(path)})
            raise InvalidInputError(f"Unable to read {path}") from exception

        with fobj:
            return self.from_resource(
                fobj,
                mime_type=mime_type,
                filename=filename or os.path.basename(path),
                store=store,
            )

    def from_content(
        self,
        content: bytes,
        mime_type: Optional[str] = None,
        filename: Optional[str] = None,
        store: Optional[StoreDirective | str | bool] = None,
    ) -> str:
        buffer = io.BytesIO(content)
        try:
            return self.from_resource(
                buffer, mime_type=mime_type, filename=filename, store=store
            )
        finally:
            buffer.close()
