from .models.upload_status import UploadStrategy

# Below this size direct upload is used, from it upward multipart upload.
MULTIPART_UPLOAD_SIZE = 10_485_760

# Multipart chunk size accepted by a single signed part URL.
PART_SIZE = 5_242_880


def decide_strategy(size_in_bytes: int) -> UploadStrategy:
    if size_in_bytes >= MULTIPART_UPLOAD_SIZE:
        return UploadStrategy.MULTIPART
    return UploadStrategy.DIRECT
