from dataclasses import dataclass, field
from typing import Optional

from .models.store_directive import StoreDirective

UPLOAD_BASE_URL = "upload.uploadcare.com"


@dataclass
class UploadServiceConfig:
    # pylint: disable=too-many-instance-attributes
    public_key: str
    upload_base_url: str = UPLOAD_BASE_URL
    default_store: StoreDirective = StoreDirective.AUTO
    headers: dict[str, str] = field(default_factory=dict)
    timeout_sec: float = 30.0
    signature: Optional[str] = None
    expire: Optional[int] = None
