from dataclasses import dataclass
from typing import BinaryIO, Optional

from ..utils import generate_filename  # pylint: disable=relative-beyond-top-level
from .store_directive import StoreDirective

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class UploadRequest:
    source: BinaryIO
    mime_type: str = DEFAULT_MIME_TYPE
    filename: Optional[str] = None
    store: Optional[StoreDirective] = None

    def __post_init__(self) -> None:
        # frozen, so normalize through object.__setattr__
        if not self.mime_type:
            object.__setattr__(self, "mime_type", DEFAULT_MIME_TYPE)
        if not self.filename:
            object.__setattr__(self, "filename", generate_filename())
        if self.store is not None:
            object.__setattr__(self, "store", StoreDirective.from_value(self.store))
