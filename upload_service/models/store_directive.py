from enum import Enum
from typing import Any

from ..exceptions import InvalidInputError  # pylint: disable=relative-beyond-top-level


class StoreDirective(Enum):
    """Value sent as `UPLOADCARE_STORE` with every upload."""

    AUTO = "auto"
    STORE = "1"
    DO_NOT_STORE = "0"

    @classmethod
    def from_value(cls, value: Any) -> "StoreDirective":
        if isinstance(value, StoreDirective):
            return value
        if isinstance(value, bool):
            return cls.STORE if value else cls.DO_NOT_STORE
        if isinstance(value, int):
            value = str(value)
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "auto":
                return cls.AUTO
            if normalized in ("1", "true"):
                return cls.STORE
            if normalized in ("0", "false"):
                return cls.DO_NOT_STORE
        raise InvalidInputError(f"Unsupported store directive: {value!r}")
