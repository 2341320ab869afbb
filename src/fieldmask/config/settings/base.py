"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base for settings dataclasses read from ``<PREFIX>_<FIELD>`` variables.

    Subclasses set ``_prefix`` and may override :meth:`_validate`, which
    runs after every construction, whichever loader built the instance.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to reject unusable values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``FIELDMASK_ENABLED``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def env_keys(cls) -> dict[str, str]:
        """Map every field name to its environment variable."""
        return {f.name: cls.env_key(f.name) for f in dataclasses.fields(cls)}


__all__ = ["Settings"]
