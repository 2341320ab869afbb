"""Application masking – RecordMasker for dict-shaped records."""
from __future__ import annotations

import fnmatch
from collections.abc import Mapping
from typing import Any

from fieldmask.application.masking.hook import SerializationHook
from fieldmask.config.masking import MaskingConfig
from fieldmask.kernel.masking.descriptor import MaskDescriptor

__all__ = ["RecordMasker"]


class RecordMasker:
    """Recursively masks dict values whose key matches a descriptor entry.

    Keys of *descriptors* are exact field names or :mod:`fnmatch` patterns
    (``"*_email"``).  Exact names win over patterns; among patterns the
    first match in insertion order is used.  The input is never mutated.

    Parameters
    ----------
    hook:
        Hook through which every matched field is masked and audited.
    config:
        Scope-local config; ``None`` uses the process-wide one.
    """

    def __init__(
        self,
        hook: SerializationHook | None = None,
        config: MaskingConfig | None = None,
    ) -> None:
        self._hook = hook or SerializationHook()
        self._config = config

    def mask(self, data: Mapping[str, Any], descriptors: Mapping[str, MaskDescriptor]) -> dict[str, Any]:
        return self._walk(data, descriptors)

    def _walk(self, node: Any, descriptors: Mapping[str, MaskDescriptor]) -> Any:
        if isinstance(node, Mapping):
            return {k: self._apply(k, v, descriptors) for k, v in node.items()}
        if isinstance(node, list):
            return [self._walk(item, descriptors) for item in node]
        return node

    def _apply(self, key: Any, value: Any, descriptors: Mapping[str, MaskDescriptor]) -> Any:
        descriptor = self._match(str(key), descriptors)
        if descriptor is None or isinstance(value, (Mapping, list)):
            return self._walk(value, descriptors)
        return self._hook.render(descriptor, str(key), value, self._config)

    @staticmethod
    def _match(key: str, descriptors: Mapping[str, MaskDescriptor]) -> MaskDescriptor | None:
        exact = descriptors.get(key)
        if exact is not None:
            return exact
        for pattern, descriptor in descriptors.items():
            if fnmatch.fnmatchcase(key, pattern):
                return descriptor
        return None
