"""Config – scope precedence and the scope-to-config binding table."""
from __future__ import annotations

import threading
import weakref
from typing import Any

from fieldmask.config.masking import MaskingConfig
from fieldmask.config.validation.errors import ConfigError
from fieldmask.observability.logging.processors import get_logger

_log = get_logger(__name__)


class ConfigResolver:
    """Pick the effective :class:`MaskingConfig` for one serialization call.

    A scope-bound config always shadows the default for every field
    serialized within that scope.  There is no per-field override.

    Parameters
    ----------
    default:
        Fallback config.  ``None`` means the process-wide instance, looked up
        on each call so :meth:`MaskingConfig.get_instance` stays authoritative.
    """

    def __init__(self, default: MaskingConfig | None = None) -> None:
        self._default = default

    @property
    def default(self) -> MaskingConfig:
        return self._default if self._default is not None else MaskingConfig.get_instance()

    def resolve(self, scope_config: MaskingConfig | None = None) -> MaskingConfig:
        if scope_config is not None:
            return scope_config
        return self.default


class ScopeRegistry:
    """Explicit binding table from serialization scopes to scope-local configs.

    Scopes are held weakly: when a scope object is garbage collected its
    binding disappears with it.  Binding errors surface here, at
    registration time, never during serialization.
    """

    def __init__(self, resolver: ConfigResolver | None = None) -> None:
        self._resolver = resolver or ConfigResolver()
        self._bindings: weakref.WeakKeyDictionary[Any, MaskingConfig] = weakref.WeakKeyDictionary()
        self._lock = threading.Lock()

    def bind(self, scope: Any, config: MaskingConfig) -> None:
        """Bind *config* to *scope*, replacing any previous binding.

        Raises
        ------
        ConfigError
            When *scope* is ``None`` or not weak-referenceable, or when
            *config* is not a :class:`MaskingConfig`.
        """
        if scope is None:
            raise ConfigError("Serialization scope must not be None")
        if not isinstance(config, MaskingConfig):
            raise ConfigError(
                "MaskingConfig must not be None" if config is None
                else f"Expected MaskingConfig, got {type(config).__name__}"
            )
        try:
            with self._lock:
                self._bindings[scope] = config
        except TypeError as exc:
            raise ConfigError(
                f"Cannot bind masking config to {type(scope).__name__}: "
                "scope must support weak references",
                cause=exc,
            ) from exc
        _log.debug("masking_scope_bound", scope=type(scope).__name__, config=repr(config))

    def unbind(self, scope: Any) -> MaskingConfig | None:
        """Remove and return the config bound to *scope*, if any."""
        with self._lock:
            try:
                return self._bindings.pop(scope, None)
            except TypeError:
                return None

    def lookup(self, scope: Any) -> MaskingConfig | None:
        if scope is None:
            return None
        with self._lock:
            try:
                return self._bindings.get(scope)
            except TypeError:
                return None

    def resolve(self, scope: Any = None) -> MaskingConfig:
        """Effective config for *scope*: its binding, else the default."""
        return self._resolver.resolve(self.lookup(scope))

    def __contains__(self, scope: Any) -> bool:
        return self.lookup(scope) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)


_default_registry = ScopeRegistry()


def default_registry() -> ScopeRegistry:
    """Process-wide binding table used by the host adapters by default."""
    return _default_registry


__all__ = ["ConfigResolver", "ScopeRegistry", "default_registry"]
