"""Unit tests for MaskingConfig, ConfigResolver and ScopeRegistry."""

from __future__ import annotations

import gc
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from fieldmask.config import (
    ConfigError,
    ConfigResolver,
    MaskingConfig,
    MaskingSnapshot,
    ScopeRegistry,
    default_registry,
)
from fieldmask.testing.fakes import InMemoryAuditSink


class _Scope:
    """Weak-referenceable stand-in for a serialization context."""


# ---------------------------------------------------------------------------
# MaskingConfig
# ---------------------------------------------------------------------------


class TestMaskingConfig:
    def test_defaults(self) -> None:
        cfg = MaskingConfig.create()
        assert cfg.is_enabled() is True
        assert cfg.get_default_mask_char() == "*"
        assert cfg.get_audit_sink() is None

    def test_process_wide_instance_is_a_singleton(self) -> None:
        assert MaskingConfig.get_instance() is MaskingConfig.get_instance()

    def test_create_returns_independent_instances(self) -> None:
        a = MaskingConfig.create()
        b = MaskingConfig.create()
        a.set_enabled(False)
        assert b.is_enabled() is True
        assert MaskingConfig.get_instance().is_enabled() is True
        assert a is not MaskingConfig.get_instance()

    def test_setters_chain(self) -> None:
        sink = InMemoryAuditSink()
        cfg = MaskingConfig.create().set_enabled(False).set_default_mask_char("#").set_audit_sink(sink)
        assert cfg.enabled is False
        assert cfg.default_mask_char == "#"
        assert cfg.audit_sink is sink

    def test_detach_audit_sink(self) -> None:
        cfg = MaskingConfig.create(audit_sink=InMemoryAuditSink())
        cfg.set_audit_sink(None)
        assert cfg.get_audit_sink() is None

    def test_non_callable_sink_rejected(self) -> None:
        cfg = MaskingConfig.create()
        with pytest.raises(ConfigError, match="audit sink must be callable"):
            cfg.set_audit_sink("audit.log")  # type: ignore[arg-type]
        assert cfg.get_audit_sink() is None

    def test_non_callable_sink_rejected_on_create(self) -> None:
        with pytest.raises(ConfigError):
            MaskingConfig.create(audit_sink=42)  # type: ignore[arg-type]

    def test_plain_function_sink_accepted(self) -> None:
        def sink(field_name, kind) -> None:  # noqa: ARG001
            return None

        assert MaskingConfig.create(audit_sink=sink).get_audit_sink() is sink

    def test_reset_restores_defaults(self, global_config: MaskingConfig) -> None:
        global_config.set_enabled(False).set_default_mask_char("#").set_audit_sink(InMemoryAuditSink())
        global_config.reset()
        assert global_config.is_enabled() is True
        assert global_config.get_default_mask_char() == "*"
        assert global_config.get_audit_sink() is None

    def test_non_printable_char_allowed(self) -> None:
        cfg = MaskingConfig.create().set_default_mask_char("\x00")
        assert cfg.get_default_mask_char() == "\x00"

    @pytest.mark.parametrize("bad", ["", "##", None, 42])
    def test_invalid_char_rejected(self, bad: object) -> None:
        cfg = MaskingConfig.create()
        with pytest.raises(ConfigError):
            cfg.set_default_mask_char(bad)  # type: ignore[arg-type]
        assert cfg.get_default_mask_char() == "*"

    def test_invalid_char_rejected_at_construction(self) -> None:
        with pytest.raises(ConfigError):
            MaskingConfig.create(default_mask_char="ab")

    def test_snapshot_is_immutable_copy(self) -> None:
        cfg = MaskingConfig.create(default_mask_char="#")
        snap = cfg.snapshot()
        cfg.set_default_mask_char("@")
        assert isinstance(snap, MaskingSnapshot)
        assert snap.default_mask_char == "#"

    def test_repr(self) -> None:
        assert "enabled=True" in repr(MaskingConfig.create())

    def test_concurrent_writes_never_tear(self) -> None:
        cfg = MaskingConfig.create()
        seen: set[str] = set()
        stop = threading.Event()

        def reader() -> None:
            while not stop.is_set():
                seen.add(cfg.get_default_mask_char())

        def writer(ch: str) -> None:
            for _ in range(500):
                cfg.set_default_mask_char(ch)

        t = threading.Thread(target=reader)
        t.start()
        with ThreadPoolExecutor(max_workers=3) as pool:
            list(pool.map(writer, ["#", "@", "x"]))
        stop.set()
        t.join()
        assert seen <= {"*", "#", "@", "x"}


# ---------------------------------------------------------------------------
# ConfigResolver
# ---------------------------------------------------------------------------


class TestConfigResolver:
    def test_scope_config_wins(self) -> None:
        scope = MaskingConfig.create(enabled=False)
        assert ConfigResolver().resolve(scope) is scope

    def test_falls_back_to_process_wide(self) -> None:
        assert ConfigResolver().resolve(None) is MaskingConfig.get_instance()
        assert ConfigResolver().resolve() is MaskingConfig.get_instance()

    def test_custom_default(self) -> None:
        fallback = MaskingConfig.create(default_mask_char="#")
        assert ConfigResolver(default=fallback).resolve(None) is fallback


# ---------------------------------------------------------------------------
# ScopeRegistry
# ---------------------------------------------------------------------------


class TestScopeRegistry:
    def test_bind_and_resolve(self) -> None:
        registry = ScopeRegistry()
        scope = _Scope()
        cfg = MaskingConfig.create(enabled=False)
        registry.bind(scope, cfg)
        assert registry.lookup(scope) is cfg
        assert registry.resolve(scope) is cfg
        assert scope in registry

    def test_unbound_scope_resolves_to_process_wide(self) -> None:
        registry = ScopeRegistry()
        assert registry.lookup(_Scope()) is None
        assert registry.resolve(_Scope()) is MaskingConfig.get_instance()
        assert registry.resolve(None) is MaskingConfig.get_instance()

    def test_rebinding_replaces(self) -> None:
        registry = ScopeRegistry()
        scope = _Scope()
        registry.bind(scope, MaskingConfig.create())
        second = MaskingConfig.create(default_mask_char="#")
        registry.bind(scope, second)
        assert registry.lookup(scope) is second

    def test_unbind(self) -> None:
        registry = ScopeRegistry()
        scope = _Scope()
        cfg = MaskingConfig.create()
        registry.bind(scope, cfg)
        assert registry.unbind(scope) is cfg
        assert registry.lookup(scope) is None
        assert registry.unbind(scope) is None

    def test_none_config_rejected(self) -> None:
        with pytest.raises(ConfigError, match="must not be None"):
            ScopeRegistry().bind(_Scope(), None)  # type: ignore[arg-type]

    def test_wrong_config_type_rejected(self) -> None:
        with pytest.raises(ConfigError):
            ScopeRegistry().bind(_Scope(), {"enabled": False})  # type: ignore[arg-type]

    def test_none_scope_rejected(self) -> None:
        with pytest.raises(ConfigError):
            ScopeRegistry().bind(None, MaskingConfig.create())

    def test_scope_without_weakref_rejected(self) -> None:
        with pytest.raises(ConfigError, match="weak references"):
            ScopeRegistry().bind({"request": 1}, MaskingConfig.create())

    def test_unhashable_lookup_is_a_miss(self) -> None:
        assert ScopeRegistry().lookup({"request": 1}) is None

    def test_binding_dropped_with_scope(self) -> None:
        registry = ScopeRegistry()
        scope = _Scope()
        registry.bind(scope, MaskingConfig.create())
        assert len(registry) == 1
        del scope
        gc.collect()
        assert len(registry) == 0

    def test_default_registry_is_shared(self) -> None:
        assert default_registry() is default_registry()
