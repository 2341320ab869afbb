"""Shared fixtures: isolate the process-wide masking config between tests."""

from __future__ import annotations

import pytest

from fieldmask.config import MaskingConfig
from fieldmask.testing.fakes import InMemoryAuditSink


@pytest.fixture(autouse=True)
def _reset_masking_config():
    MaskingConfig.get_instance().reset()
    yield
    MaskingConfig.get_instance().reset()


@pytest.fixture
def global_config() -> MaskingConfig:
    return MaskingConfig.get_instance()


@pytest.fixture
def audit_sink() -> InMemoryAuditSink:
    return InMemoryAuditSink()
