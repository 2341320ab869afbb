"""Unit tests for the pydantic adapter (Masked, masking_context)."""
from __future__ import annotations

import json
from typing import Annotated, Optional

import pytest

pydantic = pytest.importorskip("pydantic")

from fieldmask.adapters.pydantic import CONTEXT_KEY, Masked, masking_context  # noqa: E402
from fieldmask.config import MaskingConfig  # noqa: E402
from fieldmask.config.validation import ConfigError  # noqa: E402
from fieldmask.kernel.masking import MaskingEvent, MaskKind  # noqa: E402
from fieldmask.testing.fakes import InMemoryAuditSink  # noqa: E402


class Payment(pydantic.BaseModel):
    card: Annotated[str, Masked(MaskKind.CREDIT_CARD, field_name="card")]
    holder: Annotated[str, Masked(MaskKind.NAME, field_name="holder")]
    reference: Annotated[str, Masked(MaskKind.CUSTOM, mask_char="#", visible_start=2, visible_end=2, field_name="reference")]
    phone: Annotated[Optional[str], Masked(MaskKind.PHONE, field_name="phone")] = None
    note: str = ""


def _payment(**overrides: object) -> Payment:
    values: dict[str, object] = {
        "card": "4111111111111111",
        "holder": "Ana Maria Lopez",
        "reference": "REF-000123",
        "phone": "+34 600 123 456",
        "note": "plain",
    }
    values.update(overrides)
    return Payment(**values)


# ---------------------------------------------------------------------------
# Masked
# ---------------------------------------------------------------------------


class TestMasked:
    def test_model_dump_masks_fields(self) -> None:
        assert _payment().model_dump() == {
            "card": "****-****-****-1111",
            "holder": "A** M**** L****",
            "reference": "RE######23",
            "phone": "*******3456",
            "note": "plain",
        }

    def test_model_dump_json(self) -> None:
        data = json.loads(_payment().model_dump_json())
        assert data["card"] == "****-****-****-1111"

    def test_validation_keeps_raw_value(self) -> None:
        assert _payment().card == "4111111111111111"

    def test_none_stays_none(self) -> None:
        assert _payment(phone=None).model_dump()["phone"] is None

    def test_disabled_globally(self, global_config: MaskingConfig) -> None:
        global_config.set_enabled(False)
        assert _payment().model_dump()["card"] == "4111111111111111"

    def test_audits_with_declared_names(self, global_config: MaskingConfig, audit_sink: InMemoryAuditSink) -> None:
        global_config.set_audit_sink(audit_sink)
        _payment(phone=None).model_dump()
        assert audit_sink.events == [
            MaskingEvent("card", MaskKind.CREDIT_CARD),
            MaskingEvent("holder", MaskKind.NAME),
            MaskingEvent("reference", MaskKind.CUSTOM),
        ]

    def test_audits_with_model_field_names(
        self, global_config: MaskingConfig, audit_sink: InMemoryAuditSink
    ) -> None:
        class Account(pydantic.BaseModel):
            card_number: Annotated[str, Masked(MaskKind.CREDIT_CARD)]
            owner: Annotated[str, Masked(MaskKind.NAME)]

        global_config.set_audit_sink(audit_sink)
        data = json.loads(Account(card_number="4111111111111111", owner="John Doe").model_dump_json())
        assert data == {"card_number": "****-****-****-1111", "owner": "J*** D**"}
        assert audit_sink.events == [
            MaskingEvent("card_number", MaskKind.CREDIT_CARD),
            MaskingEvent("owner", MaskKind.NAME),
        ]

    def test_shared_annotation_keeps_each_field_name(
        self, global_config: MaskingConfig, audit_sink: InMemoryAuditSink
    ) -> None:
        Secret = Annotated[str, Masked()]

        class Credentials(pydantic.BaseModel):
            pin: Secret
            password: Secret

        global_config.set_audit_sink(audit_sink)
        Credentials(pin="1234", password="hunter2").model_dump()
        assert audit_sink.field_names() == ["pin", "password"]

    def test_declared_name_wins_over_model_field(
        self, global_config: MaskingConfig, audit_sink: InMemoryAuditSink
    ) -> None:
        class Card(pydantic.BaseModel):
            number: Annotated[str, Masked(MaskKind.CREDIT_CARD, field_name="cardNumber")]

        global_config.set_audit_sink(audit_sink)
        Card(number="4111111111111111").model_dump()
        assert audit_sink.field_names() == ["cardNumber"]

    def test_invalid_descriptor_rejected_at_declaration(self) -> None:
        from fieldmask.kernel.errors import ValidationError

        with pytest.raises(ValidationError):
            Masked(MaskKind.CUSTOM, mask_char="##")


# ---------------------------------------------------------------------------
# masking_context
# ---------------------------------------------------------------------------


class TestMaskingContext:
    def test_context_config_shadows_global(self, global_config: MaskingConfig) -> None:
        scoped = MaskingConfig.create(default_mask_char="#")
        data = _payment().model_dump(context=masking_context(scoped))
        assert data["card"] == "####-####-####-1111"
        assert _payment().model_dump()["card"] == "****-****-****-1111"

    def test_context_disabled(self) -> None:
        data = _payment().model_dump(context=masking_context(MaskingConfig.create(enabled=False)))
        assert data["holder"] == "Ana Maria Lopez"

    def test_context_audit_sink(self, global_config: MaskingConfig, audit_sink: InMemoryAuditSink) -> None:
        global_sink = InMemoryAuditSink()
        global_config.set_audit_sink(global_sink)
        scoped = MaskingConfig.create(audit_sink=audit_sink)
        _payment().model_dump(context=masking_context(scoped))
        assert audit_sink.call_count == 4
        assert global_sink.call_count == 0

    def test_extra_context_preserved(self) -> None:
        config = MaskingConfig.create()
        context = masking_context(config, tenant="acme")
        assert context == {"tenant": "acme", CONTEXT_KEY: config}

    def test_rejects_none(self) -> None:
        with pytest.raises(ConfigError, match="must not be None"):
            masking_context(None)  # type: ignore[arg-type]
