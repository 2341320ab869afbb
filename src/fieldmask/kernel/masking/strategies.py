"""Kernel masking – built-in strategy catalogue.

Every strategy is a pure ``(value, mask_char) -> str`` function.  None of
them raise: inputs that are too short for the kind's layout degrade to a
fixed-width full mask.
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Callable, Final

from fieldmask.kernel.masking.kind import MaskKind

__all__ = ["MaskingStrategy", "STRATEGIES", "apply_strategy", "strategy_for"]

MaskingStrategy = Callable[[str, str], str]

_NON_DIGIT: Final = re.compile(r"[^0-9]")
_WHITESPACE: Final = re.compile(r"\s+")
_IP_SEGMENT: Final = re.compile(r"[^.]+")


def _digits(value: str) -> str:
    return _NON_DIGIT.sub("", value)


def _credit_card(value: str, m: str) -> str:
    digits = _digits(value)
    block = m * 4
    if len(digits) < 4:
        return block
    return f"{block}-{block}-{block}-{digits[-4:]}"


def _email(value: str, m: str) -> str:
    at = value.find("@")
    if at <= 0:
        return m * 8
    return value[: min(2, at)] + m * 4 + value[at:]


def _phone(value: str, m: str) -> str:
    digits = _digits(value)
    if len(digits) < 4:
        return m * 4
    return m * (len(digits) - 4) + digits[-4:]


def _dni(value: str, m: str) -> str:
    if len(value) <= 4:
        return m * 4
    return m * (len(value) - 4) + value[-4:]


def _iban(value: str, m: str) -> str:
    clean = _WHITESPACE.sub("", value)
    if len(clean) <= 6:
        return m * 4
    return clean[:2] + m * (len(clean) - 6) + clean[-4:]


def _ssn(value: str, m: str) -> str:
    digits = _digits(value)
    prefix = f"{m * 3}-{m * 2}-"
    if len(digits) < 4:
        return prefix + m * 4
    return prefix + digits[-4:]


def _name(value: str, m: str) -> str:
    parts = _WHITESPACE.split(value)
    # trailing separators never produce a word
    while parts and not parts[-1]:
        parts.pop()
    out: list[str] = []
    for i, part in enumerate(parts):
        if i > 0:
            out.append(" ")
        if part:
            out.append(part[0] + m * (len(part) - 1))
    return "".join(out)


def _passport(value: str, m: str) -> str:
    if len(value) <= 5:
        return m * 4
    return value[:2] + m * (len(value) - 5) + value[-3:]


def _bank_account(value: str, m: str) -> str:
    digits = _digits(value)
    if len(digits) <= 4:
        return m * 4
    return m * (len(digits) - 4) + digits[-4:]


def _ip_address(value: str, m: str) -> str:
    last_dot = value.rfind(".")
    if last_dot < 0:
        return m * 8
    prefix = _IP_SEGMENT.sub(m * 3, value[:last_dot])
    return f"{prefix}.{value[last_dot + 1:]}"


def _total(value: str, m: str) -> str:  # noqa: ARG001
    return m * 8


STRATEGIES: Final[Mapping[MaskKind, MaskingStrategy]] = MappingProxyType({
    MaskKind.CREDIT_CARD: _credit_card,
    MaskKind.EMAIL: _email,
    MaskKind.PHONE: _phone,
    MaskKind.DNI: _dni,
    MaskKind.IBAN: _iban,
    MaskKind.SSN: _ssn,
    MaskKind.NAME: _name,
    MaskKind.PASSPORT: _passport,
    MaskKind.BANK_ACCOUNT: _bank_account,
    MaskKind.IP_ADDRESS: _ip_address,
    MaskKind.TOTAL: _total,
})


def strategy_for(kind: MaskKind) -> MaskingStrategy:
    """Return the built-in strategy for *kind*.

    Raises
    ------
    ValueError
        For :attr:`MaskKind.CUSTOM`, which has no built-in strategy.
    """
    try:
        return STRATEGIES[kind]
    except KeyError:
        raise ValueError(f"{kind!r} has no built-in strategy") from None


def apply_strategy(kind: MaskKind, value: str, mask_char: str) -> str:
    """Mask *value* with the built-in strategy of *kind* using *mask_char*."""
    return strategy_for(kind)(value, mask_char)
