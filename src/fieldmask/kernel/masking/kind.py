"""Kernel masking – MaskKind enumeration."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from fieldmask.kernel.masking.strategies import MaskingStrategy


class MaskKind(str, Enum):
    """Closed set of named masking transformations.

    Examples (default mask character ``'*'``):

    * ``CREDIT_CARD``: ``4111111111111111 → ****-****-****-1111``
    * ``EMAIL``: ``john.doe@mail.com → jo****@mail.com``
    * ``PHONE``: ``+525512345678 → ********5678``
    * ``DNI``: ``ABCD123456 → ******3456``
    * ``IBAN``: ``ES6621000418401234567891 → ES******************7891``
    * ``SSN``: ``123-45-6789 → ***-**-6789``
    * ``NAME``: ``John Doe → J*** D**``
    * ``PASSPORT``: ``AB1234567 → AB****567``
    * ``BANK_ACCOUNT``: ``12345678901234 → **********1234``
    * ``IP_ADDRESS``: ``192.168.1.100 → ***.***.***.100``
    * ``TOTAL``: ``anything → ********``
    * ``CUSTOM``: driven by the descriptor's visible window
    """

    CREDIT_CARD = "CREDIT_CARD"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    DNI = "DNI"
    IBAN = "IBAN"
    SSN = "SSN"
    NAME = "NAME"
    PASSPORT = "PASSPORT"
    BANK_ACCOUNT = "BANK_ACCOUNT"
    IP_ADDRESS = "IP_ADDRESS"
    TOTAL = "TOTAL"
    CUSTOM = "CUSTOM"

    @property
    def strategy(self) -> MaskingStrategy | None:
        """Built-in strategy for this kind; ``None`` for :attr:`CUSTOM`."""
        from fieldmask.kernel.masking.strategies import STRATEGIES

        return STRATEGIES.get(self)

    @property
    def is_custom(self) -> bool:
        return self is MaskKind.CUSTOM


__all__ = ["MaskKind"]
