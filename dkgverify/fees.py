"""
Fee record for DKG jobs, updatable only by a privileged origin.

Not used by the verifier.  A host settles fees only after
:func:`dkgverify.verify` has accepted the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Hashable

from .results import JobResult, KeyGenResult, SigningResult

logger = logging.getLogger(__name__)


class BadOrigin(PermissionError):
    """Caller is not allowed to change the fee record."""


@dataclass(frozen=True)
class FeeInfo:
    """Pricing for DKG jobs."""

    base_fee: int = 0
    dkg_validator_fee: int = 0
    sig_validator_fee: int = 0
    refresh_validator_fee: int = 0

    def __post_init__(self) -> None:
        for name in (
            "base_fee",
            "dkg_validator_fee",
            "sig_validator_fee",
            "refresh_validator_fee",
        ):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int")
            if value < 0:
                raise ValueError(f"{name} must be ≥ 0")

    def job_fee(self, result: JobResult, validators: int) -> int:
        """base fee + per-validator fee of the result's phase."""
        if validators < 0:
            raise ValueError("validators must be ≥ 0")
        if isinstance(result, KeyGenResult):
            return self.base_fee + self.dkg_validator_fee * validators
        if isinstance(result, SigningResult):
            return self.base_fee + self.sig_validator_fee * validators
        raise TypeError(f"not a job result: {type(result).__name__}")


class FeeSchedule:
    """Current ``FeeInfo`` plus the single origin allowed to replace it."""

    def __init__(self, update_origin: Hashable, fees: FeeInfo = FeeInfo()) -> None:
        self._update_origin = update_origin
        self._fees = fees

    @property
    def fees(self) -> FeeInfo:
        return self._fees

    def set_fee(self, origin: Hashable, new_fee: FeeInfo) -> None:
        """
        Replace the fee record.

        Raises ``BadOrigin`` (leaving the record untouched) unless
        *origin* is the configured update origin.
        """
        if origin != self._update_origin:
            raise BadOrigin(f"origin {origin!r} may not update fees")
        if not isinstance(new_fee, FeeInfo):
            raise TypeError("new_fee must be a FeeInfo")
        self._fees = new_fee
        logger.info("fee record updated: %s", new_fee)
