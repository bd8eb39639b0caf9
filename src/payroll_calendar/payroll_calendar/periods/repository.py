from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PeriodStatus
from .model import NewPayPeriod, PersistedPayPeriod, StoredPeriodRef


class PayPeriodRepository(Protocol):
    def list_refs(self, *, pay_group_id: int, year: int) -> Sequence[StoredPeriodRef]:
        """Stored (cycle, period_end) pairs, highest cycle first."""

        raise NotImplementedError

    def find_by_keys(self, *, pay_group_id: int, year: int, period_numbers: Sequence[str]) -> Sequence[PersistedPayPeriod]:
        raise NotImplementedError

    def replace(
        self,
        *,
        pay_group_id: int,
        year: int,
        delete_period_numbers: Sequence[str],
        rows: Sequence[NewPayPeriod],
    ) -> int:
        """Delete the given keys and insert `rows` as one atomic unit.

        Returns the number of inserted rows. On failure nothing changes.
        """

        raise NotImplementedError

    def list_periods(
        self,
        *,
        pay_group_id: int,
        year: int,
        status: Optional[PeriodStatus] = None,
    ) -> Sequence[PersistedPayPeriod]:
        raise NotImplementedError

    def get_by_id(self, pay_period_id: int) -> Optional[PersistedPayPeriod]:
        raise NotImplementedError

    def update_status(self, *, pay_period_id: int, status: PeriodStatus) -> bool:
        raise NotImplementedError
