from __future__ import annotations

from typing import Optional, Protocol

from .model import PayGroup


class PayGroupRepository(Protocol):
    def get_by_id(self, pay_group_id: int) -> Optional[PayGroup]:
        raise NotImplementedError
