from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def get_by_name(self, shift_name: str) -> Optional[Shift]:
        raise NotImplementedError

    def create(self, *, shift_name: str, start_time: Optional[time], end_time: Optional[time]) -> int:
        raise NotImplementedError

    def rename(self, *, shift_id: int, shift_name: str) -> bool:
        raise NotImplementedError

    def delete_by_id(self, shift_id: int) -> bool:
        raise NotImplementedError
