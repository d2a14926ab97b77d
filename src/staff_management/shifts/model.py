from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: a named work shift.

    Start/end times are carried for display only; attendance never checks them.
    """

    shift_id: int
    shift_name: str
    start_time: Optional[time] = None
    end_time: Optional[time] = None
