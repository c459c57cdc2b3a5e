"""Minute-of-day window used to pick users due for a reminder."""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple

MINUTES_PER_DAY = 24 * 60


def minute_of_day(now: datetime) -> int:
    """Minutes since local midnight for an already-localized datetime."""
    return now.hour * 60 + now.minute


@dataclass(frozen=True)
class ReminderWindow:
    """Inclusive window [minute - window, minute + window] around a trigger time."""
    minute_of_day: int
    window: int = 5
    
    def __post_init__(self):
        if self.window < 0:
            raise ValueError(f"window must be non-negative, got {self.window}")
    
    @classmethod
    def at(cls, now: datetime, window: int = 5) -> "ReminderWindow":
        return cls(minute_of_day=minute_of_day(now), window=window)
    
    @property
    def lower(self) -> int:
        return self.minute_of_day - self.window
    
    @property
    def upper(self) -> int:
        return self.minute_of_day + self.window
    
    def ranges(self, wrap_midnight: bool = False) -> List[Tuple[int, int]]:
        """Closed ranges of minuteOfDay values to query.
        
        Without wrapping the raw bounds are returned as-is, so near midnight
        they extend below 0 or above 1439 and match nothing over there.
        With wrapping the window is laid on the 24h circle and split in two
        where it crosses midnight.
        """
        if not wrap_midnight:
            return [(self.lower, self.upper)]
        
        if 2 * self.window + 1 >= MINUTES_PER_DAY:
            return [(0, MINUTES_PER_DAY - 1)]
        
        lower = self.lower % MINUTES_PER_DAY
        upper = self.upper % MINUTES_PER_DAY
        if lower <= upper:
            return [(lower, upper)]
        return [(0, upper), (lower, MINUTES_PER_DAY - 1)]
    
    def contains(self, minute: int, wrap_midnight: bool = False) -> bool:
        return any(lo <= minute <= hi for lo, hi in self.ranges(wrap_midnight))
