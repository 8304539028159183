from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Source of the current time for every security decision"""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as naive UTC"""
        pass
