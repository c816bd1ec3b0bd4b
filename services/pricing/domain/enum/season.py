from datetime import date
from enum import Enum


class Season(str, Enum):
    """季節（月から決定する）"""

    WINTER = "winter"
    SPRING = "spring"
    SUMMER = "summer"
    AUTUMN = "autumn"

    @classmethod
    def of(cls, day: date) -> "Season":
        month = day.month
        if month == 12 or month <= 2:
            return cls.WINTER
        if month <= 5:
            return cls.SPRING
        if month <= 8:
            return cls.SUMMER
        return cls.AUTUMN
