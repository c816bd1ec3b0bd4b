from enum import Enum

_PREMIUM_MARKERS = ("suite", "premium")


class RoomCategory(str, Enum):
    """部屋カテゴリ

    PREMIUM は需要係数の上乗せと週末の最低宿泊数ルールの対象になる。
    """

    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"

    @classmethod
    def infer_from_room_id(cls, room_id: str) -> "RoomCategory":
        """カタログに登録のない部屋IDからカテゴリを推定する"""
        if any(marker in room_id for marker in _PREMIUM_MARKERS):
            return cls.PREMIUM
        return cls.STANDARD

    @property
    def is_premium(self) -> bool:
        return self is RoomCategory.PREMIUM
