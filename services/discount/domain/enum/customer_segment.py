from enum import Enum


class CustomerSegment(str, Enum):
    """顧客区分（VIP かどうかは CustomerBenefitRegistry で別管理）"""

    FIRST_TIME = "FIRST_TIME"
    RETURNING = "RETURNING"

    @classmethod
    def infer_from_user_id(cls, user_id: str) -> "CustomerSegment":
        """予約履歴を持たない場合にユーザーIDから区分を推定する"""
        if user_id.startswith("new-") or "first" in user_id:
            return cls.FIRST_TIME
        return cls.RETURNING
