from decimal import ROUND_CEILING, ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") からも呼び出すことを想定。
    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))


def round_half_up(value: Decimal) -> Decimal:
    """1セント単位に四捨五入する（ROUND_HALF_UP）"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def ceil_to_cent(value: Decimal) -> Decimal:
    """1セント単位に切り上げる"""
    return value.quantize(CENT, rounding=ROUND_CEILING)
