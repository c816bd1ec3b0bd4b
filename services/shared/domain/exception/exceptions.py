class DomainException(Exception):
    """ドメイン層で発生する基底例外"""

    pass


class ValidationException(DomainException):
    """リクエストの形式が不正な場合（副作用の発生前に検出する）"""

    pass


class AvailabilityException(DomainException):
    """指定期間に部屋を予約できない場合"""

    pass


class PaymentException(DomainException):
    """決済ゲートウェイが失敗を返した場合"""

    pass


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    pass


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    pass
