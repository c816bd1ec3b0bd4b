from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティへのアクセスは必ず集約ルートを経由
    - 状態変化はドメインイベントとして記録し、ユースケース層が取り出して処理する
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[object] = []

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """記録済みのドメインイベントを返してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
