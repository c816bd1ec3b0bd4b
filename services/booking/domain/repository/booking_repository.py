from abc import abstractmethod
from typing import Optional

from services.booking.domain.entity.booking import Booking
from services.booking.domain.value_object.booking_id import BookingId
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """予約を保存する。未採番なら ID を採番して返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Optional[Booking]:
        """予約IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_room_id(self, room_id: str) -> list[Booking]:
        """部屋IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError
