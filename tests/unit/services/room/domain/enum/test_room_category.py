import pytest

from services.room.domain.enum.room_category import RoomCategory


class TestRoomCategory:
    @pytest.mark.parametrize(
        "room_id, expected",
        [
            ("suite-room", RoomCategory.PREMIUM),
            ("premium-suite", RoomCategory.PREMIUM),
            ("ocean-premium", RoomCategory.PREMIUM),
            ("room1", RoomCategory.STANDARD),
            ("penthouse", RoomCategory.STANDARD),
            # 大文字小文字は区別する
            ("Suite-1", RoomCategory.STANDARD),
        ],
    )
    def test_infer_from_room_id(self, room_id, expected):
        assert RoomCategory.infer_from_room_id(room_id) == expected

    def test_is_premium(self):
        assert RoomCategory.PREMIUM.is_premium
        assert not RoomCategory.STANDARD.is_premium
