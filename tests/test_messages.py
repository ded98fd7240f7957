"""Tests for messages and the direction encoding."""

import pytest

from snake_controller.messages import (
    Cell,
    Direction,
    DirectionInd,
    DisplayInd,
    FoodInd,
    FoodReq,
    FoodResp,
    LooseInd,
    MessageId,
    ScoreInd,
    TimeoutInd,
)


class TestDirection:
    def test_bit_encoding(self):
        assert Direction.UP == 0b00
        assert Direction.DOWN == 0b10
        assert Direction.LEFT == 0b01
        assert Direction.RIGHT == 0b11

    def test_axis_and_sign(self):
        assert Direction.UP.axis == Direction.DOWN.axis == 0
        assert Direction.LEFT.axis == Direction.RIGHT.axis == 1
        assert Direction.UP.sign == Direction.LEFT.sign == -1
        assert Direction.DOWN.sign == Direction.RIGHT.sign == 1

    def test_delta(self):
        assert Direction.UP.delta == (0, -1)
        assert Direction.DOWN.delta == (0, 1)
        assert Direction.LEFT.delta == (-1, 0)
        assert Direction.RIGHT.delta == (1, 0)

    def test_perpendicular(self):
        assert Direction.UP.is_perpendicular_to(Direction.LEFT)
        assert not Direction.UP.is_perpendicular_to(Direction.DOWN)
        assert not Direction.RIGHT.is_perpendicular_to(Direction.RIGHT)

    def test_chars(self):
        for d in Direction:
            assert Direction.from_char(d.to_char()) is d
        with pytest.raises(KeyError):
            Direction.from_char("N")


class TestMessageIds:
    @pytest.mark.parametrize("message, expected", [
        (DirectionInd(Direction.UP), 0x10),
        (TimeoutInd(), 0x20),
        (DisplayInd(0, 0, Cell.FREE), 0x30),
        (FoodInd(0, 0), 0x40),
        (FoodReq(), 0x41),
        (FoodResp(0, 0), 0x42),
        (ScoreInd(), 0x70),
        (LooseInd(), 0x71),
    ])
    def test_ids(self, message, expected):
        assert message.message_id == expected
        assert type(message).MESSAGE_ID == expected

    def test_ids_are_unique(self):
        assert len({int(m) for m in MessageId}) == len(MessageId)


class TestMessages:
    def test_equality(self):
        assert DisplayInd(1, 2, Cell.FOOD) == DisplayInd(1, 2, Cell.FOOD)
        assert DisplayInd(1, 2, Cell.FOOD) != DisplayInd(1, 2, Cell.SNAKE)
        assert FoodInd(1, 2) != FoodResp(1, 2)

    def test_frozen(self):
        msg = FoodInd(1, 2)
        with pytest.raises(AttributeError):
            msg.x = 3

    def test_to_dict(self):
        assert DisplayInd(3, 4, Cell.SNAKE).to_dict() == {
            "id": 0x30, "x": 3, "y": 4, "value": 2,
        }
        assert DirectionInd(Direction.RIGHT).to_dict() == {
            "id": 0x10, "direction": 0b11,
        }
        assert TimeoutInd().to_dict() == {"id": 0x20}
