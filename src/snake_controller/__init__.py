"""Snake controller — event-driven snake game decision core."""

from snake_controller.config import GameConfig, parse_config
from snake_controller.controller import Controller, Segment
from snake_controller.errors import (
    ConfigurationError,
    SnakeControllerError,
    UnexpectedEventError,
)
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
from snake_controller.ports import Port, QueuePort

__all__ = [
    "Cell",
    "ConfigurationError",
    "Controller",
    "Direction",
    "DirectionInd",
    "DisplayInd",
    "FoodInd",
    "FoodReq",
    "FoodResp",
    "GameConfig",
    "LooseInd",
    "MessageId",
    "Port",
    "QueuePort",
    "ScoreInd",
    "Segment",
    "SnakeControllerError",
    "TimeoutInd",
    "UnexpectedEventError",
    "parse_config",
]
