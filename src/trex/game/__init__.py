"""Runner simulation: entities, physics, spawning, scoring and the controller."""

from trex.game.controller import GameController
from trex.game.entities import Cloud, Obstacle, ObstacleKind, Player, Rect, overlaps
from trex.game.input import Command, InputMapper
from trex.game.random_source import NumpyRandom, RandomSource, ScriptedRandom
from trex.game.state import GameSnapshot, GameState

__all__ = [
    "Cloud",
    "Command",
    "GameController",
    "GameSnapshot",
    "GameState",
    "InputMapper",
    "NumpyRandom",
    "Obstacle",
    "ObstacleKind",
    "Player",
    "RandomSource",
    "Rect",
    "ScriptedRandom",
    "overlaps",
]
