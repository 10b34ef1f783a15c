"""Game controller: owns the state and applies commands in arrival order.

Key presses and clock ticks all go through one queue, which is drained by
a single update loop. Nothing else mutates the GameState.
"""

from collections import deque
import logging
from typing import Deque, Optional

from trex.config.settings import Settings
from trex.core.events import Event, EventBus, EventType
from trex.core.state import GamePhase, StateMachine
from trex.game import physics
from trex.game.clock import SimulationClock
from trex.game.collision import update_clouds, update_obstacles
from trex.game.input import Command, InputMapper
from trex.game.random_source import NumpyRandom, RandomSource
from trex.game.spawner import Spawner
from trex.game.state import GameSnapshot, GameState, reset_round

logger = logging.getLogger(__name__)


class GameController:
    """Runs the runner game.

    Lifecycle:
        1. key_down()/key_up()/submit() - queue commands
        2. advance(delta_ms) - queue due ticks and drain the queue
        3. snapshot() - read-only view for rendering
        4. close() - stop accepting work
    """

    def __init__(
        self,
        settings: Settings,
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
        state_machine: Optional[StateMachine] = None,
        input_mapper: Optional[InputMapper] = None,
    ):
        self.settings = settings
        if rng is None:
            rng = NumpyRandom(seed=settings.seed)
        self.rng = rng
        self.event_bus = event_bus or EventBus()
        self.state_machine = state_machine or StateMachine()
        self.input_mapper = input_mapper or InputMapper()

        self.state = GameState.initial(settings)
        self.spawner = Spawner(settings, rng)
        self.clock = SimulationClock(settings.tick_ms, settings.max_ticks_per_frame)

        self._queue: Deque[Command] = deque()
        self._closed = False

    @property
    def phase(self) -> GamePhase:
        return self.state_machine.phase

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of queued commands."""
        return len(self._queue)

    # Input
    def key_down(self, key: str) -> Optional[Command]:
        command = self.input_mapper.key_down(key, self.phase)
        if command is not None:
            self.submit(command)
        return command

    def key_up(self, key: str) -> Optional[Command]:
        command = self.input_mapper.key_up(key)
        if command is not None:
            self.submit(command)
        return command

    def submit(self, command: Command) -> None:
        """Queue a command for the next drain."""
        if self._closed:
            return
        self._queue.append(command)

    # Frame loop
    def advance(self, delta_ms: float) -> int:
        """Queue the ticks due for ``delta_ms`` of real time, then drain.

        Returns the number of simulation ticks applied.
        """
        if self._closed:
            return 0

        # Input queued since the last frame goes first
        self.process()

        if not self.state_machine.is_running:
            self.clock.reset()
            return 0

        for _ in range(self.clock.advance(delta_ms)):
            self._queue.append(Command.TICK)
        return self.process()

    def process(self) -> int:
        """Apply every queued command in order. Returns ticks applied."""
        ticks = 0
        while self._queue:
            command = self._queue.popleft()
            if command == Command.TICK:
                if self._tick():
                    ticks += 1
            else:
                self._apply(command)
        return ticks

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.capture(self.state, self.phase)

    def close(self) -> None:
        """Tear down: drop queued work and refuse new commands."""
        if self._closed:
            return
        self._closed = True
        self._queue.clear()
        self.clock.reset()
        logger.info("GameController closed")

    # Command handling
    def _apply(self, command: Command) -> None:
        state = self.state
        cfg = self.settings.player

        if command == Command.START:
            self._start_round()
            return

        # Everything else only matters mid-round
        if not self.state_machine.is_running:
            return

        if command == Command.JUMP:
            physics.start_jump(state.player, state.jump, cfg)
        elif command == Command.DUCK:
            state.duck_held = True
            physics.start_duck(state.player, cfg)
        elif command == Command.STOP_DUCK:
            state.duck_held = False
            physics.stop_duck(state.player, cfg)

    def _start_round(self) -> None:
        if self.state_machine.is_running:
            return
        reset_round(self.state, self.settings)
        self.clock.reset()

        self.state_machine.transition(GamePhase.RUNNING)
        logger.info(f"Round started (high score {self.state.high_score})")
        self.event_bus.emit(Event(
            EventType.GAME_STARTED,
            data={"high_score": self.state.high_score},
            source="game",
        ))

    def _tick(self) -> bool:
        """Run one simulation step. Returns False if the tick was stale."""
        if not self.state_machine.is_running:
            return False

        state = self.state
        settings = self.settings

        state.elapsed_ticks += 1
        state.time_ms += settings.tick_ms

        self.spawner.update(state)
        landed = physics.step_jump(state.player, state.jump, settings.tick_ms, settings.player)
        if landed and state.duck_held:
            physics.start_duck(state.player, settings.player)
        update_clouds(state, settings)
        outcome = update_obstacles(state, settings)

        if outcome.scored:
            self.event_bus.emit(Event(
                EventType.SCORE_CHANGED,
                data={"score": state.score},
                source="game",
            ))
        if outcome.collided:
            self._end_round()
        return True

    def _end_round(self) -> None:
        state = self.state
        state.high_score = max(state.high_score, state.score)

        self.clock.reset()

        self.state_machine.transition(GamePhase.OVER)
        logger.info(f"Game over: score {state.score}, high score {state.high_score}")
        self.event_bus.emit(Event(
            EventType.GAME_OVER,
            data={"score": state.score, "high_score": state.high_score},
            source="game",
        ))
