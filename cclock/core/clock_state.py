"""Two-player clock state: pure logic, no UI.

Every operation takes the current time explicitly, so callers decide where time
comes from (the UI reads ``time.monotonic()`` once per event) and tests can pass
synthetic timestamps.
"""

from enum import Enum

from cclock.common.logger import log

LEFT = 0
RIGHT = 1
_SIDE_NAMES = ("left", "right")


class GamePhase(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


class TapOutcome(Enum):
    IGNORED_GAME_OVER = "ignored_game_over"
    SWITCHED = "switched"
    STARTED = "started"
    IGNORED = "ignored"


# Players sit in a fixed two-slot list, so the opponent is just the other slot.
def opponent_of(index):
    return 1 - index


class Player:
    """Remaining time for one side of the board.

    While running, ``remaining_seconds`` is a cached projection from the start
    snapshot (``turn_started_at`` / ``turn_started_with``); while idle it is the
    authoritative value and the snapshot fields are None.
    """

    def __init__(self, initial_seconds, total_budget_seconds):
        self.remaining_seconds = float(initial_seconds)
        self.total_budget_seconds = float(total_budget_seconds)
        self.running = False
        self.turn_started_at = None
        self.turn_started_with = None

    # Remaining time at `now` if this clock is running, clamped at zero.
    def project(self, now):
        if not self.running:
            return self.remaining_seconds
        elapsed = now - self.turn_started_at
        return max(0.0, self.turn_started_with - elapsed)

    @property
    def progress(self):
        return 1 - self.remaining_seconds / self.total_budget_seconds

    @property
    def flagged(self):
        return self.remaining_seconds <= 0

    def __repr__(self):
        return (f"Player(remaining={self.remaining_seconds:.3f}, running={self.running}, "
                f"started_at={self.turn_started_at}, started_with={self.turn_started_with})")


class Game:
    """Both players plus the "whose clock is running" relationship.

    Transitions that break their preconditions (starting a running clock, acting
    after a flag fall, ...) are refused: they return False, log a warning and leave
    the state as it was.
    """

    def __init__(self, t1_seconds, t2_seconds):
        self.players = []
        self.ever_started = False
        self.reset(t1_seconds, t2_seconds)

    # Throws away both players and builds fresh idle ones. Both share the larger allotment as their budget.
    def reset(self, t1_seconds, t2_seconds):
        if t1_seconds < 0 or t2_seconds < 0 or max(t1_seconds, t2_seconds) <= 0:
            raise ValueError(f"Clock times must be non-negative with a positive maximum, got {t1_seconds}, {t2_seconds}")
        total = max(t1_seconds, t2_seconds)
        self.players = [Player(t1_seconds, total), Player(t2_seconds, total)]
        self.ever_started = False
        log.info(f"New game: left={float(t1_seconds)}s right={float(t2_seconds)}s budget={float(total)}s")

    #region === Derived state ===

    @property
    def running_index(self):
        for i, player in enumerate(self.players):
            if player.running:
                return i
        return None

    @property
    def is_over(self):
        return any(p.flagged for p in self.players)

    @property
    def phase(self):
        if self.is_over:
            return GamePhase.GAME_OVER
        if not self.ever_started:
            return GamePhase.NOT_STARTED
        return GamePhase.IN_PROGRESS

    def progress(self, index):
        return self.players[index].progress

    #endregion === Derived state ===

    #region === Transitions ===

    # Refreshes the running player's cached remaining time. Never starts or stops anything.
    def tick(self, now):
        index = self.running_index
        if index is None:
            return
        player = self.players[index]
        was_flagged = player.flagged
        player.remaining_seconds = player.project(now)
        if player.flagged and not was_flagged:
            log.info(f"Flag fell on the {_SIDE_NAMES[index]} clock, game over")

    def start_turn(self, index, now):
        player = self.players[index]
        if self.is_over:
            log.warning(f"Refused to start the {_SIDE_NAMES[index]} clock: game is over")
            return False
        if player.running:
            log.warning(f"Refused to start the {_SIDE_NAMES[index]} clock: already running")
            return False
        if self.players[opponent_of(index)].running:
            log.warning(f"Refused to start the {_SIDE_NAMES[index]} clock: opponent is running")
            return False
        player.turn_started_at = now
        player.turn_started_with = player.remaining_seconds
        player.running = True
        self.ever_started = True
        log.debug(f"Started {_SIDE_NAMES[index]} clock at {now} with {player.remaining_seconds}s")
        return True

    def end_turn(self, index, now):
        player = self.players[index]
        if not player.running:
            log.warning(f"Refused to stop the {_SIDE_NAMES[index]} clock: not running")
            return False
        player.remaining_seconds = player.project(now)
        player.turn_started_at = None
        player.turn_started_with = None
        player.running = False
        log.debug(f"Stopped {_SIDE_NAMES[index]} clock at {now} with {player.remaining_seconds}s left")
        return True

    # Ends the running player's turn and starts the opponent's at the same instant. If the running clock has
    # already reached zero by `now`, nothing changes hands.
    def switch_turn(self, now):
        index = self.running_index
        if index is None:
            log.warning("Refused to switch turns: no clock is running")
            return False
        self.tick(now)
        if self.is_over:
            log.warning("Refused to switch turns: game is over")
            return False
        self.end_turn(index, now)
        self.start_turn(opponent_of(index), now)
        return True

    # Tapping your own clock while nothing runs hands the move to the other side, like a physical clock.
    def begin_opponent_turn(self, tapped_index, now):
        if self.running_index is not None:
            log.warning("Refused to begin opponent turn: a clock is already running")
            return False
        return self.start_turn(opponent_of(tapped_index), now)

    def pause(self, now):
        index = self.running_index
        if index is None:
            return False
        self.tick(now)
        if self.is_over:
            return False
        log.info(f"Paused with the {_SIDE_NAMES[index]} clock running")
        return self.end_turn(index, now)

    def tap(self, index, now):
        """Resolve a tap on one side of the board.

        * game over: ignored
        * tapped side running: switch turns
        * neither side running: start the opponent of the tapped side
        * tapped side idle while the other runs: ignored
        """
        self.tick(now)
        tapped = self.players[index]
        opponent = self.players[opponent_of(index)]
        if tapped.flagged or opponent.flagged:
            return TapOutcome.IGNORED_GAME_OVER
        if tapped.running:
            self.switch_turn(now)
            return TapOutcome.SWITCHED
        if not opponent.running:
            self.begin_opponent_turn(index, now)
            return TapOutcome.STARTED
        return TapOutcome.IGNORED

    #endregion === Transitions ===
