"""Turn order, shot-volume rules and fire resolution."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from battleship.game.ai.selection import build_targeting_strategy
from battleship.game.ai.strategy import DEFAULT_TARGETING_ATTEMPTS
from battleship.game.core.fleet import DEFAULT_PLACEMENT_ATTEMPTS
from battleship.game.core.models import Coord, Difficulty, Rule
from battleship.game.core.player import Player

logger = logging.getLogger(__name__)

USER_INDEX = 0
BOT_INDEX = 1
WIN_MESSAGE = "You won 🙌"
LOSS_MESSAGE = "You lost 🙁"


class Game:
    """Human-versus-bot game session.

    Player 0 is the human and player 1 the bot. Every call to :meth:`fire`
    hands the turn to the other side; once ``winner`` is set the caller is
    expected to stop driving the game.
    """

    def __init__(
        self,
        rule: Rule,
        difficulty: Difficulty,
        rng: random.Random | None = None,
        *,
        placement_attempts: int = DEFAULT_PLACEMENT_ATTEMPTS,
        targeting_attempts: int = DEFAULT_TARGETING_ATTEMPTS,
    ) -> None:
        self.rule = rule
        self.difficulty = difficulty
        self._rng = rng if rng is not None else random.Random()
        self._targeting_attempts = targeting_attempts
        self.players: tuple[Player, Player] = (
            Player.create(self._rng, placement_attempts=placement_attempts),
            Player.create(self._rng, is_bot=True, placement_attempts=placement_attempts),
        )
        self.winner: int | None = None
        self.turn = USER_INDEX
        logger.info("game_created rule=%s difficulty=%s", rule.value, difficulty.value)

    @property
    def player(self) -> Player:
        return self.players[USER_INDEX]

    @property
    def computer(self) -> Player:
        return self.players[BOT_INDEX]

    def is_user_turn(self) -> bool:
        return self.turn == USER_INDEX

    def is_won(self) -> bool:
        return self.winner is not None

    def is_valid_rule(self, existing_shots: int) -> bool:
        """Return whether the human may still add a shot to the current volley."""
        if self.rule is Rule.DEFAULT:
            return existing_shots < 1
        if self.rule is Rule.FURY:
            return existing_shots < len(self.player.player_board.ships_alive())
        if self.rule is Rule.CHARGE:
            board = self.computer.player_board
            return existing_shots <= len(board.ships) - len(board.ships_alive())
        raise ValueError(f"Unsupported rule: {self.rule!r}")

    def bot_shot_count(self) -> int:
        """Return how many shots the bot fires this turn.

        Charge counts the human's sunk ships here, while :meth:`is_valid_rule`
        counts the computer's.
        """
        if self.rule is Rule.DEFAULT:
            return 1
        if self.rule is Rule.FURY:
            return len(self.computer.player_board.ships_alive())
        if self.rule is Rule.CHARGE:
            board = self.player.player_board
            return len(board.ships) - len(board.ships_alive()) + 1
        raise ValueError(f"Unsupported rule: {self.rule!r}")

    def generate_bot_firing_coordinates(self) -> set[Coord]:
        """Pick the bot's volley: distinct cells not yet targeted by the bot."""
        strategy = build_targeting_strategy(self.difficulty, self._rng)
        return strategy.generate(
            self.computer.opponent_board,
            self.bot_shot_count(),
            max_attempts=self._targeting_attempts,
        )

    def fire(self, shots: Iterable[Coord], bot: bool) -> str:
        """Resolve a volley from the side whose turn it is and hand over the turn."""
        attacker_index = self.turn
        defender_index = 1 - attacker_index
        volley = set(shots)
        response, lost = self.players[defender_index].player_board.take_fire(volley)
        message = self.players[attacker_index].opponent_board.update_status(response, bot)
        self.turn = defender_index
        logger.info(
            "fire attacker=%d shots=%d lost=%s message=%s",
            attacker_index,
            len(volley),
            lost,
            message,
        )
        if lost:
            self.winner = attacker_index
            logger.info("game_won winner=%d", attacker_index)
            return LOSS_MESSAGE if bot else WIN_MESSAGE
        return message

    def bot_fire(self) -> str:
        """Let the bot choose and fire its volley."""
        return self.fire(self.generate_bot_firing_coordinates(), bot=True)
