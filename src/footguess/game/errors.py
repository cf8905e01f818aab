"""Rule violations raised by the game service before the engine runs."""

from __future__ import annotations


class GameError(Exception):
    """Base class for guess-flow precondition failures."""


class GameCompletedError(GameError):
    def __init__(self) -> None:
        super().__init__("Game is already completed")


class NoAttemptsLeftError(GameError):
    def __init__(self) -> None:
        super().__init__("No attempts left")


class AttemptsRemainingError(GameError):
    def __init__(self) -> None:
        super().__init__("You still have attempts left")


class PlayerNotFoundError(GameError):
    def __init__(self, player_id: int) -> None:
        super().__init__("Player not found")
        self.player_id = player_id


class DuplicateGuessError(GameError):
    def __init__(self, player_id: int) -> None:
        super().__init__("Player already guessed")
        self.player_id = player_id


class AnswerPlayerMissingError(GameError):
    """The day's answer player is not in the catalog; a configuration fault."""

    def __init__(self, player_id: int) -> None:
        super().__init__("Answer player not found")
        self.player_id = player_id


class EmptyCatalogError(GameError):
    def __init__(self) -> None:
        super().__init__("No players found in the catalog")
