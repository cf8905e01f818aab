"""REST API for the footguess daily game."""

from __future__ import annotations

import logging
from pathlib import Path
from uuid import uuid4

from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response

from footguess.api.schemas import (
    ContinuousModeResponse,
    GameStateResponse,
    GuessRequest,
    PlayerSearchResponse,
)
from footguess.config import GameSettings
from footguess.game import (
    AnswerPlayerMissingError,
    EmptyCatalogError,
    GameError,
    GameService,
    GameSnapshot,
    PlayerNotFoundError,
)
from footguess.ingest import load_players_from_csv
from footguess.models import FeedbackResult, Player
from footguess.persistence import GameStore, open_store


logger = logging.getLogger("uvicorn.error")

SESSION_COOKIE = "footguess_session"
SESSION_HEADER = "X-Session-Id"
_MAX_SESSION_ID_LENGTH = 128


def seed_catalog(store: GameStore, catalog_path: Path) -> int:
    """Load the catalog CSV into an empty store; returns players inserted."""

    if store.count_players():
        return 0
    players = load_players_from_csv(catalog_path)
    inserted = store.save_players(players)
    logger.info("Seeded %d players from %s", inserted, catalog_path)
    return inserted


def snapshot_to_response(snapshot: GameSnapshot) -> GameStateResponse:
    game = snapshot.game
    return GameStateResponse(
        game_id=game.game_id,
        daily_player_id=game.answer_player_id if game.completed else None,
        attempts=snapshot.attempts,
        max_attempts=snapshot.max_attempts,
        continuous_mode_enabled=game.continuous_mode_enabled,
        completed=game.completed,
        guesses=snapshot.guesses,
        score=game.score,
        next_game_time=snapshot.next_game_time.isoformat() if snapshot.next_game_time else None,
    )


def player_to_search_result(player: Player) -> PlayerSearchResponse:
    return PlayerSearchResponse(
        id=player.id,
        name=player.name,
        nationality=player.nationality,
        club=player.club,
        image_url=player.image_url,
    )


def _status_for(exc: GameError) -> int:
    if isinstance(exc, PlayerNotFoundError):
        return 404
    if isinstance(exc, (AnswerPlayerMissingError, EmptyCatalogError)):
        return 500
    return 400


def _session_id(request: Request, response: Response) -> str:
    session_id = (request.headers.get(SESSION_HEADER) or request.cookies.get(SESSION_COOKIE) or "").strip()
    if len(session_id) > _MAX_SESSION_ID_LENGTH:
        raise HTTPException(status_code=400, detail="Session id is too long")
    if not session_id:
        session_id = uuid4().hex
    response.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return session_id


def create_app(service: GameService | None = None, *, settings: GameSettings | None = None) -> FastAPI:
    if service is None:
        settings = settings or GameSettings.from_env()
        store = open_store(settings)
        seed_catalog(store, settings.catalog_path)
        service = GameService(store, settings=settings)
        service.refresh_search_index()
    settings = service.settings

    app = FastAPI(title="footguess")
    app.state.game_service = service

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get(
        "/api/players/search",
        response_model=list[PlayerSearchResponse],
        response_model_exclude_none=True,
    )
    def search_players(q: str = Query("")) -> list[PlayerSearchResponse]:
        query = q.strip()
        if len(query) < settings.min_query_length:
            raise HTTPException(
                status_code=400,
                detail=f"Search query must be at least {settings.min_query_length} characters",
            )
        return [player_to_search_result(player) for player in service.search_players(query)]

    @app.get("/api/game/state", response_model=GameStateResponse, response_model_exclude_none=True)
    def game_state(session_id: str = Depends(_session_id)) -> GameStateResponse:
        try:
            snapshot = service.get_state(session_id)
        except GameError as exc:
            logger.error("Game state error: %s", exc)
            raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
        return snapshot_to_response(snapshot)

    @app.post("/api/game/guess", response_model=FeedbackResult, response_model_exclude_none=True)
    def submit_guess(payload: GuessRequest, session_id: str = Depends(_session_id)) -> FeedbackResult:
        try:
            return service.submit_guess(session_id, payload.player_id)
        except GameError as exc:
            status_code = _status_for(exc)
            if status_code >= 500:
                logger.error("Guess error for session %s: %s", session_id, exc)
            raise HTTPException(status_code=status_code, detail=str(exc)) from exc

    @app.post("/api/game/continuous-mode", response_model=ContinuousModeResponse)
    def continuous_mode(session_id: str = Depends(_session_id)) -> ContinuousModeResponse:
        try:
            service.enable_continuous_mode(session_id)
        except GameError as exc:
            raise HTTPException(status_code=_status_for(exc), detail=str(exc)) from exc
        return ContinuousModeResponse(success=True)

    return app
