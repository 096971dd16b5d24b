'''
Reference Mastermind game server

Endpoints:
POST   /game          -> start a game (4 distinct digits, 1-6)
POST   /guess         -> submit a guess, returns black/white/result/status
DELETE /game/{id}     -> remove a game

Speaks the same protocol the API-mode client expects, so it can stand in for
the hosted server (e.g. `uvicorn mastermind.server:app`).
Set MM_SERVER_API_KEY to require an API key.
'''

import secrets
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException

from .config import server_api_key
from .schemas import DeletedResponse, GuessRequest, GuessResponse, NewGameResponse
from .secret import generate
from .store import GameStore, StoredGame
from .types import CODE_LENGTH, DIGIT_RANGE
from .validation import GuessError, has_repeats, parse_guess

app = FastAPI(title="Mastermind API", version="1.0.0")

store = GameStore()


def get_store() -> GameStore:
    return store


def require_api_key(
    x_api_key: Optional[str] = Header(None),
    authorization: Optional[str] = Header(None),
) -> None:
    expected = server_api_key()
    if expected is None:
        return
    offered = x_api_key or ""
    if not offered and authorization and authorization.startswith("Bearer "):
        offered = authorization[len("Bearer "):]
    if not secrets.compare_digest(offered.encode(), expected.encode()):
        raise HTTPException(status_code=401, detail="unauthorized")


def _to_response(game: StoredGame) -> GuessResponse:
    fb = game.last
    black, white = (fb.exact, fb.partial) if fb else (0, 0)
    return GuessResponse(
        black=black,
        white=white,
        result=fb.pegs() if fb else "-",
        status=game.status,
        attempts=game.session.attempts,
    )


# ---------------- Routes ----------------

@app.post("/game", response_model=NewGameResponse, summary="Start a new game",
          dependencies=[Depends(require_api_key)])
def start_game(games: GameStore = Depends(get_store)) -> NewGameResponse:
    secret = generate(CODE_LENGTH, DIGIT_RANGE, distinct=True)
    game = games.create(secret)
    return NewGameResponse(game_id=game.id)


@app.post("/guess", response_model=GuessResponse, summary="Submit a guess",
          dependencies=[Depends(require_api_key)])
def submit_guess(payload: GuessRequest, games: GameStore = Depends(get_store)) -> GuessResponse:
    game_id = payload.identifier()
    if not game_id:
        raise HTTPException(status_code=400, detail="Missing game_id")

    try:
        guess = parse_guess(payload.guess, CODE_LENGTH, DIGIT_RANGE)
    except GuessError as err:
        raise HTTPException(status_code=400, detail=str(err))
    if has_repeats(guess):
        raise HTTPException(status_code=400, detail="Digits must be unique.")

    try:
        game = games.guess(game_id, guess)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if game is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_response(game)


@app.delete("/game/{game_id}", response_model=DeletedResponse, summary="Delete a game",
            dependencies=[Depends(require_api_key)])
def delete_game(game_id: str, games: GameStore = Depends(get_store)) -> DeletedResponse:
    if not games.delete(game_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return DeletedResponse(deleted=game_id)
