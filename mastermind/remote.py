"""
- HTTP client for a remote Mastermind server.

POST   {base}/game        -> create a game, returns its id
POST   {base}/guess       -> evaluate a guess for a game
DELETE {base}/game/{id}   -> best-effort cleanup

Servers disagree on payload shapes, so replies are read by trying a fixed list
of shapes in order and taking the first one that fits.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .engine import Feedback
from .oracle import Verdict
from .schemas import CreateGameReply, GuessReply
from .types import Code, DigitRange, CODE_LENGTH, DIGIT_RANGE
from .validation import code_to_str

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# (connect, read) seconds; expiry surfaces as NetworkError
DEFAULT_TIMEOUT: Tuple[float, float] = (5.0, 15.0)


class OracleError(Exception):
    """The remote server could not evaluate a request."""


class InvalidResponse(OracleError):
    def __init__(self, body: str = ""):
        self.body = body
        super().__init__("Invalid response from server.")


class HttpError(OracleError):
    def __init__(self, code: int, body: str):
        self.code = code
        self.body = body
        super().__init__(f"HTTP Error {code}: {body}")


class NetworkError(OracleError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network Error: {cause}")


# ---------------- Reply shapes ----------------

@dataclass(frozen=True)
class Payload:
    """One response body, decoded the ways the shape readers need."""

    text: str
    strict: Optional[BaseModel]
    loose: Optional[Dict[str, Any]]


def _decode_strict(model: Type[M], text: str) -> Optional[M]:
    try:
        return model.model_validate_json(text)
    except ValidationError:
        return None


def _decode_loose(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return None


def read_payload(model: Type[BaseModel], text: str) -> Payload:
    loose = _decode_loose(text)
    return Payload(
        text=text,
        strict=_decode_strict(model, text),
        loose=loose if isinstance(loose, dict) else None,
    )


def _count_pegs(text: str) -> Feedback:
    return Feedback(exact=text.count("B"), partial=text.count("W"))


def _as_count(value: Any) -> Optional[int]:
    """JSON number that is a whole number (4 or 4.0); bools are not counts."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _strict_counts(p: Payload) -> Optional[Verdict]:
    r = p.strict
    if r is None or r.black is None or r.white is None:
        return None
    return Verdict(Feedback(exact=r.black, partial=r.white), r.status)


def _strict_result(p: Payload) -> Optional[Verdict]:
    r = p.strict
    if r is None or r.result is None:
        return None
    return Verdict(_count_pegs(r.result), r.status)


def _error_field(p: Payload) -> Optional[Verdict]:
    if p.strict is not None:
        error = p.strict.error
    elif p.loose is not None:
        error = p.loose.get("error")
    else:
        error = None
    if isinstance(error, str) and error:
        raise HttpError(400, error)
    return None


def _loose_status(d: Dict[str, Any]) -> Optional[str]:
    status = d.get("status")
    return status if isinstance(status, str) else None


def _loose_counts(p: Payload) -> Optional[Verdict]:
    d = p.loose
    if d is None:
        return None
    black, white = _as_count(d.get("black")), _as_count(d.get("white"))
    if black is None or white is None:
        return None
    return Verdict(Feedback(exact=black, partial=white), _loose_status(d))


def _loose_result(p: Payload) -> Optional[Verdict]:
    d = p.loose
    if d is None or not isinstance(d.get("result"), str):
        return None
    return Verdict(_count_pegs(d["result"]), _loose_status(d))


def _raw_pegs(p: Payload) -> Optional[Verdict]:
    if not p.text:
        return None
    return Verdict(_count_pegs(p.text))


GUESS_SHAPES: Sequence[Callable[[Payload], Optional[Verdict]]] = (
    _strict_counts,
    _strict_result,
    _error_field,
    _loose_counts,
    _loose_result,
    _raw_pegs,
)


def _strict_id(p: Payload) -> Optional[str]:
    return p.strict.identifier() if p.strict is not None else None


def _loose_id(p: Payload) -> Optional[str]:
    if p.loose is None:
        return None
    for key in ("game_id", "gameId", "gameID", "id"):
        value = p.loose.get(key)
        if isinstance(value, str) and value:
            return value
    return None


def _json_string_id(p: Payload) -> Optional[str]:
    value = _decode_loose(p.text)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _raw_id(p: Payload) -> Optional[str]:
    return p.text.strip() or None


CREATE_SHAPES: Sequence[Callable[[Payload], Optional[str]]] = (
    _strict_id,
    _loose_id,
    _json_string_id,
    _raw_id,
)


def interpret_guess_reply(text: str) -> Verdict:
    payload = read_payload(GuessReply, text)
    for shape in GUESS_SHAPES:
        verdict = shape(payload)
        if verdict is not None:
            return verdict
    raise InvalidResponse(text)


def interpret_create_reply(text: str) -> str:
    payload = read_payload(CreateGameReply, text)
    for shape in CREATE_SHAPES:
        game_id = shape(payload)
        if game_id is not None:
            return game_id
    raise InvalidResponse(text)


# ---------------- Client ----------------

class MastermindClient:
    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: Any = DEFAULT_TIMEOUT,
        session: Optional[Any] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        # anything with requests.Session's request() signature
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        close = getattr(self.session, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "MastermindClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
            headers["X-API-Key"] = self.api_key
        return headers

    def _request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.info("%s %s body=%s", method, url, json.dumps(body) if body is not None else "<none>")
        try:
            response = self.session.request(
                method, url, json=body, headers=self._headers(), timeout=self.timeout
            )
        except requests.RequestException as exc:
            logger.info("%s %s failed: %s", method, url, exc)
            raise NetworkError(exc) from exc

        text = response.text or ""
        if not 200 <= response.status_code <= 299:
            logger.info("HTTP %s body=%s", response.status_code, text)
            raise HttpError(response.status_code, text)
        logger.info("HTTP %s OK", response.status_code)
        return text

    def create_game(self) -> str:
        return interpret_create_reply(self._request("POST", "/game", {}))

    def submit_guess(self, game_id: str, guess: str) -> Verdict:
        payload = {"guess": guess, "game_id": game_id, "gameId": game_id, "gameID": game_id}
        return interpret_guess_reply(self._request("POST", "/guess", payload))

    def delete_game(self, game_id: str) -> bool:
        """Best effort: failures are logged and never raised."""
        try:
            self._request("DELETE", f"/game/{game_id}")
        except OracleError as exc:
            logger.info("DELETE /game/%s failed: %s", game_id, exc)
            return False
        logger.info("DELETE /game/%s OK", game_id)
        return True


class RemoteOracle:
    """Guess evaluator backed by one game on the server."""

    unique_digits = True

    def __init__(
        self,
        client: MastermindClient,
        game_id: str,
        code_length: int = CODE_LENGTH,
        digit_range: DigitRange = DIGIT_RANGE,
    ):
        self.client = client
        self.game_id = game_id
        self.code_length = code_length
        self.digit_range = digit_range

    def submit_guess(self, guess: Code) -> Verdict:
        return self.client.submit_guess(self.game_id, code_to_str(guess))
