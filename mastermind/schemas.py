"""
Pydantic models for the game server protocol.
- Reply models: how the client reads server payloads (strictly typed first)
- Request/response models: what the reference server accepts and returns
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


# 1. Client side: reply to POST /game
class CreateGameReply(BaseModel):
    model_config = ConfigDict(strict=True)

    game_id: Optional[StrictStr] = None
    gameId: Optional[StrictStr] = None
    gameID: Optional[StrictStr] = None
    id: Optional[StrictStr] = None

    def identifier(self) -> Optional[str]:
        for value in (self.game_id, self.gameId, self.gameID, self.id):
            if value:
                return value
        return None


# 2. Client side: reply to POST /guess
# Any field with the wrong type fails the whole decode; the client then
# falls back to reading a plain JSON map.
class GuessReply(BaseModel):
    model_config = ConfigDict(strict=True)

    black: Optional[StrictInt] = None
    white: Optional[StrictInt] = None
    result: Optional[StrictStr] = None
    status: Optional[StrictStr] = None
    error: Optional[StrictStr] = None


# 3. Server side: body of POST /guess
class GuessRequest(BaseModel):
    guess: str = Field(..., description="Four distinct digits 1-6 as a string, e.g. '1234'")
    game_id: Optional[str] = Field(None, description="Game id (snake case)")
    gameId: Optional[str] = Field(None, description="Game id (camel case)")
    gameID: Optional[str] = Field(None, description="Game id (upper-case ID)")

    @field_validator("guess")
    @classmethod
    def strip_guess(cls, guess: str) -> str:
        return guess.strip()

    def identifier(self) -> Optional[str]:
        return self.game_id or self.gameId or self.gameID

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"guess": "1234", "game_id": "5f0c...", "gameId": "5f0c...", "gameID": "5f0c..."},
            ]
        }
    }


# 4. Server side: responses
class NewGameResponse(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game; secret is never returned")


class GuessResponse(BaseModel):
    black: int = Field(..., description="Digits right in value and position")
    white: int = Field(..., description="Digits right in value, wrong position")
    result: str = Field(..., description="Feedback pegs, e.g. 'BWW' or '-'")
    status: str = Field(..., description="'in_progress' or 'won'")
    attempts: int = Field(..., description="Guesses evaluated so far")


class DeletedResponse(BaseModel):
    deleted: str = Field(..., description="Id of the removed game")
