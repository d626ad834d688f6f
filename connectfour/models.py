"""Pydantic models for the JSON API and the WebSocket message protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ValidationError

from connectfour.game import GameState


# ---------------------------------------------------------------------------
# Client → Server
# ---------------------------------------------------------------------------

class DropMsg(BaseModel):
    type: Literal["drop"] = "drop"
    column: int


class ResetMsg(BaseModel):
    type: Literal["reset"] = "reset"


class SyncMsg(BaseModel):
    type: Literal["sync"] = "sync"


ClientMessage = DropMsg | ResetMsg | SyncMsg


class DropRequest(BaseModel):
    column: int


# ---------------------------------------------------------------------------
# Server → Client
# ---------------------------------------------------------------------------

class StateMsg(BaseModel):
    type: Literal["state"] = "state"
    board: list[list[str | None]]
    current_turn: str
    status: str
    winner: str | None
    move_count: int
    full_columns: list[bool]
    revision: int


class DropResult(BaseModel):
    row: int
    state: StateMsg


class ErrorMsg(BaseModel):
    type: Literal["error"] = "error"
    code: str
    message: str


def state_message(game: GameState, revision: int = 0) -> StateMsg:
    return StateMsg(
        board=game.board,
        current_turn=game.current_turn,
        status=game.status,
        winner=game.winner,
        move_count=game.move_count,
        full_columns=game.full_columns(),
        revision=revision,
    )


def parse_client_message(data: dict) -> ClientMessage | None:
    """Parse a raw dict into a typed client message, or None if invalid."""
    msg_type = data.get("type")
    mapping: dict[str, type[BaseModel]] = {
        "drop": DropMsg,
        "reset": ResetMsg,
        "sync": SyncMsg,
    }
    model = mapping.get(msg_type)  # type: ignore[arg-type]
    if model is None:
        return None
    try:
        return model.model_validate(data)  # type: ignore[return-value]
    except ValidationError:
        return None
