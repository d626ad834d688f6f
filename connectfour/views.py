"""The rendered game page, its form actions, and the JSON API."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from connectfour.config import settings
from connectfour.game import BLACK, RED, MoveError
from connectfour.models import DropRequest, DropResult, StateMsg
from connectfour.session import GameSession, get_session

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))

router = APIRouter()

PIECE_ICONS = {
    RED: "🔴",
    BLACK: "⚫",
}
EMPTY_ICON = "⬜"


def piece_icon(piece: str | None) -> str:
    return PIECE_ICONS.get(piece, EMPTY_ICON)  # type: ignore[arg-type]


templates.env.filters["icon"] = piece_icon


async def move_error_handler(request: Request, exc: MoveError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"code": exc.code, "message": exc.message},
    )


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def index(request: Request, session: GameSession = Depends(get_session)):
    game = session.game
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "board": game.board,
            "current_turn": game.current_turn,
            "game_over": game.is_game_over,
            "winner": game.winner,
            "full_columns": game.full_columns(),
            "theme_primary": settings.theme_primary,
        },
    )


@router.post("/drop/{column}")
async def drop_form(column: int, session: GameSession = Depends(get_session)):
    if session.game.drop(column) is not None:
        await session.publish()
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.post("/reset")
async def reset_form(session: GameSession = Depends(get_session)):
    session.game.reset()
    await session.publish()
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


# ---------------------------------------------------------------------------
# JSON API
# ---------------------------------------------------------------------------

@router.get("/api/state")
async def get_state(session: GameSession = Depends(get_session)) -> StateMsg:
    return session.snapshot()


@router.post("/api/drop")
async def api_drop(req: DropRequest, session: GameSession = Depends(get_session)) -> DropResult:
    row = session.game.play(req.column)
    await session.publish()
    return DropResult(row=row, state=session.snapshot())


@router.post("/api/reset")
async def api_reset(session: GameSession = Depends(get_session)) -> StateMsg:
    session.game.reset()
    await session.publish()
    return session.snapshot()
