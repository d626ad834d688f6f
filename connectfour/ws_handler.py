"""WebSocket endpoint and message routing."""

import json

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from connectfour.game import MoveError
from connectfour.models import (
    DropMsg,
    ErrorMsg,
    ResetMsg,
    SyncMsg,
    parse_client_message,
)
from connectfour.session import GameSession, get_session

router = APIRouter()


def decode_frame(text: str) -> dict | None:
    try:
        data = json.loads(text)
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


@router.websocket("/ws")
async def websocket_endpoint(ws: WebSocket, session: GameSession = Depends(get_session)):
    await ws.accept()
    await session.connect(ws)
    try:
        while True:
            data = decode_frame(await ws.receive_text())
            msg = parse_client_message(data) if data is not None else None
            if msg is None:
                await ws.send_json(
                    ErrorMsg(code="invalid_message", message="Unknown or invalid message").model_dump()
                )
                continue

            if isinstance(msg, DropMsg):
                try:
                    session.game.play(msg.column)
                except MoveError as e:
                    await ws.send_json(ErrorMsg(code=e.code, message=e.message).model_dump())
                    continue
                await session.publish()

            elif isinstance(msg, ResetMsg):
                session.game.reset()
                await session.publish()

            elif isinstance(msg, SyncMsg):
                await ws.send_json(session.snapshot().model_dump())
    except WebSocketDisconnect:
        pass
    finally:
        session.disconnect(ws)
