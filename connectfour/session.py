"""The process-wide game session: one engine plus its live observers."""

from __future__ import annotations

import logging

from fastapi import WebSocket

from connectfour.game import GameState
from connectfour.models import StateMsg, state_message

logger = logging.getLogger(__name__)


class GameSession:
    def __init__(self, game: GameState | None = None):
        self.game = game if game is not None else GameState()
        self.revision = 0
        self.observers: list[WebSocket] = []
        self.game.subscribe(self._on_change)

    def _on_change(self, game: GameState):
        self.revision += 1

    def snapshot(self) -> StateMsg:
        return state_message(self.game, self.revision)

    async def connect(self, ws: WebSocket):
        self.observers.append(ws)
        logger.info("Observer connected (%d total)", len(self.observers))
        await self.send_to(ws, self.snapshot().model_dump())

    def disconnect(self, ws: WebSocket):
        if ws in self.observers:
            self.observers.remove(ws)
            logger.info("Observer disconnected (%d left)", len(self.observers))

    async def send_to(self, ws: WebSocket, msg_dict: dict):
        try:
            await ws.send_json(msg_dict)
        except Exception:
            logger.warning("Dropping observer after failed send", exc_info=True)
            self.disconnect(ws)

    async def broadcast(self, msg_dict: dict):
        for ws in list(self.observers):
            await self.send_to(ws, msg_dict)

    async def publish(self):
        """Push the current state to every observer."""
        await self.broadcast(self.snapshot().model_dump())


session = GameSession()


def get_session() -> GameSession:
    return session
