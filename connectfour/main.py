import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from connectfour.config import settings
from connectfour.game import MoveError
from connectfour.views import move_error_handler
from connectfour.views import router as views_router
from connectfour.ws_handler import router as ws_router

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Connect Four")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(MoveError, move_error_handler)  # type: ignore[arg-type]

app.include_router(views_router)
app.include_router(ws_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
