from __future__ import annotations

import logging
import os
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import PlainTextResponse

from dice_roller.rolls import coerce_count, roll_dice
from todos.env import load_env
from todos.logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Dice Roller")


@app.get("/favicon.ico")
def favicon() -> None:
    raise HTTPException(status_code=404)


@app.get("/", response_class=PlainTextResponse)
def roll(request: Request, rolls: Optional[str] = None, sides: Optional[str] = None) -> str:
    results = roll_dice(coerce_count(rolls), coerce_count(sides))
    body = "".join(f"{value}\n" for value in results)
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    logger.debug("dice.rolled rolls=%s sides=%s", len(results), sides)
    return f"{body}\n{request.method} {path}\n"


def run() -> None:
    load_env()
    setup_logging()
    host = os.getenv("DICE_HOST") or "localhost"
    port = int(os.getenv("DICE_PORT") or 3000)
    logger.info("Server listening on port %s...", port)
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run()
