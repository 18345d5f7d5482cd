"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from keycrafter.api.dependencies import set_game_manager
from keycrafter.api.game_manager import GameManager
from keycrafter.api.routes import api_router
from keycrafter.config import GameConfig
from keycrafter.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level, _config.log_file)
        manager = GameManager(_config)
        set_game_manager(manager)
        logger.info("API server started — game ready (seed=%d).", _config.world_seed)
        yield
        set_game_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="KeyCrafter Engine",
        description=(
            "Typing-driven harvesting engine.\n\n"
            "## API Groups\n\n"
            "- **State** — Player, resource nodes and the event feed; save totals\n"
            "- **Control** — Keystroke input, upgrades and reset\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "State", "description": "Read-only snapshots for renderers and save/load layers."},
            {"name": "Control", "description": "Keystrokes, upgrade purchases and session reset. Writes are serialized."},
            {"name": "Config", "description": "Read-only game configuration (grid size, island rules, harvest range)."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
