"""Aggregate app for the scheduling board HTTP surface."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from workboard.board.routes import router as timeline_router
from workboard.work_orders.routes import router as work_orders_router

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Work Order Scheduling Board")
    app.include_router(work_orders_router)
    app.include_router(timeline_router)
    logger.debug("Scheduling board routes registered")
    return app


app = create_app()
