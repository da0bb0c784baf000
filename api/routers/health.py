"""
Health check router.

This router provides the health check endpoint for monitoring and load
balancers. It reports which store backs the API and whether that store
answers.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(request: Request):
    """
    Liveness endpoint.

    Returns:
        dict: Status, current UTC timestamp, store provider and database state
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        provider = None
        database = "Not configured"
    else:
        provider = getattr(store, "provider", None)
        database = "Connected" if store.ping() else "Unavailable"

    return {
        "status": "OK",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "provider": provider,
        "database": database,
    }
