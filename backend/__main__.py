"""
Entry point for running the application with `python -m backend`.

uvicorn handles SIGINT/SIGTERM; the app's lifespan logs the shutdown.
"""
import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )
