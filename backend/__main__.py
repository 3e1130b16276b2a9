"""
Entry point for running the application with `python -m backend`.

Logging is configured by create_app(), so `uvicorn backend.main:app` and
this entry point log the same way.
"""
import uvicorn

from backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
