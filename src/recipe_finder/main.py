"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn recipe_finder.main:app --reload

    # Using the configured host and port
    recipe-finder
"""

from recipe_finder.factory import create_app


app = create_app()


def run() -> None:
    """Run the application with uvicorn using the server settings."""
    import uvicorn

    from recipe_finder.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recipe_finder.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    run()
