"""Main application entry point."""

from roadbook.core.settings import get_settings
from roadbook.factory import create_app

settings = get_settings()
app = create_app(settings)

# For development server
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "roadbook.main:app",
        host="0.0.0.0",  # nosec B104 - Development server binding is intentional
        port=8000,
        reload=settings.app_env == "local",
        log_level=settings.log_level.lower(),
    )
