# hovenier/__main__.py
import uvicorn

from hovenier.config import get_settings


def main() -> None:
    """API starten: `python -m hovenier` of `hovenier-api`."""
    settings = get_settings()
    uvicorn.run(
        "hovenier.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
