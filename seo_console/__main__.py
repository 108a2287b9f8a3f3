"""Run the stub server: ``python -m seo_console`` or ``seo-console-stub``."""

import uvicorn

from seo_console.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "seo_console.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
