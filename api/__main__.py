"""Run the Circles API with uvicorn: ``python -m api``."""

from __future__ import annotations

import uvicorn

from .settings import get_settings


def main() -> None:
    settings = get_settings()
    # log_config=None keeps the handlers installed by configure_logging
    uvicorn.run("api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
