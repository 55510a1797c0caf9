"""Run the gateway with uvicorn: ``python -m gateway``."""

import uvicorn

from .config import HOST, PORT
from .config.logging import APP_LOG_LEVEL


def main() -> None:
    uvicorn.run("gateway.server:app", host=HOST, port=PORT, log_level=APP_LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
