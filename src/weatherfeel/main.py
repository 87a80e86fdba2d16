# src/weatherfeel/main.py
import sys

import uvicorn

from weatherfeel.core.errors import ConfigurationError
from weatherfeel.core.settings import load_settings
from weatherfeel.server import configure_logging, create_app


def main() -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.exit(1)

    configure_logging(settings.log_level)
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
