"""Run the API with uvicorn: ``python -m product_api``.

Host and port come from ``HOST`` and ``PORT`` (defaults ``0.0.0.0``
and ``3000``).
"""

from uvicorn import Config, Server

from product_api.core.config import get_settings
from product_api.main import create_app


def main() -> None:
    settings = get_settings()
    config = Config(
        app=create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
