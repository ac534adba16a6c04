"""Run the API with uvicorn: ``python -m mesto``."""

import uvicorn

from mesto.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("mesto.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
