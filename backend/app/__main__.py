"""Serve the API with uvicorn: `python -m app`.

Host and port come from `HOST` and `PORT` (see `app.config`).
"""

import uvicorn

from .config import settings


def main():
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == '__main__':
    main()
