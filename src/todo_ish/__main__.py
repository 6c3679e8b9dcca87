"""Run the todo_ish HTTP server with uvicorn: ``python -m todo_ish``."""
import uvicorn

from .config import settings


def main() -> None:
    uvicorn.run(
        "todo_ish.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
