import uvicorn

from newsletter.core.config import settings


def main() -> None:
    uvicorn.run(
        "newsletter.main:app",
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
