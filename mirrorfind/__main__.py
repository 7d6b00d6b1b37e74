import uvicorn

from mirrorfind.config import Settings


def main() -> None:
    settings = Settings()
    uvicorn.run(
        "mirrorfind.main:build_default_app",
        factory=True,
        host=settings.http_host,
        port=settings.http_port,
        log_config=None,  # keep the logging set up by mirrorfind.main
    )


if __name__ == "__main__":
    main()
