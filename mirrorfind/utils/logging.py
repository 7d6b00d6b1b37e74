import logging

from mirrorfind.config import Settings

LOG_FORMAT = "%(asctime)s frontend: %(levelname)s %(filename)s:%(lineno)d %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger for the serving process.

    Output goes to ``settings.log_file`` when set, stderr otherwise.
    Calling this more than once replaces the previous handlers.
    """
    kwargs = {
        "level": settings.log_level.upper(),
        "format": LOG_FORMAT,
        "force": True,
    }
    if settings.log_file:
        kwargs["filename"] = settings.log_file

    logging.basicConfig(**kwargs)
    logging.getLogger(__name__).debug(f"Logging configured at level {settings.log_level.upper()}")
