import logging
from pathlib import Path

from core.config import settings
from sandbox.errors import MaterializeError

logger = logging.getLogger(__name__)

SCRIPT_PREFIX = "script-runner-code"


def script_path(language: str, request_id: str | None = None) -> Path:
    """
    Path the script for ``language`` is written to.

    With a request id every run gets its own file. Without one the name is
    fixed per language, so concurrent runs of the same language overwrite
    each other.
    """
    extension = settings.LANGUAGES[language].extension
    name = f"{SCRIPT_PREFIX}-{request_id}" if request_id else SCRIPT_PREFIX
    return Path(settings.SCRIPT_DIR) / f"{name}{extension}"


def materialize(language: str, code: str, request_id: str | None = None) -> Path:
    path = script_path(language, request_id)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(code.encode(settings.SCRIPT_ENCODING))
    except (OSError, UnicodeEncodeError) as exc:
        logger.error("Could not write script %s: %s", path, exc)
        raise MaterializeError() from exc

    logger.debug("Materialized %s script at %s", language, path)
    return path


def discard(path: Path) -> None:
    if settings.KEEP_SCRIPTS:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        # the run already has its result
        logger.warning("Could not remove script %s: %s", path, exc)
