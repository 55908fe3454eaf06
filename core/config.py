import os
import tempfile
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Interpreter:
    executable: str
    extra_args: tuple[str, ...]
    extension: str
    timeout: float


def load_languages() -> dict[str, Interpreter]:
    """Language to interpreter table, with executables resolved through PATH."""
    return {
        "Node": Interpreter(
            executable=os.getenv("NODE_EXECUTABLE", "node"),
            extra_args=(),
            extension=".js",
            timeout=float(os.getenv("NODE_TIMEOUT_SECONDS", "7")),
        ),
        "Python": Interpreter(
            executable=os.getenv("PYTHON_EXECUTABLE", "python"),
            extra_args=(),
            extension=".py",
            timeout=float(os.getenv("PYTHON_TIMEOUT_SECONDS", "10")),
        ),
        "Deno": Interpreter(
            executable=os.getenv("DENO_EXECUTABLE", "deno"),
            extra_args=("run",),
            extension=".ts",
            timeout=float(os.getenv("DENO_TIMEOUT_SECONDS", "10")),
        ),
    }


class Settings:
    PROJECT_NAME: str = "Script Runner"
    PROJECT_VERSION: str = "1.0.0"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # materialized scripts
    SCRIPT_DIR: str = os.getenv("SCRIPT_DIR", tempfile.gettempdir())
    KEEP_SCRIPTS: bool = os.getenv("KEEP_SCRIPTS", "false").lower() in ("1", "true", "yes")
    SCRIPT_ENCODING: str = os.getenv("SCRIPT_ENCODING", "utf-8")
    STREAM_ENCODING: str = os.getenv("STREAM_ENCODING", "utf-8")

    # background submissions kept in memory
    MAX_STORED_TASKS: int = int(os.getenv("MAX_STORED_TASKS", "1000"))

    LANGUAGES: dict[str, Interpreter] = load_languages()


settings = Settings()
