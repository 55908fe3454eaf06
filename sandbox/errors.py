"""
Failure taxonomy for a single script run.

Each error carries the fixed diagnostic shown to the caller and the
``error_type`` tag stored on the result. The messages are matched on by
clients, keep them stable.
"""


class RunnerError(Exception):
    error_type: str = "unexpected"
    message: str = "Something unexpected happened during execution."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MaterializeError(RunnerError):
    error_type = "io"
    message = "Couldn't create temp file"


class SpawnError(RunnerError):
    error_type = "spawn"
    message = "Couldn't spawn command."


class InputWriteError(RunnerError):
    error_type = "input"
    message = "Couldn't write input in"


class ExecutionTimeout(RunnerError):
    error_type = "timeout"
    message = "Execution Timeout..."


class UnexpectedExecutionError(RunnerError):
    pass


class DecodeError(RunnerError):
    error_type = "decode"

    def __init__(self, stream: str):
        self.stream = stream
        super().__init__(
            "Something unexpected happened with script-runner. "
            f"Error: unexpected {stream} output"
        )
