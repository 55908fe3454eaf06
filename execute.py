import logging
from uuid import uuid4

from core.config import settings
from sandbox import runner
from sandbox.errors import RunnerError
from sandbox.materializer import discard, materialize
from schemas.code import CodeRequest, CodeResult

logger = logging.getLogger(__name__)


"""
Sample Json for Python:
{
    "language": "Python",
    "code": "import sys\nprint(sys.stdin.read().upper())",
    "input": "hello"
}


Sample Json for Node:
{
    "language": "Node",
    "code": "process.stdout.write(require('fs').readFileSync(0, 'utf8'))",
    "input": "ping"
}


Sample Json for Deno:
{
    "language": "Deno",
    "code": "const text = await new Response(Deno.stdin.readable).text();\nconsole.log(text.length);",
    "input": "four"
}
"""


async def execute_code(request: CodeRequest) -> CodeResult:
    interpreter = settings.LANGUAGES[request.language]
    request_id = uuid4().hex
    logger.info("Run %s: %s via %s", request_id, request.language, interpreter.executable)

    script = None
    try:
        script = materialize(request.language, request.code, request_id)
        result = await runner.run(
            interpreter.executable,
            interpreter.extra_args,
            script,
            request.input,
            interpreter.timeout,
        )
    except RunnerError as e:
        logger.info("Run %s failed: %s (%s)", request_id, e.error_type, e.message)
        return CodeResult(success=False, output=e.message, error_type=e.error_type)
    finally:
        if script is not None:
            discard(script)

    logger.info(
        "Run %s finished: exit_code=%s time=%ss",
        request_id,
        result.exit_code,
        result.execution_time,
    )
    return result
