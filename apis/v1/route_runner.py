import logging
from collections import OrderedDict
from uuid import uuid4

from fastapi import APIRouter, BackgroundTasks, HTTPException

from core.config import settings
from execute import execute_code
from sandbox.errors import UnexpectedExecutionError
from schemas.code import CodeRequest, CodeResult, CodeStatus, LanguageInfo

logger = logging.getLogger(__name__)

router = APIRouter()

# task_id -> CodeStatus, oldest first
tasks_db: "OrderedDict[str, CodeStatus]" = OrderedDict()


def _store(status: CodeStatus) -> None:
    tasks_db[status.task_id] = status
    while len(tasks_db) > settings.MAX_STORED_TASKS:
        tasks_db.popitem(last=False)


async def run_background_task(task_id: str, code_request: CodeRequest):
    _store(CodeStatus(task_id=task_id, status="running"))

    try:
        result = await execute_code(code_request)
    except Exception:
        logger.exception("Background task %s crashed", task_id)
        result = CodeResult(
            success=False, output=UnexpectedExecutionError.message, error_type="unexpected"
        )

    if result.error_type == "timeout":
        final_status = "timeout"
    else:
        final_status = "completed" if result.success else "failed"
    _store(CodeStatus(task_id=task_id, status=final_status, result=result))


@router.post("/run", response_model=CodeResult)
async def run_code(code_request: CodeRequest) -> CodeResult:
    return await execute_code(code_request)


@router.post("/", response_model=CodeStatus)
async def submit_code(
    code_request: CodeRequest, background_tasks: BackgroundTasks
) -> CodeStatus:
    task_id = str(uuid4())
    status = CodeStatus(task_id=task_id, status="pending")
    _store(status)

    background_tasks.add_task(run_background_task, task_id, code_request)

    return status


@router.get("/status/{task_id}", response_model=CodeStatus)
async def get_status(task_id: str) -> CodeStatus:
    if task_id not in tasks_db:
        raise HTTPException(status_code=404, detail="Task not found")

    return tasks_db[task_id]


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages() -> list[LanguageInfo]:
    return [
        LanguageInfo(
            language=name,
            executable=interpreter.executable,
            extra_args=list(interpreter.extra_args),
            extension=interpreter.extension,
            timeout=interpreter.timeout,
        )
        for name, interpreter in settings.LANGUAGES.items()
    ]
