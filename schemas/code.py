from pydantic import BaseModel
from typing import Literal

Lang = Literal["Node", "Python", "Deno"]

ErrorType = Literal["io", "spawn", "input", "timeout", "unexpected", "decode", "runtime"]


class CodeRequest(BaseModel):
    language: Lang
    code: str
    input: str = ""


class CodeResult(BaseModel):
    success: bool
    output: str
    error_type: ErrorType | None = None
    exit_code: int | None = None
    execution_time: float | None = None


class CodeStatus(BaseModel):
    task_id: str
    status: Literal["pending", "running", "completed", "failed", "timeout"]
    result: CodeResult | None = None


class LanguageInfo(BaseModel):
    language: Lang
    executable: str
    extra_args: list[str]
    extension: str
    timeout: float
