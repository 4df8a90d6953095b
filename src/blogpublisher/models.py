import os
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator


class PublishStep(str, Enum):
    """Steps of a publish run, in execution order."""

    BUILD = "build"
    ENTER_OUTPUT_DIR = "enter_output_dir"
    STAGE = "stage"
    COMMIT = "commit"
    PUSH = "push"


class PublishError(Exception):
    """A publish step failed; ``returncode`` is the status the process should exit with."""

    def __init__(self, step: PublishStep, returncode: int, detail: str = ""):
        self.step = step
        self.returncode = returncode
        self.detail = detail
        message = f"{step.value} failed with status {returncode}"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class PublishConfig(BaseModel):
    message: str
    site_dir: str = "."
    output_dir: str = "public"
    build_command: list[str]
    remote: str | None = None
    branch: str | None = None
    progress: bool = True

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        # kept verbatim, only checked
        if not value.strip():
            raise ValueError("commit message must not be empty")
        return value

    @field_validator("build_command")
    @classmethod
    def command_not_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("build command must not be empty")
        return value

    @model_validator(mode="after")
    def branch_needs_remote(self):
        if self.branch and not self.remote:
            raise ValueError("a branch can only be pushed together with a remote")
        return self

    @property
    def output_path(self) -> str:
        return os.path.abspath(os.path.join(self.site_dir, self.output_dir))


class PublishReport(BaseModel):
    steps: list[PublishStep] = []
    commit_output: str | None = None
    push_output: str | None = None
