from enum import Enum
from typing import Optional

from pydantic import BaseModel


class FileStatus(str, Enum):
    UNCHANGED = "UNCHANGED"
    REFORMATTED = "REFORMATTED"
    FAILED = "FAILED"


class FileReport(BaseModel):
    file_path: str
    status: FileStatus
    message: Optional[str] = None


class RunSummary(BaseModel):
    total_files: int
    reformatted_files: int
    failed_files: int
