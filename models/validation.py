# models/validation.py

from re import Pattern
from typing import Any, Callable, List, Optional
from pydantic import BaseModel, ConfigDict, Field


# Called as custom(value, form_data); returns the error message or None.
CustomCheck = Callable[[Any, Optional[dict]], Optional[str]]

DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024
DEFAULT_MAX_FILES = 10


# ===============================================================
# RULES
# ===============================================================

class ValidationRule(BaseModel):
    """
    Declarative constraints for one form field.
    Evaluated by core.form_validation.validate_field in a fixed order;
    the first failing constraint is reported.
    """
    model_config = ConfigDict(frozen=True)

    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[Pattern[str]] = None
    email: bool = False
    phone: bool = False
    url: bool = False
    date: bool = False
    custom: Optional[CustomCheck] = None


# ===============================================================
# RESULTS
# ===============================================================

class ValidationError(BaseModel):
    field: str
    message: str


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[ValidationError] = []


# ===============================================================
# FILE UPLOADS
# ===============================================================

class UploadedFileInfo(BaseModel):
    """
    The parts of an uploaded file the upload checks look at.
    `type` is the MIME type reported by the client.
    """
    name: str = ""
    size: int = 0
    type: str = ""

    @classmethod
    def from_upload(cls, upload) -> "UploadedFileInfo":
        """Build from a FastAPI/Starlette UploadFile."""
        size = upload.size
        if size is None:
            upload.file.seek(0, 2)
            size = upload.file.tell()
            upload.file.seek(0)

        return cls(
            name=upload.filename or "",
            size=size,
            type=upload.content_type or "",
        )


class FileUploadOptions(BaseModel):
    max_size: int = Field(DEFAULT_MAX_FILE_SIZE, description="Bytes")
    allowed_types: List[str] = []
    max_files: int = DEFAULT_MAX_FILES
