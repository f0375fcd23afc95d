# routers/validation.py

from typing import Any, Dict, List

from fastapi import APIRouter, Body, File, HTTPException, UploadFile

from core.config import settings
from core.form_validation import validate_form, validate_multiple_files
from core.logging_config import logger
from core.validation_rules import FORM_RULES
from models.validation import (
    FileUploadOptions,
    UploadedFileInfo,
    ValidationError,
    ValidationResult,
)

router = APIRouter(
    prefix="/validation",
    tags=["Validation"],
)


def upload_options() -> FileUploadOptions:
    return FileUploadOptions(
        max_size=settings.UPLOAD_MAX_SIZE_BYTES,
        allowed_types=settings.UPLOAD_ALLOWED_TYPES,
        max_files=settings.UPLOAD_MAX_FILES,
    )


# -----------------------------------------------------
# GET /validation/forms
# -----------------------------------------------------
@router.get("/forms", summary="Forms with server-side rules")
def list_forms():
    return {"forms": list(FORM_RULES)}


# -----------------------------------------------------
# POST /validation/forms/{form_name}
# Always 200; the result says whether the record is valid
# -----------------------------------------------------
@router.post("/forms/{form_name}", response_model=ValidationResult, summary="Validate a form record")
def validate_named_form(form_name: str, data: Dict[str, Any] = Body(...)):
    rules = FORM_RULES.get(form_name)
    if rules is None:
        raise HTTPException(404, f"Unknown form '{form_name}'")

    result = validate_form(data, rules)
    if not result.is_valid:
        logger.info(f"{form_name} form failed validation: {[e.field for e in result.errors]}")
    return result


# -----------------------------------------------------
# POST /validation/files
# -----------------------------------------------------
@router.post("/files", response_model=List[ValidationError], summary="Check uploads against size/type/count limits")
def validate_files(files: List[UploadFile] = File(...)):
    infos = [UploadedFileInfo.from_upload(upload) for upload in files]
    errors = validate_multiple_files(infos, upload_options())
    if errors:
        logger.info(f"Upload rejected: {len(errors)} error(s) across {len(infos)} file(s)")
    return errors
