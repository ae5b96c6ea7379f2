from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, File, UploadFile

from aaa_audit.api.deps import Services, get_services
from aaa_audit.app.errors import InvalidRequestError

router = APIRouter(prefix="/api/upload", tags=["upload"])

MAX_FILES = 10


@router.post("")
def upload_file(file: Optional[UploadFile] = File(None), services: Services = Depends(get_services)) -> Dict[str, Any]:
    stored = services.uploads.save(file)
    return {"message": "File uploaded successfully", "file": stored.to_dict()}


@router.post("/multiple")
def upload_files(
    files: Optional[List[UploadFile]] = File(None),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    if not files:
        raise InvalidRequestError("No files uploaded")
    if len(files) > MAX_FILES:
        raise InvalidRequestError(f"Too many files (maximum {MAX_FILES})")

    stored = [services.uploads.save(f).to_dict() for f in files]
    return {"message": f"{len(stored)} files uploaded successfully", "files": stored}
