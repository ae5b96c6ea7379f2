from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Set

from fastapi import UploadFile

from aaa_audit.app.errors import FileTooLargeError, InvalidRequestError, UnsupportedMediaError
from aaa_audit.core.ids import new_upload_id
from aaa_audit.tools.media.kinds import media_kind, upload_folder

logger = logging.getLogger(__name__)

_CHUNK = 1024 * 1024


@dataclass
class StoredUpload:
    id: str
    original_name: str
    filename: str
    path: str
    size: int
    mimetype: str
    url: str
    data: bytes = field(repr=False, default=b"")

    @property
    def kind(self) -> Optional[str]:
        return media_kind(self.mimetype)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "originalName": self.original_name,
            "filename": self.filename,
            "path": self.path,
            "size": self.size,
            "mimetype": self.mimetype,
            "url": self.url,
        }


class UploadStore:
    """
    Writes uploads to `{root}/{images|audio|video|other}/{uuid}-{name}`.
    """

    def __init__(self, root: str, max_bytes: int):
        self.root = os.path.abspath(root)
        self.max_bytes = max_bytes
        os.makedirs(self.root, exist_ok=True)

    def _read_limited(self, upload: UploadFile, limit: int) -> bytes:
        buf = bytearray()
        while True:
            chunk = upload.file.read(_CHUNK)
            if not chunk:
                break
            buf.extend(chunk)
            if len(buf) > limit:
                raise FileTooLargeError(f"The uploaded file exceeds the size limit ({limit // _CHUNK}MB).")
        return bytes(buf)

    def save(
        self,
        upload: Optional[UploadFile],
        *,
        kinds: Optional[Set[str]] = None,
        max_bytes: Optional[int] = None,
        missing_message: str = "No file uploaded",
    ) -> StoredUpload:
        if upload is None or not upload.filename:
            raise InvalidRequestError(missing_message)

        mimetype = upload.content_type or "application/octet-stream"
        if kinds is not None and media_kind(mimetype) not in kinds:
            allowed = ", ".join(sorted(kinds))
            raise UnsupportedMediaError(f"Unsupported file type {mimetype}; expected {allowed}")

        data = self._read_limited(upload, max_bytes or self.max_bytes)

        folder = upload_folder(mimetype)
        original = os.path.basename(upload.filename)
        upload_id = new_upload_id()
        filename = f"{upload_id}-{original}"
        directory = os.path.join(self.root, folder)
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "wb") as f:
            f.write(data)

        logger.info("File uploaded", extra={"ctx": {"filename": filename, "size": len(data), "mimetype": mimetype}})
        return StoredUpload(
            id=upload_id,
            original_name=original,
            filename=filename,
            path=path,
            size=len(data),
            mimetype=mimetype,
            url=f"/uploads/{folder}/{filename}",
            data=data,
        )
