from __future__ import annotations
import secrets
import uuid

def _tok(nbytes: int = 12) -> str:
    return secrets.token_urlsafe(nbytes)

def new_report_id() -> str:
    return f"rep_{_tok()}"

def new_audit_id() -> str:
    return f"aud_{_tok()}"

def new_upload_id() -> str:
    return str(uuid.uuid4())
