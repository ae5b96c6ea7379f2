from __future__ import annotations

from dotenv import load_dotenv

load_dotenv()  # Load .env file

import uvicorn

from aaa_audit.api.app import create_app
from aaa_audit.api.deps import build_services
from aaa_audit.app.logging import setup_logging
from aaa_audit.app.settings import load_settings


def build_app():
    """
    Uvicorn factory entrypoint (`uvicorn aaa_audit.main:build_app --factory`):
    - load settings from env
    - configure JSON logging
    - build provider clients / report storage
    """
    s = load_settings()
    setup_logging(s.log_level)
    return create_app(build_services(s))


def main() -> None:
    s = load_settings()
    uvicorn.run(build_app(), host=s.host, port=s.port, log_config=None)


if __name__ == "__main__":
    main()
