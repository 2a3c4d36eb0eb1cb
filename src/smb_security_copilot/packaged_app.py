from __future__ import annotations

import os
import socket

import uvicorn

from smb_security_copilot import get_runtime_version

APP_IMPORT_PATH = "app.main:app"
HOST = "127.0.0.1"
PREFERRED_PORT = 56461


def _can_bind_localhost(port: int) -> bool:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((HOST, int(port)))
            return True
        except OSError:
            return False


def _find_port(preferred_port: int = PREFERRED_PORT) -> int:
    if _can_bind_localhost(preferred_port):
        return preferred_port
    # Preferred port busy: let the OS hand out a free one.
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind((HOST, 0))
        return int(sock.getsockname()[1])


def main() -> int:
    from app.main import app as fastapi_app

    preferred = int(os.getenv("PORT", str(PREFERRED_PORT)))
    port = _find_port(preferred)
    base_url = f"http://{HOST}:{port}"
    print(f"Version: {get_runtime_version()}", flush=True)
    print(f"API: {base_url}/api/questions", flush=True)
    print(f"App import path: {APP_IMPORT_PATH}", flush=True)

    uvicorn.run(
        fastapi_app,
        host=HOST,
        port=port,
        reload=False,
        access_log=False,
        log_level="warning",
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
