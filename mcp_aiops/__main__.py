from __future__ import annotations

import argparse

import uvicorn

from mcp_aiops.config import settings
from mcp_aiops.main import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="MCP-AIOps anomaly check service")
    parser.add_argument("--host", default=settings.host, help="Host to bind")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on")
    parser.add_argument("--reload", action="store_true", help="Auto-reload on changes")
    args = parser.parse_args()

    configure_logging()
    uvicorn.run(
        "mcp_aiops.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
