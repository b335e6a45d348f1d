"""FastAPI 서버 실행

Usage:
    python -m reading_tracker.main
    # or
    uvicorn reading_tracker.api:app --reload --host 0.0.0.0 --port 8080
"""
import argparse

import uvicorn

from reading_tracker.config import config


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the reading tracker API server")
    parser.add_argument("--server.port", dest="server_port", type=int, default=config.PORT, help="Port to run the server on")
    parser.add_argument("--server.address", dest="server_address", type=str, default=config.HOST, help="Host to run the server on")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    args, _unknown = parser.parse_known_args()

    uvicorn.run(
        "reading_tracker.api:app",
        host=args.server_address,
        port=args.server_port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
