"""
Run the Cardio Advisor API locally with uvicorn.

Usage:
    python demo_endpoint.py
    python demo_endpoint.py --port 9000 --no-reload
"""

import argparse
from typing import List, Optional

import uvicorn

from cardio_advisor.config import settings


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the Cardio Advisor API locally")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args(argv)

    print(f"POST http://localhost:{args.port}/recommendations  (docs at /docs)")
    if not settings.GOOGLE_API_KEY:
        print("GOOGLE_API_KEY not set: every request returns the reviewed fallback set")

    uvicorn.run(
        "cardio_advisor.main:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
