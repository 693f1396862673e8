"""Uvicorn runner for the Device Registration API.

Usage:
    python src/server.py                        # 127.0.0.1:8000
    python src/server.py --host 0.0.0.0 --port 8080
    python src/server.py --reload               # development autoreload
"""

import argparse

import uvicorn


def build_parser():
    parser = argparse.ArgumentParser(description="Device Registration API server")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind (default: 8000)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
