#!/usr/bin/env python3
"""Entry point for running the slash command server."""

from app.main import main
import argparse

import config

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Planning Poker slash command server")
    parser.add_argument("--host", default=config.HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=config.PORT, help="Bind port")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="DEBUG, INFO, WARNING, ...")
    args = parser.parse_args()
    main(host=args.host, port=args.port, log_level=args.log_level)
