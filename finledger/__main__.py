# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Development entry point: ``python -m finledger``."""

from __future__ import annotations

import argparse

from finledger.app import create_app
from finledger.infrastructure.container import Container
from finledger.infrastructure.db import init_db
from finledger.shared.config import load_config
from finledger.shared.logging import logger, setup_logging


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="finledger", description="Run the finledger API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    parser.add_argument("--debug", action="store_true", help="enable the Flask debugger")
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="create the database schema and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = load_config()
    container = Container(config)

    if args.init_db:
        setup_logging(debug_mode=config.debug_logging)
        init_db(container.engine)
        logger.info("init-db: done")
        return 0

    app = create_app(config, container)
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
