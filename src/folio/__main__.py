"""Entry point: python -m folio [serve|show <collection>]

- "serve":             Daemon mode (HTTP API until SIGTERM/SIGINT)
- "show <collection>": Print a collection as JSON (projects, team, activities)
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from folio.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_serve() -> None:
    """Daemon mode: HTTP API."""
    config = load_config()
    _setup_logging(config.log_level)

    from folio.daemon import FolioDaemon

    daemon = FolioDaemon(config)
    try:
        asyncio.run(daemon.run())
    except KeyboardInterrupt:
        pass


def _run_show(name: str) -> None:
    """Print one collection to stdout."""
    config = load_config()
    _setup_logging(config.log_level)

    from folio.core import Folio

    folio = Folio(config)
    try:
        service = folio.service(name)
    except KeyError as e:
        print(e.args[0], file=sys.stderr)
        sys.exit(1)
    print(json.dumps(service.list(), indent=2, ensure_ascii=False))


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "serve"

    if cmd == "serve":
        _run_serve()
    elif cmd == "show" and len(sys.argv) > 2:
        _run_show(sys.argv[2])
    else:
        print("Usage: python -m folio [serve|show <collection>]")
        print("  serve              - Run the HTTP API (default)")
        print("  show <collection>  - Print projects, team or activities as JSON")
        sys.exit(1)


if __name__ == "__main__":
    main()
