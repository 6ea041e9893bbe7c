"""Daemon process: always-on mode for production.

Usage: python -m folio serve

Manages:
- HTTP API lifecycle
- PID file (prevent duplicate instances)
- Graceful shutdown (SIGTERM/SIGINT)
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import sys

from folio.config import FolioConfig, load_config
from folio.core import Folio
from folio.server import ApiServer

logger = logging.getLogger(__name__)


class FolioDaemon:
    """Always-on daemon process."""

    def __init__(self, config: FolioConfig | None = None) -> None:
        self.config = config or load_config()
        self._shutdown_event = asyncio.Event()

    # ── PID file management ──────────────────────────────────

    def _write_pid(self) -> None:
        self.config.pid_file.parent.mkdir(parents=True, exist_ok=True)
        self.config.pid_file.write_text(str(os.getpid()))
        logger.info("PID file written: %s (pid=%d)", self.config.pid_file, os.getpid())

    def _remove_pid(self) -> None:
        if self.config.pid_file.exists():
            self.config.pid_file.unlink()

    def _check_existing(self) -> None:
        if not self.config.pid_file.exists():
            return
        try:
            pid = int(self.config.pid_file.read_text().strip())
            os.kill(pid, 0)
        except (ProcessLookupError, ValueError):
            logger.warning("Removing leftover PID file %s", self.config.pid_file)
            self._remove_pid()
            return
        print(
            f"Another folio server (pid={pid}) is serving {self.config.data_dir}; "
            f"remove {self.config.pid_file} if that is wrong.",
            file=sys.stderr,
        )
        sys.exit(1)

    # ── Signal handling ──────────────────────────────────────

    def _setup_signals(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            loop.add_signal_handler(sig, self._handle_signal, sig)

    def _handle_signal(self, sig: signal.Signals) -> None:
        logger.info("Received %s, shutting down...", sig.name)
        self._shutdown_event.set()

    def shutdown(self) -> None:
        self._shutdown_event.set()

    # ── Main run loop ────────────────────────────────────────

    async def run(self) -> None:
        self._check_existing()
        self._write_pid()
        self._setup_signals()

        server = ApiServer(Folio(self.config))
        logger.info("folio daemon starting (data_dir=%s)", self.config.data_dir)

        try:
            await server.start()
            await self._shutdown_event.wait()
        except asyncio.CancelledError:
            pass
        finally:
            await server.stop()
            self._remove_pid()
            logger.info("folio daemon stopped.")
