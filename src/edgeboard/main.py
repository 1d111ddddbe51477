#!/usr/bin/env python3

import argparse
import logging
import signal
import sys
import time
from pathlib import Path
from typing import Optional

from edgeboard.clipboard import ClipboardBackend
from edgeboard.config import EdgeBoardConfig
from edgeboard.services.clipboard_service import ClipboardService
from edgeboard.services.sink import LoggingSink, PanelSink, UpdateSink

logger = logging.getLogger(__name__)


class EdgeBoardApp:

    def __init__(
        self,
        config: Optional[EdgeBoardConfig] = None,
        serve: bool = False,
        export_path: Optional[Path] = None,
        backend: Optional[ClipboardBackend] = None,
    ):
        self.config = config or EdgeBoardConfig()
        self.serve = serve
        self.export_path = export_path
        self.backend = backend
        self.sink: UpdateSink = PanelSink() if serve else LoggingSink(visible=True)
        self.clipboard_service: Optional[ClipboardService] = None
        self.running = False

    def start(self):
        if self.running:
            return

        self.running = True
        self.clipboard_service = ClipboardService(
            backend=self.backend,
            sink=self.sink,
            config=self.config,
        )
        self.clipboard_service.start()
        print("EdgeBoard running. Press Ctrl+C to stop")

    def stop(self):
        if not self.running:
            return

        self.running = False

        if self.clipboard_service:
            self.clipboard_service.stop()
            if self.export_path:
                try:
                    self.clipboard_service.store.export_json(self.export_path)
                except OSError as e:
                    logger.error(f"Could not export history: {e}")

        print("EdgeBoard stopped")

    def run_forever(self):
        self.start()

        try:
            if self.serve and self.clipboard_service:
                from edgeboard.api import serve
                serve(self.clipboard_service, self.config.api_host, self.config.api_port)
            else:
                while self.running:
                    time.sleep(1.0)
        except KeyboardInterrupt:
            print("\nStopping...")
        finally:
            self.stop()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="EdgeBoard - clipboard history for the desktop overlay"
    )

    parser.add_argument(
        "-i", "--poll-interval",
        type=float,
        default=None,
        help="Clipboard polling interval in seconds (default: 0.5)"
    )

    parser.add_argument(
        "--max-history",
        type=int,
        default=None,
        help="Number of clipboard entries to keep (default: 50)"
    )

    parser.add_argument(
        "--classify-on-startup",
        action="store_true",
        default=None,
        help="Classify the clipboard content found at startup instead of storing it as TEXT"
    )

    parser.add_argument(
        "--serve",
        action="store_true",
        help="Serve the history panel API over HTTP"
    )

    parser.add_argument("--host", type=str, default=None, help="Panel API host")
    parser.add_argument("--port", type=int, default=None, help="Panel API port")

    parser.add_argument(
        "--export",
        type=Path,
        default=None,
        help="Write the history to this JSON file on exit"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    return parser.parse_args(argv)


def build_config(args) -> EdgeBoardConfig:
    return EdgeBoardConfig.from_env().with_overrides(
        poll_interval=args.poll_interval,
        max_history=args.max_history,
        classify_on_startup=args.classify_on_startup,
        api_host=args.host,
        api_port=args.port,
    )


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(2)

    app = EdgeBoardApp(config=config, serve=args.serve, export_path=args.export)

    if not args.serve:
        def signal_handler(signum, frame):
            app.stop()
            sys.exit(0)

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    try:
        app.run_forever()
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
