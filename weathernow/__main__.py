"""Entry point for running WeatherNow as a module."""

import argparse
import atexit
import logging
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .app import WeatherNowApp
from .models.config import ClientConfig, Config

# Global reference for signal handlers
_app: WeatherNowApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    # Try to add rotating file handler
    log_dir = Path("logs")
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "weathernow.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError):
        pass  # Skip file logging if we can't write

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully.

    Args:
        signum: Signal number received
        frame: Current stack frame (unused)
    """
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("WeatherNow shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    atexit.register(_cleanup)


def run_proxy() -> None:
    """Start the backend proxy; exits with status 1 if misconfigured."""
    from .proxy import ConfigurationError, create_app

    try:
        app = create_app()
    except ConfigurationError as e:
        _logger.error(f"Cannot start proxy: {e}")
        sys.exit(1)

    host, port = app.config["HOST"], app.config["PORT"]
    _logger.info(f"Weather proxy running at http://{host}:{port}")
    app.run(host=host, port=port)


def load_config(config_path: Path, proxy_url: str | None) -> Config:
    """Load the client configuration, exiting on invalid content."""
    if not config_path.exists():
        print(f"Config file not found: {config_path}")
        print("Starting with default configuration (proxy at http://localhost:5000)...")

    try:
        config = Config.load_or_default(config_path)
        if proxy_url:
            config.client = ClientConfig(
                proxy_url=proxy_url, timeout_seconds=config.client.timeout_seconds
            )
    except ValueError as e:  # ValidationError and JSONDecodeError
        print(f"Invalid configuration in {config_path}:\n{e}")
        sys.exit(1)

    return config


def run_app(config: Config) -> None:
    """Start the terminal UI."""
    global _app

    setup_signal_handlers()

    _app = WeatherNowApp(config=config)
    _app.run()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="WeatherNow - localized weather search with favorite cities"
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["app", "proxy"],
        default="app",
        help="Run the terminal app (default) or the backend proxy",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "--proxy-url",
        help="Base URL of the backend proxy (overrides client.proxy_url)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )

    args = parser.parse_args()

    # Handle version flag
    if args.version:
        from . import __version__

        print(f"WeatherNow v{__version__}")
        sys.exit(0)

    if args.command == "proxy":
        from .proxy.config import Config as ProxyConfig

        setup_logging("DEBUG" if args.verbose else ProxyConfig.LOG_LEVEL)
        _logger.info("Starting WeatherNow proxy")
        run_proxy()
        return

    config = load_config(args.config, args.proxy_url)
    setup_logging("DEBUG" if args.verbose else config.settings.log_level)
    _logger.info("Starting WeatherNow")
    run_app(config)


if __name__ == "__main__":
    main()
