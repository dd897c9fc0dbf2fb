import os
import sys
import argparse
import logging
from pathlib import Path
from typing import Optional, List

from labdevices.config import LabConfig, LoggingConfig
from labdevices.config_manager import ConfigurationManager
from labdevices.hierarchy.loader import load_container
from labdevices.menu import DeviceMenu


def _resolve_config_path(cli_path: Optional[str]) -> Optional[Path]:
    """
    Resolve config path with the following precedence:
    1) CLI: --config /path/to/config.yaml
    2) ENV: LABDEVICES_CONFIG=/path/to/config.yaml
    3) Default: <project_root>/config.yaml if it exists (parent of the 'labdevices' package dir)
    Returns None when nothing is configured, meaning built-in defaults.
    """
    if cli_path:
        return Path(cli_path).expanduser().resolve()

    env = os.getenv("LABDEVICES_CONFIG")
    if env:
        return Path(env).expanduser().resolve()

    default = Path(__file__).resolve().parents[1] / "config.yaml"
    if default.exists():
        return default
    return None


def load_config(path: Optional[Path]) -> LabConfig:
    config_manager = ConfigurationManager(path)
    return config_manager.load_config()


def _configure_logging(log_config: LoggingConfig):
    """Configure logging based on config settings. Output goes to stderr so the menu stays readable."""
    root_logger = logging.getLogger()
    log_level = getattr(logging, log_config.level.upper())
    root_logger.setLevel(log_level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(log_config.format))
        root_logger.addHandler(console_handler)

    logging.getLogger("labdevices").setLevel(log_level)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Laboratory measurement device manager")
    parser.add_argument(
        "--config",
        help="Path to config.yaml (overrides LABDEVICES_CONFIG and default).",
        required=False,
    )
    parser.add_argument(
        "--no-startup",
        action="store_true",
        help="Skip the add-device prompts and go straight to the main menu.",
    )
    args = parser.parse_args(argv)

    log = logging.getLogger(__name__)
    try:
        cfg = load_config(_resolve_config_path(args.config))
    except Exception as e:
        _configure_logging(LoggingConfig())
        log.error(f"Failed to load configuration: {e}", exc_info=True)
        return 1

    _configure_logging(cfg.logging)
    container = load_container(cfg.devices)
    log.info(f"Starting with {len(container)} configured devices")

    menu = DeviceMenu(container)
    add_first = cfg.menu.add_devices_on_startup and not args.no_startup
    return menu.run(add_devices_first=add_first)


if __name__ == "__main__":
    sys.exit(main())
