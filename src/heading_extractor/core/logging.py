"""Logfire setup for extraction runs.

Services log through the module-level ``logfire`` API and never configure it.
Entry points call ``configure_logging`` with the run's ``ExtractionConfig``;
only the first call in a process takes effect.
"""

import sys
import threading

import logfire

from heading_extractor.core.config import ExtractionConfig

SERVICE_NAME = "heading-extractor"

_configured = False
_config_lock = threading.Lock()


def configure_logging(config: ExtractionConfig | None = None, *, verbose: bool = False) -> bool:
    """Configure logfire for this process if it is not configured yet.

    Args:
        config: Run settings supplying the log level and the console switch
        verbose: Mirror records to the console at debug level

    Returns:
        True if logfire is configured when the call returns
    """
    global _configured

    if _configured:
        return True

    config = config or ExtractionConfig()
    with _config_lock:
        if _configured:
            return True
        from heading_extractor import __version__

        show_console = verbose or config.enable_console_logging
        try:
            logfire.configure(
                service_name=SERVICE_NAME,
                service_version=__version__,
                console=logfire.ConsoleOptions() if show_console else False,
                send_to_logfire="if-token-present",
                min_level="debug" if verbose else config.log_level,
            )
        except Exception as e:
            # logfire is unusable here, so report on stderr and keep running
            print(f"Failed to configure logfire: {e}", file=sys.stderr)
            return False
        _configured = True
        return True


__all__ = ["SERVICE_NAME", "configure_logging"]
