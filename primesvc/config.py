"""
config.py

Service settings, read from PRIME_SERVICE_* environment variables and
overridden by command-line options.
"""

import logging
import os

VERSION = "0.1.0"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 9000
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

TRUE_VALUES = ("1", "true", "yes", "on")


def parse_port(value):
    port = int(value)
    if port < 0 or port > 65535:
        raise ValueError(f"Port must be within [0..65535], got {port}")
    return port


class ServiceConfig:
    """
    Settings for one server process.

    Attributes:
      - host (str): interface to bind
      - port (int): TCP port, 0 lets the OS pick one
      - strict_errors (bool): report serialization failures with status 500
      - log_level (str): logging level name
      - log_file (str|None): write the log there instead of stderr
    """
    def __init__(self, host=DEFAULT_HOST, port=DEFAULT_PORT, strict_errors=False,
                 log_level=DEFAULT_LOG_LEVEL, log_file=None):
        self.host = host
        self.port = port
        self.strict_errors = strict_errors
        self.log_level = log_level
        self.log_file = log_file

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        port = env.get("PRIME_SERVICE_PORT")
        return cls(
            host=env.get("PRIME_SERVICE_HOST", DEFAULT_HOST),
            port=parse_port(port) if port else DEFAULT_PORT,
            strict_errors=env.get("PRIME_SERVICE_STRICT_ERRORS", "").strip().lower() in TRUE_VALUES,
            log_level=env.get("PRIME_SERVICE_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            log_file=env.get("PRIME_SERVICE_LOG_FILE") or None,
        )

    def override(self, host=None, port=None, strict_errors=None, log_level=None, log_file=None):
        """
        Return a copy with every non-None argument replacing the current value.
        """
        return ServiceConfig(
            host=self.host if host is None else host,
            port=self.port if port is None else port,
            strict_errors=self.strict_errors if strict_errors is None else strict_errors,
            log_level=self.log_level if log_level is None else log_level,
            log_file=self.log_file if log_file is None else log_file,
        )


def configure_logging(config):
    level = getattr(logging, str(config.log_level).upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")
    if config.log_file:
        log_dir = os.path.dirname(os.path.abspath(config.log_file))
        os.makedirs(log_dir, exist_ok=True)
        logging.basicConfig(filename=config.log_file, level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
