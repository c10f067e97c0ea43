"""
Greeter server entrypoint.

Loads the configuration, sets up logging and serves the greeting routes
on 127.0.0.1:3000 until the process is terminated.
"""

import sys

from dotenv import load_dotenv

from greeter.config import load_config
from greeter.errors import ConfigError
from greeter.server.runner import serve
from greeter.utils.logging_utils import default_log_file, get_logger, setup_logger

logger = get_logger(__name__)

EXIT_BIND_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def main() -> int:
    """
    Run the server.

    Returns:
        int: 0 after a clean shutdown, 1 if the address cannot be bound,
        2 if the configuration is invalid
    """
    # .env may only carry GREETER_LOG_LEVEL / GREETER_LOG_DIR
    load_dotenv()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    setup_logger("greeter", level=config.log_level, log_file=default_log_file("greeter"))

    try:
        serve(config)
    except OSError as e:
        logger.error(f"Could not listen on {config.host}:{config.port}: {e}")
        return EXIT_BIND_FAILURE

    return 0


if __name__ == "__main__":
    sys.exit(main())
