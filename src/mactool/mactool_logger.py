# mactool_logger.py
import logging

LOG_LEVELS = {
    "quiet": logging.ERROR,
    "normal": logging.INFO,
    "verbose": logging.DEBUG,
}


class MactoolLogger:
    """
    Diagnostics for the command line tool. Messages go to stderr (or the
    given stream) so that command output on stdout can be piped.
    """

    def __init__(self, log_level="normal", stream=None):
        self.logger = logging.getLogger("mactool")
        self.logger.propagate = False
        self.logger.setLevel(logging.DEBUG)

        # main() may build a logger more than once per process
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)

        self.handler = logging.StreamHandler(stream)
        self.handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        self.handler.setLevel(LOG_LEVELS.get(log_level, logging.INFO))
        self.logger.addHandler(self.handler)

    def info(self, message):
        self.logger.info(message)

    def error(self, message):
        self.logger.error(message)

    def debug(self, message):
        self.logger.debug(message)
