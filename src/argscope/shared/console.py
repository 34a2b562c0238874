import logging

from colorama import Fore, Style, init


class ConsoleManager:
    """Manages console output, respecting quiet/debug/color flags."""

    def __init__(self, level: int, no_color: bool):
        self.level = level
        self.no_color = no_color
        if not no_color:
            init(autoreset=True)

    def _log(self, msg: str, log_level: int, color: str = "", exc_info: bool = False):
        if log_level < self.level:
            return

        if not self.no_color and color:
            msg = f"{color}{msg}{Style.RESET_ALL}"

        if log_level >= logging.CRITICAL:
            logging.critical(msg, exc_info=exc_info)
        elif log_level >= logging.ERROR:
            logging.error(msg, exc_info=exc_info)
        elif log_level >= logging.WARNING:
            logging.warning(msg)
        elif log_level >= logging.INFO:
            logging.info(msg)
        else:
            logging.debug(msg)

    def debug(self, msg: str):
        self._log(msg, logging.DEBUG, Style.DIM)

    def critical(self, msg: str, exc_info: bool = False):
        self._log(msg, logging.CRITICAL, Fore.RED + Style.BRIGHT, exc_info=exc_info)

    def emit(self, lines: list[str]):
        """Writes report lines to stdout."""
        for line in lines:
            print(line)
