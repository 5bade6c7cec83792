import logging
from rich.console import Console
from rich.logging import RichHandler


class Logger:
    def __init__(self, name="subaruu", filename=None, level=logging.WARNING):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Remove old handlers to avoid duplicates
        if self.logger.hasHandlers():
            self.logger.handlers.clear()

        # Rich console handler, kept off stdout so program output stays clean
        console_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=True,
        )
        console_handler.setLevel(level)
        self.logger.addHandler(console_handler)

        if filename:
            file_handler = logging.FileHandler(filename, mode="w")
            file_handler.setLevel(level)

            # Formatter (only for file, RichHandler has its own)
            formatter = logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self):
        return self.logger


def configure(config) -> logging.Logger:
    return Logger("subaruu", filename=config.log_file, level=config.log_level).get_logger()


__all__ = ["Logger", "configure"]
