import logging
import os

from systemd.journal import JournalHandler

LOG_LEVEL_ENV = 'SDUNITS_LOG_LEVEL'


def setup_logger(level: int | str | None = None) -> None:
    """Send sdunits logs to the systemd journal.

    Args:
        level: Log level, defaults to $SDUNITS_LOG_LEVEL or INFO
    """
    app_logger = logging.getLogger('sdunits')
    app_logger.setLevel(level or os.environ.get(LOG_LEVEL_ENV, 'INFO'))

    if any(isinstance(h, JournalHandler) for h in app_logger.handlers):
        return

    journal_handler = JournalHandler(SYSLOG_IDENTIFIER='sdunits')

    app_logger.addHandler(journal_handler)
