import logging
import logging.config
from typing import Any


def setup_logging(level: int | str = logging.NOTSET) -> None:
    """
    Route all records to stderr through a colored formatter.
    """

    for package in BLACKLIST:
        logging.getLogger(package).setLevel(logging.WARNING)

    logging.config.dictConfig(
        {**LOGGER_CONFIG, 'root': {'level': level, 'handlers': ['stderr']}}
    )


BLACKLIST = ['torch', 'hypothesis']

LOGGER_CONFIG: dict[str, Any] = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'colored': {
            '()': 'colorlog.ColoredFormatter',
            'fmt': '%(log_color)s[%(levelname)s]%(reset)s %(module)s %(message)s',
            'log_colors': {
                'DEBUG': 'blue',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'bold_red',
            },
        },
    },
    'handlers': {
        'stderr': {
            'class': 'logging.StreamHandler',
            'formatter': 'colored',
            'stream': 'ext://sys.stderr',
        }
    },
}
