import logging
from configparser import ConfigParser
from pathlib import Path

ini_file_path = Path(__file__).parent / "settings.ini"

parser = ConfigParser()
parser.read(str(ini_file_path.absolute()))

LOGGER_TRACE = 5
logging.addLevelName(LOGGER_TRACE, "TRACE")

log_level_mapper = {
    "notset": logging.NOTSET,
    "trace": LOGGER_TRACE,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

# ini placeholders -> logging.Formatter fields
log_format_mapper = {
    "$name": "%(name)s",
    "$levelno": "%(levelno)s",
    "$levelname": "%(levelname)s",
    "$filename": "%(filename)s",
    "$module": "%(module)s",
    "$lineno": "%(lineno)d",
    "$funcName": "%(funcName)s",
    "$asctime": "%(asctime)s",
    "$msecs": "%(msecs)d",
    "$thread": "%(thread)d",
    "$process": "%(process)d",
    "$message": "%(message)s",
}


def read_level(option: str) -> int:
    level = parser.get("Logging", option).strip().lower()
    if level not in log_level_mapper:
        raise ValueError(
            f"settings.ini contains invalid value {level!r} for the `{option}` option"
        )
    return log_level_mapper[level]


def read_format(option: str) -> str:
    text = parser.get("Logging", option)
    for placeholder, field in log_format_mapper.items():
        text = text.replace(placeholder, field)
    return text


LOGGER_NAME = parser.get("Logging", "logger_name")
MAIN_LOGGER_LEVEL = read_level("logger_level")
STREAM_HANDLER_LEVEL = read_level("stream_handler_level")
FORMAT = read_format("stream_handler_format")

BENCHMARK_SAMPLE_URI = parser.get("Benchmark", "sample_uri")
BENCHMARK_ITERATIONS = parser.getint("Benchmark", "iterations")


def _trace(message, *args, **kwargs):
    logger = logging.getLogger(LOGGER_NAME)

    if logger.isEnabledFor(LOGGER_TRACE):
        logger._log(LOGGER_TRACE, message, args, **kwargs)


main_logger = logging.getLogger(LOGGER_NAME)
main_logger.trace = _trace  # type: ignore
main_logger.propagate = False
main_logger.setLevel(MAIN_LOGGER_LEVEL)

if not main_logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(STREAM_HANDLER_LEVEL)
    handler.setFormatter(logging.Formatter(FORMAT))
    main_logger.addHandler(handler)
