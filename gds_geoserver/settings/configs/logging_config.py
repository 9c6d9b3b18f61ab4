import os
import logging

from gds_geoserver.settings.logs.toml_logs_loader import TomlLogsLoader as LogsLoader


class InvalidLogLevelError(ValueError):
    pass


# Logging setup for gds_geoserver programs

log_format = '%(levelname)s - %(asctime)s - %(filename)s - Function:%(funcName)s -\n    %(message)s'


def configure_logging(level='DEBUG', log_file=None):
    """
    Applies the package log format to the root logger.

    :param level: Minimum log severity, as a level name or number.
    :param log_file: If provided, log records are also appended to this file.
    """
    if isinstance(level, str):
        level_number = logging.getLevelName(level.upper())
        if not isinstance(level_number, int):
            err_msg = LogsLoader.get_log(section='logging_config',
                                         log_name='invalid_level',
                                         parameters={'level': level})
            logging.error(err_msg)
            raise InvalidLogLevelError(err_msg)
        level = level_number

    logging.basicConfig(
        level=level,
        format=log_format
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if log_file:
        absolute_path = os.path.abspath(log_file)
        already_attached = any(isinstance(handler, logging.FileHandler) and handler.baseFilename == absolute_path
                               for handler in root_logger.handlers)
        if not already_attached:
            file_handler = logging.FileHandler(log_file, mode='a')
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(log_format))
            root_logger.addHandler(file_handler)

    return root_logger
