import logging

import pytest

from gds_geoserver import settings
from gds_geoserver.settings.configs.logging_config import InvalidLogLevelError
from gds_geoserver.settings.configs.toml_config_loader import MissingConfigFileError, MissingConfigFileValueError
from gds_geoserver.settings.logs.toml_logs_loader import (BadLogParametersError, MissingLogMessageError,
                                                          MissingLogsFileError)
from gds_geoserver.testing_modules import get_toml_path


@pytest.fixture
def log_loader():
    return settings.TomlLogsLoader(get_toml_path())


def test_get_config_success():
    config_value = settings.TomlConfigLoader.get_config(section='config_test',
                                                        config_name='test_config',
                                                        configs_file_path=get_toml_path())
    assert config_value == "Test config"


def test_get_config_fail():
    with pytest.raises(MissingConfigFileValueError):
        settings.TomlConfigLoader.get_config(section='bad_section',
                                             config_name='bad_config',
                                             configs_file_path=get_toml_path())


def test_get_config_default(config_loader):
    config_value = settings.TomlConfigLoader.get_config(section='bad_section',
                                                        config_name='bad_config',
                                                        default='fallback')
    assert config_value == 'fallback'


def test_get_config_missing_file(tmp_path):
    with pytest.raises(MissingConfigFileError):
        settings.TomlConfigLoader(str(tmp_path / 'missing.toml'))
    # A failed load leaves no half-built instance behind
    assert settings.TomlConfigLoader._instance is None


def test_config_loader_is_singleton(config_loader):
    assert settings.TomlConfigLoader() is config_loader


def test_packaged_config_loads():
    base_url = settings.TomlConfigLoader.get_config(section='geoserver_service', config_name='base_url')
    assert base_url.startswith('http')


def test_get_message_success(log_loader):
    message = settings.TomlLogsLoader.get_log(section='logging_test',
                                              log_name='test_log')
    assert message == 'Test log'


def test_get_message_success_parameters(log_loader):
    message = settings.TomlLogsLoader.get_log(section='logging_test',
                                              log_name='test_log_parameters',
                                              parameters={
                                                  'parameter1': 'test one',
                                                  'parameter2': 'test two'
                                              })
    assert message == 'Test log with parameters test one test two'


def test_get_message_fail(log_loader):
    with pytest.raises(MissingLogMessageError):
        settings.TomlLogsLoader.get_log(section='bad_section',
                                        log_name='bad_log_name')


def test_get_message_fail_parameters(log_loader):
    with pytest.raises(BadLogParametersError):
        settings.TomlLogsLoader.get_log(section='logging_test',
                                        log_name='test_log_parameters',
                                        parameters={
                                            'bad_parameter': 'bad',
                                            'bad_parameter2': 'bad'
                                        })


def test_missing_logs_file(tmp_path):
    with pytest.raises(MissingLogsFileError):
        settings.TomlLogsLoader(str(tmp_path / 'missing.toml'))


def test_packaged_messages_cover_connection_manager():
    message = settings.TomlLogsLoader.get_log(section='geoserver_connection_manager',
                                              log_name='posting_request',
                                              parameters={'num_parameters': 2, 'url': 'http://host/path'})
    assert message == 'Posting 2 parameter(s) to http://host/path.'


def test_configure_logging_adds_file_handler_once(tmp_path):
    log_file = str(tmp_path / 'geoserver.log')
    root_logger = logging.getLogger()
    try:
        settings.configure_logging(level='INFO', log_file=log_file)
        settings.configure_logging(level='INFO', log_file=log_file)
        file_handlers = [handler for handler in root_logger.handlers
                         if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file]
        assert len(file_handlers) == 1
        assert root_logger.level == logging.INFO
    finally:
        root_logger.setLevel(logging.DEBUG)
        for handler in list(root_logger.handlers):
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
                root_logger.removeHandler(handler)
                handler.close()


def test_configure_logging_unknown_level():
    with pytest.raises(InvalidLogLevelError):
        settings.configure_logging(level='LOUD')


def test_configure_logging_level_name_case_insensitive():
    root_logger = settings.configure_logging(level='warning')
    try:
        assert root_logger.level == logging.WARNING
    finally:
        root_logger.setLevel(logging.DEBUG)
