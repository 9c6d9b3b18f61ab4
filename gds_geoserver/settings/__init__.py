from .configs.toml_config_loader import TomlConfigLoader
from .configs.logging_config import configure_logging
from .logs.toml_logs_loader import TomlLogsLoader
