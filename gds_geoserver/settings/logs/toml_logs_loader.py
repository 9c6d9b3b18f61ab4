import inspect
import os
import tomli
import logging


class MissingLogsFileError(Exception):
    pass


class MissingLogMessageError(Exception):
    pass


class BadLogParametersError(Exception):
    pass


class GetLogInfiniteRecursionError(Exception):
    pass


class TomlLogsLoader:
    _instance = None
    _toml_logging_messages = None

    @staticmethod
    def _generate_logs_file_path():
        """
        :return: The path of the 'logging_messages.toml' file shipped beside this module.
        """
        parent_package_path = os.path.dirname(__file__)
        messages_file_path = os.path.join(parent_package_path, 'logging_messages.toml')
        return messages_file_path

    @staticmethod
    def _get_logs_data(file_path):
        """
        Retrieves TOML log data.

        :param file_path: The file path to read toml log messages from.
        :return: A dict of TOML messages from function tomli.load.
        :raises MissingLogsFileError: if the provided file path does not exist.
        """
        try:
            with open(file_path, "rb") as toml_file:
                return tomli.load(toml_file)
        except FileNotFoundError:
            err_msg = f"No logging messages file found at '{file_path}'."
            logging.error(err_msg)
            raise MissingLogsFileError(err_msg)

    def __new__(cls, logs_file_path=None):
        """
        Create a new or retrieve an existing instance of TomlLogsLoader.

        The class creator is called automatically in get_log if no instance has been created, so there is no need
        to call this explicitly unless you want to connect a different logs_file_path than the default.

        :param logs_file_path: The path to a .toml logs file. If not provided, the packaged
            'logging_messages.toml' is used.
        """
        if not cls._instance:
            if not logs_file_path:
                logs_file_path = cls._generate_logs_file_path()

            # Assign the instance only once the file is loaded so that a failed load can be retried
            toml_logging_messages = cls._get_logs_data(logs_file_path)
            cls._instance = super(TomlLogsLoader, cls).__new__(cls)
            cls._toml_logging_messages = toml_logging_messages

        return cls._instance

    @classmethod
    def reset(cls):
        """
        Resets the current class instance.
        """
        cls._instance = None
        cls._toml_logging_messages = None

    @staticmethod
    def in_recursive_call() -> bool:
        """
        Returns whether the calling function has been called by a function of the same name.
        """
        current_frame = inspect.currentframe()
        outer_frames = inspect.getouterframes(current_frame)

        current_function_name = outer_frames[1].function
        prev_function_name = outer_frames[2].function

        return prev_function_name == current_function_name

    @classmethod
    def get_log(cls, section: str, log_name: str, parameters: dict = None) -> str:
        """
        Get a log message.

        :param str section: Section name from the logs file of the message being requested.
        :param str log_name: Individual log name from the logs file of the message being requested.
        :param dict parameters: Parameters to be filled into the format string of the message being requested.

        :return: The requested log message.

        :raises GetLogInfiniteRecursionError: If an error is raised during get_log, and the internal
            get_log message describing it is also not found.
        :raises MissingLogMessageError: If a log message is requested but not found.
        :raises BadLogParametersError: If one or more parameters are provided but do not fit into the retrieved
            log message.
        """
        if not cls._instance:
            cls()

        log_msgs = cls._toml_logging_messages
        try:
            msg = log_msgs[section][log_name]
        except KeyError:
            # Raise directly if the message describing a missing message is itself missing
            if cls.in_recursive_call():
                err_msg = f"Could not access internal TomlLogsLoader error, unrelated to original error message.\n" \
                          f"Original get_log call section name was '{section}' and original message name " \
                          f"was '{log_name}'"
                logging.error(err_msg)
                raise GetLogInfiniteRecursionError(err_msg)

            err_msg = cls.get_log(section='messages_logging',
                                  log_name='missing_message',
                                  parameters={
                                      'section_name': section,
                                      'message_name': log_name
                                  })
            logging.error(err_msg)
            raise MissingLogMessageError(err_msg)

        try:
            if parameters:
                msg = msg.format(**parameters)
        except (KeyError, IndexError):
            if cls.in_recursive_call():
                err_msg = "Error in logging messages handler, unrelated to passed error. Could not access internal " \
                          "logging error message."
                logging.error(err_msg)
                raise GetLogInfiniteRecursionError(err_msg)

            err_msg = cls.get_log(section='messages_logging',
                                  log_name='bad_parameters',
                                  parameters={
                                      'section_name': section,
                                      'message_name': log_name,
                                      'parameters': parameters
                                  })
            logging.error(err_msg)
            raise BadLogParametersError(err_msg)

        return msg
