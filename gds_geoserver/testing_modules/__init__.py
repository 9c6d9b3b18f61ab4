import os


def get_toml_path():
    current_dir = os.path.dirname(__file__)
    return os.path.join(current_dir, 'test_variables.toml')
