# What it does: Manages all read/write operations for the `.store-root/config` file
# What data structure it uses: Map / Hash Table / Dictionary (the INI file format is a map of sections to key-value pairs, managed by Python's `configparser`)

import configparser
import os

from .digest import DEFAULT_ALGORITHM, get_digest_function
from .repository import get_store_dir

DEFAULTS = {
    'core': {
        'digest': DEFAULT_ALGORITHM,
        'strict': 'false',
    },
}


def get_config_path(repo_root):  # Returns the path to the config file within the repository
    return os.path.join(get_store_dir(repo_root), 'config')


def read_config(repo_root): # Reads and returns the configuration as a ConfigParser object, defaults included
    config = configparser.ConfigParser()
    config.read_dict(DEFAULTS)
    config_path = get_config_path(repo_root)
    if os.path.exists(config_path):
        config.read(config_path)
    return config


def write_config(repo_root, key, value): # Sets a configuration key to a value and writes it to the config file
    config_path = get_config_path(repo_root)
    config = configparser.ConfigParser()
    if os.path.exists(config_path):
        config.read(config_path)

    try:
        section, option = key.split('.', 1)
    except ValueError:
        raise ValueError("Error: Invalid key format. Should be 'section.key'.")

    if key == 'core.digest':
        get_digest_function(value)
    elif key == 'core.strict' and value.lower() not in configparser.ConfigParser.BOOLEAN_STATES:
        raise ValueError(f"Error: '{value}' is not a boolean.")

    if not config.has_section(section):
        config.add_section(section)

    config.set(section, option, value)

    with open(config_path, 'w') as configfile:
        config.write(configfile)


def get_digest_algorithm(repo_root): # Name of the digest strategy used to address new objects
    return read_config(repo_root).get('core', 'digest')


def get_hasher(repo_root): # The digest function selected by `core.digest`
    return get_digest_function(get_digest_algorithm(repo_root))


def is_strict(repo_root): # True when malformed index/commit lines must raise instead of being skipped
    return read_config(repo_root).getboolean('core', 'strict')
