# info.py

import os
import time

from mactool.oui_database import OuiDatabase


def days_since_last_modified(path):
    return int((time.time() - os.stat(path).st_mtime) // 86400)


def print_variables(out, title, variables):
    print(f"{title} variables loaded:", file=out)
    if not variables:
        print(" No variables defined.", file=out)
        return
    width = max(len(key) for key in variables)
    for key in sorted(variables):
        print(f" {key.ljust(width)} : {variables[key]}", file=out)


def print_config_info(out, config):
    state = "" if config.config_found else " (not found, using defaults)"
    print(f"Configuration file path: \n {config.config_path}{state}", file=out)
    print(file=out)
    print_variables(out, "Configuration file", config.file_values)
    print(file=out)
    print_variables(out, "Environment", config.env_values)


def print_config_debug(out, config):
    print_config_info(out, config)
    print(file=out)
    print_variables(out, "All", {
        'csv_file': config.csv_file,
        'oui_url': config.oui_url,
        'suppress_unmatched': config.suppress_unmatched,
        'debug': config.debug,
        'log_level': config.log_level,
    })


def print_database_info(out, config, logger):
    """Print the OUI database location, age and size."""
    path = config.csv_file
    try:
        days = days_since_last_modified(path)
        entries = len(OuiDatabase.load_file(path, logger))
    except OSError as e:
        logger.error(f"Failed to read OUI database {path}: {e}")
        return False

    print("OUI Database:", file=out)
    print(f" CSV database file URL    : {config.oui_url}", file=out)
    print(f" CSV database file path   : {path}", file=out)
    print(f" Days since last modified : {days}", file=out)
    print(f" Number of entries        : {entries}", file=out)
    return True
