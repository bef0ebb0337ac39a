"""
Configuration module for the timesheet checker.
"""
from .logging_config import LoggingConfig, configure_logging, reset_logging
from .settings import TimesheetConfig, get_config, load_config, reload_config

__all__ = [
    'LoggingConfig',
    'TimesheetConfig',
    'configure_logging',
    'get_config',
    'load_config',
    'reload_config',
    'reset_logging',
]
