"""CLI utility functions"""

from .output import (
    console,
    ConsoleReporter,
    format_deploy_result,
    format_clean_result,
    format_table,
    format_json,
    format_yaml,
    print_error,
    print_warning,
)
from .interactive import InitWizard, select_from_list

__all__ = [
    # Output utilities
    'console',
    'ConsoleReporter',
    'format_deploy_result',
    'format_clean_result',
    'format_table',
    'format_json',
    'format_yaml',
    'print_error',
    'print_warning',

    # Interactive utilities
    'InitWizard',
    'select_from_list',
]
