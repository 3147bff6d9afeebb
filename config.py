# Application Global Variables
# This module serves as a way to share variables across different
# modules (global variables).

import os

# Flag that indicates to run in Debug mode or not. When running in Debug mode
# every log message is also echoed to the console. Generally, it's useful
# to set this to True while developing and set it to False when you
# are ready to distribute.
DEBUG = os.environ.get('PRECISION_TAPE_DEBUG', '') not in ('', '0')

# Name used for the package logger
APP_NAME = 'precision_tape'

# Fraction precision (maximum denominator) offered to the user
DEFAULT_PRECISION = 16

# Recent conversions kept by the history panel
HISTORY_LIMIT = 10
