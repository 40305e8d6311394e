"""Runtime configuration read from environment variables."""

import os

# Encoding used for every file read or written by tabletool
ENCODING = os.getenv("TABLETOOL_ENCODING", "utf-8")

# Default log level for the command line tool
LOG_LEVEL = os.getenv("TABLETOOL_LOG_LEVEL", "WARNING").upper()
