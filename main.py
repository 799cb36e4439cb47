#!/usr/bin/env python3
"""
DesignOS product loader - CLI entry point.

Usage:
    python main.py [--root DIR] [-c CONFIG] [-v] load [-o FILE] [--with-sections]
    python main.py [--root DIR] sections
    python main.py [--root DIR] section <section_id>
    python main.py [--root DIR] status

Environment (a .env file in the working directory is honored):
    DESIGNOS_PROJECT_ROOT   default project root
    DESIGNOS_CONFIG         default config file
"""

import sys

from designos.cli import main


if __name__ == "__main__":
    sys.exit(main())
