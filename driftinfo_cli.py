#!/usr/bin/env python3
"""
Command line entry point: print Bahnhof's open incidents.

Usage:
    driftinfo            # one line per incident
    driftinfo --json     # JSON array
    driftinfo --version  # build information
"""

import argparse
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from config import AppConfig, get_config
from driftinfo_client import DriftinfoClient
from formatters import format_incident, incidents_to_json, sort_incidents
from models import IncidentsError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(config: AppConfig) -> None:
    """
    Send log records to stderr and, if configured, to a rotating log file.

    Stdout is left for program output only.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)

    if config.log_file and not config.testing:
        log_dir = os.path.dirname(config.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            config.log_file,
            maxBytes=config.log_max_bytes,
            backupCount=config.log_backup_count,
        )
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        root.addHandler(file_handler)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='driftinfo',
        description="Show Bahnhof's ongoing service disruptions and scheduled maintenance.",
    )
    parser.add_argument('--version', action='store_true', help='show version and build info')
    parser.add_argument('--json', action='store_true', help='output JSON instead')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, client: Optional[DriftinfoClient] = None) -> int:
    """
    Run the tool once.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        client: Client to use; a new DriftinfoClient if not provided

    Returns:
        Process exit status
    """
    args = parse_args(argv)
    config = get_config()

    if args.version:
        print(json.dumps(config.version_info()))
        return 0

    if not logging.getLogger().handlers:
        configure_logging(config)

    try:
        result = (client or DriftinfoClient(config)).get_incidents()
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130

    if isinstance(result, IncidentsError):
        logger.error(f"❌ {result.message} ({result.error})")
        return 1

    incidents = sort_incidents(result.incidents)

    if args.json:
        print(incidents_to_json(incidents))
        return 0

    for incident in incidents:
        print(format_incident(incident))
    return 0


if __name__ == '__main__':
    sys.exit(main())
