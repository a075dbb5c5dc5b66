#!/usr/bin/env python3
"""
Configuration
Reads service settings from the environment (and a .env file if present).
"""

import logging
import os
from dataclasses import dataclass
from datetime import time
from functools import lru_cache

from dotenv import load_dotenv

from booking_calendar.date_utils import (
    DEFAULT_CHECK_IN_TIME,
    DEFAULT_CHECK_OUT_TIME,
    format_time,
    parse_time,
)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the calendar service and CLI."""
    default_check_in: time = DEFAULT_CHECK_IN_TIME
    default_check_out: time = DEFAULT_CHECK_OUT_TIME
    locale: str = 'en'
    log_level: str = 'INFO'


def load_settings() -> Settings:
    """
    Build Settings from environment variables.

    Variables:
        CALENDAR_DEFAULT_CHECK_IN: default check-in time (HH:MM), default 12:00
        CALENDAR_DEFAULT_CHECK_OUT: default check-out time (HH:MM), default 14:00
        CALENDAR_LOCALE: 'en' or 'pt', default 'en'
        LOG_LEVEL: logging level name, default INFO

    Raises:
        EnvironmentError: if a time variable cannot be parsed
    """
    load_dotenv()

    check_in_str = os.environ.get('CALENDAR_DEFAULT_CHECK_IN', format_time(DEFAULT_CHECK_IN_TIME))
    check_out_str = os.environ.get('CALENDAR_DEFAULT_CHECK_OUT', format_time(DEFAULT_CHECK_OUT_TIME))
    try:
        check_in = parse_time(check_in_str)
        check_out = parse_time(check_out_str)
    except ValueError as e:
        raise EnvironmentError(
            f"Invalid default check-in/out time in environment: {e}\n"
            "Use HH:MM, e.g. export CALENDAR_DEFAULT_CHECK_IN='15:00'"
        ) from e

    return Settings(
        default_check_in=check_in,
        default_check_out=check_out,
        locale=os.environ.get('CALENDAR_LOCALE', 'en').strip().lower() or 'en',
        log_level=os.environ.get('LOG_LEVEL', 'INFO').strip().upper() or 'INFO',
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings loaded once per process."""
    return load_settings()


def configure_logging(level: str = 'INFO') -> None:
    """Configure root logging for the service and CLI entry points."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
