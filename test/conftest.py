"""
Pytest configuration for all tests.
Sets up environment variables and fixtures used across test modules.
"""

import os
import pytest


# Set environment variable BEFORE any other imports
# This must happen at module import time to affect config initialization
os.environ['TESTING'] = 'true'


@pytest.fixture(autouse=True)
def reset_time_zone():
    """Reset the process-wide time zone cache before each test."""
    from date_parser import reset_location
    reset_location()
    yield
    reset_location()
