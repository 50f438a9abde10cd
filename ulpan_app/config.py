# File: ulpan_app/config.py
# Application configuration, environment-driven with development defaults.

import os
from dotenv import load_dotenv

load_dotenv()

# Project root (ulpan_app/ lives one level below it)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))


class Config:
    """Configuration for the Ulpan Flask application."""

    # Bundled JSON vocabulary files (words.json, phrases.json, ...)
    CONTENT_DIR = os.environ.get('ULPAN_CONTENT_DIR') or os.path.join(BASE_DIR, 'content')

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_DIR = os.environ.get('ULPAN_LOG_DIR') or os.path.join(BASE_DIR, 'logs')
    LOG_JSON = False

    # Option counts for choice exercises
    WORD_CHOICE_OPTIONS = 10  # the first release used 6
    LETTER_CHOICE_OPTIONS = 10
    ARABIC_WORD_CHOICE_OPTIONS = 10
    DEFINITION_CHOICE_OPTIONS = 10
    PREPOSITION_OPTIONS = 4

    MAX_TYPING_ATTEMPTS = 3

    # Advance timers are fire-and-forget unless this is enabled
    CANCEL_STALE_TIMERS = os.environ.get('ULPAN_CANCEL_STALE_TIMERS', '').lower() in ('1', 'true', 'yes')

    # Sessions untouched for this many seconds are dropped (0 keeps them forever)
    SESSION_IDLE_TIMEOUT = float(os.environ.get('ULPAN_SESSION_IDLE_TIMEOUT', 3600))

    @classmethod
    def init_app(cls, app):
        """Create the directories the app writes to."""
        if cls.LOG_DIR:
            os.makedirs(cls.LOG_DIR, exist_ok=True)
