"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings (word length is fixed by the bundled word lists)
    MAX_ATTEMPTS = int(os.getenv('MAX_ATTEMPTS', 6))
    WORD_SELECTION = os.getenv('WORD_SELECTION', 'daily')  # "daily" or "random"
    WORD_EPOCH = os.getenv('WORD_EPOCH', '2022-01-01')

    # Idle games are dropped from memory by the cleanup worker
    GAME_IDLE_TIMEOUT_SECONDS = int(os.getenv('GAME_IDLE_TIMEOUT_SECONDS', 3600))
    GAME_CLEANUP_INTERVAL_SECONDS = int(os.getenv('GAME_CLEANUP_INTERVAL_SECONDS', 60))

    # Presentation timing hints (milliseconds)
    FLIP_ANIMATION_DURATION_MS = int(os.getenv('FLIP_ANIMATION_DURATION_MS', 500))
    DANCE_ANIMATION_DURATION_MS = int(os.getenv('DANCE_ANIMATION_DURATION_MS', 500))
    ALERT_DURATION_MS = int(os.getenv('ALERT_DURATION_MS', 1000))
    WIN_ALERT_DURATION_MS = int(os.getenv('WIN_ALERT_DURATION_MS', 5000))

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    WORD_SELECTION = 'random'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
