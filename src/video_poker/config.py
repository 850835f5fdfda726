"""Configuration settings for the video poker game."""

import os

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid {name}: {value!r} is not an integer")


def _int_list(value: str) -> tuple:
    """Parse a comma separated list of positive integers."""
    try:
        numbers = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError:
        raise ValueError(f"Invalid integer list: {value!r}")
    if not numbers or any(n <= 0 for n in numbers):
        raise ValueError(f"Expected positive integers, got {value!r}")
    return numbers


class Config:
    """Base configuration class."""

    # Game settings
    STARTING_CREDITS = 100
    BET_OPTIONS = (5, 10, 20, 30)
    DEFAULT_BET = 5

    # Logging settings
    LOG_LEVEL = "WARNING"
    LOG_FILE = None

    # Apply VIDEO_POKER_* environment overrides in load()
    USE_ENVIRONMENT = True

    @classmethod
    def load(cls, environ=None):
        """
        Settings with VIDEO_POKER_* environment overrides applied.

        Returns a subclass carrying the overrides, so the configuration
        classes themselves are never modified.

        Raises:
            ValueError: If an environment value cannot be parsed
        """
        if not cls.USE_ENVIRONMENT:
            return cls
        environ = os.environ if environ is None else environ

        overrides = {}
        if "VIDEO_POKER_STARTING_CREDITS" in environ:
            overrides["STARTING_CREDITS"] = _int(
                "VIDEO_POKER_STARTING_CREDITS", environ["VIDEO_POKER_STARTING_CREDITS"]
            )
        if "VIDEO_POKER_BET_OPTIONS" in environ:
            overrides["BET_OPTIONS"] = _int_list(environ["VIDEO_POKER_BET_OPTIONS"])
        if "VIDEO_POKER_DEFAULT_BET" in environ:
            overrides["DEFAULT_BET"] = _int(
                "VIDEO_POKER_DEFAULT_BET", environ["VIDEO_POKER_DEFAULT_BET"]
            )
        if environ.get("VIDEO_POKER_LOG_LEVEL"):
            overrides["LOG_LEVEL"] = environ["VIDEO_POKER_LOG_LEVEL"].upper()
        if environ.get("VIDEO_POKER_LOG_FILE"):
            overrides["LOG_FILE"] = environ["VIDEO_POKER_LOG_FILE"]

        if not overrides:
            return cls
        return type(cls.__name__, (cls,), overrides)

    @classmethod
    def validate(cls) -> None:
        """
        Check that the settings make a playable game.

        Raises:
            ValueError: If any setting is out of range
        """
        if cls.STARTING_CREDITS < 0:
            raise ValueError(f"Starting credits cannot be negative: {cls.STARTING_CREDITS}")
        if cls.DEFAULT_BET not in cls.BET_OPTIONS:
            raise ValueError(f"Default bet {cls.DEFAULT_BET} is not one of {cls.BET_OPTIONS}")
        if cls.LOG_LEVEL not in LOG_LEVELS:
            raise ValueError(f"Unknown log level {cls.LOG_LEVEL!r}, expected one of {LOG_LEVELS}")


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = "DEBUG"


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "DEBUG"
    USE_ENVIRONMENT = False


config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(config_name: str = "default"):
    """
    Get configuration by name, with environment overrides applied.

    Raises:
        ValueError: If the name is unknown or the configuration is invalid
    """
    try:
        config_class = config[config_name]
    except KeyError:
        raise ValueError(f"Unknown configuration {config_name!r}, expected one of {sorted(config)}")
    settings = config_class.load()
    settings.validate()
    return settings
