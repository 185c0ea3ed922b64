"""
Configuration management for the file browser.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration class."""

    # Sandbox root; everything served or created lives below it
    ROOT_DIR = os.path.expanduser(os.getenv("ROOT_DIR", "./public"))

    # Display settings
    SIMPLE_ICONS = os.getenv("SIMPLE_ICONS", "false").lower() == "true"

    # Server settings
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 8000))
    DEBUG = os.getenv("DEBUG", "true").lower() == "true"
    TESTING = False

    @classmethod
    def canonical_root(cls) -> str:
        """Return the root directory with symlinks and '..' resolved."""
        return os.path.realpath(cls.ROOT_DIR)

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        os.makedirs(cls.ROOT_DIR, exist_ok=True)

    @classmethod
    def with_root(cls, root_dir: str):
        """Derive a configuration class serving a different root directory."""
        return type(cls.__name__, (cls,), {"ROOT_DIR": os.path.expanduser(root_dir)})


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    ROOT_DIR = "./test_root"


# Configuration dictionary for easy access
config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig
}


def get_config(config_name: str = None):
    """Get configuration by name, defaulting to environment variable or development."""
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "development")
    return config_by_name.get(config_name, DevelopmentConfig)
