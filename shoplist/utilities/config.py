"""Configuration management for the Shopping List application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Reminders export
REMINDERS_SHORTCUT_NAME: Final[str] = os.getenv('REMINDERS_SHORTCUT_NAME', 'Add Shopping List to Reminders')

# Request limits
MAX_RECIPE_IDS: Final[int] = int(os.getenv('MAX_RECIPE_IDS', '50'))
MAX_LIST_NAME_LENGTH: Final[int] = int(os.getenv('MAX_LIST_NAME_LENGTH', '200'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('SHOPLIST_DATA_DIR', str(BASE_DIR / 'data')))
RECIPES_FILE: Final[Path] = Path(os.getenv('SHOPLIST_RECIPES_FILE', str(DATA_DIR / 'recipes.json')))
