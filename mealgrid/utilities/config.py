"""Configuration management for the meal grid application."""
import os
from typing import Final, Optional
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
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
GRID_FILE: Final[Path] = Path(os.getenv('GRID_FILE', str(DATA_DIR / 'grid.json')))

# Generation
EMPTY_POOL_POLICIES: Final[tuple[str, ...]] = ('abort', 'skip')


def _seed_from_env() -> Optional[int]:
    raw = os.getenv('PLAN_SEED', '').strip()
    return int(raw) if raw else None


def _policy_from_env() -> str:
    policy = os.getenv('EMPTY_POOL_POLICY', 'abort').strip().lower()
    if policy not in EMPTY_POOL_POLICIES:
        raise ValueError(f"EMPTY_POOL_POLICY must be one of {EMPTY_POOL_POLICIES}, got {policy!r}")
    return policy


PLAN_SEED: Final[Optional[int]] = _seed_from_env()
EMPTY_POOL_POLICY: Final[str] = _policy_from_env()
