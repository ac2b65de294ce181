from pathlib import Path
import environ
import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"

env = environ.Env(
    BREAKPEAK_LOG_LEVEL=(str, DEFAULT_LOG_LEVEL),
    BREAKPEAK_HOST=(str, "127.0.0.1"),
    BREAKPEAK_PORT=(int, 8000),
)

BASE_DIR = Path.cwd()

if os.path.exists(BASE_DIR / '.env'):
    environ.Env.read_env(os.path.join(BASE_DIR, '.env'))


def resolve_log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName maps known names to their numeric level.
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


LOG_LEVEL = resolve_log_level(env('BREAKPEAK_LOG_LEVEL'))
HOST = env('BREAKPEAK_HOST')
PORT = env('BREAKPEAK_PORT')
