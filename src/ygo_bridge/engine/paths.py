"""
Centralized path configuration for ygo-bridge.

The shared library location can be overridden with YGOPRO_LIB_PATH, either in
the environment or in a .env file at the project root.
"""

import os
import platform
from pathlib import Path

from dotenv import load_dotenv

# Project root is three directories up from src/ygo_bridge/engine/
PROJECT_ROOT = Path(__file__).parents[3]

BUILD_DIR = PROJECT_ROOT / "build"

LIB_PATH_ENV = "YGOPRO_LIB_PATH"


def get_lib_extension() -> str:
    """Get platform-appropriate shared library extension.

    Returns:
        Library extension including the dot (.dylib, .dll, or .so).
    """
    system = platform.system()
    if system == "Darwin":
        return ".dylib"
    elif system == "Windows":
        return ".dll"
    return ".so"  # Linux and others


def get_library_path() -> Path:
    """Get the ocgcore shared library path.

    Checks YGOPRO_LIB_PATH (environment, then .env) before falling back to
    build/libocgcore<ext> under the project root.
    """
    load_dotenv()
    env_path = os.environ.get(LIB_PATH_ENV)
    if env_path:
        return Path(env_path)
    return BUILD_DIR / f"libocgcore{get_lib_extension()}"
