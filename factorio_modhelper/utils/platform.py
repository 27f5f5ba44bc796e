import logging
import os
import sys
from pathlib import Path
from typing import Optional

from ..errors import PackagingIOError
from .env_manager import EnvManager

logger = logging.getLogger(__name__)

#: mods 디렉토리를 직접 지정하는 환경 변수
MODS_DIR_ENV = "FACTORIO_MODS_DIR"


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise PackagingIOError("resolve home directory", None, e) from e


def factorio_mods_dir(env: Optional[EnvManager] = None) -> Path:
    """
    운영체제별 팩토리오 mods 디렉토리를 반환합니다.

    FACTORIO_MODS_DIR (환경 변수 또는 .env)이 있으면 그 값을 우선 사용합니다.
    """
    override = (
        env.get_env_var(MODS_DIR_ENV) if env is not None else os.environ.get(MODS_DIR_ENV)
    )
    if override:
        logger.debug(f"{MODS_DIR_ENV} 사용: {override}")
        return Path(override).expanduser()

    if sys.platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else _home_dir() / "AppData" / "Roaming"
        return base / "Factorio" / "mods"

    if sys.platform == "darwin":
        return _home_dir() / "Library" / "Application Support" / "factorio" / "mods"

    return _home_dir() / ".factorio" / "mods"
