"""
모드 설치 모듈

빌드된 ZIP을 팩토리오 mods 폴더에 그대로 복사합니다.
"""

import logging
import shutil
from pathlib import Path

from ..errors import PackagingIOError

logger = logging.getLogger(__name__)


class ModInstaller:
    """빌드된 ZIP을 mods 디렉토리로 복사하는 클래스"""

    def __init__(self, mods_dir: Path):
        """
        Args:
            mods_dir: 팩토리오 mods 디렉토리 (없으면 생성)
        """
        self.mods_dir = Path(mods_dir)

    def install(self, zip_path: Path) -> Path:
        """ZIP 파일을 mods 디렉토리에 같은 이름으로 복사하고 대상 경로를 반환합니다."""
        zip_path = Path(zip_path)

        try:
            self.mods_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PackagingIOError("create mods directory", self.mods_dir, e) from e

        dest = self.mods_dir / zip_path.name
        try:
            shutil.copyfile(zip_path, dest)
        except OSError as e:
            raise PackagingIOError(f"copy {zip_path} to", dest, e) from e

        logger.debug(f"파일 복사: {zip_path} → {dest}")
        return dest
