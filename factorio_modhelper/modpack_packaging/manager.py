"""
패키징 관리자 모듈

모드 탐색 → 메타데이터 읽기 → ZIP 생성 → 설치 순서로 전체 작업을 조정합니다.
모드는 탐색 순서대로 하나씩 처리되며, 첫 번째 오류에서 나머지 작업을 중단합니다.
"""

import logging
from pathlib import Path
from typing import List, Optional

from ..errors import NoModsFoundError, PackagingIOError
from ..localization import get_message
from ..modpack.load import resolve_mod_paths
from ..parsers.info import ModInfo
from ..utils.platform import factorio_mods_dir
from .base import BuildConfig, PackagingResult
from .installer import ModInstaller
from .zip_builder import ModZipBuilder

logger = logging.getLogger(__name__)


class PackageManager:
    """전체 빌드/설치 작업을 관리하는 클래스"""

    def __init__(
        self,
        config: BuildConfig,
        out_dir: Path = Path("build"),
        mods_dir: Optional[Path] = None,
    ):
        """
        Args:
            config: 빌드 설정
            out_dir: ZIP 출력 디렉토리 (상대 경로면 작업 디렉토리 기준)
            mods_dir: 설치 대상 디렉토리 (기본값: 운영체제별 팩토리오 mods 폴더)
        """
        self.config = config
        self.out_dir = Path(out_dir)
        self._mods_dir = Path(mods_dir) if mods_dir is not None else None
        self.zip_builder = ModZipBuilder(config)

    @property
    def mods_dir(self) -> Path:
        if self._mods_dir is None:
            self._mods_dir = factorio_mods_dir()
        return self._mods_dir

    def install_all(
        self, mod_path: Optional[Path] = None, cwd: Optional[Path] = None
    ) -> List[PackagingResult]:
        """
        감지된 모든 모드(또는 지정된 모드 하나)를 빌드하고 설치합니다.

        Args:
            mod_path: 명시적 모드 경로 (없으면 cwd와 하위 폴더에서 감지)
            cwd: 작업 디렉토리 (기본값: 현재 디렉토리)

        Returns:
            모드별 PackagingResult 목록 (처리 순서)
        """
        cwd = Path(cwd) if cwd is not None else Path.cwd()
        mods = resolve_mod_paths(mod_path, cwd)
        if not mods:
            raise NoModsFoundError(cwd)

        out_dir = self.out_dir if self.out_dir.is_absolute() else cwd / self.out_dir
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PackagingIOError("create output directory", out_dir, e) from e

        results = []
        for mod_root in mods:
            self.config.log(get_message("install.processing", path=mod_root))
            results.append(self.install_one(mod_root, out_dir))

        return results

    def install_one(
        self, mod_root: Path, out_dir: Optional[Path] = None
    ) -> PackagingResult:
        """모드 하나를 out_dir에 ZIP으로 빌드한 뒤 mods 폴더에 복사합니다. 빌드된 ZIP은 남겨둡니다."""
        out_dir = Path(out_dir) if out_dir is not None else self.out_dir
        info = ModInfo.load_from_dir(mod_root)
        zip_name = info.zip_name()
        zip_path = out_dir / f"{zip_name}.zip"

        result = self.zip_builder.build(mod_root, zip_path, zip_name)
        result.installed_path = ModInstaller(self.mods_dir).install(zip_path)

        logger.info(
            get_message("install.installed", name=zip_name, dest=result.installed_path)
        )
        return result
