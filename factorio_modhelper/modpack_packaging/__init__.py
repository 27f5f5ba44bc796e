"""
모드 패키징 모듈

모드 폴더를 팩토리오용 ZIP으로 패키징하고 mods 폴더에 설치합니다.
- ZIP 생성: `<name>_<version>/` 최상위 구조, 제외 목록, 기본 썸네일 주입
- 설치: 빌드된 ZIP을 운영체제별 mods 폴더로 복사
"""

from .base import DEFAULT_EXCLUDES, BuildConfig, PackagingResult, load_default_thumbnail_bytes
from .installer import ModInstaller
from .manager import PackageManager
from .zip_builder import ModZipBuilder, build_zip

__all__ = [
    "DEFAULT_EXCLUDES",
    "BuildConfig",
    "PackagingResult",
    "load_default_thumbnail_bytes",
    "ModInstaller",
    "PackageManager",
    "ModZipBuilder",
    "build_zip",
]
