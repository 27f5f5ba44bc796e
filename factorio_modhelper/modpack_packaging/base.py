"""
패키징 기본 클래스들
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional

from ..localization import get_message

logger = logging.getLogger(__name__)

#: 아카이브에서 항상 제외되는 최상위 디렉토리 이름
DEFAULT_EXCLUDES: FrozenSet[str] = frozenset(
    {"build", ".git", ".github", ".idea", ".vscode"}
)

#: --default-thumbnail이 없을 때 작업 디렉토리 기준으로 찾는 경로
FALLBACK_THUMBNAIL = Path("assets") / "default_thumbnail.png"

THUMBNAIL_NAME = "thumbnail.png"


@dataclass(frozen=True)
class BuildConfig:
    """한 번의 실행 동안 변하지 않는 빌드 설정"""

    verbose: bool = False
    default_thumbnail: Optional[bytes] = None
    excludes: FrozenSet[str] = DEFAULT_EXCLUDES

    @classmethod
    def create(
        cls,
        verbose: bool = False,
        default_thumbnail: Optional[Path] = None,
        cwd: Optional[Path] = None,
    ) -> "BuildConfig":
        """
        명령행 옵션으로부터 BuildConfig를 생성합니다.

        Args:
            verbose: 항목별 로그 출력 여부
            default_thumbnail: 명시적으로 지정된 기본 썸네일 경로
            cwd: 대체 썸네일 경로의 기준 디렉토리 (기본값: 현재 디렉토리)
        """
        return cls(
            verbose=verbose,
            default_thumbnail=load_default_thumbnail_bytes(default_thumbnail, cwd),
        )

    def log(self, message: str) -> None:
        """verbose 모드일 때만 INFO 레벨로 출력합니다."""
        if self.verbose:
            logger.info(message)
        else:
            logger.debug(message)


@dataclass
class PackagingResult:
    """모드 하나의 빌드/설치 결과를 담는 데이터 클래스"""

    zip_name: str
    output_path: Path
    installed_path: Optional[Path] = None
    file_count: int = 0
    dir_count: int = 0
    thumbnail_injected: bool = False
    entries: List[str] = field(default_factory=list)


def load_default_thumbnail_bytes(
    explicit: Optional[Path], cwd: Optional[Path] = None
) -> Optional[bytes]:
    """
    기본 썸네일 바이트를 읽습니다.

    명시적 경로를 먼저 시도하고, 실패하면 assets/default_thumbnail.png를 찾습니다.
    둘 다 없으면 None을 반환하며 오류로 취급하지 않습니다.
    """
    if explicit is not None:
        explicit = Path(explicit)
        if cwd is not None and not explicit.is_absolute():
            explicit = Path(cwd) / explicit
        try:
            data = explicit.read_bytes()
            logger.debug(
                get_message("config.thumbnail_loaded", path=explicit, size=len(data))
            )
            return data
        except OSError as e:
            logger.warning(
                get_message("config.thumbnail_unreadable", path=explicit, error=e)
            )

    fallback = (Path(cwd) if cwd is not None else Path.cwd()) / FALLBACK_THUMBNAIL
    try:
        data = fallback.read_bytes()
    except OSError:
        return None

    logger.debug(get_message("config.thumbnail_loaded", path=fallback, size=len(data)))
    return data
