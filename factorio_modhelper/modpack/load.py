import logging
from pathlib import Path
from typing import List, Optional

from ..errors import NotAModError, PackagingIOError
from ..parsers.info import METADATA_FILE

logger = logging.getLogger(__name__)


def is_mod_root(path: Path) -> bool:
    """디렉토리에 info.json이 있는지 확인합니다."""
    return (Path(path) / METADATA_FILE).exists()


def resolve_mod_paths(mod_path: Optional[Path], cwd: Path) -> List[Path]:
    """
    처리할 모드 루트 목록을 결정합니다.

    Args:
        mod_path: 명시적으로 지정된 모드 경로 (상대 경로면 cwd 기준)
        cwd: 작업 디렉토리

    Returns:
        모드 루트 경로 목록 (비어 있을 수 있음)

    Raises:
        NotAModError: 명시적 경로에 info.json이 없는 경우
    """
    if mod_path is not None:
        path = Path(mod_path)
        if not path.is_absolute():
            path = Path(cwd) / path
        if not is_mod_root(path):
            raise NotAModError(path)
        return [path]

    return detect_all_mod_roots(Path(cwd))


def detect_all_mod_roots(root: Path) -> List[Path]:
    """
    모드를 감지합니다: 루트 자체에 info.json이 있으면 먼저 포함하고,
    info.json이 있는 직계 하위 디렉토리를 순서대로 추가합니다.
    """
    mods: List[Path] = []

    # 루트 자체가 모드인지 확인
    if is_mod_root(root):
        mods.append(root)

    # 직계 하위 디렉토리 확인 (재귀 없음)
    try:
        for child in root.iterdir():
            if child.is_dir() and is_mod_root(child):
                mods.append(child)
    except OSError as e:
        raise PackagingIOError("list directory", root, e) from e

    logger.debug(f"모드 {len(mods)}개 감지: {root}")
    return mods
