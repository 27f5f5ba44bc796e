"""
모드 헬퍼 전체에서 사용하는 예외 계층

모든 오류는 치명적이며 최상위(main)까지 전파되어 메시지와 함께 종료 코드 1로 끝납니다.
"""

from pathlib import Path
from typing import Optional

__all__ = [
    "ModHelperError",
    "NotAModError",
    "NoModsFoundError",
    "MetadataParseError",
    "PackagingIOError",
]


class ModHelperError(Exception):
    """모드 헬퍼 오류의 기본 클래스"""


class NotAModError(ModHelperError):
    """명시적으로 지정한 경로에 info.json이 없을 때 발생합니다."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No info.json found at {path}")


class NoModsFoundError(ModHelperError):
    """작업 디렉토리에서 모드를 하나도 찾지 못했을 때 발생합니다."""

    def __init__(self, root: Path):
        self.root = root
        super().__init__(
            f"No mods found in {root}. "
            "Place an info.json in the repo root or in subfolders."
        )


class MetadataParseError(ModHelperError):
    """info.json 내용이 올바르지 않을 때 발생합니다."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse {path}: {reason}")


class PackagingIOError(ModHelperError):
    """파일 시스템 읽기/쓰기/생성/삭제 실패"""

    def __init__(self, action: str, path: Optional[Path], cause: Exception):
        self.action = action
        self.path = path
        self.cause = cause
        where = f" {path}" if path is not None else ""
        super().__init__(f"Failed to {action}{where}: {cause}")
