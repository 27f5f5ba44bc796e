from __future__ import annotations

import abc
from pathlib import Path
from typing import Any

from ..errors import PackagingIOError


class BaseParser(abc.ABC):
    """모드 메타데이터 파일을 읽어 구조화된 값을 반환하는 추상 파서입니다.

    파서는 *path*를 읽고 파일 형식에 맞는 결과 객체를 반환합니다.
    모든 입출력은 동기식으로 처리됩니다.
    """

    #: 지원되는 파일 이름 접미사 목록 (점 포함)
    file_extensions: tuple[str, ...] = ()

    def __init__(self, path: Path):
        self.path = Path(path)

    # ------------------------------------------------------------------
    # 공개 API
    # ------------------------------------------------------------------
    @abc.abstractmethod
    def parse(self) -> Any:
        """*path*에서 읽은 내용을 파싱하여 반환합니다."""

    # ------------------------------------------------------------------
    # 헬퍼
    # ------------------------------------------------------------------
    def _check_extension(self) -> None:
        if self.file_extensions and self.path.suffix not in self.file_extensions:
            raise ValueError(
                f"지원하지 않는 파일 형식 {self.path} for {self.__class__.__name__}"
            )

    def _read_text(self) -> str:
        """파일 전체를 UTF-8 텍스트로 읽습니다. BOM이 있으면 제거합니다."""
        try:
            with open(self.path, "r", encoding="utf-8-sig") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise PackagingIOError("read", self.path, e) from e
