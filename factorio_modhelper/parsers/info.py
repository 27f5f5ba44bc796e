from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import MetadataParseError
from .base import BaseParser

logger = logging.getLogger(__name__)

__all__ = ["METADATA_FILE", "ModInfo", "InfoParser"]

#: 모드 루트를 식별하는 메타데이터 파일 이름
METADATA_FILE = "info.json"


class ModInfo(BaseModel):
    """info.json에서 읽은 모드 메타데이터"""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(description="Internal mod name")
    version: str = Field(description="Mod version string, e.g. 1.0.0")
    title: Optional[str] = Field(default=None, description="Display title")
    author: Optional[str] = Field(default=None, description="Mod author")
    factorio_version: Optional[str] = Field(
        default=None, description="Targeted Factorio version"
    )
    description: Optional[str] = Field(default=None, description="Short description")

    @field_validator("name", "version")
    @classmethod
    def _check_path_component(cls, value: str) -> str:
        # 아카이브 최상위 폴더 이름이 되므로 경로 구분자를 허용하지 않음
        if not value:
            raise ValueError("must not be empty")
        if "/" in value or "\\" in value:
            raise ValueError(f"must not contain path separators: {value!r}")
        return value

    @classmethod
    def load_from_dir(cls, mod_root: Path) -> "ModInfo":
        """주어진 디렉토리의 info.json을 읽어 ModInfo를 반환합니다."""
        return InfoParser(Path(mod_root) / METADATA_FILE).parse()

    def zip_name(self) -> str:
        """'name_version' 형식의 아카이브 이름을 반환합니다."""
        return f"{self.name}_{self.version}"


class InfoParser(BaseParser):
    """팩토리오 info.json 파서입니다.

    JSON 객체여야 하며 문자열 ``name``과 ``version`` 필드가 필요합니다.
    읽기 실패는 PackagingIOError, 내용 오류는 MetadataParseError로 보고됩니다.
    """

    file_extensions = (".json",)

    def parse(self) -> ModInfo:
        self._check_extension()
        content = self._read_text()

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise MetadataParseError(self.path, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise MetadataParseError(
                self.path, f"expected a JSON object, got {type(data).__name__}"
            )

        try:
            info = ModInfo.model_validate(data)
        except ValidationError as e:
            raise MetadataParseError(self.path, self._format_errors(e)) from e

        logger.debug(f"메타데이터 로드: {self.path} → {info.zip_name()}")
        return info

    @staticmethod
    def _format_errors(error: ValidationError) -> str:
        parts = []
        for item in error.errors():
            field = ".".join(str(loc) for loc in item["loc"]) or "<root>"
            parts.append(f"{field}: {item['msg']}")
        return "; ".join(parts)
