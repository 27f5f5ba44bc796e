"""
환경 변수 관리 유틸리티 모듈

.env 파일 읽기 및 설정 값 조회 기능 제공
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class EnvManager:
    """환경 변수 관리자 클래스

    .env 파일의 값은 이미 설정된 환경 변수를 덮어쓰지 않습니다.
    """

    def __init__(self, env_file_path: str = ".env"):
        self.env_file_path = Path(env_file_path)
        self.env_data: Dict[str, str] = {}
        self.load_env_file()

    def load_env_file(self) -> None:
        """환경 변수 파일 로드"""
        if not self.env_file_path.is_file():
            logger.debug(f"환경 변수 파일이 없습니다: {self.env_file_path}")
            return

        try:
            with open(self.env_file_path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line and not line.startswith("#") and "=" in line:
                        key, value = line.split("=", 1)
                        key = key.strip()
                        value = value.strip()

                        # 따옴표 제거
                        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                            value = value[1:-1]

                        self.env_data[key] = value
                        os.environ.setdefault(key, value)

            logger.debug(f"환경 변수 파일 로드 완료: {len(self.env_data)}개 변수")

        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"환경 변수 파일 로드 실패: {e}")

    def get_env_var(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """환경 변수 값 조회"""
        # 먼저 현재 환경 변수에서 조회
        value = os.environ.get(key)
        if value:
            return value
        return self.env_data.get(key) or default
