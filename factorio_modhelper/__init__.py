"""팩토리오 모드 도우미: 모드 폴더를 `<name>_<version>.zip`으로 빌드하고 mods 폴더에 설치합니다."""

__version__ = "0.1.0"
