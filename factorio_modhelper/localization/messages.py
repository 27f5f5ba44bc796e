"""
애플리케이션 전체의 지역화를 위한 메시지 카탈로그입니다.

모든 사용자 대상 문자열(로그, CLI 출력 등)은
런타임에 번역하거나 대체할 수 있도록 안정적인 키로 여기에 정의됩니다.
형식화된 텍스트를 검색하려면 `get_message(key, **kwargs)`를 사용하세요.
"""

from __future__ import annotations

from typing import Any, Dict

# ---------------------------------------------------------------------------
# 1. 언어별 메시지 카탈로그
# ---------------------------------------------------------------------------

_CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        # Discovery / orchestration
        "install.processing": "🔍 Processing mod at {path}",
        "install.installed": "✅ Installed {name} → {dest}",
        "install.summary": "🏁 Installed {count} mod(s)",
        # Archive builder
        "build.dir": "📁 Dir   → {zip_path}",
        "build.file": "📄 File  {path} → {zip_path}",
        "build.thumbnail_injected": "🔧 Injected default thumbnail into {top}",
        "build.done": "📦 Built {path}",
        # Config
        "config.thumbnail_unreadable": "⚠️ Default thumbnail {path} could not be read: {error}",
        "config.thumbnail_loaded": "🖼️ Using default thumbnail {path} ({size} bytes)",
        # CLI
        "cli.description": "Factorio mod helper (zip + install)",
        "cli.install_help": "Install a mod (or all detected mods) into your Factorio mods/ folder",
        "cli.mod_path_help": "Optional path to a mod folder containing info.json. If omitted, installs all detected mods in the repo.",
        "cli.out_dir_help": "Output directory for the built .zip(s) before install (default: build)",
        "cli.thumbnail_help": "Optional default thumbnail to use when a submod has none.",
        "cli.verbose_help": "Print extra information while building.",
        "cli.lang_help": "Language for console messages.",
        "cli.error": "❌ {error}",
        "cli.interrupted": "⏸️  Interrupted by user.",
    },
    "ko": {
        "install.processing": "🔍 모드 처리 중: {path}",
        "install.installed": "✅ 설치 완료 {name} → {dest}",
        "install.summary": "🏁 모드 {count}개 설치 완료",
        "build.dir": "📁 폴더  → {zip_path}",
        "build.file": "📄 파일  {path} → {zip_path}",
        "build.thumbnail_injected": "🔧 기본 썸네일을 {top}에 추가했습니다",
        "build.done": "📦 생성 완료 {path}",
        "config.thumbnail_unreadable": "⚠️ 기본 썸네일 {path}을(를) 읽을 수 없습니다: {error}",
        "config.thumbnail_loaded": "🖼️ 기본 썸네일 사용: {path} ({size} 바이트)",
        "cli.description": "팩토리오 모드 도우미 (zip 생성 + 설치)",
        "cli.install_help": "모드(또는 감지된 모든 모드)를 팩토리오 mods/ 폴더에 설치합니다",
        "cli.mod_path_help": "info.json이 있는 모드 폴더 경로. 생략하면 저장소에서 감지된 모든 모드를 설치합니다.",
        "cli.out_dir_help": "설치 전에 .zip 파일을 생성할 출력 디렉토리 (기본값: build)",
        "cli.thumbnail_help": "모드에 썸네일이 없을 때 사용할 기본 썸네일 경로",
        "cli.verbose_help": "빌드 중 자세한 정보를 출력합니다.",
        "cli.lang_help": "콘솔 메시지 언어",
        "cli.error": "❌ {error}",
        "cli.interrupted": "⏸️  사용자가 작업을 중단했습니다.",
    },
}

# 현재 선택된 언어 (기본값: 영어).
_LANG: str = "en"


# ---------------------------------------------------------------------------
# 2. API 헬퍼
# ---------------------------------------------------------------------------


def available_languages() -> list[str]:
    """카탈로그에 등록된 언어 코드 목록을 반환합니다."""
    return sorted(_CATALOGS)


def set_language(lang: str) -> None:
    """지역화를 위한 전역 언어를 설정합니다 (예: "en", "ko")."""
    global _LANG
    if lang in _CATALOGS:
        _LANG = lang
    else:
        _LANG = "en"


def get_language() -> str:
    return _LANG


def get_message(key: str, **kwargs: Any) -> str:
    """지정된 키에 대한 지역화된 메시지를 반환합니다."""
    catalog = _CATALOGS.get(_LANG, _CATALOGS["en"])
    template = catalog.get(key) or _CATALOGS["en"].get(key, f"<{key}>")
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError):
        # 포맷팅 실패 시 템플릿을 그대로 반환
        return template
