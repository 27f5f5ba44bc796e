"""모드 루트 탐색 모듈"""

from .load import detect_all_mod_roots, is_mod_root, resolve_mod_paths

__all__ = ["detect_all_mod_roots", "is_mod_root", "resolve_mod_paths"]
