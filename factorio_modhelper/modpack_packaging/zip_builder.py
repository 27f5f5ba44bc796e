"""
모드 ZIP 생성 모듈

모드 폴더를 팩토리오가 읽을 수 있는 `<name>_<version>/` 최상위 구조의 ZIP으로 묶습니다.
- 제외 목록에 있는 최상위 디렉토리(build, .git 등)는 하위 전체를 건너뜀
- 아카이브 내부 경로는 항상 슬래시(/) 구분자 사용
- thumbnail.png가 없으면 기본 썸네일을 추가
"""

import logging
import os
import zipfile
from pathlib import Path
from typing import Iterator, Optional, Tuple

from ..errors import PackagingIOError
from ..localization import get_message
from .base import THUMBNAIL_NAME, BuildConfig, PackagingResult

logger = logging.getLogger(__name__)

# 주입되는 썸네일 항목의 고정 타임스탬프 (ZIP 최소 날짜)
THUMBNAIL_DATE_TIME = (1980, 1, 1, 0, 0, 0)


class ModZipBuilder:
    """모드 루트 하나를 ZIP 아카이브로 만드는 클래스"""

    def __init__(self, config: BuildConfig):
        """
        Args:
            config: 실행 동안 변하지 않는 빌드 설정
        """
        self.config = config

    def build(self, mod_root: Path, out_zip: Path, top: str) -> PackagingResult:
        """
        모드 폴더를 ZIP으로 패키징합니다.

        Args:
            mod_root: info.json이 있는 모드 루트
            out_zip: 생성할 ZIP 파일 경로 (이미 있으면 덮어씀)
            top: 아카이브 최상위 폴더 이름 (name_version)

        Returns:
            PackagingResult: 패키징 결과

        Raises:
            PackagingIOError: 읽기/쓰기 실패. 불완전한 ZIP은 삭제됩니다.
        """
        mod_root = Path(mod_root)
        out_zip = Path(out_zip)
        result = PackagingResult(zip_name=top, output_path=out_zip)

        self._prepare_output_file(out_zip)

        try:
            # 1980년 이전 수정 시각은 ZIP 최소 날짜로 고정
            with zipfile.ZipFile(
                out_zip, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False
            ) as archive:
                for path, zip_path, is_dir in self._iter_entries(mod_root, top, out_zip):
                    if is_dir:
                        self._add_directory(archive, path, zip_path)
                        result.dir_count += 1
                        result.entries.append(zip_path + "/")
                    else:
                        self._add_file(archive, path, zip_path)
                        result.file_count += 1
                        result.entries.append(zip_path)

                injected = self._add_default_thumbnail_if_missing(archive, mod_root, top)
                if injected:
                    result.thumbnail_injected = True
                    result.entries.append(injected)
        except PackagingIOError:
            self._discard(out_zip)
            raise
        except (OSError, ValueError, zipfile.BadZipFile) as e:
            self._discard(out_zip)
            raise PackagingIOError("write archive", out_zip, e) from e
        except BaseException:
            self._discard(out_zip)
            raise

        logger.info(get_message("build.done", path=out_zip))
        return result

    # ------------------------------------------------------------------
    # 출력 파일 준비/정리
    # ------------------------------------------------------------------
    def _prepare_output_file(self, out_zip: Path) -> None:
        """상위 디렉토리를 만들고 기존 파일을 삭제합니다 (append가 아닌 덮어쓰기)."""
        try:
            out_zip.parent.mkdir(parents=True, exist_ok=True)
            if out_zip.exists():
                out_zip.unlink()
        except OSError as e:
            raise PackagingIOError("prepare output", out_zip, e) from e

    def _discard(self, out_zip: Path) -> None:
        try:
            out_zip.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"불완전한 ZIP 삭제 실패 ({out_zip}): {e}")

    # ------------------------------------------------------------------
    # 순회
    # ------------------------------------------------------------------
    def _iter_entries(
        self, mod_root: Path, top: str, out_zip: Path
    ) -> Iterator[Tuple[Path, str, bool]]:
        """
        (파일 시스템 경로, 아카이브 경로, 디렉토리 여부)를 순서대로 반환합니다.

        디렉토리 항목은 항상 그 내용보다 먼저 나옵니다.
        심볼릭 링크 디렉토리는 항목으로만 기록하고 따라 들어가지 않습니다.
        """
        out_resolved = out_zip.resolve()

        for dirpath, dirnames, filenames in os.walk(
            mod_root, topdown=True, onerror=_raise_walk_error, followlinks=False
        ):
            current = Path(dirpath)

            # 제외는 최상위 디렉토리에만 적용; dirnames를 수정해 하위로 내려가지 않음
            if current == mod_root:
                dirnames[:] = [d for d in dirnames if d not in self.config.excludes]
            dirnames.sort()

            for name in dirnames:
                path = current / name
                yield path, self._create_zip_path(path, mod_root, top), True

            for name in sorted(filenames):
                path = current / name
                if name == out_zip.name and path.resolve() == out_resolved:
                    continue
                yield path, self._create_zip_path(path, mod_root, top), False

    @staticmethod
    def _create_zip_path(path: Path, mod_root: Path, top: str) -> str:
        """모드 루트 기준 상대 경로를 `top/` 아래의 슬래시 경로로 변환합니다."""
        rel = path.relative_to(mod_root)
        return f"{top}/{rel.as_posix()}"

    # ------------------------------------------------------------------
    # 항목 쓰기
    # ------------------------------------------------------------------
    def _add_directory(self, archive: zipfile.ZipFile, path: Path, zip_path: str) -> None:
        try:
            # 디렉토리 항목은 내용이 없으므로 무압축
            archive.write(path, zip_path, compress_type=zipfile.ZIP_STORED)
        except OSError as e:
            raise PackagingIOError("add directory", path, e) from e
        self.config.log(get_message("build.dir", zip_path=zip_path + "/"))

    def _add_file(self, archive: zipfile.ZipFile, path: Path, zip_path: str) -> None:
        try:
            archive.write(path, zip_path, compress_type=zipfile.ZIP_DEFLATED)
        except OSError as e:
            raise PackagingIOError("read", path, e) from e
        self.config.log(get_message("build.file", path=path, zip_path=zip_path))

    def _add_default_thumbnail_if_missing(
        self, archive: zipfile.ZipFile, mod_root: Path, top: str
    ) -> Optional[str]:
        """모드에 thumbnail.png가 없고 기본 썸네일이 있으면 추가합니다."""
        if os.path.lexists(mod_root / THUMBNAIL_NAME) or not self.config.default_thumbnail:
            return None

        zip_path = f"{top}/{THUMBNAIL_NAME}"
        info = zipfile.ZipInfo(zip_path, date_time=THUMBNAIL_DATE_TIME)
        info.compress_type = zipfile.ZIP_DEFLATED
        info.external_attr = 0o644 << 16
        archive.writestr(info, self.config.default_thumbnail)

        self.config.log(get_message("build.thumbnail_injected", top=top))
        return zip_path


def _raise_walk_error(error: OSError) -> None:
    path = Path(error.filename) if error.filename else None
    raise PackagingIOError("read directory", path, error) from error


def build_zip(
    mod_root: Path, out_zip: Path, top: str, config: BuildConfig
) -> PackagingResult:
    """`<name>_<version>/` 최상위 폴더와 슬래시 경로를 가진 ZIP을 생성합니다."""
    return ModZipBuilder(config).build(mod_root, out_zip, top)
