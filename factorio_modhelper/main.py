"""
메인 애플리케이션 진입점

명령행 인자를 해석하여 모드 빌드/설치를 실행합니다.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import ModHelperError
from .localization import available_languages, get_message, set_language
from .modpack_packaging import BuildConfig, PackageManager
from .utils.env_manager import EnvManager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="factorio-modhelper", description=get_message("cli.description")
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--lang",
        choices=available_languages(),
        default="en",
        help=get_message("cli.lang_help"),
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    install = subparsers.add_parser("install", help=get_message("cli.install_help"))
    install.add_argument(
        "mod_path", nargs="?", type=Path, help=get_message("cli.mod_path_help")
    )
    install.add_argument(
        "--out-dir", default="build", help=get_message("cli.out_dir_help")
    )
    install.add_argument(
        "--default-thumbnail",
        type=Path,
        metavar="PATH",
        help=get_message("cli.thumbnail_help"),
    )
    install.add_argument(
        "--verbose", action="store_true", help=get_message("cli.verbose_help")
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """로깅 설정"""
    if verbose:
        logging.basicConfig(
            level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
        )
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")


def main(argv: Optional[List[str]] = None) -> int:
    """명령행 진입점. 종료 코드를 반환합니다."""
    args = build_parser().parse_args(argv)
    set_language(args.lang)
    configure_logging(args.verbose)

    cwd = Path.cwd()
    # .env의 FACTORIO_MODS_DIR 등을 환경 변수로 로드
    EnvManager(str(cwd / ".env"))

    try:
        if args.command == "install":
            config = BuildConfig.create(args.verbose, args.default_thumbnail, cwd)
            manager = PackageManager(config, Path(args.out_dir))
            results = manager.install_all(args.mod_path, cwd)
            logger.info(get_message("install.summary", count=len(results)))
    except ModHelperError as e:
        logger.error(get_message("cli.error", error=e))
        return 1
    except KeyboardInterrupt:
        logger.warning(get_message("cli.interrupted"))
        return 130

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
