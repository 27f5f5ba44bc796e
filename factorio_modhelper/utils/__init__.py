from .env_manager import EnvManager
from .platform import MODS_DIR_ENV, factorio_mods_dir

__all__ = ["EnvManager", "MODS_DIR_ENV", "factorio_mods_dir"]
