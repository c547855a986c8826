#!filepath: gdlogit/utils/filesystem.py
from pathlib import Path

from gdlogit.utils.logger import logs


class FileSystem:
    """
    File helpers used by model persistence
    - create parent directories
    - atomic write (tmp file -> rename)
    - file size lookup
    """

    @staticmethod
    def ensure_dir(path: str | Path) -> Path:
        p = Path(path)
        if not p.exists():
            p.mkdir(parents=True, exist_ok=True)
            logs.debug(f"[FS] created dir: {p}")
        return p

    @staticmethod
    def file_exists(path: str | Path) -> bool:
        return Path(path).is_file()

    @staticmethod
    def get_file_size(path: str | Path) -> int:
        """
        File size in bytes, 0 when the file does not exist.
        """
        p = Path(path)
        if not p.exists():
            return 0
        return p.stat().st_size

    @staticmethod
    def safe_write(path: str | Path, data: bytes) -> None:
        """
        Atomic write, a reader never sees a half-written file:
            1) write <path>.tmp
            2) rename -> <path>
        """
        path = Path(path)
        FileSystem.ensure_dir(path.parent)

        tmp_path = path.with_name(path.name + ".tmp")

        try:
            with open(tmp_path, "wb") as f:
                f.write(data)
            logs.debug(f"[FS] wrote tmp file: {tmp_path}")
            tmp_path.replace(path)
        except OSError:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

        logs.debug(f"[FS] atomic write done: {path}")
