from pathlib import Path

from home_inventory.utilities.config import DATA_DIR, STORE_FILE

# Centralized paths for data files


def ensure_data_dir(path: Path = DATA_DIR) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = ['DATA_DIR', 'STORE_FILE', 'ensure_data_dir']
