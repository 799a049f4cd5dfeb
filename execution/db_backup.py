"""Data backup script — copies the JSON collection files to a timestamped folder."""

import shutil
import sys
from datetime import datetime
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from bindery_estimator.config import Config
from bindery_estimator.database.schema import COLLECTION_FILES


def backup_data(data_dir: Path | None = None,
                backup_dir: Path | None = None,
                keep: int | None = None) -> Path | None:
    """Copy every collection file into a new timestamped backup folder."""
    data_dir = Path(data_dir or Config.DATA_DIR)
    backup_dir = Path(backup_dir or Config.BACKUP_PATH)
    keep = keep or Config.BACKUP_KEEP

    files = [data_dir / name for name in COLLECTION_FILES.values()]
    files = [f for f in files if f.exists()]
    if not files:
        print(f"No data files found in {data_dir}")
        return None

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    target = backup_dir / f"bindery_{timestamp}"
    target.mkdir(parents=True, exist_ok=True)
    for f in files:
        shutil.copy2(f, target / f.name)
    print(f"Backup created: {target}")

    # Keep only the newest backups
    backups = sorted(backup_dir.glob("bindery_*"), reverse=True)
    for old in backups[keep:]:
        shutil.rmtree(old)
        print(f"Removed old backup: {old.name}")
    return target


if __name__ == "__main__":
    backup_data()
