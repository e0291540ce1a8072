import platform
import sys

from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from likert.config import LOGS_DIR, RAW_DIR  # noqa: E402
from likert.utils.logging import package_versions, write_json  # noqa: E402


def main() -> None:
    info = {
        "python_version": sys.version,
        "platform": platform.platform(),
        "packages": package_versions(),
        "raw_dir_exists": RAW_DIR.exists(),
        "raw_files": sorted(p.name for p in RAW_DIR.glob("*")) if RAW_DIR.exists() else [],
    }
    write_json(LOGS_DIR / "environment_check.json", info)
    print("Wrote outputs/logs/environment_check.json")


if __name__ == "__main__":
    main()
