import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

SRC_ROOT = Path(__file__).resolve().parents[2]
APPS_DIR = SRC_ROOT / "apps"


def get_apps() -> Dict[str, str]:
    return {name: str(APPS_DIR / name) for name in sorted(os.listdir(APPS_DIR))}


@lru_cache(maxsize=None)
def get_app_paths(child_name: str) -> dict[str, dict[str, str]]:
    """Return all <child_name> module paths inside every app."""
    result: dict[str, dict[str, str]] = {}

    for app_name, app_path in get_apps().items():
        if not os.path.isdir(app_path) or app_name.startswith("__"):
            continue

        for root, dirs, files in os.walk(app_path):
            if os.path.basename(root) == child_name:
                file_paths = {
                    file.removesuffix(".py"): os.path.join(root, file)
                    for file in sorted(files)
                    if file.endswith(".py") and "__init__" not in file
                }
                result[app_name] = file_paths
                break

    return result


def convert_path_to_model(path: str) -> str:
    """Turn a module file path under src/ into its dotted import name."""
    relative = Path(path).resolve().relative_to(SRC_ROOT.parent)
    return ".".join(relative.with_suffix("").parts)
