"""Developer Tools tools. Auto-discovers and imports every tool module in this package."""
from pathlib import Path
import importlib

CATEGORY = "Developer Tools"

# Auto-import all .py files in this directory (except __init__.py)
for _file in sorted(Path(__file__).parent.glob("*.py")):
    if not _file.stem.startswith("_"):
        importlib.import_module(f".{_file.stem}", __package__)
