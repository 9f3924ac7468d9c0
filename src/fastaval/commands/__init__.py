import importlib
from pathlib import Path

MAIN_FUNC_NAME = "main"

# Export the `main` command of every module under its command name
for file in sorted(Path(__file__).parent.iterdir()):
    if file.suffix == ".py" and not file.name.startswith("_"):
        module = importlib.import_module("." + file.stem, package=__name__)
        cmd = getattr(module, MAIN_FUNC_NAME, None)
        if cmd is not None:
            globals()[getattr(cmd, "name", None) or file.stem] = cmd
