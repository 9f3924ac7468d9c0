import gzip
import sys
from pathlib import Path

import pytest

# Ensure package import without installation
_repo_root = Path(__file__).resolve().parents[1]
_src_path = str(_repo_root / "src")
if _src_path not in sys.path:
    sys.path.insert(0, _src_path)


@pytest.fixture()
def runner():
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the user config file into the test directory."""
    import fastaval

    cfg_path = tmp_path / "config" / "fastaval.yaml"
    monkeypatch.setattr(fastaval, "CONFIG_PATH", str(cfg_path))
    return cfg_path


@pytest.fixture()
def write_fasta(tmp_path):
    """Return a writer `(name, content) -> Path`, gzipping names ending in .gz."""

    def _write(name: str, content) -> Path:
        path = tmp_path / name
        data = content.encode("latin-1") if isinstance(content, str) else content
        if name.endswith(".gz"):
            with gzip.open(path, "wb") as fh:
                fh.write(data)
        else:
            path.write_bytes(data)
        return path

    return _write
