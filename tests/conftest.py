"""Shared test fixtures."""

from pathlib import Path

import pytest

from expsum.config import Settings

EXPERIMENT_NOTE = """# {name}

## 实验结果：

mIoU: 71.2

## 后续任务

- [ ] Tune learning rate
"""


@pytest.fixture
def tmp_vault(tmp_path: Path) -> Path:
    """Create a temporary vault with a models folder of experiment notes."""
    vault = tmp_path / "vault"
    vault.mkdir()

    (vault / "Welcome.md").write_text("# Welcome\n")

    pointnet = vault / "models" / "PointNet"
    pointnet.mkdir(parents=True)
    (pointnet / "baseline.md").write_text(EXPERIMENT_NOTE.format(name="baseline"))
    (pointnet / "augment.md").write_text(EXPERIMENT_NOTE.format(name="augment"))

    ablation = pointnet / "ablation"
    ablation.mkdir()
    (ablation / "no-bn.md").write_text(EXPERIMENT_NOTE.format(name="no-bn"))

    dgcnn = vault / "models" / "DGCNN"
    dgcnn.mkdir()
    (dgcnn / "baseline.md").write_text(EXPERIMENT_NOTE.format(name="baseline"))

    # Noise the collector must ignore
    (vault / "models" / "README.md").write_text("Models overview")
    (dgcnn / "plot.png").write_bytes(b"\x89PNG")
    hidden = vault / "models" / ".trash"
    hidden.mkdir()
    (hidden / "old.md").write_text("deleted")

    return vault


@pytest.fixture
def settings(tmp_vault: Path, monkeypatch) -> Settings:
    """Settings pointing at the temporary vault, ignoring any local .env file."""
    monkeypatch.delenv("MODELS_FOLDER", raising=False)
    return Settings(_env_file=None, vault_path=tmp_vault)
