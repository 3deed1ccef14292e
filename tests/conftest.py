import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("VIEWREMOTE_CONFIG", raising=False)
    monkeypatch.delenv("VIEWREMOTE_REMOTE", raising=False)
