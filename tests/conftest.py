import pytest


@pytest.fixture
def write_file(tmp_path):
    def _write(content: bytes, name: str = "input.txt") -> str:
        path = tmp_path / name
        path.write_bytes(content)
        return str(path)
    return _write


@pytest.fixture
def cache_dir(tmp_path):
    directory = tmp_path / "cache"
    directory.mkdir()
    return directory
