import pytest

from procsys import procfile, random_pool
from procsys.procfile import NotFoundError, ParseError


@pytest.fixture
def random_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(procfile, "SYS_ROOT", tmp_path)
    directory = tmp_path / "kernel" / "random"
    directory.mkdir(parents=True)
    return directory


def test_entropy_avail(random_dir):
    (random_dir / "entropy_avail").write_text("256\n")
    entropy = random_pool.entropy_avail()
    assert entropy == 256
    assert entropy <= 4096


def test_poolsize(random_dir):
    (random_dir / "poolsize").write_text("4096\n")
    assert random_pool.poolsize() == 4096


def test_read_wakeup_threshold_primary(random_dir):
    (random_dir / "read_wakeup_threshold").write_text("64\n")
    (random_dir / "write_wakeup_threshold").write_text("896\n")
    assert random_pool.read_wakeup_threshold() == 64


def test_read_wakeup_threshold_falls_back(random_dir):
    (random_dir / "write_wakeup_threshold").write_text("896\n")
    assert random_pool.read_wakeup_threshold() == 896


def test_read_wakeup_threshold_missing_both(random_dir):
    with pytest.raises(NotFoundError):
        random_pool.read_wakeup_threshold()


def test_read_wakeup_threshold_parse_error_not_swallowed(random_dir):
    (random_dir / "read_wakeup_threshold").write_text("garbage\n")
    (random_dir / "write_wakeup_threshold").write_text("896\n")
    with pytest.raises(ParseError):
        random_pool.read_wakeup_threshold()


def test_write_wakeup_threshold_restores(random_dir):
    (random_dir / "write_wakeup_threshold").write_text("896\n")
    old = random_pool.read_wakeup_threshold()
    random_pool.write_wakeup_threshold(1024)
    assert random_pool.read_wakeup_threshold() == 1024
    random_pool.write_wakeup_threshold(old)
    assert random_pool.read_wakeup_threshold() == 896


def test_uuid_and_boot_id(random_dir):
    (random_dir / "uuid").write_text("00000000-0000-4000-8000-000000000001\n")
    (random_dir / "boot_id").write_text("00000000-0000-4000-8000-000000000002\n")
    assert random_pool.uuid() == "00000000-0000-4000-8000-000000000001"
    assert random_pool.boot_id() == "00000000-0000-4000-8000-000000000002"


def test_uuid_missing(random_dir):
    with pytest.raises(NotFoundError):
        random_pool.uuid()