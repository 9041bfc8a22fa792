import pytest

from procsys import keys, procfile
from procsys.procfile import NotFoundError, ParseError


@pytest.fixture
def keys_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(procfile, "SYS_ROOT", tmp_path)
    directory = tmp_path / "kernel" / "keys"
    directory.mkdir(parents=True)
    return directory


def test_readers(keys_dir):
    (keys_dir / "gc_delay").write_text("300\n")
    (keys_dir / "persistent_keyring_expiry").write_text("259200\n")
    (keys_dir / "maxbytes").write_text("20000\n")
    (keys_dir / "maxkeys").write_text("200\n")
    (keys_dir / "root_maxbytes").write_text("25000000\n")
    (keys_dir / "root_maxkeys").write_text("1000000\n")

    assert keys.gc_delay() == 300
    assert keys.persistent_keyring_expiry() == 259200
    assert keys.maxbytes() == 20000
    assert keys.maxkeys() == 200
    assert keys.root_maxbytes() == 25000000
    assert keys.root_maxkeys() == 1000000


def test_missing_gc_delay_is_not_found(keys_dir):
    with pytest.raises(NotFoundError):
        keys.gc_delay()


def test_missing_persistent_keyring_expiry_is_not_found(keys_dir):
    with pytest.raises(NotFoundError):
        keys.persistent_keyring_expiry()


def test_missing_maxbytes_is_not_found(keys_dir):
    with pytest.raises(NotFoundError):
        keys.maxbytes()


def test_missing_maxkeys_is_not_found(keys_dir):
    with pytest.raises(NotFoundError):
        keys.maxkeys()


def test_missing_root_maxbytes_is_not_found(keys_dir):
    with pytest.raises(NotFoundError):
        keys.root_maxbytes()


def test_missing_root_maxkeys_is_not_found(keys_dir):
    with pytest.raises(NotFoundError):
        keys.root_maxkeys()


def test_set_maxbytes_round_trip(keys_dir):
    keys.set_maxbytes(12345)
    assert (keys_dir / "maxbytes").read_text() == "12345"
    assert keys.maxbytes() == 12345


def test_set_maxkeys_round_trip(keys_dir):
    keys.set_maxkeys(12345)
    assert (keys_dir / "maxkeys").read_text() == "12345"
    assert keys.maxkeys() == 12345


def test_set_root_maxbytes_round_trip(keys_dir):
    keys.set_root_maxbytes(12345)
    assert (keys_dir / "root_maxbytes").read_text() == "12345"
    assert keys.root_maxbytes() == 12345


def test_set_root_maxkeys_round_trip(keys_dir):
    keys.set_root_maxkeys(12345)
    assert (keys_dir / "root_maxkeys").read_text() == "12345"
    assert keys.root_maxkeys() == 12345


def test_garbage_is_parse_error(keys_dir):
    (keys_dir / "gc_delay").write_text("soon\n")
    with pytest.raises(ParseError):
        keys.gc_delay()