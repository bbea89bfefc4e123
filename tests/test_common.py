import pytest

from passwright.common import CommonPasswordSet, load_common_passwords
from passwright.config import ConfigError


def test_from_lines_strips_endings_and_skips_blanks():
    common = CommonPasswordSet.from_lines(["password\n", "letmein\r\n", "\n", "", "dragon"])
    assert len(common) == 3
    assert "password" in common
    assert "letmein" in common
    assert "" not in common

def test_lookup_is_exact():
    common = CommonPasswordSet(["password"])
    assert "Password" not in common
    assert "password " not in common
    assert "passwor" not in common

def test_from_path(tmp_path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"hunter2\r\nswordfish\r\n\r\n")
    common = load_common_passwords(str(p))
    assert set(common) == {"hunter2", "swordfish"}

def test_bundled_list():
    common = load_common_passwords()
    assert len(common) > 200
    for pw in ("password", "123456", "qwerty", "iloveyou"):
        assert pw in common

def test_set_is_read_only():
    common = CommonPasswordSet(["a"])
    assert not hasattr(common, "add")
    try:
        common.extra = 1
        ok = True
    except AttributeError:
        ok = False
    assert not ok

def test_unreadable_word_list_raises_config_error(tmp_path):
    with pytest.raises(ConfigError):
        load_common_passwords(str(tmp_path / "missing.txt"))
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9\n")
    with pytest.raises(ConfigError):
        load_common_passwords(str(bad))
