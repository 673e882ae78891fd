import pytest

from strength_check.common import COMMON_PASSWORDS, is_common


def test_list_is_large_enough_and_lowercase():
    assert len(COMMON_PASSWORDS) >= 40
    assert all(p == p.lower() for p in COMMON_PASSWORDS)


@pytest.mark.parametrize("password", ["password", "PASSWORD", "PassWord", "QwErTy", "TrustNo1"])
def test_match_is_case_insensitive(password):
    assert is_common(password)


@pytest.mark.parametrize("password", ["", "password!", " password", "correct horse"])
def test_only_exact_matches(password):
    assert not is_common(password)
