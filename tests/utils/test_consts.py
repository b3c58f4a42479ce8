from hanoi.utils.consts import ConstUtils, total_steps_for


def test_const_utils_limits():
    assert ConstUtils.MIN_RINGS == 1
    assert ConstUtils.MAX_RINGS == 63
    assert ConstUtils.PEG_COUNT == 3


def test_total_steps_for():
    assert total_steps_for(0) == 0
    assert total_steps_for(1) == 1
    assert total_steps_for(3) == 7
    assert total_steps_for(63) == 2**63 - 1


def test_total_steps_fit_in_63_bits():
    assert total_steps_for(ConstUtils.MAX_RINGS).bit_length() == 63
