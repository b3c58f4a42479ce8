import itertools

import pytest

from hanoi.interfaces.pegs import NOOP_AT_BEGIN, NOOP_AT_END, Move, Peg


class TestPeg:
    def test_values_are_storage_indices(self):
        assert [int(peg) for peg in Peg] == [0, 1, 2]

    @pytest.mark.parametrize("first,second", list(itertools.permutations(Peg, 2)))
    def test_third_is_the_remaining_peg(self, first, second):
        third = Peg.third(first, second)
        assert {first, second, third} == set(Peg)

    @pytest.mark.parametrize("peg", list(Peg))
    def test_third_rejects_same_peg(self, peg):
        with pytest.raises(ValueError):
            Peg.third(peg, peg)


class TestMove:
    def test_real_move_is_truthy(self):
        move = Move(Peg.FROM, Peg.TO)
        assert move
        assert not move.is_noop

    def test_sentinels(self):
        assert NOOP_AT_END == Move(Peg.TO, Peg.TO)
        assert NOOP_AT_BEGIN == Move(Peg.FROM, Peg.FROM)
        assert not NOOP_AT_END
        assert NOOP_AT_BEGIN.is_noop

    def test_frozen(self):
        move = Move(Peg.FROM, Peg.TO)
        with pytest.raises(AttributeError):
            move.source = Peg.BUFFER

    def test_str(self):
        assert str(Move(Peg.BUFFER, Peg.FROM)) == "BUFFER->FROM"
