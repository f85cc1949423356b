"""
Unit tests for the B3/S23 evolution rule.
"""

import pytest

from conway.core.rules import BIRTH_COUNT, SURVIVAL_COUNTS, next_state


class TestNextState:
    @pytest.mark.parametrize("count", [2, 3])
    def test_survival(self, count):
        assert next_state(True, count) is True

    @pytest.mark.parametrize("count", [0, 1, 4, 5, 8])
    def test_live_cell_dies(self, count):
        assert next_state(True, count) is False

    def test_birth_on_three(self):
        assert next_state(False, 3) is True

    @pytest.mark.parametrize("count", [0, 1, 2, 4, 6, 8])
    def test_dead_cell_stays_dead(self, count):
        assert next_state(False, count) is False

    def test_constants(self):
        assert BIRTH_COUNT == 3
        assert SURVIVAL_COUNTS == {2, 3}
