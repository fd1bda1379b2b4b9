"""Tests for bounded cell counting."""

import numpy as np
import pytest

from spiralizer.core.cells import count_bounded_cells


class TestCountBoundedCells:
    """Test counting cells without infinite vertices."""

    def test_empty(self):
        """Test that no cells count as zero."""
        assert count_bounded_cells([]) == 0

    def test_mixed_flags(self):
        """Test counting the unflagged entries."""
        assert count_bounded_cells([False, False, True]) == 2

    def test_all_unbounded(self):
        """Test that fully flagged input counts zero."""
        assert count_bounded_cells([True, True]) == 0

    def test_numpy_input(self):
        """Test numpy boolean arrays."""
        flags = np.array([True, False] * 50)

        result = count_bounded_cells(flags)
        assert result == 50
        assert isinstance(result, int)

    def test_input_not_modified(self):
        """Test that the flag array is left untouched."""
        flags = np.array([True, False, False])
        count_bounded_cells(flags)

        np.testing.assert_array_equal(flags, [True, False, False])

    def test_multidimensional_rejected(self):
        """Test that nested flag arrays are rejected."""
        with pytest.raises(ValueError):
            count_bounded_cells([[True, False], [False, False]])

    def test_reproducibility(self):
        """Test that repeated calls give the same count."""
        flags = np.array([True, False, False, True, False])

        assert count_bounded_cells(flags) == count_bounded_cells(flags) == 3
