"""
Tests for error types and input checks.
"""

import numpy as np
import pytest

from divmap.validation import (
    DivergenceError,
    InvalidModelError,
    InvalidParameterError,
    ShapeMismatchError,
    check_grid_size,
    check_model_flux,
    check_model_samples,
    check_negative_policy,
    check_reference,
    check_shape,
)


class TestErrorHierarchy:

    @pytest.mark.parametrize("err", [ShapeMismatchError, InvalidParameterError, InvalidModelError])
    def test_all_derive_from_base(self, err):
        assert issubclass(err, DivergenceError)

    def test_value_errors(self):
        """Argument errors are also ValueErrors; model errors are not."""
        assert issubclass(ShapeMismatchError, ValueError)
        assert issubclass(InvalidParameterError, ValueError)
        assert not issubclass(InvalidModelError, ValueError)

    def test_shape_mismatch_message(self):
        err = ShapeMismatchError((2, 2), (3, 3))
        assert err.expected == (2, 2)
        assert err.actual == (3, 3)
        assert "(2, 2)" in str(err)
        assert "(3, 3)" in str(err)


class TestChecks:

    def test_check_shape(self):
        check_shape((2, 3), (2, 3))
        with pytest.raises(ShapeMismatchError):
            check_shape((2, 3), (3, 2))

    def test_check_grid_size(self):
        assert check_grid_size(np.int32(4), 'x') == 4
        for bad in (0, -1, 2.0, False, None):
            with pytest.raises(InvalidParameterError):
                check_grid_size(bad, 'x')

    def test_check_reference_returns_flux(self):
        assert check_reference(np.array([[1.0, 2.0], [0.0, 1.0]])) == 4.0

    def test_check_reference_overflowing_flux(self):
        """Finite samples whose sum overflows cannot be normalized."""
        data = np.full((2, 2), np.finfo(np.float64).max)
        with np.errstate(over='ignore'):
            with pytest.raises(InvalidParameterError):
                check_reference(data)

    def test_check_negative_policy(self):
        assert check_negative_policy("clamp") == "clamp"
        with pytest.raises(InvalidParameterError):
            check_negative_policy("wrap")

    def test_clamp_counts_and_zeroes(self):
        samples = np.array([[1.0, -2.0], [-0.5, 3.0]])
        assert check_model_samples(samples, "clamp") == 2
        np.testing.assert_array_equal(samples, [[1.0, 0.0], [0.0, 3.0]])

    def test_clean_samples_untouched(self):
        samples = np.array([[1.0, 0.0]])
        assert check_model_samples(samples, "reject") == 0

    def test_reject(self):
        with pytest.raises(InvalidModelError, match="1 negative"):
            check_model_samples(np.array([[1.0, -2.0]]), "reject")

    def test_non_finite_rejected(self):
        with pytest.raises(InvalidModelError):
            check_model_samples(np.array([[1.0, np.nan]]), "clamp")

    def test_non_finite_skipped_when_disabled(self):
        samples = np.array([[1.0, np.nan]])
        assert check_model_samples(samples, "clamp", check_finite=False) == 0

    @pytest.mark.parametrize("flux", [0.0, np.nan, np.inf, -np.inf])
    def test_bad_flux(self, flux):
        with pytest.raises(InvalidModelError):
            check_model_flux(flux)

    def test_good_flux(self):
        assert check_model_flux(0.5) == 0.5
