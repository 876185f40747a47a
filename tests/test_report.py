"""
Tests for the multi-kind divergence table.
"""

import numpy as np
import polars as pl
import pytest

from divmap import Gaussian, IntensityMap, ShapeMismatchError, divergence_table


@pytest.fixture
def image():
    return IntensityMap(Gaussian(sigma=3.0).intensitymap(IntensityMap(np.zeros((32, 32))).grid))


class TestDivergenceTable:

    def test_all_kinds_by_default(self, image):
        df = divergence_table(image, Gaussian(sigma=3.0, x0=1.0))
        assert df.columns == ['kind', 'divergence', 'model_flux', 'error']
        assert df['kind'].to_list() == [
            'bhattacharyya', 'kullback_leibler', 'least_squares', 'renyi',
        ]
        assert df['error'].null_count() == 4
        assert (df['divergence'] > 0).all()

    def test_schema(self, image):
        df = divergence_table(image, Gaussian(sigma=3.0))
        assert df.schema['divergence'] == pl.Float64
        assert df.schema['error'] == pl.Utf8

    def test_model_flux_column(self, image):
        df = divergence_table(image, lambda x, y: np.full_like(x, 0.5), kinds=['least_squares'])
        assert df['model_flux'][0] == pytest.approx(0.5 * 32 * 32)

    def test_kind_parameters(self, image):
        model = Gaussian(sigma=2.0)
        df = divergence_table(
            image, model,
            kinds={'renyi': {'alpha': 0.5}, 'bhattacharyya': {}},
        )
        values = dict(zip(df['kind'], df['divergence']))
        assert values['renyi'] == pytest.approx(2 * values['bhattacharyya'], rel=1e-10)

    def test_model_errors_recorded(self, image):
        df = divergence_table(image, lambda x, y: 0.0, kinds=['renyi', 'least_squares'])
        assert df['error'].null_count() == 0
        assert df['divergence'].is_nan().all()
        assert "zero" in df['error'][0]

    def test_shape_mismatch_raises(self, image):
        with pytest.raises(ShapeMismatchError):
            divergence_table(image, IntensityMap(np.ones((4, 4))))
