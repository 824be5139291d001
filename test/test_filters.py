"""
Tests unitaires pour le module filters.
"""

import pytest

from nrg_tools.filters import (
    DEFAULT_FILTER_COEFFICIENT,
    ScalarLowPassFilter,
    VectorLowPassFilter
)


class TestScalarLowPassFilter:
    """Tests du filtre passe-bas scalaire."""

    def test_default_coefficient(self):
        """Coefficient recommandé par défaut."""
        lpf = ScalarLowPassFilter()
        assert lpf.coefficient == DEFAULT_FILTER_COEFFICIENT == 2.0
        assert lpf.value == 0.0

    def test_steady_state_after_seeding(self):
        """Entrée constante égale à la valeur initiale: sortie constante."""
        lpf = ScalarLowPassFilter(2.0, 5.0)
        assert lpf.filter(5.0) == pytest.approx(5.0)
        assert lpf.filter(5.0) == pytest.approx(5.0)

    def test_step_response(self):
        """Échelon unité, c=2: 1/3 puis 7/9."""
        lpf = ScalarLowPassFilter(2.0, 0.0)
        assert lpf.filter(1.0) == pytest.approx(1.0 / 3.0)
        assert lpf.filter(1.0) == pytest.approx(7.0 / 9.0)

    def test_step_response_converges(self):
        """La sortie tend vers l'échelon."""
        lpf = ScalarLowPassFilter(2.0, 0.0)
        for _ in range(200):
            y = lpf.filter(1.0)
        assert y == pytest.approx(1.0)

    def test_larger_coefficient_smooths_more(self):
        """Coefficient plus grand: réponse plus lente."""
        soft = ScalarLowPassFilter(10.0, 0.0)
        hard = ScalarLowPassFilter(1.0, 0.0)
        assert soft.filter(1.0) < hard.filter(1.0)

    def test_zero_coefficient_averages_last_two(self):
        """c=0: y' = x0 + x1 - y."""
        lpf = ScalarLowPassFilter(0.0, 0.0)
        assert lpf.filter(2.0) == pytest.approx(2.0)
        assert lpf.filter(2.0) == pytest.approx(2.0)

    def test_reset_removes_history(self):
        """reset(v) puis filter(v) retourne v."""
        lpf = ScalarLowPassFilter(3.0, 0.0)
        for x in (10.0, -4.0, 7.5):
            lpf.filter(x)
        lpf.reset(2.5)
        assert lpf.value == 2.5
        assert lpf.filter(2.5) == pytest.approx(2.5)

    def test_reset_keeps_coefficient(self):
        """Le coefficient n'est pas modifié par reset."""
        lpf = ScalarLowPassFilter(4.0, 1.0)
        lpf.reset(0.0)
        assert lpf.coefficient == 4.0


class TestVectorLowPassFilter:
    """Tests du filtre passe-bas multi-canaux."""

    def test_channel_count(self):
        """Nombre de canaux = taille des valeurs initiales."""
        lpf = VectorLowPassFilter([2.0] * 4, [0.0] * 4)
        assert lpf.channel_count() == 4
        assert len(lpf) == 4

    def test_mismatched_construction(self):
        """3 coefficients, 5 valeurs initiales: ValueError."""
        with pytest.raises(ValueError):
            VectorLowPassFilter([2.0] * 3, [0.0] * 5)

    def test_filter_wrong_size(self):
        """Mesure de 4 éléments sur 3 canaux: IndexError."""
        lpf = VectorLowPassFilter([2.0] * 3, [0.0] * 3)
        with pytest.raises(IndexError):
            lpf.filter([1.0] * 4)

    def test_channels_are_independent(self):
        """Chaque canal suit sa propre loi."""
        lpf = VectorLowPassFilter([2.0, 0.0, 2.0], [0.0, 0.0, 3.0])
        out = lpf.filter([1.0, 1.0, 3.0])
        assert out == pytest.approx([1.0 / 3.0, 1.0, 3.0])

    def test_matches_scalar_filters(self):
        """Équivalent à des filtres scalaires séparés."""
        coeffs, init = [2.0, 5.0], [1.0, -1.0]
        lpf = VectorLowPassFilter(coeffs, init)
        scalars = [ScalarLowPassFilter(c, v) for c, v in zip(coeffs, init)]
        for sample in ([0.5, 2.0], [1.5, -3.0], [0.0, 0.0]):
            expected = [f.filter(x) for f, x in zip(scalars, sample)]
            assert lpf.filter(sample) == pytest.approx(expected)

    def test_reset_all(self):
        """Remise à zéro de tous les canaux."""
        lpf = VectorLowPassFilter([2.0, 2.0], [0.0, 0.0])
        lpf.filter([10.0, 20.0])
        lpf.reset([1.0, 2.0])
        assert lpf.filter([1.0, 2.0]) == pytest.approx([1.0, 2.0])

    def test_reset_wrong_size(self):
        """Remise à zéro de taille incorrecte: IndexError."""
        lpf = VectorLowPassFilter([2.0, 2.0], [0.0, 0.0])
        with pytest.raises(IndexError):
            lpf.reset([1.0])

    def test_reset_single_channel(self):
        """Remise à zéro d'un seul canal."""
        lpf = VectorLowPassFilter([2.0, 2.0], [0.0, 0.0])
        lpf.reset_channel(1, 4.0)
        out = lpf.filter([1.0, 4.0])
        assert out == pytest.approx([1.0 / 3.0, 4.0])

    def test_reset_channel_out_of_range(self):
        """Index hors limites: IndexError."""
        lpf = VectorLowPassFilter([2.0, 2.0], [0.0, 0.0])
        with pytest.raises(IndexError):
            lpf.reset_channel(2, 0.0)
        with pytest.raises(IndexError):
            lpf.reset_channel(-1, 0.0)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
