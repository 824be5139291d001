"""
Module de filtres passe-bas pour mesures scalaires et vectorielles.
"""

from typing import List, Sequence

# Valeur recommandée: plus grand = plus lisse, mais plus de retard
DEFAULT_FILTER_COEFFICIENT = 2.0


class ScalarLowPassFilter:
    """
    Filtre passe-bas du premier ordre (IIR) sur une seule valeur.

    Loi de filtrage, avec x0 la nouvelle mesure, x1 la précédente et
    y la dernière sortie filtrée:

        y' = (x0 + x1 - (1 - c) * y) / (1 + c)

    Examples:
        >>> lpf = ScalarLowPassFilter(2.0, 0.0)
        >>> round(lpf.filter(1.0), 4)
        0.3333
    """

    def __init__(self, coefficient: float = DEFAULT_FILTER_COEFFICIENT,
                 initial_value: float = 0.0):
        """
        Args:
            coefficient: Coefficient de lissage (>= 0 en pratique)
            initial_value: Valeur de départ (historique et sortie)
        """
        self._coefficient = float(coefficient)
        self._measurements = [0.0, 0.0]
        self._filtered = 0.0
        self.reset(initial_value)

    @property
    def coefficient(self) -> float:
        return self._coefficient

    @property
    def value(self) -> float:
        """Dernière sortie filtrée."""
        return self._filtered

    def filter(self, measurement: float) -> float:
        """
        Met à jour le filtre avec une nouvelle mesure.

        Args:
            measurement: Nouvelle mesure brute

        Returns:
            Mesure filtrée
        """
        self._measurements[1] = self._measurements[0]
        self._measurements[0] = float(measurement)

        c = self._coefficient
        self._filtered = (self._measurements[0] + self._measurements[1]
                          - (1.0 - c) * self._filtered) / (1.0 + c)
        return self._filtered

    def reset(self, value: float) -> None:
        """
        Force l'état du filtre à une valeur (supprime le transitoire).

        Args:
            value: Valeur imposée à l'historique et à la sortie
        """
        value = float(value)
        self._measurements = [value, value]
        self._filtered = value

    def __repr__(self):
        return (f"ScalarLowPassFilter(coefficient={self._coefficient}, "
                f"value={self._filtered})")


class VectorLowPassFilter:
    """
    Ensemble de filtres passe-bas indépendants, un par canal.

    Le nombre de canaux est fixé à la construction; toute mesure ou
    remise à zéro de taille différente lève IndexError.
    """

    def __init__(self, coefficients: Sequence[float], initial_values: Sequence[float]):
        """
        Args:
            coefficients: Un coefficient par canal
            initial_values: Valeur de départ de chaque canal

        Raises:
            ValueError: Si les deux séquences n'ont pas la même taille
        """
        coefficients = list(coefficients)
        initial_values = list(initial_values)
        if len(coefficients) != len(initial_values):
            raise ValueError(
                f"{len(coefficients)} coefficients pour {len(initial_values)} "
                f"valeurs initiales")

        self._filters = [ScalarLowPassFilter(c, v)
                         for c, v in zip(coefficients, initial_values)]

    def channel_count(self) -> int:
        return len(self._filters)

    def __len__(self):
        return len(self._filters)

    def filter(self, measurements: Sequence[float]) -> List[float]:
        """
        Filtre chaque canal séparément.

        Args:
            measurements: Une mesure par canal

        Returns:
            Mesures filtrées, dans le même ordre

        Raises:
            IndexError: Si la taille ne correspond pas au nombre de canaux
        """
        measurements = list(measurements)
        self._check_size(measurements, "Le vecteur de mesures")
        return [f.filter(m) for f, m in zip(self._filters, measurements)]

    def reset(self, values: Sequence[float]) -> None:
        """
        Remet tous les canaux aux valeurs données.

        Raises:
            IndexError: Si la taille ne correspond pas au nombre de canaux
        """
        values = list(values)
        self._check_size(values, "Le vecteur de remise à zéro")
        for f, v in zip(self._filters, values):
            f.reset(v)

    def reset_channel(self, index: int, value: float) -> None:
        """
        Remet un seul canal à une valeur.

        Raises:
            IndexError: Si l'index dépasse le nombre de canaux
        """
        if not 0 <= index < len(self._filters):
            raise IndexError(
                f"Index {index} hors limites ({len(self._filters)} canaux)")
        self._filters[index].reset(value)

    def _check_size(self, values: list, label: str) -> None:
        if len(values) != len(self._filters):
            raise IndexError(
                f"{label} doit avoir {len(self._filters)} éléments "
                f"(reçu {len(values)})")
