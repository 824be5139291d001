"""
Filtre passe-bas pour messages structurés.

Utile pour lisser directement les retours capteurs (IMU, capteur
d'effort, vitesses...) reçus dans un callback de souscription.
"""

from nrg_tools.conversions import can_decode, from_vec, output_like, to_vec
from nrg_tools.filters import VectorLowPassFilter


class TypedLowPassFilter:
    """
    Filtre passe-bas sur tout type convertible (messages, listes, tableaux).

    Chaque élément du vecteur canonique est filtré indépendamment.

    Examples:
        >>> from nrg_tools import msgs
        >>> coeffs = msgs.Wrench(force=msgs.Vector3(2.0, 2.0, 2.0),
        ...                      torque=msgs.Vector3(2.0, 2.0, 2.0))
        >>> lpf = TypedLowPassFilter(coeffs)
        >>> filtered = lpf.filter(msgs.Wrench())
    """

    def __init__(self, coefficients, seed=None):
        """
        Args:
            coefficients: Coefficients de lissage. Sans `seed`, doivent être du
                type filtré (valeurs initiales nulles). Avec `seed`, peuvent
                être de n'importe quel type de même taille.
            seed: Valeur initiale du filtre (optionnelle); fixe la taille

        Raises:
            ValueError: Si `seed` et `coefficients` n'ont pas la même taille
        """
        coefficient_values = to_vec(coefficients)
        if seed is None:
            initial_values = [0.0] * len(coefficient_values)
        else:
            initial_values = to_vec(seed)
        self._multifilter = VectorLowPassFilter(coefficient_values, initial_values)

    def channel_count(self) -> int:
        return self._multifilter.channel_count()

    def filter(self, measurement):
        """
        Met à jour le filtre et retourne la mesure filtrée.

        Args:
            measurement: Nouvelle mesure, du type filtré

        Returns:
            Copie de `measurement` (en-tête compris) avec les valeurs filtrées

        Raises:
            IndexError: Si la taille de la mesure ne correspond pas au filtre
            ValueError: Si la sortie ne peut pas être reconstruite (tuple...)
        """
        values = to_vec(measurement)
        output = output_like(measurement)
        # Sortie validée avant de toucher à l'historique du filtre
        if not (can_decode(type(output)) and from_vec(values, output)):
            raise ValueError(f"Type non reconstructible: {type(measurement).__name__}")
        from_vec(self._multifilter.filter(values), output)
        return output

    def reset(self, value) -> None:
        """
        Force le filtre à la valeur d'un message.

        Raises:
            IndexError: Si la taille ne correspond pas au filtre
        """
        self._multifilter.reset(to_vec(value))
