"""
Module de saturation de commandes et mesures (limites articulaires, efforts...).

Les fonctions opèrent sur tout type convertible (voir conversions): les
limites peuvent être d'un type différent de l'entrée, pourvu que la taille
du vecteur canonique soit la même.
"""

import numpy as np

from nrg_tools.conversions import can_decode, from_vec, output_like, to_vec


def bound(n: float, lower: float, upper: float) -> float:
    """
    Borne une valeur entre deux limites.

    Args:
        n: Valeur à borner
        lower: Limite basse
        upper: Limite haute

    Returns:
        max(lower, min(n, upper))

    Examples:
        >>> bound(1000, -100, 100)
        100
        >>> bound(42, -100, 100)
        42
    """
    return max(lower, min(n, upper))


def bound_all(value, lower, upper):
    """
    Borne élément par élément un message, une liste ou un tableau.

    Args:
        value: Objet à borner (type convertible)
        lower: Limites basses, élément par élément
        upper: Limites hautes, élément par élément

    Returns:
        Objet borné, du même type que `value` (en-tête conservé)

    Raises:
        ValueError: Si les tailles de l'entrée et des limites diffèrent, ou si
            `value` est d'un type source uniquement (tuple)

    Examples:
        >>> bound_all([9, 8, 7, 6, 5, 4, 3, 2, 1], [-5] * 9, [5] * 9)
        [5.0, 5.0, 5.0, 5.0, 5.0, 4.0, 3.0, 2.0, 1.0]
    """
    values = np.array(to_vec(value))
    lower_values = np.array(to_vec(lower))
    upper_values = np.array(to_vec(upper))
    if not (values.size == lower_values.size == upper_values.size):
        raise ValueError(
            f"Tailles incompatibles: entrée {values.size}, "
            f"limites {lower_values.size}/{upper_values.size}")

    # Même ordre que bound(): la limite basse l'emporte si lower > upper
    bounded = np.maximum(lower_values, np.minimum(values, upper_values))
    return _rebuild(value, bounded)


def bound_uniform(value, limit):
    """
    Ramène un objet dans ses limites par une mise à l'échelle uniforme.

    Toutes les composantes sont multipliées par le même facteur, ce qui
    conserve la direction (utile pour une vitesse ou un effort). Les
    limites sont symétriques autour de 0 (seule leur valeur absolue compte).

    Args:
        value: Objet à borner (type convertible)
        limit: Limites (+/-), élément par élément

    Returns:
        Objet mis à l'échelle, du même type que `value`

    Raises:
        ValueError: Si les tailles de l'entrée et des limites diffèrent, ou si
            `value` est d'un type source uniquement (tuple)

    Examples:
        >>> bound_uniform([-10, 10, 0, -5, -5], [-20, 5, -10, 1, 100])
        [-2.0, 2.0, 0.0, -1.0, -1.0]
    """
    values = np.array(to_vec(value))
    limits = np.abs(np.array(to_vec(limit)))
    if values.size != limits.size:
        raise ValueError(
            f"Tailles incompatibles: entrée {values.size}, limites {limits.size}")

    magnitudes = np.abs(values)
    exceeded = magnitudes > limits
    scale = 1.0
    if np.any(exceeded):
        scale = min(1.0, float(np.min(limits[exceeded] / magnitudes[exceeded])))
    return _rebuild(value, values * scale)


def _rebuild(template, values: np.ndarray):
    """Copie de `template` remplie avec `values` (même taille garantie)."""
    if not can_decode(type(template)):
        raise ValueError(f"Type non reconstructible: {type(template).__name__}")
    output = output_like(template)
    if not from_vec(values, output):
        raise ValueError(f"Conversion impossible vers {type(template).__name__}")
    return output
