"""
Chargeur de paramètres de filtrage et de saturation depuis les fichiers YAML.

Les fichiers suivent le format des paramètres ROS2, ce qui permet de partager
le même fichier entre un nœud et un script hors ROS:

    wrench_filter:
      ros__parameters:
        filter_coefficients: [2.0, 2.0, 2.0, 2.0, 2.0, 2.0]
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import yaml

from nrg_tools.filters import DEFAULT_FILTER_COEFFICIENT, VectorLowPassFilter

logger = logging.getLogger(__name__)

DEFAULT_PARAMS_FILE = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'config', 'lowpass_params.yaml')


def load_yaml_params(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Charge un fichier de paramètres YAML.

    Args:
        path: Chemin du fichier (fichier fourni avec le paquet si None)

    Returns:
        dict: Contenu du fichier, vide si introuvable ou illisible
    """
    path = path or DEFAULT_PARAMS_FILE
    if not os.path.exists(path):
        logger.info(f"Fichier YAML introuvable: {path}")
        return {}
    try:
        with open(path, 'r', encoding='utf-8') as handle:
            return yaml.safe_load(handle) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning(f"Lecture YAML échouée {path}: {exc}")
        return {}


def get_node_params(config: Dict[str, Any], node_name: str) -> Dict[str, Any]:
    """Extrait la section `ros__parameters` d'un nœud (vide si absente)."""
    if not isinstance(config, dict):
        logger.warning(f"Configuration inattendue ({type(config).__name__}), dict attendu")
        return {}
    node = config.get(node_name)
    if not isinstance(node, dict):
        return {}
    params = node.get('ros__parameters')
    return params if isinstance(params, dict) else {}


def get_filter_coefficients(params: Dict[str, Any],
                            channels: Optional[int] = None) -> List[float]:
    """
    Lit les coefficients de filtrage.

    Un coefficient scalaire (ou absent: DEFAULT_FILTER_COEFFICIENT) est
    répété sur `channels` canaux, pris dans l'argument ou le paramètre
    `channels`.

    Raises:
        ValueError: Coefficient scalaire sans nombre de canaux
    """
    coefficients = params.get('filter_coefficients', DEFAULT_FILTER_COEFFICIENT)
    if isinstance(coefficients, (int, float)):
        count = channels if channels is not None else params.get('channels')
        if count is None:
            raise ValueError("Coefficient scalaire: nombre de canaux requis")
        return [float(coefficients)] * int(count)
    return [float(c) for c in coefficients]


def build_vector_filter(params: Dict[str, Any],
                        channels: Optional[int] = None) -> VectorLowPassFilter:
    """
    Construit un VectorLowPassFilter depuis les paramètres d'un nœud.

    Args:
        params: Section `ros__parameters` (voir get_node_params)
        channels: Nombre de canaux si le coefficient est scalaire

    Returns:
        Filtre initialisé (`initial_values`, ou zéros par défaut)

    Examples:
        >>> params = get_node_params(load_yaml_params(), 'wrench_filter')
        >>> lpf = build_vector_filter(params)
        >>> assert lpf.channel_count() == 6
    """
    coefficients = get_filter_coefficients(params, channels)
    initial_values = params.get('initial_values')
    if initial_values is None:
        initial_values = [0.0] * len(coefficients)
    logger.debug(f"Filtre passe-bas: {len(coefficients)} canaux")
    return VectorLowPassFilter(coefficients, [float(v) for v in initial_values])


def get_bounds(params: Dict[str, Any]) -> Tuple[Optional[List[float]], Optional[List[float]]]:
    """
    Lit les limites basses et hautes (pour bound_all).

    Returns:
        (lower, upper), None pour une limite absente
    """
    return _float_list(params.get('lower_limits')), _float_list(params.get('upper_limits'))


def get_limits(params: Dict[str, Any]) -> Optional[List[float]]:
    """Lit les limites symétriques (pour bound_uniform), None si absentes."""
    return _float_list(params.get('limits'))


def _float_list(values) -> Optional[List[float]]:
    if values is None:
        return None
    return [float(v) for v in values]
