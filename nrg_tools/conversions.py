"""
Module de conversions entre mesures structurées et vecteurs canoniques.

Le vecteur canonique est une liste ordonnée de flottants. Le module comporte
trois parties:
1. Conversions vers le vecteur canonique (to_vec)
2. Conversions depuis le vecteur canonique (from_vec)
3. Conversion générique entre deux types quelconques (convert)

Pour ajouter un type, il suffit d'appeler register_conversion() avec un
encodeur et un décodeur. Les types composés s'écrivent à partir des
conversions de leurs sous-enregistrements.

La table des conversions (registres singledispatch, _VARIABLE_ARITY et le
cache de arity) est le seul état global du paquet: elle est remplie à
l'import et par register_conversion(), jamais par les filtres ni les
fonctions de saturation.
"""

import copy
import logging
from functools import lru_cache, singledispatch
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from nrg_tools import msgs

logger = logging.getLogger(__name__)

Encoder = Callable[[object], List[float]]
Decoder = Callable[[object, List[float]], bool]

# Types dont la taille n'est pas fixée par le type lui-même
_VARIABLE_ARITY = {list, tuple, np.ndarray}


@singledispatch
def to_vec(value) -> List[float]:
    """
    Convertit une mesure structurée en vecteur canonique.

    Args:
        value: Instance d'un type enregistré (message, liste, np.ndarray...)

    Returns:
        Liste de flottants, dans l'ordre documenté du type

    Raises:
        TypeError: Si aucune conversion n'est enregistrée pour ce type

    Examples:
        >>> to_vec(msgs.Vector3(x=1.0, y=2.0, z=3.0))
        [1.0, 2.0, 3.0]
    """
    raise TypeError(f"Aucune conversion enregistrée pour {type(value).__name__}")


@singledispatch
def _decode(output, values: List[float]) -> bool:
    raise TypeError(f"Aucune conversion enregistrée pour {type(output).__name__}")


def from_vec(values: Sequence[float], output) -> bool:
    """
    Remplit `output` (en place) à partir d'un vecteur canonique.

    Args:
        values: Séquence de flottants
        output: Instance du type cible, modifiée en place

    Returns:
        True si la taille du vecteur correspond au type, False sinon.
        En cas d'échec, `output` n'est pas modifié.

    Examples:
        >>> twist = msgs.Twist()
        >>> from_vec([1, 2, 3, 4, 5, 6], twist)
        True
        >>> from_vec([1, 2, 3], twist)
        False
    """
    values = [float(v) for v in values]
    if _decode(output, values):
        return True
    logger.debug(f"Vecteur de taille {len(values)} incompatible "
                 f"avec {type(output).__name__}")
    return False


def convert(a, b) -> bool:
    """
    Convertit `a` vers `b` en passant par le vecteur canonique.

    Args:
        a: Objet source (tout type enregistré)
        b: Objet destination, modifié en place

    Returns:
        True si la conversion a réussi

    Examples:
        >>> wrench = msgs.Wrench()
        >>> convert(msgs.Twist(), wrench)
        True
    """
    return from_vec(to_vec(a), b)


def can_decode(record_type: type) -> bool:
    """True si from_vec() accepte des instances de `record_type` en sortie."""
    return _decode.dispatch(record_type) is not _decode.dispatch(object)


def output_like(value):
    """
    Copie de `value` destinée à recevoir un vecteur de flottants.

    Un np.ndarray est copié en float64: une copie de même dtype tronquerait
    les valeurs filtrées ou mises à l'échelle d'un tableau d'entiers.

    Examples:
        >>> output_like(np.array([3, 3])).dtype
        dtype('float64')
    """
    if isinstance(value, np.ndarray):
        return np.array(value, dtype=float)
    return copy.deepcopy(value)


def register_conversion(cls: type, encode: Encoder, decode: Decoder,
                        variable_arity: bool = False) -> None:
    """
    Ajoute un type à l'ensemble des types convertibles.

    Args:
        cls: Type à enregistrer (ex: geometry_msgs.msg.Twist d'une install ROS2)
        encode: Fonction value -> liste de flottants
        decode: Fonction (output, values) -> bool, remplit output en place
        variable_arity: True si la taille dépend de l'instance
    """
    to_vec.register(cls, encode)
    _decode.register(cls, decode)
    if variable_arity:
        _VARIABLE_ARITY.add(cls)
    arity.cache_clear()


@lru_cache(maxsize=None)
def arity(record_type: type) -> Optional[int]:
    """
    Taille du vecteur canonique d'un type.

    Returns:
        Nombre de flottants, ou None pour les types de taille variable

    Examples:
        >>> arity(msgs.Pose)
        7
        >>> arity(msgs.Polygon) is None
        True
    """
    if any(issubclass(record_type, t) for t in _VARIABLE_ARITY):
        return None
    return len(to_vec(record_type()))


# ~~~~~~~~~~~~~~~~~~~~~~~~~~ Types élémentaires ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def _encode_xyz(value) -> List[float]:
    return [float(value.x), float(value.y), float(value.z)]


def _decode_xyz(output, values: List[float]) -> bool:
    if len(values) != 3:
        return False
    output.x, output.y, output.z = values
    return True


def _encode_quaternion(value) -> List[float]:
    return [float(value.x), float(value.y), float(value.z), float(value.w)]


def _decode_quaternion(output, values: List[float]) -> bool:
    if len(values) != 4:
        return False
    output.x, output.y, output.z, output.w = values
    return True


def _encode_pose2d(value) -> List[float]:
    return [float(value.x), float(value.y), float(value.theta)]


def _decode_pose2d(output, values: List[float]) -> bool:
    if len(values) != 3:
        return False
    output.x, output.y, output.theta = values
    return True


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~ Types composés ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

def _composite(first: str, second: str) -> Tuple[Encoder, Decoder]:
    """
    Conversions d'un type formé de deux sous-enregistrements.

    Le vecteur est la concaténation des vecteurs de `first` puis `second`.
    """
    def encode(value) -> List[float]:
        return to_vec(getattr(value, first)) + to_vec(getattr(value, second))

    def decode(output, values: List[float]) -> bool:
        if len(values) != arity(type(output)):
            return False
        head = getattr(output, first)
        split = arity(type(head))
        return (_decode(head, values[:split])
                and _decode(getattr(output, second), values[split:]))

    return encode, decode


def _stamped(attr: str) -> Tuple[Encoder, Decoder]:
    """Conversions d'une variante horodatée: seul le champ `attr` est converti."""
    def encode(value) -> List[float]:
        return to_vec(getattr(value, attr))

    def decode(output, values: List[float]) -> bool:
        return _decode(getattr(output, attr), values)

    return encode, decode


def _encode_polygon(value) -> List[float]:
    # Point par point: le 4e élément est le x du second point
    output = []
    for point in value.points:
        output.extend(to_vec(point))
    return output


def _decode_polygon(output, values: List[float]) -> bool:
    if len(values) % 3 != 0:
        return False
    points = []
    for i in range(0, len(values), 3):
        point = msgs.Point32()
        _decode(point, values[i:i + 3])
        points.append(point)
    output.points = points
    return True


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~ Conteneurs génériques ~~~~~~~~~~~~~~~~~~~~~~~~~~

def _encode_sequence(value) -> List[float]:
    return [float(v) for v in value]


def _decode_list(output: list, values: List[float]) -> bool:
    # Cas trivial: toujours valide
    output[:] = values
    return True


def _encode_array(value: np.ndarray) -> List[float]:
    return np.asarray(value, dtype=float).ravel().tolist()


def _decode_array(output: np.ndarray, values: List[float]) -> bool:
    # La taille d'un tableau destination est fixée par le tableau lui-même
    if output.size != len(values):
        return False
    output.flat[:] = values
    return True


# ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~ Enregistrement ~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

register_conversion(list, _encode_sequence, _decode_list)
to_vec.register(tuple, _encode_sequence)
register_conversion(np.ndarray, _encode_array, _decode_array)

for _cls in (msgs.Vector3, msgs.Point, msgs.Point32):
    register_conversion(_cls, _encode_xyz, _decode_xyz)
register_conversion(msgs.Quaternion, _encode_quaternion, _decode_quaternion)
register_conversion(msgs.Pose2D, _encode_pose2d, _decode_pose2d)

register_conversion(msgs.Pose, *_composite('position', 'orientation'))
register_conversion(msgs.Transform, *_composite('translation', 'rotation'))
register_conversion(msgs.Twist, *_composite('linear', 'angular'))
register_conversion(msgs.Accel, *_composite('linear', 'angular'))
register_conversion(msgs.Wrench, *_composite('force', 'torque'))
register_conversion(msgs.Polygon, _encode_polygon, _decode_polygon,
                    variable_arity=True)

register_conversion(msgs.Vector3Stamped, *_stamped('vector'))
register_conversion(msgs.PointStamped, *_stamped('point'))
register_conversion(msgs.QuaternionStamped, *_stamped('quaternion'))
register_conversion(msgs.PoseStamped, *_stamped('pose'))
register_conversion(msgs.TransformStamped, *_stamped('transform'))
register_conversion(msgs.TwistStamped, *_stamped('twist'))
register_conversion(msgs.AccelStamped, *_stamped('accel'))
register_conversion(msgs.WrenchStamped, *_stamped('wrench'))
register_conversion(msgs.PolygonStamped, *_stamped('polygon'),
                    variable_arity=True)
