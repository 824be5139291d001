"""
Utilitaires d'orientation: passage entre messages Quaternion et
scipy.spatial.transform.Rotation.

Rotation utilise la même convention scalaire en dernier (x, y, z, w) que le
vecteur canonique d'un Quaternion.
"""

from typing import Tuple

import numpy as np
from scipy.spatial.transform import Rotation

from nrg_tools import msgs
from nrg_tools.conversions import from_vec, to_vec


def quaternion_to_rotation(q) -> Rotation:
    """
    Convertit un quaternion (message ou tout type de taille 4) en Rotation.

    Raises:
        ValueError: Si le quaternion est nul ou n'a pas 4 composantes
    """
    values = to_vec(q)
    if len(values) != 4:
        raise ValueError(f"Quaternion attendu (4 composantes), reçu {len(values)}")
    return Rotation.from_quat(values)


def rotation_to_quaternion(rotation: Rotation) -> msgs.Quaternion:
    """Convertit une Rotation scipy en message Quaternion."""
    q = msgs.Quaternion()
    from_vec(rotation.as_quat(), q)
    return q


def euler_to_quaternion(roll: float, pitch: float, yaw: float) -> msgs.Quaternion:
    """
    Convertit angles d'Euler en quaternion.

    Args:
        roll: Roulis (rad)
        pitch: Tangage (rad)
        yaw: Lacet (rad)

    Returns:
        Quaternion

    Examples:
        >>> q = euler_to_quaternion(0.0, 0.0, np.pi/2)
        >>> assert abs(q.z - 0.707) < 0.01
    """
    return rotation_to_quaternion(Rotation.from_euler("xyz", [roll, pitch, yaw]))


def quaternion_to_euler(q) -> Tuple[float, float, float]:
    """
    Convertit quaternion en angles d'Euler.

    Args:
        q: Quaternion (message ou vecteur x, y, z, w)

    Returns:
        (roll, pitch, yaw) en radians

    Examples:
        >>> q = msgs.Quaternion(x=0.0, y=0.0, z=0.707, w=0.707)
        >>> r, p, y = quaternion_to_euler(q)
        >>> assert abs(y - np.pi/2) < 0.01
    """
    roll, pitch, yaw = quaternion_to_rotation(q).as_euler("xyz")
    return float(roll), float(pitch), float(yaw)


def normalize_quaternion(q: msgs.Quaternion) -> msgs.Quaternion:
    """
    Retourne le quaternion unitaire de même direction.

    Un quaternion lissé composante par composante n'est plus unitaire;
    à appliquer en sortie d'un TypedLowPassFilter.

    Raises:
        ValueError: Si la norme est nulle
    """
    values = np.array(to_vec(q))
    norm = np.linalg.norm(values)
    if norm == 0.0:
        raise ValueError("Quaternion de norme nulle")
    output = msgs.Quaternion()
    from_vec(values / norm, output)
    return output


def pose_from_xyyaw(x: float, y: float, yaw: float, z: float = 0.0) -> msgs.Pose:
    """
    Crée une Pose à partir de coordonnées 2D + yaw.

    Args:
        x, y: Position 2D (m)
        yaw: Orientation (rad)
        z: Altitude (m, défaut 0)

    Returns:
        Pose

    Examples:
        >>> pose = pose_from_xyyaw(5.0, 10.0, np.pi/2)
        >>> assert pose.position.x == 5.0
    """
    pose = msgs.Pose()
    pose.position = msgs.Point(x=x, y=y, z=z)
    pose.orientation = euler_to_quaternion(0.0, 0.0, yaw)
    return pose
