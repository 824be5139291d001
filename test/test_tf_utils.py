"""
Tests unitaires pour le module tf_utils.
"""

import pytest
import numpy as np
from scipy.spatial.transform import Rotation

from nrg_tools import msgs
from nrg_tools.conversions import to_vec
from nrg_tools.message_filter import TypedLowPassFilter
from nrg_tools.tf_utils import (
    euler_to_quaternion,
    normalize_quaternion,
    pose_from_xyyaw,
    quaternion_to_euler,
    quaternion_to_rotation,
    rotation_to_quaternion
)


class TestEulerQuaternion:
    """Tests de conversion Euler/quaternion."""

    def test_yaw_90deg(self):
        """Lacet de 90°."""
        q = euler_to_quaternion(0.0, 0.0, np.pi / 2)
        assert abs(q.z - np.sqrt(0.5)) < 1e-6
        assert abs(q.w - np.sqrt(0.5)) < 1e-6

    def test_identity(self):
        """Angles nuls: quaternion identité."""
        q = euler_to_quaternion(0.0, 0.0, 0.0)
        assert to_vec(q) == pytest.approx([0.0, 0.0, 0.0, 1.0])

    def test_roundtrip(self):
        """Aller-retour Euler -> quaternion -> Euler."""
        angles = (0.1, -0.2, 0.3)
        assert quaternion_to_euler(euler_to_quaternion(*angles)) == pytest.approx(angles)

    def test_quaternion_to_euler_yaw(self):
        """Quaternion non normalisé accepté."""
        q = msgs.Quaternion(x=0.0, y=0.0, z=0.707, w=0.707)
        roll, pitch, yaw = quaternion_to_euler(q)
        assert abs(yaw - np.pi / 2) < 0.01
        assert abs(roll) < 1e-6


class TestRotationInterop:
    """Tests du passage vers scipy Rotation."""

    def test_rotation_to_quaternion_order(self):
        """Même ordre x, y, z, w que scipy."""
        rot = Rotation.from_quat([0.0, 0.0, np.sqrt(0.5), np.sqrt(0.5)])
        q = rotation_to_quaternion(rot)
        assert to_vec(q) == pytest.approx(rot.as_quat().tolist())

    def test_quaternion_to_rotation_from_list(self):
        """Toute séquence de 4 éléments est acceptée."""
        rot = quaternion_to_rotation([0.0, 0.0, 0.0, 1.0])
        assert rot.magnitude() == pytest.approx(0.0)

    def test_quaternion_to_rotation_wrong_size(self):
        """Taille incorrecte: ValueError."""
        with pytest.raises(ValueError):
            quaternion_to_rotation(msgs.Vector3())


class TestNormalizeQuaternion:
    """Tests de normalisation."""

    def test_unit_norm(self):
        """La sortie est unitaire et de même direction."""
        q = normalize_quaternion(msgs.Quaternion(0.0, 0.0, 2.0, 2.0))
        assert np.linalg.norm(to_vec(q)) == pytest.approx(1.0)
        assert q.z == pytest.approx(q.w)

    def test_zero_norm(self):
        """Quaternion nul: ValueError."""
        with pytest.raises(ValueError):
            normalize_quaternion(msgs.Quaternion(0.0, 0.0, 0.0, 0.0))

    def test_after_filtering(self):
        """Un quaternion lissé redevient unitaire après normalisation."""
        lpf = TypedLowPassFilter(msgs.Quaternion(2.0, 2.0, 2.0, 2.0),
                                 seed=msgs.Quaternion())
        filtered = lpf.filter(euler_to_quaternion(0.0, 0.0, np.pi / 2))
        assert np.linalg.norm(to_vec(filtered)) != pytest.approx(1.0)
        q = normalize_quaternion(filtered)
        assert np.linalg.norm(to_vec(q)) == pytest.approx(1.0)


class TestPoseFromXYYaw:
    """Tests de création de Pose."""

    def test_position(self):
        pose = pose_from_xyyaw(5.0, 10.0, np.pi / 2)
        assert pose.position.x == 5.0
        assert pose.position.y == 10.0
        assert pose.position.z == 0.0

    def test_orientation(self):
        pose = pose_from_xyyaw(0.0, 0.0, 0.5, z=-2.0)
        assert quaternion_to_euler(pose.orientation)[2] == pytest.approx(0.5)
        assert pose.position.z == -2.0


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
