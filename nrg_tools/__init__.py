"""
Bibliothèque de traitement numérique générique pour la télémétrie robot.

Modules:
- msgs: Enregistrements de mesures (disposition geometry_msgs)
- conversions: Passage messages <-> vecteur canonique
- filters: Filtres passe-bas scalaire et vectoriel
- message_filter: Filtre passe-bas sur messages
- bounds: Saturation élément par élément ou uniforme
- tf_utils: Quaternions, angles d'Euler, scipy Rotation
- config_loader: Paramètres YAML (format ROS2)
"""

from nrg_tools.bounds import bound, bound_all, bound_uniform
from nrg_tools.conversions import arity, convert, from_vec, register_conversion, to_vec
from nrg_tools.filters import ScalarLowPassFilter, VectorLowPassFilter
from nrg_tools.message_filter import TypedLowPassFilter

__version__ = '0.1.0'
