"""
Organism - aggregate readiness and liveness for a process made of parts.

A process is modelled as an :class:`Organism` that owns a set of named
:class:`Limb` trackers (HTTP server, gRPC server, background workers...).
The organism is ready only when every limb is ready and alive only while
every limb is alive, which is what orchestration readiness/liveness probes
need to answer.
"""

from organism.constants import CORE_LIMB_NAME, PACKAGE_NAME, PACKAGE_VERSION
from organism.limb import Limb
from organism.models import LimbStatus, OrganismStatus
from organism.organism import Organism

__version__ = PACKAGE_VERSION
__app_name__ = PACKAGE_NAME

__all__ = [
    "CORE_LIMB_NAME",
    "Limb",
    "LimbStatus",
    "Organism",
    "OrganismStatus",
    "PACKAGE_NAME",
    "PACKAGE_VERSION",
    "__version__",
    "__app_name__",
]
