"""Aggregate health of a process built from limbs.

Every part of a service whose failure takes the service down is a limb,
e.g. the client-facing HTTP server or a gRPC server. The organism is not
ready until all limbs are ready, and it is dead as soon as any limb dies:
the readiness probe keeps traffic away until startup finishes and the
liveness probe lets the scheduler replace the process once a part has
stopped.

Usage::

    from organism import Organism

    body = Organism()
    http = body.grow_limb("http-server")
    grpc = body.grow_limb("grpc-server")

    http.ready()
    grpc.ready()
    body.ready()          # the main loop itself is up
    assert body.is_ready()

    grpc.die()
    assert not body.is_alive()
    [limb.name for limb in body.dead_limbs()]   # ["grpc-server"]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Tuple

from organism.constants import CORE_LIMB_NAME
from organism.limb import Limb
from organism.models import OrganismStatus

if TYPE_CHECKING:
    from organism.config.schema import OrganismConfig

logger = logging.getLogger(__name__)


class Organism:
    """Ordered collection of limbs with AND-aggregated health.

    The constructor grows a limb named ``"core"`` that stands for the
    host process's own main loop. :meth:`ready` and :meth:`die` act on that
    limb only; other limbs are driven through the :class:`Limb` returned by
    :meth:`grow_limb`.
    """

    def __init__(self) -> None:
        self._limbs: List[Limb] = []
        self._core: Limb = self.grow_limb(CORE_LIMB_NAME)

    @classmethod
    def from_config(cls, config: "OrganismConfig") -> "Organism":
        """Create an organism and grow every limb listed in *config*."""
        body = cls()
        for name in config.limbs:
            body.grow_limb(name)
        logger.info("Organism grown from config with %d limb(s)", len(body))
        return body

    # ── Growth ───────────────────────────────────────────────────────────

    def grow_limb(self, name: str) -> Limb:
        """Append a new limb and return it for direct mutation.

        Duplicate and empty names are accepted as-is.
        """
        limb = Limb(name)
        self._limbs.append(limb)
        logger.debug("Grew limb '%s' (%d total)", name, len(self._limbs))
        return limb

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def core(self) -> Limb:
        return self._core

    @property
    def limbs(self) -> Tuple[Limb, ...]:
        """All limbs in growth order, core first."""
        return tuple(self._limbs)

    def __len__(self) -> int:
        return len(self._limbs)

    def __iter__(self) -> Iterator[Limb]:
        return iter(tuple(self._limbs))

    # ── Aggregate predicates ─────────────────────────────────────────────

    def is_ready(self) -> bool:
        return all(limb.is_ready() for limb in self._limbs)

    def is_alive(self) -> bool:
        return all(limb.is_alive() for limb in self._limbs)

    def dead_limbs(self) -> List[Limb]:
        """Dead limbs in growth order; empty when all are alive."""
        return [limb for limb in self._limbs if not limb.is_alive()]

    def not_ready_limbs(self) -> List[Limb]:
        """Limbs not yet ready, in growth order; empty when all are ready."""
        return [limb for limb in self._limbs if not limb.is_ready()]

    # ── Core delegates ───────────────────────────────────────────────────

    def ready(self) -> None:
        """Mark the core limb ready."""
        self._core.ready()

    def die(self) -> None:
        """Mark the core limb dead. The organism stays dead from here on."""
        self._core.die()

    # ── Serialisation ────────────────────────────────────────────────────

    def status(self) -> OrganismStatus:
        """Snapshot of the aggregate and per-limb state."""
        return OrganismStatus(
            alive=self.is_alive(),
            ready=self.is_ready(),
            dead_limbs=[limb.name for limb in self.dead_limbs()],
            not_ready_limbs=[limb.name for limb in self.not_ready_limbs()],
            limbs=[limb.status() for limb in self._limbs],
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.status().model_dump()

    def __repr__(self) -> str:
        return (
            f"Organism(limbs={len(self._limbs)}, alive={self.is_alive()}, "
            f"ready={self.is_ready()})"
        )
