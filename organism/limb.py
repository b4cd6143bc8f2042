"""Single-component health tracker.

A limb carries two independent flags::

    alive: True ──(die)──► False        (terminal)
    ready: False ──(ready)──► True      (no way back)

Both transitions are idempotent and never fail.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from organism.models import LimbStatus

logger = logging.getLogger(__name__)


class Limb:
    """Named alive/ready tracker for one sub-component.

    Parameters
    ----------
    name:
        Identifier of the component. Not validated: empty and duplicate
        names are accepted.
    """

    __slots__ = ("_name", "_alive", "_ready")

    def __init__(self, name: str) -> None:
        self._name = name
        self._alive = True
        self._ready = False

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    def is_alive(self) -> bool:
        return self._alive

    def is_ready(self) -> bool:
        return self._ready

    # ── Transition methods ───────────────────────────────────────────────

    def ready(self) -> None:
        """Mark the limb ready. Allowed after death; the flag is independent."""
        if not self._ready:
            self._ready = True
            logger.info("[%s] Limb ready", self._name)

    def die(self) -> None:
        """Mark the limb dead. Irreversible."""
        if self._alive:
            self._alive = False
            logger.warning("[%s] Limb died", self._name)

    # ── Serialisation ────────────────────────────────────────────────────

    def status(self) -> LimbStatus:
        """Return a validated snapshot model of this limb."""
        return LimbStatus(name=self._name, alive=self._alive, ready=self._ready)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot for probe responses and logs."""
        return self.status().model_dump()

    def __repr__(self) -> str:
        return f"Limb(name={self._name!r}, alive={self._alive}, ready={self._ready})"
