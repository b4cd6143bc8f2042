"""Pydantic snapshot models for organism state.

These are what a probe-serving layer serialises into its response body.
They are built fresh on every call and never feed back into the live
limbs.
"""

from typing import List

from pydantic import BaseModel, Field


class LimbStatus(BaseModel):
    """Point-in-time state of a single limb."""

    name: str
    alive: bool = True
    ready: bool = False

    model_config = {
        "frozen": True,
        "json_schema_extra": {"examples": [{"name": "http-server", "alive": True, "ready": False}]},
    }


class OrganismStatus(BaseModel):
    """Aggregate state of an organism and all of its limbs."""

    alive: bool = Field(description="True while every limb is alive.")
    ready: bool = Field(description="True when every limb is ready.")
    dead_limbs: List[str] = Field(
        default_factory=list,
        description="Names of dead limbs, in growth order.",
    )
    not_ready_limbs: List[str] = Field(
        default_factory=list,
        description="Names of limbs not yet ready, in growth order.",
    )
    limbs: List[LimbStatus] = Field(default_factory=list)

    model_config = {"frozen": True}
