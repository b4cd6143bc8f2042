"""Tests for Organism aggregation over limbs."""

from __future__ import annotations

import pytest

from organism import CORE_LIMB_NAME, Organism, OrganismStatus
from organism.config.schema import OrganismConfig


def _names(limbs) -> list:
    return [limb.name for limb in limbs]


# ── Construction ─────────────────────────────────────────────────────────


class TestOrganismCreation:
    def test_fresh_organism_alive_not_ready(self) -> None:
        o = Organism()
        assert o.is_alive() is True
        assert o.is_ready() is False

    def test_core_grown_first(self) -> None:
        o = Organism()
        assert len(o) == 1
        assert o.core.name == CORE_LIMB_NAME == "core"
        assert o.limbs[0] is o.core

    def test_ready_then_die(self) -> None:
        o = Organism()
        o.ready()
        assert o.is_ready() is True

        o.die()
        assert o.is_alive() is False
        assert o.is_ready() is True


# ── Growth ───────────────────────────────────────────────────────────────


class TestGrowLimb:
    def test_grow_one_limb(self) -> None:
        o = Organism()
        limb = o.grow_limb("limb")

        assert limb.is_alive() is True
        assert limb.is_ready() is False
        assert limb.name == "limb"

        limb.ready()
        assert limb.is_ready() is True
        assert o.is_alive() is True
        assert o.is_ready() is False

        o.ready()
        assert o.is_alive() is True
        assert o.is_ready() is True

        limb.die()
        assert limb.is_alive() is False
        assert limb.is_ready() is True
        assert o.is_alive() is False
        assert o.is_ready() is True

        o.die()
        assert o.is_alive() is False
        assert o.is_ready() is True

    def test_returned_limb_is_owned(self) -> None:
        o = Organism()
        limb = o.grow_limb("http-server")
        assert o.limbs[-1] is limb

    def test_growth_order_preserved(self) -> None:
        o = Organism()
        for name in ("a", "b", "c"):
            o.grow_limb(name)
        assert _names(o.limbs) == ["core", "a", "b", "c"]
        assert _names(o) == ["core", "a", "b", "c"]

    def test_duplicate_and_empty_names_accepted(self) -> None:
        o = Organism()
        first = o.grow_limb("dup")
        second = o.grow_limb("dup")
        o.grow_limb("")
        assert first is not second
        assert _names(o.limbs) == ["core", "dup", "dup", ""]

    def test_limbs_is_a_snapshot(self) -> None:
        o = Organism()
        snapshot = o.limbs
        o.grow_limb("late")
        assert len(snapshot) == 1
        assert len(o.limbs) == 2

    def test_core_delegates_do_not_touch_other_limbs(self) -> None:
        o = Organism()
        other = o.grow_limb("other")
        o.ready()
        o.die()
        assert other.is_ready() is False
        assert other.is_alive() is True


# ── Dead limbs ───────────────────────────────────────────────────────────


class TestDeadLimbs:
    def test_one_dead_limb(self) -> None:
        o = Organism()
        o.grow_limb("alive_limb")
        o.grow_limb("custom_limb").die()

        assert o.is_alive() is False
        assert _names(o.dead_limbs()) == ["custom_limb"]

    def test_organism_died(self) -> None:
        o = Organism()
        o.grow_limb("alive_limb1")
        o.grow_limb("alive_limb2")
        o.die()

        assert o.is_alive() is False
        assert _names(o.dead_limbs()) == ["core"]

    def test_organism_alive(self) -> None:
        o = Organism()
        o.grow_limb("alive_limb1")
        o.grow_limb("alive_limb2")

        assert o.is_alive() is True
        assert o.dead_limbs() == []

    def test_death_is_permanent(self) -> None:
        o = Organism()
        limb = o.grow_limb("worker")
        limb.die()
        limb.ready()
        o.ready()
        assert o.is_alive() is False

    def test_recomputed_each_call(self) -> None:
        o = Organism()
        a = o.grow_limb("a")
        b = o.grow_limb("b")
        assert o.dead_limbs() == []
        b.die()
        assert o.dead_limbs() == [b]
        a.die()
        assert o.dead_limbs() == [a, b]


# ── Not-ready limbs ──────────────────────────────────────────────────────


class TestNotReadyLimbs:
    @pytest.mark.parametrize(
        "grow, expected, is_ready",
        [
            pytest.param(lambda o: None, ["core"], False, id="empty organism"),
            pytest.param(
                lambda o: o.grow_limb("first_limb"),
                ["core", "first_limb"],
                False,
                id="one limb",
            ),
            pytest.param(
                lambda o: o.grow_limb("first_limb").ready(),
                ["core"],
                False,
                id="one ready limb",
            ),
            pytest.param(
                lambda o: (o.grow_limb("first_limb"), o.ready()),
                ["first_limb"],
                False,
                id="ready core with one not ready limb",
            ),
            pytest.param(
                lambda o: (
                    o.grow_limb("first_limb").ready(),
                    o.grow_limb("second_limb").ready(),
                    o.grow_limb("third_limb").ready(),
                    o.ready(),
                ),
                [],
                True,
                id="ready organism with ready limbs",
            ),
        ],
    )
    def test_not_ready_limbs(self, grow, expected, is_ready) -> None:
        o = Organism()
        grow(o)
        assert o.is_ready() is is_ready
        assert _names(o.not_ready_limbs()) == expected

    def test_dead_limb_keeps_readiness(self) -> None:
        o = Organism()
        limb = o.grow_limb("worker")
        limb.ready()
        o.ready()
        limb.die()
        assert o.is_ready() is True
        assert o.not_ready_limbs() == []


# ── Status snapshot ──────────────────────────────────────────────────────


class TestOrganismStatus:
    def test_status_reports_failing_limbs(self) -> None:
        o = Organism()
        o.grow_limb("http-server").ready()
        o.grow_limb("grpc-server").die()

        status = o.status()
        assert isinstance(status, OrganismStatus)
        assert status.alive is False
        assert status.ready is False
        assert status.dead_limbs == ["grpc-server"]
        assert status.not_ready_limbs == ["core", "grpc-server"]
        assert [s.name for s in status.limbs] == ["core", "http-server", "grpc-server"]

    def test_to_dict(self) -> None:
        o = Organism()
        o.ready()
        d = o.to_dict()
        assert d["alive"] is True
        assert d["ready"] is True
        assert d["dead_limbs"] == []
        assert d["not_ready_limbs"] == []
        assert d["limbs"] == [{"name": "core", "alive": True, "ready": True}]

    def test_repr(self) -> None:
        assert "limbs=1" in repr(Organism())


# ── From config ──────────────────────────────────────────────────────────


class TestFromConfig:
    def test_limbs_grown_after_core(self) -> None:
        cfg = OrganismConfig(limbs=["http-server", "grpc-server"])
        o = Organism.from_config(cfg)
        assert _names(o.limbs) == ["core", "http-server", "grpc-server"]
        assert o.limbs[0] is o.core
        assert o.is_ready() is False
        assert o.is_alive() is True

    def test_empty_config(self) -> None:
        o = Organism.from_config(OrganismConfig())
        assert len(o) == 1
