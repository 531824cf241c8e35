"""Tests for the Board facade: role toggles, views and restore."""

import pytest

from conceptify.board import Board
from conceptify.config import AppConfig, BoardConfig, VlanSeed
from conceptify.models.board import Snapshot
from conceptify.models.item import PackGroup, PlacementCandidate, Position, SimpleItem
from conceptify.models.vlan import Vlan
from tests.fakes import assert_consistent


def drop(board, type_tag, x, y):
    return board.engine.place(PlacementCandidate(type_tag=type_tag), x, y, True).item


class TestBoardSetup:

    def test_defaults(self, board):
        assert board.engine.grid_size == 50
        assert [v.id for v in board.vlans.all()] == [10]
        assert board.supports_advanced("windowsServer")
        assert board.supports_advanced("workstation")
        assert not board.supports_advanced("firewall")
        assert not board.supports_advanced("unknownThing")

    def test_grid_size_and_vlans_from_config(self):
        config = AppConfig(board=BoardConfig(
            grid_size=40,
            region_padding=4,
            default_vlans=[VlanSeed(id=99, name="Mgmt", color="#000000")],
        ))
        board = Board(config)

        item = drop(board, "router", 50, 50)
        board.engine.set_vlan_memberships(item.id, {99})

        assert item.position == Position(left=40, top=40)
        (region,) = board.regions()
        assert (region.left, region.width) == (36, 48)

    def test_pack_type_comes_from_catalog(self, board):
        item = drop(board, "vmPack", 0, 0)
        assert item.kind == "pack"
        assert item.group.template_type == "ubuntu"


class TestToggleRole:

    def test_toggle_on_and_off(self, board):
        item = drop(board, "windowsServer", 0, 0)

        assert board.toggle_role(item.id, "DNS")
        assert board.engine.get(item.id).roles == {"DNS"}
        assert board.toggle_role(item.id, "DHCP")
        assert board.toggle_role(item.id, "DNS")
        assert board.engine.get(item.id).roles == {"DHCP"}

    def test_role_outside_type_is_ignored(self, board):
        item = drop(board, "firewall", 0, 0)
        assert board.toggle_role(item.id, "ADDS") is False
        assert board.engine.get(item.id).roles == set()

    def test_unknown_item_is_ignored(self, board):
        assert board.toggle_role("firewall-9", "NAT") is False


class TestViewAndExport:

    def test_view_reflects_engine(self, board):
        item = drop(board, "router", 100, 100)
        board.engine.set_vlan_memberships(item.id, {10})

        view = board.view()

        assert [i.id for i in view.items] == ["router-1"]
        assert view.occupancy == {"100,100": "router-1"}
        assert [r.vlan_id for r in view.regions] == [10]

    def test_export_includes_pack_instances(self, board):
        drop(board, "router", 0, 0)
        pack = drop(board, "vmPack", 50, 0)
        board.engine.set_group(pack.id, PackGroup(instance_count=2, template_type="debian"))

        configs = board.export_config()

        assert [e.id for e in configs["router"]] == ["router-1"]
        assert [e.id for e in configs["debian"]] == ["debian-vmPack-1-1", "debian-vmPack-1-2"]


class TestRestore:

    def test_restore_replaces_board(self, board):
        drop(board, "windowsServer", 0, 0)
        drop(board, "windowsServer", 50, 0)
        snapshot = Snapshot(
            timestamp=0,
            whiteboard_items=[
                SimpleItem(id="windowsServer-3", type_tag="windowsServer", position=Position(left=0, top=100)),
                SimpleItem(id="windowsServer-7", type_tag="windowsServer", position=Position(left=50, top=100)),
            ],
            vlans=[Vlan(id=30, name="Lab", color="#ff0000")],
        )

        board.restore(snapshot)

        assert [i.id for i in board.engine.items] == ["windowsServer-3", "windowsServer-7"]
        assert [v.id for v in board.vlans.all()] == [30]
        assert_consistent(board.engine)
        assert drop(board, "windowsServer", 200, 200).id == "windowsServer-8"

    def test_restored_items_are_detached_from_snapshot(self, board):
        snapshot = Snapshot(
            timestamp=0,
            whiteboard_items=[SimpleItem(id="router-1", type_tag="router", position=Position(left=0, top=0))],
        )
        board.restore(snapshot)
        board.toggle_role("router-1", "BGP")

        assert snapshot.whiteboard_items[0].roles == set()

    def test_cell_of_restored_item_blocks_drops(self, board):
        board.restore(Snapshot(
            timestamp=0,
            whiteboard_items=[SimpleItem(id="router-1", type_tag="router", position=Position(left=0, top=0))],
        ))
        result = board.engine.place(PlacementCandidate(type_tag="firewall"), 10, 10, True)
        assert result.outcome.value == "blocked"


class TestSnapshotValidation:

    def test_duplicate_ids_rejected(self):
        item = SimpleItem(id="router-1", type_tag="router", position=Position(left=0, top=0))
        other = item.model_copy(update={"position": Position(left=50, top=0)})
        with pytest.raises(ValueError):
            Snapshot(timestamp=0, whiteboard_items=[item, other])

    @pytest.mark.parametrize("second", [
        Vlan(id=10, name="Other", color="#111112"),
        Vlan(id=11, name="vlan 10", color="#111112"),
        Vlan(id=11, name="Other", color="#111111"),
    ])
    def test_duplicate_vlans_rejected(self, second):
        first = Vlan(id=10, name="VLAN 10", color="#111111")
        with pytest.raises(ValueError):
            Snapshot(timestamp=0, vlans=[first, second])

    def test_off_grid_position_rejected_with_grid_context(self):
        item = SimpleItem(id="router-1", type_tag="router", position=Position(left=10, top=10))
        raw = Snapshot(timestamp=0, whiteboard_items=[item]).model_dump_json(by_alias=True)

        assert Snapshot.model_validate_json(raw).whiteboard_items[0].position.left == 10
        with pytest.raises(ValueError):
            Snapshot.model_validate_json(raw, context={"grid_size": 50})
