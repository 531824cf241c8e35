"""Tests for config derivation (export document)."""

from conceptify.board.export import config_document, derive_config, instance_id
from conceptify.models.item import PackGroup, PackItem, Position, SimpleItem


def at(n):
    return Position(left=50 * n, top=0)


class TestDeriveConfig:

    def test_simple_items_group_by_type(self):
        items = [
            SimpleItem(id="windowsServer-1", type_tag="windowsServer", position=at(0),
                       roles={"DNS", "ADDS"}, vlan_memberships={20, 10}),
            SimpleItem(id="router-1", type_tag="router", position=at(1)),
            SimpleItem(id="windowsServer-2", type_tag="windowsServer", position=at(2)),
        ]

        configs = derive_config(items)

        assert list(configs) == ["windowsServer", "router"]
        assert [e.id for e in configs["windowsServer"]] == ["windowsServer-1", "windowsServer-2"]
        first = configs["windowsServer"][0]
        assert first.roles == ["ADDS", "DNS"]
        assert first.vlans == [10, 20]
        assert configs["router"][0].roles == []

    def test_pack_expands_to_instances(self):
        pack = PackItem(
            id="vmPack-1",
            type_tag="vmPack",
            position=at(0),
            roles={"Worker"},
            group=PackGroup(instance_count=3, template_type="ubuntu", vlan_memberships={10, 20}),
        )

        configs = derive_config([pack])

        assert list(configs) == ["ubuntu"]
        entities = configs["ubuntu"]
        assert len(entities) == 3
        assert len({e.id for e in entities}) == 3
        assert [e.id for e in entities] == [
            "ubuntu-vmPack-1-1",
            "ubuntu-vmPack-1-2",
            "ubuntu-vmPack-1-3",
        ]
        for entity in entities:
            assert entity.vlans == [10, 20]
            assert entity.roles == ["Worker"]

    def test_packs_and_simple_items_share_template_key_in_order(self):
        items = [
            PackItem(id="vmPack-1", type_tag="vmPack", position=at(0),
                     group=PackGroup(instance_count=2, template_type="debian")),
            SimpleItem(id="debian-1", type_tag="debian", position=at(1)),
            PackItem(id="vmPack-2", type_tag="vmPack", position=at(2),
                     group=PackGroup(instance_count=1, template_type="debian")),
        ]

        configs = derive_config(items)

        assert [e.id for e in configs["debian"]] == [
            "debian-vmPack-1-1",
            "debian-vmPack-1-2",
            "debian-1",
            "debian-vmPack-2-1",
        ]

    def test_empty_board(self):
        assert derive_config([]) == {}

    def test_document_is_json_ready(self):
        configs = derive_config([
            SimpleItem(id="router-1", type_tag="router", position=at(0), vlan_memberships={10}),
        ])
        assert config_document(configs) == {
            "router": [{"id": "router-1", "roles": [], "vlans": [10]}],
        }

    def test_instance_id(self):
        assert instance_id("windows10", "vmPack-4", 2) == "windows10-vmPack-4-2"
