"""Tests for per-type id allocation and reseeding from restored items."""

from conceptify.board.identity import IdentityAllocator, split_id


class TestSplitId:

    def test_splits_on_last_separator(self):
        assert split_id("windowsServer-3") == ("windowsServer", 3)
        assert split_id("edge-router-12") == ("edge-router", 12)

    def test_rejects_malformed_suffixes(self):
        assert split_id("windowsServer") is None
        assert split_id("windowsServer-") is None
        assert split_id("windowsServer-abc") is None
        assert split_id("windowsServer-0") is None
        assert split_id("-4") is None


class TestIdentityAllocator:

    def test_sequences_are_per_type(self):
        ids = IdentityAllocator()

        assert ids.next_id("firewall") == "firewall-1"
        assert ids.next_id("firewall") == "firewall-2"
        assert ids.next_id("router") == "router-1"
        assert ids.peek("firewall") == 2
        assert ids.peek("database") == 0

    def test_no_duplicates_within_a_type(self):
        ids = IdentityAllocator()
        issued = [ids.next_id("linuxServer") for _ in range(50)]
        assert len(set(issued)) == 50

    def test_reseed_resumes_after_highest_restored(self):
        """Restoring windowsServer-3 and -7 makes the next id windowsServer-8."""
        ids = IdentityAllocator()
        for _ in range(12):
            ids.next_id("windowsServer")

        ids.reseed(["windowsServer-3", "windowsServer-7", "router-2"])

        assert ids.next_id("windowsServer") == "windowsServer-8"
        assert ids.next_id("router") == "router-3"

    def test_reseed_ignores_malformed_ids(self):
        ids = IdentityAllocator()
        ids.reseed(["firewall-x", "firewall", "firewall-2"])
        assert ids.next_id("firewall") == "firewall-3"

    def test_reseed_forgets_types_not_restored(self):
        ids = IdentityAllocator()
        ids.next_id("database")
        ids.reseed([])
        assert ids.next_id("database") == "database-1"
