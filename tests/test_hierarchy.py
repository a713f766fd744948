"""
Tests for the static hierarchy description (levels, edges, paths).
"""

import pytest

from access.exceptions import UnknownTargetError
from territory import hierarchy
from territory.hierarchy import CITIZEN, LEVELS, TARGETS
from territory.models import Citizen, School


class TestTargets:

    def test_levels_are_ordered_coarse_to_fine(self):
        assert LEVELS == ("section", "locality", "circuit", "school", "table")
        assert TARGETS[-1] == CITIZEN

    @pytest.mark.parametrize("raw, expected", [
        ("school", "school"),
        (" School ", "school"),
        ("TABLE", "table"),
        ("citizen", "citizen"),
    ])
    def test_parse_target_normalizes(self, raw, expected):
        assert hierarchy.parse_target(raw) == expected

    @pytest.mark.parametrize("raw", ["province", "", None, "schools"])
    def test_parse_target_rejects_unknown(self, raw):
        with pytest.raises(UnknownTargetError) as excinfo:
            hierarchy.parse_target(raw)
        assert excinfo.value.target == raw

    def test_unknown_target_is_a_value_error(self):
        with pytest.raises(ValueError):
            hierarchy.parse_target("province")

    def test_model_for(self):
        assert hierarchy.model_for("school") is School
        assert hierarchy.model_for("Citizen") is Citizen

    def test_depth(self):
        assert hierarchy.depth("section") == 0
        assert hierarchy.depth("table") == 4
        assert hierarchy.depth("citizen") == 5


class TestEdges:

    def test_child_edge_walks_one_hop(self):
        edge = hierarchy.child_edge("circuit")
        assert (edge.parent, edge.child, edge.fk) == ("circuit", "school", "circuit")
        assert edge.fk_column == "circuit_id"

    def test_table_is_the_bottom_level(self):
        assert hierarchy.child_edge("table") is None

    def test_section_edge_follows_setting(self, settings):
        settings.FIELDOPS_SECTION_PROPAGATES = True
        assert hierarchy.child_edge("section").child == "locality"

        settings.FIELDOPS_SECTION_PROPAGATES = False
        assert hierarchy.child_edge("section") is None

    def test_path_between_levels(self):
        path = hierarchy.path_between("locality", "table")
        assert [e.fk for e in path] == ["locality", "circuit", "school"]

    def test_path_to_citizens_goes_through_tables(self):
        path = hierarchy.path_between("school", "citizen")
        assert [e.child for e in path] == ["table", "citizen"]
        assert [e.child for e in hierarchy.path_between("table", "citizen")] == ["citizen"]

    def test_no_upward_path(self):
        assert hierarchy.path_between("table", "school") == ()
        assert hierarchy.path_between("citizen", "table") == ()

    def test_same_level_path_is_empty(self):
        assert hierarchy.path_between("school", "school") == ()

    def test_disabled_section_edge_breaks_paths(self, settings):
        settings.FIELDOPS_SECTION_PROPAGATES = False
        assert hierarchy.path_between("section", "table") == ()
        assert hierarchy.path_between("section", "citizen") == ()
        assert len(hierarchy.path_between("locality", "table")) == 3

    def test_is_ancestor(self):
        assert hierarchy.is_ancestor("section", "citizen")
        assert hierarchy.is_ancestor("circuit", "table")
        assert not hierarchy.is_ancestor("table", "school")
        assert not hierarchy.is_ancestor("school", "school")
