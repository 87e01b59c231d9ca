"""Unit tests for the parser module."""

import pytest

from graphlens.parser import (
    ConfigConflictError,
    EdgeSpecParser,
    FormatError,
    RangeError,
    StructuralError,
    ValidationError,
)


class TestParseNodeCount:
    """Tests for EdgeSpecParser.parse_node_count."""

    def test_integer(self, parser):
        """Test that a plain int is accepted."""
        assert parser.parse_node_count(5) == 5

    def test_integer_text(self, parser):
        """Test that integer text with padding is accepted."""
        assert parser.parse_node_count(" 7 ") == 7

    def test_non_integer_text(self, parser):
        """Test that non-numeric text raises RangeError."""
        with pytest.raises(RangeError) as exc_info:
            parser.parse_node_count("abc")
        assert "positive integer" in str(exc_info.value)

    def test_zero(self, parser):
        """Test that zero raises RangeError."""
        with pytest.raises(RangeError):
            parser.parse_node_count(0)

    def test_negative(self, parser):
        """Test that a negative count raises RangeError."""
        with pytest.raises(RangeError):
            parser.parse_node_count("-3")

    def test_underscore_digits(self, parser):
        """Test that digit-group underscores are not a number."""
        with pytest.raises(RangeError):
            parser.parse_node_count("1_0")

    def test_exceeds_maximum(self, parser):
        """Test that counts above max_nodes raise RangeError."""
        with pytest.raises(RangeError) as exc_info:
            parser.parse_node_count(51)
        assert "maximum limit of 50" in str(exc_info.value)

    def test_at_maximum(self, parser):
        """Test that exactly max_nodes is accepted."""
        assert parser.parse_node_count(50) == 50

    def test_custom_limit(self):
        """Test that the limit is configurable."""
        parser = EdgeSpecParser(max_nodes=5)
        with pytest.raises(RangeError):
            parser.parse_node_count(6)


class TestParseEdges:
    """Tests for EdgeSpecParser.parse_edges."""

    def test_simple(self, parser):
        """Test parsing comma-separated pairs."""
        assert parser.parse_edges("1 2, 2 3, 3 1") == [(1, 2), (2, 3), (3, 1)]

    def test_extra_whitespace(self, parser):
        """Test that tabs and repeated spaces inside a pair are fine."""
        assert parser.parse_edges("  1\t2 ,3    4") == [(1, 2), (3, 4)]

    def test_empty(self, parser):
        """Test that an empty spec yields no edges."""
        assert parser.parse_edges("") == []
        assert parser.parse_edges("   ") == []

    def test_skips_empty_segments(self, parser):
        """Test that doubled and trailing commas are ignored."""
        assert parser.parse_edges("1 2,, 2 3,") == [(1, 2), (2, 3)]

    def test_self_loop(self, parser):
        """Test that self-loops are kept."""
        assert parser.parse_edges("2 2") == [(2, 2)]

    def test_single_number(self, parser):
        """Test that a lone number raises FormatError naming the token."""
        with pytest.raises(FormatError) as exc_info:
            parser.parse_edges("1 2, 3")
        assert "'3'" in str(exc_info.value)

    def test_three_numbers(self, parser):
        """Test that three numbers in a pair raise FormatError."""
        with pytest.raises(FormatError) as exc_info:
            parser.parse_edges("1 2 3")
        assert "'1 2 3'" in str(exc_info.value)

    def test_non_integer(self, parser):
        """Test that a non-integer endpoint raises FormatError."""
        with pytest.raises(FormatError) as exc_info:
            parser.parse_edges("1 b")
        assert "'1 b'" in str(exc_info.value)

    def test_float(self, parser):
        """Test that a float endpoint raises FormatError."""
        with pytest.raises(FormatError):
            parser.parse_edges("1 2.5")

    @pytest.mark.parametrize("spec", ["1_2 3", "1 \u0663", "\uff11 2"])
    def test_non_ascii_or_underscore_digits(self, parser, spec):
        """Test that only plain ASCII digits count as integers."""
        with pytest.raises(FormatError):
            parser.parse_edges(spec)


class TestCheckRange:
    """Tests for EdgeSpecParser.check_range."""

    def test_valid(self, parser):
        """Test that in-range edges pass."""
        parser.check_range(3, [(1, 2), (3, 3)])

    def test_too_high(self, parser):
        """Test that an endpoint above n names the node and the edge."""
        with pytest.raises(RangeError) as exc_info:
            parser.check_range(4, [(1, 2), (5, 6)])
        message = str(exc_info.value)
        assert "5" in message
        assert "'5 6'" in message

    def test_zero_endpoint(self, parser):
        """Test that node 0 is out of range."""
        with pytest.raises(RangeError):
            parser.check_range(4, [(0, 1)])


class TestCheckTree:
    """Tests for EdgeSpecParser.check_tree."""

    def test_valid_tree(self, parser):
        """Test that a valid tree passes."""
        parser.check_tree(4, [(1, 2), (1, 3), (3, 4)], root=1)

    def test_single_node(self, parser):
        """Test that one node with no edges is a tree."""
        parser.check_tree(1, [], root=1)

    def test_wrong_edge_count(self, parser):
        """Test that n edges for n nodes is rejected."""
        with pytest.raises(StructuralError) as exc_info:
            parser.check_tree(3, [(1, 2), (2, 3), (1, 3)], root=1)
        assert "exactly 2 edges" in str(exc_info.value)

    def test_cycle(self, parser):
        """Test that a cycle with the right edge count is rejected."""
        with pytest.raises(StructuralError) as exc_info:
            parser.check_tree(4, [(1, 2), (2, 3), (3, 1)], root=1)
        assert "Cycle" in str(exc_info.value)

    def test_parallel_edges_are_a_cycle(self, parser):
        """Test that a doubled edge counts as a cycle."""
        with pytest.raises(StructuralError) as exc_info:
            parser.check_tree(3, [(1, 2), (2, 1)], root=1)
        assert "Cycle" in str(exc_info.value)

    def test_unreachable(self, parser):
        """Test that a cycle away from the root leaves nodes unreachable."""
        with pytest.raises(StructuralError) as exc_info:
            parser.check_tree(4, [(2, 3), (3, 4), (4, 2)], root=1)
        assert "reachable" in str(exc_info.value)

    def test_root_out_of_range(self, parser):
        """Test that the root must be a valid node."""
        with pytest.raises(RangeError) as exc_info:
            parser.check_tree(3, [(1, 2), (2, 3)], root=4)
        assert "Root must be between 1 and 3" in str(exc_info.value)

    def test_non_default_root(self, parser):
        """Test validation from a root other than 1."""
        parser.check_tree(3, [(1, 2), (2, 3)], root=3)


class TestParse:
    """Tests for EdgeSpecParser.parse."""

    def test_general(self, parser):
        """Test the full general-graph path."""
        assert parser.parse("3", "1 2, 2 3") == (3, [(1, 2), (2, 3)], 1)

    def test_tree_limit(self, parser):
        """Test that tree mode uses the smaller node limit."""
        with pytest.raises(RangeError) as exc_info:
            parser.parse(21, "", shape="tree")
        assert "20" in str(exc_info.value)

    def test_tree_root_text(self, parser):
        """Test that the root may be given as text."""
        assert parser.parse(2, "1 2", shape="tree", root="2") == (2, [(1, 2)], 2)

    def test_blank_root_general(self, parser):
        """Test that a blank root field falls back to node 1 outside tree mode."""
        assert parser.parse("3", "1 2, 2 3", root="") == (3, [(1, 2), (2, 3)], 1)
        assert parser.parse("3", "1 2, 2 3", root=None)[2] == 1

    def test_blank_root_tree(self, parser):
        """Test that tree mode needs a root."""
        with pytest.raises(RangeError) as exc_info:
            parser.parse(3, "1 2, 2 3", shape="tree", root=" ")
        assert "Root must be between 1 and 3" in str(exc_info.value)

    @pytest.mark.parametrize("root", [0, "4", "x"])
    def test_bad_root_general(self, parser, root):
        """Test that a given root is range-checked in every mode."""
        with pytest.raises(RangeError):
            parser.parse(3, "1 2", root=root)

    def test_unknown_shape(self, parser):
        """Test that an unknown shape is a configuration conflict."""
        with pytest.raises(ConfigConflictError):
            parser.parse(3, "1 2", shape="forest")

    def test_errors_share_base_class(self, parser):
        """Test that every parse error is a ValidationError and a ValueError."""
        with pytest.raises(ValidationError):
            parser.parse(3, "1 x")
        with pytest.raises(ValueError):
            parser.parse(3, "1 9")
