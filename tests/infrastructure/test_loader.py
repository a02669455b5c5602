"""Tests for the graph file loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from friendgraph.domain.graph import GraphError, SocialGraph
from friendgraph.infrastructure.loader import GraphFormatError, load_graph, parse_graph
from tests.conftest import CAMPUS_FILE


def _parse(text: str) -> SocialGraph:
    return parse_graph(text.splitlines())


class TestParseGraph:
    def test_minimal(self) -> None:
        g = _parse("2\nsam|y|rutgers\njane|n\nsam|jane\n")
        assert len(g) == 2
        assert g.person_at(0).school == "rutgers"
        assert g.person_at(1).school == ""
        assert g.friendship_count() == 1

    def test_school_with_spaces(self) -> None:
        g = _parse("1\nricardo|y|penn state\n")
        assert g.person_at(0).school == "penn state"

    def test_flag_case_insensitive(self) -> None:
        g = _parse("2\na|Y|x\nb|N\n")
        assert g.person_at(0).school == "x"
        assert g.person_at(1).school == ""

    def test_fields_stripped_and_blank_lines_skipped(self) -> None:
        g = _parse("\n 2 \n\n a | y | rutgers \nb|n\n\n a | b \n")
        assert g.lookup("a") == 0
        assert g.person_at(0).school == "rutgers"
        assert g.friendship_count() == 1

    def test_names_keep_case(self) -> None:
        g = _parse("2\nSam|n\nsam|n\nSam|sam\n")
        assert g.lookup("Sam") == 0
        assert g.lookup("sam") == 1

    def test_no_people(self) -> None:
        assert len(_parse("0\n")) == 0

    def test_repeated_friendship_kept_once(self) -> None:
        g = _parse("2\na|n\nb|n\na|b\nb|a\n")
        assert g.friendship_count() == 1


class TestParseErrors:
    def test_empty_file(self) -> None:
        with pytest.raises(GraphFormatError, match="empty") as info:
            _parse("")
        assert info.value.line is None

    def test_bad_count(self) -> None:
        with pytest.raises(GraphFormatError, match="person count") as info:
            _parse("many\n")
        assert info.value.line == 1

    def test_negative_count(self) -> None:
        with pytest.raises(GraphFormatError, match="negative"):
            _parse("-1\n")

    def test_too_few_people(self) -> None:
        with pytest.raises(GraphFormatError, match="Expected 3 people, found 1"):
            _parse("3\na|n\n")

    @pytest.mark.parametrize(
        "line",
        ["a|y", "a|y|", "a|n|school", "a|maybe|x", "|n", "a"],
    )
    def test_malformed_person(self, line: str) -> None:
        with pytest.raises(GraphFormatError, match="line 2"):
            _parse(f"1\n{line}\n")

    def test_malformed_friendship(self) -> None:
        with pytest.raises(GraphFormatError, match="Malformed friendship") as info:
            _parse("2\na|n\nb|n\na|b|c\n")
        assert info.value.line == 4

    def test_unknown_friend(self) -> None:
        with pytest.raises(GraphFormatError, match="unknown person 'ghost'"):
            _parse("1\na|n\na|ghost\n")

    def test_self_friendship(self) -> None:
        with pytest.raises(GraphFormatError, match="themselves"):
            _parse("1\na|n\na|a\n")

    def test_duplicate_person(self) -> None:
        with pytest.raises(GraphFormatError, match="first defined on line 2") as info:
            _parse("2\na|n\na|y|x\n")
        assert info.value.line == 3

    def test_format_error_is_graph_error(self) -> None:
        with pytest.raises(GraphError):
            _parse("x\n")


class TestLoadGraph:
    def test_loads_fixture(self) -> None:
        g = load_graph(CAMPUS_FILE)
        assert len(g) == 15
        assert g.friendship_count() == 14

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_graph(tmp_path / "nope.txt")

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "g.txt"
        path.write_text("2\nzoë|y|université\nkai|n\nzoë|kai\n", encoding="utf-8")
        g = load_graph(path)
        assert g.person_at(0).name == "zoë"
        assert g.person_at(0).school == "université"

    def test_invalid_utf8_is_format_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"2\nsam|n\n\xff\xfe|n\n")
        with pytest.raises(GraphFormatError, match="UTF-8") as info:
            load_graph(path)
        assert info.value.line == 3

    def test_directory_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_graph(tmp_path)
