"""Tests for dataset directory inventory."""

from pathlib import Path

import pytest

from egostats.graph import EdgeListError, analyze_files, count_lines


@pytest.fixture
def ego_dir(tmp_path: Path) -> Path:
    (tmp_path / "0.edges").write_text("1 2\n2 3\n3 4\n")
    (tmp_path / "0.circles").write_text("circle0\t1\t2\n")
    (tmp_path / "0.feat").write_text("1 0 1\n2 1 0\n")
    (tmp_path / "0.featnames").write_text("0 gender\n1 school\n")
    (tmp_path / "README.txt").write_text("facebook ego networks\n")
    return tmp_path


class TestCountLines:

    def test_counts_lines(self, tmp_path: Path) -> None:
        path = tmp_path / "a.edges"
        path.write_text("1 2\n2 3\n")
        assert count_lines(path) == 2

    def test_missing_trailing_newline(self, tmp_path: Path) -> None:
        path = tmp_path / "a.edges"
        path.write_text("1 2\n2 3")
        assert count_lines(path) == 2

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "a.edges"
        path.write_text("")
        assert count_lines(path) == 0

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(EdgeListError):
            count_lines(tmp_path / "nope.edges")


class TestAnalyzeFiles:

    def test_counts_matching_files(self, ego_dir: Path) -> None:
        assert analyze_files(ego_dir) == {
            "0.edges": 3,
            "0.circles": 1,
            "0.feat": 2,
        }

    def test_custom_extensions(self, ego_dir: Path) -> None:
        assert analyze_files(ego_dir, (".featnames",)) == {"0.featnames": 2}

    def test_file_path_yields_empty(self, ego_dir: Path) -> None:
        assert analyze_files(ego_dir / "0.edges") == {}

    def test_missing_directory_yields_empty(self, tmp_path: Path) -> None:
        assert analyze_files(tmp_path / "absent") == {}

    def test_subdirectories_ignored(self, ego_dir: Path) -> None:
        (ego_dir / "nested.edges").mkdir()
        assert "nested.edges" not in analyze_files(ego_dir)

    def test_undecodable_file_counted(self, ego_dir: Path) -> None:
        """A .feat file that is not valid UTF-8 is still inventoried."""
        (ego_dir / "0.feat").write_bytes(b"1 \xff\n2 0\n")
        assert count_lines(ego_dir / "0.feat") == 2
        counts = analyze_files(ego_dir)
        assert counts["0.feat"] == 2
        assert counts["0.edges"] == 3
