from pathlib import Path

from sastcore.core.file_manager import FileManager


def test_all_lists_relative_files_and_skips_excluded_dirs(tmp_path: Path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src/A.java").write_text("class A {}\n", encoding="utf-8")
    (tmp_path / "node_modules/x").mkdir(parents=True)
    (tmp_path / "node_modules/x/B.java").write_text("class B {}\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("hi\n", encoding="utf-8")

    fm = FileManager(tmp_path, exclude_dirs=["node_modules"])

    assert fm.all() == ["README.md", "src/A.java"]
    assert fm.language_files("java") == ["src/A.java"]
    assert fm.language_files(".java") == ["src/A.java"]


def test_exists_and_read_accept_relative_and_absolute(tmp_path: Path):
    (tmp_path / "report.xml").write_text("<BugCollection/>", encoding="utf-8")
    fm = FileManager(tmp_path)

    assert fm.exists("report.xml")
    assert fm.exists(tmp_path / "report.xml")
    assert not fm.exists("missing.xml")
    assert fm.read_text("report.xml") == "<BugCollection/>"


def test_glob_is_sorted_and_files_only(tmp_path: Path):
    (tmp_path / "target/classes").mkdir(parents=True)
    (tmp_path / "target/b.jar").write_bytes(b"")
    (tmp_path / "target/a.jar").write_bytes(b"")

    assert FileManager(tmp_path).glob("target/*.jar") == ["target/a.jar", "target/b.jar"]


def test_remove_deletes_file_and_ignores_missing(tmp_path: Path):
    (tmp_path / "findSecBugsReport.xml").write_text("<BugCollection/>", encoding="utf-8")
    fm = FileManager(tmp_path)

    fm.remove("findSecBugsReport.xml")
    fm.remove("findSecBugsReport.xml")

    assert not fm.exists("findSecBugsReport.xml")
