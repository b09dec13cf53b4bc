from pathlib import Path

import pytest

from dir2prompt.cli import main, split_patterns


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "src").mkdir()
    (tmp_path / "docs").mkdir()
    files = {
        "README.md": b"# Test Project\nThis is a test project.",
        "main.go": b'package main\n\nfunc main() {\n\tprintln("Hello, world!")\n}\n',
        "src/lib.go": b'package src\n\nfunc DoSomething() string {\n\treturn "something"\n}\n',
        "docs/guide.md": b"# User Guide\nThis is a user guide.",
        "binary.bin": bytes([0x00, 0x01, 0x02, 0x03]),
        "docs/draft.tmp": b"Draft document",
    }
    for rel, content in files.items():
        (tmp_path / rel).write_bytes(content)
    return tmp_path


def _contains_file(output: str, name: str) -> bool:
    return ("File: " + name) in output or ("/" + name) in output


@pytest.mark.parametrize(
    "extra, expected",
    [
        (["--include-files", "*.md"], ["README.md", "guide.md"]),
        (["--exclude-files", "*.bin,*.tmp"], ["README.md", "main.go", "lib.go", "guide.md"]),
        (
            ["--include-files", "*.go,*.md", "--exclude-files", "docs/*"],
            ["README.md", "main.go", "lib.go"],
        ),
    ],
)
def test_root_command_lists_expected_files(project, capsys, extra, expected):
    status = main(["--dir", str(project), *extra])
    out = capsys.readouterr().out
    assert status == 0
    for name in expected:
        assert _contains_file(out, name), name


def test_exclude_directory_pattern_drops_docs(project, capsys):
    status = main(
        ["--dir", str(project), "--include-files", "*.go,*.md", "--exclude-files", "docs/*"]
    )
    out = capsys.readouterr().out
    assert status == 0
    assert "File: docs/guide.md" not in out
    assert "File: src/lib.go" in out


def test_missing_dir_is_an_error(capsys):
    status = main(["--include-files", "*.md"])
    err = capsys.readouterr().err
    assert status == 1
    assert "--dir" in err


def test_empty_dir_value_is_an_error(capsys):
    status = main(["--dir", ""])
    err = capsys.readouterr().err
    assert status == 1
    assert "--dir flag is required" in err


def test_estimate_tokens_flag(project, capsys):
    status = main(["--dir", str(project), "--include-files", "README.md", "--estimate-tokens"])
    captured = capsys.readouterr()
    assert status == 0
    assert "Estimated tokens:" in captured.err


def test_output_file(project, capsys):
    output_file = project / "output.txt"
    status = main(
        ["--dir", str(project), "--include-files", "README.md", "--output", str(output_file)]
    )
    assert status == 0
    content = output_file.read_text(encoding="utf-8")
    assert "File: README.md" in content
    assert capsys.readouterr().out == ""


def test_short_output_flag(project):
    output_file = project / "out.txt"
    status = main(["--dir", str(project), "--include-files", "*.go", "-o", str(output_file)])
    assert status == 0
    content = output_file.read_text(encoding="utf-8")
    assert "File: main.go" in content
    assert "File: src/lib.go" in content


def test_binary_files_handling(project, capsys):
    status = main(["--dir", str(project), "--include-files", "*"])
    captured = capsys.readouterr()
    assert status == 0
    assert "Warning: Skipping binary file" in captured.err
    assert "File: binary.bin" not in captured.out
    assert "File: README.md" in captured.out


def test_invalid_pattern_is_an_error(project, capsys):
    status = main(["--dir", str(project), "--include-files", "[invalid"])
    err = capsys.readouterr().err
    assert status == 1
    assert "invalid include pattern '[invalid'" in err


def test_missing_directory_is_an_error(tmp_path, capsys):
    status = main(["--dir", str(tmp_path / "absent")])
    assert status == 1
    assert capsys.readouterr().err.startswith("Error:")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", []),
        ("*.go", ["*.go"]),
        ("*.go,*.md", ["*.go", "*.md"]),
        (" *.go , ,*.md ,", ["*.go", "*.md"]),
        (" , ", []),
    ],
)
def test_split_patterns(raw, expected):
    assert split_patterns(raw) == expected