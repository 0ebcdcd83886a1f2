"""Tests for the CLI interface."""

from pathlib import Path

from typer.testing import CliRunner

from styled_text.cli import app, generate_output_path


runner = CliRunner()


class TestGenerateOutputPath:
    """Tests for output path generation."""

    def test_adds_styled_suffix(self):
        """Test that -styled suffix and renderer extension are used."""
        input_path = Path("/path/to/notes.md")
        output = generate_output_path(input_path, ".html")

        assert output.name == "notes-styled.html"
        assert output.parent == input_path.parent

    def test_handles_spaces_in_filename(self):
        """Test handling of spaces in filename."""
        output = generate_output_path(Path("/path/to/my notes.md"), ".txt")

        assert output.name == "my notes-styled.txt"

    def test_custom_output_directory(self):
        """Test specifying custom output directory."""
        output_dir = Path("/custom/output")
        output = generate_output_path(Path("/path/to/notes.md"), ".html", output_dir)

        assert output.parent == output_dir


class TestCLI:
    """Tests for CLI commands."""

    def test_version_flag(self):
        """Test --version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "Styled Text" in result.stdout

    def test_help_flag(self):
        """Test --help flag."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "styled text" in result.stdout

    def test_text_plain(self):
        """Test rendering --text to plain output."""
        result = runner.invoke(
            app, ["--text", "[go](https://example.com)", "--format", "plain"]
        )

        assert result.exit_code == 0
        assert "[go]" in result.stdout

    def test_text_html(self):
        """Test rendering --text to HTML with a custom tint."""
        result = runner.invoke(
            app, ["--text", "`x`", "--format", "html", "--tint", "#FF9500"]
        )

        assert result.exit_code == 0
        assert "color: #ff9500" in result.stdout

    def test_text_console(self):
        """Test rendering --text to the terminal."""
        result = runner.invoke(app, ["--text", "*hi*", "--format", "console"])

        assert result.exit_code == 0
        assert "[hi]" in result.stdout

    def test_bracket_scope_links(self):
        """Test limiting brackets to link labels."""
        result = runner.invoke(
            app,
            ["--text", "See [1](https://e.com)", "-f", "plain", "-b", "links"],
        )

        assert result.exit_code == 0
        assert "See [1]" in result.stdout

    def test_invalid_tint(self):
        """Test error for a malformed tint."""
        result = runner.invoke(app, ["--text", "x", "--tint", "orange"])

        assert result.exit_code == 1
        assert "Invalid hex color" in result.stdout

    def test_unknown_format(self):
        """Test error for an unknown renderer."""
        result = runner.invoke(app, ["--text", "x", "--format", "pdf"])

        assert result.exit_code == 1
        assert "Unsupported renderer" in result.stdout

    def test_no_input(self):
        """Test error when neither PATH nor --text is given."""
        result = runner.invoke(app, [])

        assert result.exit_code == 1

    def test_missing_file_error(self, tmp_path: Path):
        """Test error when file doesn't exist."""
        result = runner.invoke(app, [str(tmp_path / "nonexistent.md")])

        assert result.exit_code != 0

    def test_single_file(self, tmp_markdown_file: Path):
        """Test processing one file with the default output path."""
        result = runner.invoke(app, [str(tmp_markdown_file), "--format", "plain"])

        assert result.exit_code == 0
        output = tmp_markdown_file.parent / "notes-styled.txt"
        assert output.exists()
        assert output.read_text(encoding="utf-8").startswith("[Hello ][1]")

    def test_single_file_with_output(self, tmp_markdown_file: Path, tmp_path: Path):
        """Test processing one file to an explicit output path."""
        output = tmp_path / "custom.html"
        result = runner.invoke(app, [str(tmp_markdown_file), "-o", str(output)])

        assert result.exit_code == 0
        assert output.exists()

    def test_unsupported_format_skipped(self, tmp_path: Path):
        """Test that unsupported input files fail."""
        unsupported = tmp_path / "file.xyz"
        unsupported.write_text("content")

        result = runner.invoke(app, [str(unsupported)])

        assert result.exit_code == 1
        assert "Skipping" in result.stdout

    def test_folder(self, tmp_path: Path):
        """Test processing a folder, skipping earlier output."""
        (tmp_path / "a.md").write_text("**a**", encoding="utf-8")
        sub = tmp_path / "sub"
        sub.mkdir()
        (sub / "b.txt").write_text("`b`", encoding="utf-8")
        (tmp_path / "old-styled.md").write_text("x", encoding="utf-8")

        result = runner.invoke(app, [str(tmp_path), "--format", "html"])

        assert result.exit_code == 0
        assert (tmp_path / "a-styled.html").exists()
        assert (sub / "b-styled.html").exists()
        assert not (tmp_path / "old-styled-styled.html").exists()
        assert "2 succeeded, 0 failed" in result.stdout

    def test_empty_folder(self, tmp_path: Path):
        """Test a folder without supported files."""
        result = runner.invoke(app, [str(tmp_path)])

        assert result.exit_code == 0
        assert "No supported files" in result.stdout

    def test_folder_continues_after_unreadable_file(self, tmp_path: Path):
        """Test that one undecodable file does not stop the folder run."""
        (tmp_path / "a.md").write_bytes(b"\xff\xfe bad")
        (tmp_path / "b.md").write_text("**b**", encoding="utf-8")

        result = runner.invoke(app, [str(tmp_path), "--format", "plain"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert (tmp_path / "b-styled.txt").exists()
        assert "Cannot read" in result.stdout
        assert "1 succeeded, 1 failed" in result.stdout

    def test_signed_tint_rejected(self):
        """Test that a tint with sign characters is rejected."""
        result = runner.invoke(app, ["--text", "x", "--tint", "#+1+1+1"])

        assert result.exit_code == 1
        assert "Invalid hex color" in result.stdout

    def test_invalid_tint_in_environment(self, monkeypatch):
        """Test that a bad configured tint prints an error instead of a traceback."""
        monkeypatch.setenv("STYLED_TEXT_TINT", "nothex")

        result = runner.invoke(app, ["--text", "x"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.stdout

    def test_text_output_to_directory(self, tmp_path: Path):
        """Test that writing --text output onto a directory fails cleanly."""
        result = runner.invoke(app, ["--text", "x", "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot write" in result.stdout
