"""
Tests for the command-line entry point
"""

from wasmrun.__main__ import main

from conftest import SEVEN, NEGATE_I32, NO_MAIN, HELLO_MEMORY, SPINS


class TestMain:

    def test_default_path(self, wasm_file, monkeypatch, tmp_path, capsys):
        """No arguments runs ./out.wasm"""
        wasm_file(NEGATE_I32)
        monkeypatch.chdir(tmp_path)

        assert main([]) == 0
        assert capsys.readouterr().out == "main: -5\n"

    def test_explicit_path(self, wasm_file, capsys):
        assert main([wasm_file(SEVEN, name="seven.wasm")]) == 0
        assert capsys.readouterr().out == "main: 7\n"

    def test_missing_file_exits_nonzero(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.wasm")]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[ERROR]" in captured.err

    def test_missing_export_exits_nonzero(self, wasm_file, capsys):
        assert main([wasm_file(NO_MAIN)]) == 1
        assert "main" in capsys.readouterr().err

    def test_export_flag(self, wasm_file, capsys):
        assert main([wasm_file(NO_MAIN), "--export", "other"]) == 0
        assert capsys.readouterr().out == "other: 1\n"

    def test_dump_memory(self, wasm_file, capsys):
        assert main([wasm_file(HELLO_MEMORY), "--dump-memory"]) == 0
        assert capsys.readouterr().out == "main: 5\nmemory: hello\n"

    def test_fuel(self, wasm_file, capsys):
        assert main([wasm_file(SPINS), "--fuel", "1000"]) == 1
        assert capsys.readouterr().out == ""

    def test_verbose_logs_to_stderr(self, wasm_file, capsys):
        assert main([wasm_file(SEVEN), "-v"]) == 0
        captured = capsys.readouterr()
        assert captured.out == "main: 7\n"
        assert "[DEBUG]" in captured.err
