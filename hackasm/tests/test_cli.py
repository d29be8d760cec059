# hackasm/tests/test_cli.py
from hackasm.cli import main


def test_cli_assembles_file(tmp_path, capsys):
    src = tmp_path / "Prog.asm"
    src.write_text("@foo\nM=1\nD=X\n")
    out = tmp_path / "Prog.hack"
    assert main([str(src), str(out)]) == 0
    assert out.read_text() == "0000000000010000\n1110111111001000\n"
    err = capsys.readouterr().err
    assert "line 3: Invalid computation mnemonic: 'X'" in err

def test_cli_prompts_for_file_names(tmp_path, monkeypatch, capsys):
    src = tmp_path / "Prog.asm"
    src.write_text("@3\n")
    out = tmp_path / "Prog.hack"
    answers = iter([str(src), str(out)])
    monkeypatch.setattr("builtins.input", lambda: next(answers))
    assert main([]) == 0
    prompts = capsys.readouterr().out
    assert "Enter the input file name" in prompts
    assert "Enter the output file name" in prompts
    assert out.read_text() == "0000000000000011\n"

def test_cli_missing_input_is_fatal(tmp_path, capsys):
    out = tmp_path / "Prog.hack"
    assert main([str(tmp_path / "missing.asm"), str(out)]) == 1
    assert "Error handling files" in capsys.readouterr().err
    assert not out.exists()

def test_cli_reports_duplicate_label_warning(tmp_path, capsys):
    src = tmp_path / "Dup.asm"
    src.write_text("(X)\n@X\n(X)\n@X\n")
    out = tmp_path / "Dup.hack"
    assert main([str(src), str(out)]) == 0
    assert "warning: Duplicate label definition: X" in capsys.readouterr().err
