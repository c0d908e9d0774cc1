import io

from config.config import validate_config
from main import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.notation == 'value'
    assert args.expressions == []
    assert args.file is None


def test_batch_mode_exit_code(capsys):
    assert main(["1+2", "(1+2"]) == 1
    assert capsys.readouterr().out.splitlines() == ["3.0", "! Too many left parentheses"]


def test_batch_mode_prefix(capsys):
    assert main(["--notation", "prefix", "1*2+3/1-2^2"]) == 0
    assert capsys.readouterr().out.strip() == "(- (+ (* 1 2) (/ 3 1)) (^ 2 2))"


def test_batch_mode_from_file(tmp_path, capsys):
    path = tmp_path / "exprs.txt"
    path.write_text("8-1-2\n1+\n", encoding="utf-8")
    output_path = tmp_path / "out.csv"

    assert main(["--file", str(path), "--output_path", str(output_path)]) == 1
    assert capsys.readouterr().out.splitlines() == ["5.0", "! Insufficient operands for '+'"]
    assert output_path.exists()


def test_repl_mode(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1+2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "3.0\n"


def test_validate_config():
    validate_config()


def test_expressions_are_positional():
    args = build_parser().parse_args(["--notation", "postfix", "1+2", "3*4"])
    assert args.expressions == ["1+2", "3*4"]
    assert args.notation == 'postfix'
