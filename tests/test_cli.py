import io
import json
from pathlib import Path

import pytest

import yajq
from yajq.cli import main

DOC = {"x": [{"name": "value1"}, {"name": "value2"}], "n": 3}


def _run(argv: list[str], stdin: str = json.dumps(DOC)) -> tuple[int, str, str]:
    stdout = io.StringIO()
    stderr = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin), stdout=stdout, stderr=stderr)
    return code, stdout.getvalue(), stderr.getvalue()


def test_cli_filters_stdin(yajq_config) -> None:
    code, out, err = _run(["x.*.name"])

    assert code == 0
    assert json.loads(out) == ["value1", "value2"]
    assert out == '[\n  "value1",\n  "value2"\n]\n'
    assert err == ""


def test_cli_without_expression_prints_document(yajq_config) -> None:
    code, out, _ = _run([])

    assert code == 0
    assert json.loads(out) == DOC


def test_cli_reads_file(yajq_config, tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps(DOC), encoding="utf-8")

    code, out, _ = _run(["x.1.name", str(path)], stdin="")

    assert code == 0
    assert out == '"value2"\n'


def test_cli_compact_and_sorted(yajq_config) -> None:
    code, out, _ = _run(["--compact", "--sort-keys", "x.0"], stdin='{"x": [{"b": 1, "a": 2}]}')

    assert code == 0
    assert out == '{"a": 2, "b": 1}\n'


def test_cli_indent_flag(yajq_config) -> None:
    code, out, _ = _run(["--indent", "4", "x"], stdin='{"x": [1]}')

    assert code == 0
    assert out == "[\n    1\n]\n"


def test_cli_uses_config_defaults(yajq_config) -> None:
    yajq_config.indent = None

    _, out, _ = _run(["x.0"])

    assert out == '{"name": "value1"}\n'


@pytest.mark.parametrize(
    ("argv", "stdin", "message"),
    [
        (["x.*.missing"], json.dumps(DOC), "Filtering Error: Key missing not in dict\n"),
        (["n.k"], json.dumps(DOC), "Filtering Error: Unit can't be filtered for key k\n"),
        (["n.*"], json.dumps(DOC), "Filtering Error: Can't use * on non array\n"),
        (
            ["x.9"],
            json.dumps(DOC),
            "Filtering Error: index 9 out of bounds for array of length 2\n",
        ),
        (
            ["x.first"],
            json.dumps(DOC),
            "Parsing Error: invalid array index 'first': invalid digit found in string\n",
        ),
    ],
)
def test_cli_reports_filter_errors(yajq_config, argv, stdin, message) -> None:
    code, out, err = _run(argv, stdin=stdin)

    assert code == 1
    assert out == ""
    assert err == message


def test_cli_reports_invalid_json(yajq_config) -> None:
    code, out, err = _run(["x"], stdin="{oops")

    assert code == 1
    assert out == ""
    assert err.startswith("Json Error: <stdin>: ")


def test_cli_reports_missing_file(yajq_config, tmp_path: Path) -> None:
    code, _, err = _run(["x", str(tmp_path / "nope.json")])

    assert code == 1
    assert err.startswith("IO Error: failed to read ")


def test_cli_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == f"yajq {yajq.__version__}"


def test_cli_rejects_conflicting_layout_flags(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--compact", "--indent", "2", "x"])

    assert excinfo.value.code == 2
    assert "not allowed with argument" in capsys.readouterr().err


def test_cli_rejects_bad_log_level(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--log-level", "chatty", "x"])

    assert "log level must be one of" in capsys.readouterr().err


def test_cli_reports_undecodable_stdin(yajq_config) -> None:
    stdout = io.StringIO()
    stderr = io.StringIO()
    stdin = io.TextIOWrapper(io.BytesIO(b'{"x": "\xff"}'), encoding="utf-8")

    code = main(["x"], stdin=stdin, stdout=stdout, stderr=stderr)

    assert code == 1
    assert stdout.getvalue() == ""
    assert stderr.getvalue().startswith("IO Error: failed to read stdin: ")


def test_cli_prints_deeply_nested_document(yajq_config) -> None:
    text = "[" * 700 + "]" * 700

    code, out, err = _run(["--compact"], stdin=text)

    assert code == 0
    assert out == text + "\n"
    assert err == ""

    code, out, _ = _run(["--compact", "0"], stdin=text)

    assert code == 0
    assert out == "[" * 699 + "]" * 699 + "\n"


def test_cli_debug_logs_go_to_given_stderr(yajq_config) -> None:
    code, out, err = _run(["--log-level", "debug", "x.*.name"])

    assert code == 0
    assert json.loads(out) == ["value1", "value2"]
    assert "read object document from <stdin>" in err
    assert "expression: x.*.name" in err
    assert "result type: array" in err
