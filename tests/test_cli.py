import math

from mathexpr.__main__ import format_result, main


def test_evaluates_argument(capsys):
    assert main(["2 + 3 * 4"]) == 0
    assert capsys.readouterr().out == "14\n"


def test_prompts_when_no_argument(monkeypatch, capsys):
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return "pow(2, 10)"

    monkeypatch.setattr("builtins.input", fake_input)
    assert main([]) == 0
    assert prompts == ["Enter your math expression: "]
    assert capsys.readouterr().out == "1024\n"


def test_reports_errors_on_stderr(capsys):
    assert main(["(2 + 3"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Expected closing parenthesis ')'\n"


def test_format_result():
    assert format_result(3.0) == "3"
    assert format_result(0.5) == "0.5"
    assert format_result(math.nan) == "NaN"
    assert format_result(math.inf) == "Infinity"
    assert format_result(-math.inf) == "-Infinity"


def test_long_sum_prints_result(capsys):
    assert main([" + ".join(["1"] * 1500)]) == 0
    assert capsys.readouterr().out == "1500\n"


def test_domain_error_prints_nan(capsys):
    assert main(["acos(2)"]) == 0
    assert capsys.readouterr().out == "NaN\n"
