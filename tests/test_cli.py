import io

import pytest

from cpsolutions.cli import main
from cpsolutions.introductory import hanoi_moves, weird_algorithm
from cpsolutions.numtheory import mod_pow
from cpsolutions.problems import counting_rooms, twins_coins


def run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([problem])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_weird_algorithm(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "weird-algorithm", "3\n")
    assert code == 0
    assert out.split() == [str(x) for x in weird_algorithm(3)]


def test_exponentiation(monkeypatch, capsys):
    pairs = [(3, 4), (2, 8), (123, 123)]
    text = "3\n" + "".join(f"{a} {b}\n" for a, b in pairs)
    code, out, _ = run(monkeypatch, capsys, "exponentiation", text)
    assert code == 0
    assert out.splitlines() == [str(mod_pow(a, b)) for a, b in pairs]


def test_two_sets_yes(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "two-sets", "7\n")
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "YES"
    first = [int(x) for x in lines[2].split()]
    second = [int(x) for x in lines[4].split()]
    assert int(lines[1]) == len(first)
    assert int(lines[3]) == len(second)
    assert sorted(first + second) == list(range(1, 8))
    assert sum(first) == sum(second)


def test_two_sets_no(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "two-sets", "6\n")
    assert code == 0
    assert out == "NO\n"


def test_palindrome_reorder(monkeypatch, capsys):
    word = "AAAACACBA"
    code, out, _ = run(monkeypatch, capsys, "palindrome-reorder", word + "\n")
    result = out.strip()
    assert code == 0
    assert result == result[::-1]
    assert sorted(result) == sorted(word)


def test_palindrome_no_solution(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "palindrome-reorder", "ABC\n")
    assert code == 0
    assert out == "NO SOLUTION\n"


def test_permutation_no_solution(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "permutations", "3\n")
    assert code == 0
    assert out == "NO SOLUTION\n"


def test_hanoi(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "hanoi", "3\n")
    lines = out.splitlines()
    moves = hanoi_moves(3)
    assert code == 0
    assert lines[0] == str(len(moves))
    assert lines[1:] == [f"{a} {b}" for a, b in moves]


def test_counting_rooms(monkeypatch, capsys):
    grid = ["#.#.", "..##", "##.."]
    text = "3 4\n" + "\n".join(grid) + "\n"
    code, out, _ = run(monkeypatch, capsys, "counting-rooms", text)
    assert code == 0
    assert out.strip() == str(counting_rooms(grid))


def test_lucky_division(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, "lucky-division", "47\n")
    assert code == 0
    assert out == "YES\n"


def test_twins(monkeypatch, capsys):
    values = [4, 8, 15, 16, 23, 42]
    text = f"{len(values)}\n" + " ".join(map(str, values)) + "\n"
    code, out, _ = run(monkeypatch, capsys, "twins", text)
    assert code == 0
    assert out.strip() == str(twins_coins(values))


def test_missing_input_reports_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, "weird-algorithm", "")
    assert code == 1
    assert out == ""
    assert "cpsolutions" in err


def test_non_integer_input_reports_error(monkeypatch, capsys):
    code, _, err = run(monkeypatch, capsys, "bit-strings", "abc\n")
    assert code == 1
    assert "abc" in err


def test_unknown_problem_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit):
        main(["no-such-problem"])