import pytest

from highwayhash.cli import main
from highwayhash.core import hash64


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_prints_both_hashes(capsys):
    assert main(["Hello world!"]) == 0
    lines = _lines(capsys)
    assert len(lines) == 2
    expected = hash64(b"Hello world!", (1, 2, 3, 4))
    assert lines[0] == f"Hash   : {expected}"
    assert lines[1] == f"HashCat: {expected}"


def test_one_shot_and_incremental_agree_for_long_text(capsys):
    text = "abcdefghijklmnopqrstuvwxyz0123456789" * 3
    assert main([text]) == 0
    first, second = _lines(capsys)
    assert first.split(":", 1)[1].strip() == second.split(":", 1)[1].strip()
    assert int(first.split(":", 1)[1]) == hash64(text.encode(), (1, 2, 3, 4))


def test_empty_text_is_hashed(capsys):
    assert main([""]) == 0
    first, _ = _lines(capsys)
    assert first == f"Hash   : {hash64(b'', (1, 2, 3, 4))}"


@pytest.mark.parametrize("argv", [[], ["a", "b"]])
def test_wrong_argument_count(capsys, argv):
    assert main(argv) == 1
    assert _lines(capsys) == ["Please provide 1 argument with a text to hash"]


def test_different_texts_give_different_output(capsys):
    main(["alpha"])
    out_alpha = capsys.readouterr().out
    main(["beta"])
    out_beta = capsys.readouterr().out
    assert out_alpha != out_beta
    assert out_alpha.startswith("Hash   : ")