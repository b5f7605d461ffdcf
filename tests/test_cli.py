import pytest

from morsedial.cli import MorseDialCLI, parse_args
from morsedial.selector import select
from morsedial.sinks import CounterBank
from morsedial.words import WordList


@pytest.fixture
def app(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("alpha\nbravo\ncharlie\n", encoding="utf-8")
    words = WordList(str(path))
    words.reload()
    return MorseDialCLI(words, CounterBank(3), unit_ms=100, lamp=False)


def test_set_inc_dec_reset(app):
    assert app._execute_command("set 1 7")
    assert app._execute_command("inc 2")
    assert app._execute_command("inc 2")
    assert app._execute_command("dec 3")
    assert app.inputs.read() == [7, 2, -1]

    assert app._execute_command("reset")
    assert app.inputs.read() == [0, 0, 0]
    assert app.status.text == "reset"


def test_bad_commands_keep_the_shell(app):
    assert app._execute_command("")
    assert app._execute_command("# just a comment")
    assert app._execute_command("set 9 1")
    assert app._execute_command("set x 1")
    assert app._execute_command("set 1")
    assert app._execute_command("frobnicate")
    assert app._execute_command('set "1')
    assert app.inputs.read() == [0, 0, 0]


def test_non_numeric_value_is_zero(app):
    app._execute_command("set 1 5")
    app._execute_command("set 1 banana")
    assert app.inputs.read() == [0, 0, 0]


def test_show_help_reload(app):
    assert app._execute_command("show")
    assert app._execute_command("help")
    assert app._execute_command("reload")
    assert len(app.words) == 3


def test_exit(app):
    assert app._execute_command("exit") is False
    assert app._execute_command("EXIT  # bye") is False


def test_driver_sees_shell_changes(app):
    app._execute_command("set 1 4")
    assert app.driver.vector_source() == [4, 0, 0]
    assert select(app.driver.vector_source(), len(app.driver.dictionary())) == select([4, 0, 0], 3)


def test_invalid_unit_rejected(tmp_path):
    with pytest.raises(ValueError):
        MorseDialCLI(WordList(), CounterBank(), unit_ms=0, lamp=False)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.unit == 250
    assert args.inputs == 5
    assert args.values is None
    assert args.lamp is True
    assert args.daemon is False

    args = parse_args(["--unit", "60", "--values", "1", "2", "--no-lamp", "--daemon", "--dict", "w.txt"])
    assert args.unit == 60
    assert args.values == ["1", "2"]
    assert args.lamp is False
    assert args.daemon
    assert args.dict_path == "w.txt"
