import pytest

from cellcli.cli import SimpleCLI
from cellcli.command import Command
from cellcli.errors import CommandErrorType


def test_callback_receives_parsed_value_and_command_is_reset():
    cli = SimpleCLI()
    seen = []
    cmd = cli.add_command("echo", lambda c: seen.append(c.get_argument("text").value))
    cmd.add_positional_argument("text")
    cli.parse("echo hello")
    assert seen == ["hello"]
    assert cli.get_command("echo").get_argument("text").is_set is False
    assert not cli.available


def test_unknown_command_is_queued_as_error():
    cli = SimpleCLI()
    cli.add_command("ls")
    cli.parse("nope")
    assert cli.errored
    error = cli.pop_error()
    assert error.type is CommandErrorType.COMMAND_NOT_FOUND
    assert error.data == "nope"
    assert error.command is None
    assert cli.pop_error() is None


def test_on_error_callback_receives_error():
    cli = SimpleCLI()
    errors = []
    cli.set_on_error(errors.append)
    cli.parse("missing")
    assert len(errors) == 1
    assert errors[0].type is CommandErrorType.COMMAND_NOT_FOUND
    assert cli.errored is False


def test_missing_argument_error_names_command_and_argument():
    cli = SimpleCLI()
    cmd = cli.add_command("set", lambda c: None)
    cmd.add_argument("key")
    cli.parse("set")
    error = cli.pop_error()
    assert error.type is CommandErrorType.MISSING_ARGUMENT
    assert error.command is cmd
    assert error.argument.name == "key"


def test_command_without_callback_is_queued_as_copy():
    cli = SimpleCLI()
    cmd = cli.add_command("wrm")
    cmd.add_positional_argument("num")
    cli.parse("wrm 7")
    assert cli.available
    assert cli.queued_commands == 1
    popped = cli.pop_command()
    assert popped is not cmd
    assert popped.get_argument("num").value == "7"
    assert cmd.get_argument("num").is_set is False
    assert cli.pop_command() is None


def test_pause_queues_and_unpause_runs_callbacks():
    cli = SimpleCLI()
    seen = []
    cli.add_single_argument_command("say", lambda c: seen.append(c.get_argument(0).value))
    cli.pause()
    assert cli.paused
    cli.parse("say hi")
    assert seen == []
    assert cli.queued_commands == 1
    cli.unpause()
    assert cli.paused is False
    assert seen == ["hi"]
    assert cli.available is False


def test_unpause_delivers_queued_errors():
    cli = SimpleCLI()
    errors = []
    cli.set_on_error(errors.append)
    cli.pause()
    cli.parse("bogus")
    assert errors == []
    assert cli.queued_errors == 1
    cli.unpause()
    assert [e.data for e in errors] == ["bogus"]
    assert cli.errored is False


def test_unpause_keeps_commands_without_callback():
    cli = SimpleCLI()
    cli.add_command("df")
    cli.pause()
    cli.parse("df")
    cli.unpause()
    assert cli.queued_commands == 1
    assert cli.pop_command().name == "df"


def test_several_lines_are_handled_in_order():
    cli = SimpleCLI()
    seen = []
    cli.add_command("a", lambda c: seen.append(c.name))
    cli.add_command("b", lambda c: seen.append(c.name))
    cli.parse("a;;b\nA")
    assert seen == ["a", "b", "a"]


def test_zero_sized_queues_keep_nothing():
    cli = SimpleCLI(command_queue_size=0, error_queue_size=0)
    cli.add_command("ls")
    cli.parse("ls")
    cli.parse("other")
    assert cli.available is False
    assert cli.errored is False


def test_bounded_queue_drops_oldest_entries():
    cli = SimpleCLI(command_queue_size=2)
    cmd = cli.add_command("n")
    cmd.add_positional_argument("v")
    for value in ["1", "2", "3", "4", "5"]:
        cli.parse(f"n {value}")
    assert cli.queued_commands < 5
    values = []
    while cli.available:
        values.append(cli.pop_command().get_argument("v").value)
    assert values[-1] == "5"
    assert values == sorted(values)
    assert "1" not in values


def test_get_command_uses_abbreviation_template():
    cli = SimpleCLI()
    cmd = cli.add_single_argument_command("r/elay")
    assert cli.get_command("r") is cmd
    assert cli.get_command("relay") is cmd
    assert cli.get_command("x") is None
    assert cli.get_command(None) is None


def test_case_sensitivity_applies_to_existing_and_new_commands():
    cli = SimpleCLI()
    seen = []
    cli.add_command("echo", lambda c: seen.append(c.name))
    cli.parse("ECHO")
    assert seen == ["echo"]
    cli.set_case_sensitive(True)
    later = cli.add_command("ping")
    assert later.case_sensitive is True
    cli.parse("ECHO")
    assert seen == ["echo"]
    assert cli.pop_error().type is CommandErrorType.COMMAND_NOT_FOUND


def test_boundless_command_collects_all_values():
    cli = SimpleCLI()
    seen = []
    cli.add_boundless_command("sum", lambda c: seen.append([a.value for a in c.arguments]))
    cli.parse("sum 1 2 3")
    assert seen == [["1", "2", "3"]]
    assert cli.get_command("sum").arguments == []


def test_single_argument_command_takes_rest_of_line():
    cli = SimpleCLI()
    seen = []
    cli.add_single_argument_command("cat", lambda c: seen.append(c.get_argument(0).value))
    cli.parse("cat a b")
    assert seen == ["a b"]


def test_blank_line_reports_not_found_without_data():
    cli = SimpleCLI()
    cli.add_command("ls")
    cli.parse(" ")
    error = cli.pop_error()
    assert error.type is CommandErrorType.COMMAND_NOT_FOUND
    assert error.data is None


def test_none_input_does_nothing():
    cli = SimpleCLI()
    cli.parse(None)
    assert cli.errored is False
    assert cli.available is False


def test_add_command_without_name_raises():
    cli = SimpleCLI()
    with pytest.raises(ValueError):
        cli.add_command(None)


def test_to_string_joins_command_usage():
    cli = SimpleCLI()
    ls = cli.add_command("ls")
    ping = cli.add_command("ping")
    ping.description = "check"
    assert cli.to_string(False) == "ls\r\nping\r\n"
    full = cli.to_string()
    assert full == ls.to_string() + "\r\n\r\n" + ping.to_string() + "\r\n\r\n"
    assert str(cli) == full


def test_added_command_is_a_command_in_registry():
    cli = SimpleCLI()
    cmd = cli.add_command("df")
    assert isinstance(cmd, Command)
    assert cli.commands == [cmd]