from montyhall.analysis import Result
from montyhall.output import format_percentage


def test_format_percentage():
    assert format_percentage(100 / 3) == "33.33%"
    assert format_percentage(200 / 3) == "66.67%"
    assert format_percentage(None) == "undefined"


def test_instructions_end_with_blank_line(output, lines):
    output.print_instructions()
    assert lines[0] == "Welcome to Monty Hall, a brain teaser"
    assert lines[-1] == ""
    assert len(lines) == 5


def test_simulation_report(output, lines):
    output.print_simulation(1, Result(not_switch=None, do_switch=100.0))
    assert lines == [
        "After 1 simulations the chances of winning are:",
        "If you do not switch: undefined",
        "If you do switch: 100.00%",
    ]


def test_parse_error_quotes_argument(output, lines):
    output.print_parse_error("abc")
    assert lines == [
        "I'm sorry, I could not parse: 'abc' as a number so I will not run the simulation."
    ]
