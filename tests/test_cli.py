from pathlib import Path

import pytest

from form_assist.cli import build_parser


def test_fill_requires_saved_analysis() -> None:
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["fill", "--url", "https://example.com"])


def test_fill_arguments() -> None:
    args = build_parser().parse_args(
        ["fill", "--url", "https://example.com", "--analysis", "data/run/analysis.json", "--headed"]
    )
    assert args.command == "fill"
    assert args.analysis == Path("data/run/analysis.json")
    assert args.headed is True
    assert args.verbose is False


@pytest.mark.parametrize("command", ["discover", "analyze", "autofill"])
def test_commands_need_a_url(command: str) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([command])
