"""Integration tests for the database management CLI."""

import json
import sys
from unittest.mock import patch

import pytest
from manage import main, non_negative_int
from registration.domain import registration


@pytest.fixture()
def initialized():
    """The session fixture has already initialized the domain."""
    with patch.object(registration, "init") as init:
        yield init


class TestSchemaCommands:
    def test_setup_db(self, initialized, capsys):
        with patch("registration.utils.db.setup_db") as setup_db:
            main(["setup-db"])

        initialized.assert_called_once_with()
        setup_db.assert_called_once_with(registration)
        assert "Done." in capsys.readouterr().out

    def test_drop_db(self, initialized, capsys):
        with patch("registration.utils.db.drop_db") as drop_db:
            main(["drop-db"])

        drop_db.assert_called_once_with(registration)
        assert "Done." in capsys.readouterr().out


class TestListDevices:
    def test_prints_json_lines_only(self, initialized, directory, capsys):
        for token in ("a", "b"):
            directory.register(token)

        with patch("registration.utils.logging.configure_logging"):
            main(["list-devices", "--count", "5"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert {json.loads(line)["regId"] for line in lines} == {"a", "b"}

    def test_logging_goes_to_stderr(self, initialized):
        with patch("registration.utils.logging.configure_logging") as configure:
            main(["list-devices", "--count", "1"])

        configure.assert_called_once_with(stream=sys.stderr)

    def test_count_bounds_output(self, initialized, directory, capsys):
        for token in ("a", "b", "c"):
            directory.register(token)

        with patch("registration.utils.logging.configure_logging"):
            main(["list-devices", "--count", "2"])

        assert len(capsys.readouterr().out.strip().splitlines()) == 2

    def test_negative_count_is_a_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["list-devices", "--count", "-1"])

        assert exc.value.code == 2
        assert "must be >= 0" in capsys.readouterr().err

    def test_non_numeric_count_is_a_usage_error(self):
        with pytest.raises(SystemExit):
            main(["list-devices", "--count", "many"])


class TestNonNegativeInt:
    @pytest.mark.parametrize("value, expected", [("0", 0), ("20", 20)])
    def test_accepts(self, value, expected):
        assert non_negative_int(value) == expected

    def test_rejects_negative(self):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            non_negative_int("-3")


def test_command_is_required():
    with pytest.raises(SystemExit):
        main([])
