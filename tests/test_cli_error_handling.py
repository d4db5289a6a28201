"""Tests for CLI error helpers."""

from decimal import Decimal

import click
import pytest

from finanzas.cli.error_handling import handle_domain_error, parse_amount_or_exit
from finanzas.domain.errors import NotFoundError


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_handle_domain_error_exits(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        handle_domain_error(_ctx(), NotFoundError("Credit 3 not found"))

    assert excinfo.value.exit_code == 1
    assert capsys.readouterr().err.strip() == "Error: Credit 3 not found"


def test_parse_amount_or_exit_returns_decimal():
    assert parse_amount_or_exit(_ctx(), "UYU 1.500,00") == Decimal("1500.00")


def test_parse_amount_or_exit_rejects_garbage(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        parse_amount_or_exit(_ctx(), "mucho")

    assert excinfo.value.exit_code == 1
    assert "Invalid amount format" in capsys.readouterr().err
