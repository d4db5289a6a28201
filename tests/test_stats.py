"""Tests for the stats service and command."""

from datetime import datetime, timedelta, timezone, UTC
from decimal import Decimal

from finanzas.cli.main import cli
from finanzas.domain.stats import StatsService
from finanzas.utils.date_parser import current_month


def _may_ledger(transaction_service, fixed_expense_service):
    transaction_service.create_transaction(
        type="income", amount=Decimal("30000"), description="Sueldo",
        created_at=datetime(2024, 5, 1, 9, 0, tzinfo=UTC),
    )
    transaction_service.create_transaction(
        type="expense", amount=Decimal("5000"), description="Super",
        created_at=datetime(2024, 5, 3, 18, 0, tzinfo=UTC),
    )
    fixed_expense_service.create_fixed_expense("Internet", Decimal("2000"))


def test_monthly_stats(stats_service, transaction_service, fixed_expense_service):
    _may_ledger(transaction_service, fixed_expense_service)

    stats = stats_service.monthly_stats(2024, 4)

    assert stats.income == Decimal("30000")
    assert stats.variable_expenses == Decimal("5000")
    assert stats.fixed_expenses == Decimal("2000")
    assert stats.credits_expenses == Decimal("0")
    assert stats.total_expenses == Decimal("7000")
    assert stats.balance == Decimal("23000")


def test_monthly_stats_other_month_keeps_fixed(stats_service, transaction_service, fixed_expense_service):
    _may_ledger(transaction_service, fixed_expense_service)

    stats = stats_service.monthly_stats(2024, 5)

    assert stats.income == Decimal("0")
    assert stats.fixed_expenses == Decimal("2000")
    assert stats.balance == Decimal("-2000")


def test_monthly_stats_includes_credit_installments(stats_service, credit_service):
    credit_service.create_credit("TV", Decimal("10000"), 3, 3, 2024)

    assert stats_service.monthly_stats(2024, 4).credits_expenses == Decimal("3334")
    assert stats_service.monthly_stats(2024, 6).credits_expenses == Decimal("0")


def test_month_decided_by_configured_timezone(temp_db, transaction_service):
    # 2024-06-01 01:00 UTC is still May 31st in Montevideo
    transaction_service.create_transaction(
        type="expense", amount=Decimal("100"), description="Cena",
        created_at=datetime(2024, 6, 1, 1, 0, tzinfo=UTC),
    )

    utc_stats = StatsService(temp_db, tz=UTC)
    montevideo_stats = StatsService(temp_db, tz=timezone(timedelta(hours=-3)))

    assert utc_stats.monthly_stats(2024, 5).variable_expenses == Decimal("100")
    assert montevideo_stats.monthly_stats(2024, 4).variable_expenses == Decimal("100")
    assert montevideo_stats.monthly_stats(2024, 5).variable_expenses == Decimal("0")


def test_current_month_stats(stats_service, transaction_service):
    transaction_service.create_transaction(type="income", amount=Decimal("10"), description="Hoy")

    year, month = current_month(stats_service.tz)
    assert stats_service.current_month_stats() == stats_service.monthly_stats(year, month)
    assert stats_service.current_month_stats().income == Decimal("10")


def test_credit_helpers(stats_service, credit_service):
    credit_service.create_credit("TV", Decimal("10000"), 3, 0, 2024)

    assert len(stats_service.active_credits(2024, 1)) == 1
    assert stats_service.credits_summary(2024, 1).total_remaining == Decimal("6668")


def test_stats_command(cli_runner, cli_args, transaction_service, fixed_expense_service):
    _may_ledger(transaction_service, fixed_expense_service)

    result = cli_runner.invoke(cli, cli_args + ["stats", "--month", "2024-05"])

    assert result.exit_code == 0
    assert "May 2024" in result.output
    lines = {line.split("  ")[0].strip(): line.split()[-1] for line in result.output.splitlines() if "$" in line}
    assert lines["Income"] == "$30,000.00"
    assert lines["Variable expenses"] == "$5,000.00"
    assert lines["Fixed expenses"] == "$2,000.00"
    assert lines["Credit installments"] == "$0.00"
    assert lines["Total expenses"] == "$7,000.00"
    assert lines["Balance"] == "$23,000.00"


def test_stats_command_negative_balance(cli_runner, cli_args, fixed_expense_service):
    fixed_expense_service.create_fixed_expense("Alquiler", Decimal("18000"))

    result = cli_runner.invoke(cli, cli_args + ["stats", "--month", "2024-01"])

    assert result.exit_code == 0
    assert "-$18,000.00" in result.output


def test_stats_command_invalid_timezone(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "--timezone", "Mars/Olympus", "stats"]
    )

    assert result.exit_code == 1
    assert "Unknown timezone" in result.output


def test_default_zone_picks_month_and_classifies_timestamps(temp_db, transaction_service, month_boundary_clock):
    transaction_service.create_transaction(
        type="income", amount=Decimal("100"), description="Cena", created_at=month_boundary_clock
    )

    service = StatsService(temp_db)

    assert current_month(service.tz) == (2024, 4)
    assert service.current_month_stats().income == Decimal("100")
    assert service.monthly_stats(2024, 5).income == Decimal("0")


def test_list_transactions_for_month_defaults_to_local_zone(transaction_service, month_boundary_clock):
    transaction_service.create_transaction(
        type="expense", amount=Decimal("100"), description="Cena", created_at=month_boundary_clock
    )

    assert [t.description for t in transaction_service.list_transactions_for_month(2024, 4)] == ["Cena"]
    assert transaction_service.list_transactions_for_month(2024, 5) == []


def test_stats_command_current_month_in_local_zone(cli_runner, temp_db, transaction_service, month_boundary_clock):
    transaction_service.create_transaction(
        type="income", amount=Decimal("100"), description="Cena", created_at=month_boundary_clock
    )

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "stats"])

    assert result.exit_code == 0
    assert "May 2024" in result.output
    assert "$100.00" in result.output
