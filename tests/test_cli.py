"""Tests for the command-line interface."""

import logging
import os

from spendbook.cli.main import cli


def _invoke(runner, db_path, *args):
    return runner.invoke(cli, ["--db-path", db_path, *args])


def _add_expense(runner, db_path, amount="12.50", category="Food", date="2024-03-15", *extra):
    result = _invoke(
        runner,
        db_path,
        "expense",
        "add",
        "--amount",
        amount,
        "--category",
        category,
        "--date",
        date,
        *extra,
    )
    assert result.exit_code == 0, result.output
    return result.output.splitlines()[0].split()[-1]


def test_help_does_not_touch_database(cli_runner, cli_db_path):
    result = _invoke(cli_runner, cli_db_path, "--help")

    assert result.exit_code == 0
    assert "expense" in result.output
    assert not os.path.exists(cli_db_path)


def test_init_seeds_once(cli_runner, cli_db_path):
    result = _invoke(cli_runner, cli_db_path, "init")
    assert result.exit_code == 0
    assert "Created 8 default categories: Food, Transport" in result.output

    result = _invoke(cli_runner, cli_db_path, "init")
    assert result.exit_code == 0
    assert "Database already initialized." in result.output


def test_db_path_from_environment(cli_runner, cli_db_path):
    result = cli_runner.invoke(cli, ["category", "list"], env={"SPENDBOOK_DB_PATH": cli_db_path})

    assert result.exit_code == 0
    assert "Food" in result.output


class TestCategoryCommands:
    """Tests for the category command group."""

    def test_list_shows_seeded_categories(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "list")

        assert result.exit_code == 0
        assert "Categories:" in result.output
        lines = [line for line in result.output.splitlines() if "(ID:" in line]
        assert len(lines) == 8
        assert "Food" in lines[0]
        assert "Other" in lines[-1]

    def test_create_and_duplicate(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "create", "Pets", "--icon", "paw")
        assert result.exit_code == 0
        assert "Created category 'Pets'" in result.output

        result = _invoke(cli_runner, cli_db_path, "category", "create", "pets")
        assert result.exit_code == 1
        assert "Category name must be unique." in result.output

    def test_create_empty_name(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "create", "  ")
        assert result.exit_code == 1
        assert "Category name is required." in result.output

    def test_rename(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "rename", "food", "Groceries")
        assert result.exit_code == 0

        result = _invoke(cli_runner, cli_db_path, "category", "list")
        assert "Groceries" in result.output
        assert "Food" not in result.output

    def test_archive_and_restore(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "archive", "Shopping")
        assert result.exit_code == 0

        active = _invoke(cli_runner, cli_db_path, "category", "list").output
        everything = _invoke(cli_runner, cli_db_path, "category", "list", "--all").output
        assert "Shopping" not in active
        assert "Shopping [archived]" in everything

        result = _invoke(cli_runner, cli_db_path, "category", "restore", "shopping")
        assert result.exit_code == 0
        assert "Shopping" in _invoke(cli_runner, cli_db_path, "category", "list").output

    def test_reorder(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "reorder", "Transport", "Food")
        assert result.exit_code == 0
        assert "Reordered 2 categories" in result.output

        lines = [
            line
            for line in _invoke(cli_runner, cli_db_path, "category", "list").output.splitlines()
            if "(ID:" in line
        ]
        assert "Transport" in lines[0]
        assert "Food" in lines[1]

    def test_unknown_category(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "category", "archive", "Nope")
        assert result.exit_code == 1
        assert "Category Nope not found" in result.output


class TestExpenseCommands:
    """Tests for the expense command group."""

    def test_add_and_show(self, cli_runner, cli_db_path):
        result = _invoke(
            cli_runner,
            cli_db_path,
            "expense",
            "add",
            "--amount",
            "$12.50",
            "--category",
            "food",
            "--date",
            "2024-03-15",
            "--merchant",
            "Corner Cafe",
        )
        assert result.exit_code == 0, result.output
        assert "  Amount: $12.50" in result.output
        assert "  Date: 2024-03-15" in result.output
        expense_id = result.output.splitlines()[0].split()[-1]

        result = _invoke(cli_runner, cli_db_path, "expense", "show", expense_id)
        assert result.exit_code == 0
        assert "Category: Food" in result.output
        assert "Merchant: Corner Cafe" in result.output

    def test_add_zero_amount_rejected(self, cli_runner, cli_db_path):
        result = _invoke(
            cli_runner, cli_db_path, "expense", "add", "--amount", "0", "--category", "Food"
        )
        assert result.exit_code == 1
        assert "Amount must be greater than zero." in result.output

        listed = _invoke(
            cli_runner, cli_db_path, "expense", "list", "--start-date", "1970-01-01",
            "--end-date", "2999-12-31",
        )
        assert "No expenses found." in listed.output

    def test_add_bad_amount(self, cli_runner, cli_db_path):
        result = _invoke(
            cli_runner, cli_db_path, "expense", "add", "--amount", "lots", "--category", "Food"
        )
        assert result.exit_code == 1
        assert "Could not parse amount" in result.output

    def test_add_with_currency(self, cli_runner, cli_db_path):
        result = _invoke(
            cli_runner, cli_db_path, "expense", "add", "--amount", "5", "--category", "Food",
            "--currency", "eur",
        )
        assert result.exit_code == 0
        assert "EUR 5.00" in result.output

    def test_list_filters(self, cli_runner, cli_db_path):
        _add_expense(cli_runner, cli_db_path, "10", "Food", "2024-03-10", "--merchant", "Bakery")
        _add_expense(cli_runner, cli_db_path, "20", "Transport", "2024-03-12")
        _add_expense(cli_runner, cli_db_path, "30", "Food", "2024-04-01")

        march = ["--start-date", "2024-03-01", "--end-date", "2024-03-31"]
        result = _invoke(cli_runner, cli_db_path, "expense", "list", *march)
        assert "Found 2 expense(s)" in result.output

        result = _invoke(cli_runner, cli_db_path, "expense", "list", *march, "--category", "Food")
        assert "Found 1 expense(s)" in result.output
        assert "Bakery" in result.output

        result = _invoke(cli_runner, cli_db_path, "expense", "list", *march, "--search", "transport")
        assert "Found 1 expense(s)" in result.output
        assert "$20.00" in result.output

    def test_edit(self, cli_runner, cli_db_path):
        expense_id = _add_expense(cli_runner, cli_db_path)

        result = _invoke(
            cli_runner, cli_db_path, "expense", "edit", expense_id, "--amount", "99", "--note", "Dinner"
        )
        assert result.exit_code == 0
        assert f"Updated expense {expense_id}" in result.output

        shown = _invoke(cli_runner, cli_db_path, "expense", "show", expense_id).output
        assert "$99.00" in shown
        assert "Note: Dinner" in shown

    def test_edit_without_changes(self, cli_runner, cli_db_path):
        expense_id = _add_expense(cli_runner, cli_db_path)
        result = _invoke(cli_runner, cli_db_path, "expense", "edit", expense_id)
        assert "Nothing to update." in result.output

    def test_delete_and_restore(self, cli_runner, cli_db_path):
        expense_id = _add_expense(cli_runner, cli_db_path)

        result = _invoke(cli_runner, cli_db_path, "expense", "delete", expense_id)
        assert result.exit_code == 0
        assert f"Deleted expense {expense_id}" in result.output

        result = _invoke(cli_runner, cli_db_path, "expense", "show", expense_id)
        assert result.exit_code == 1
        assert f"Error: Expense {expense_id} not found" in result.output

        result = _invoke(cli_runner, cli_db_path, "expense", "restore", expense_id)
        assert result.exit_code == 0
        assert _invoke(cli_runner, cli_db_path, "expense", "show", expense_id).exit_code == 0

    def test_missing_expense(self, cli_runner, cli_db_path):
        for command in ("show", "delete", "restore"):
            result = _invoke(cli_runner, cli_db_path, "expense", command, "missing")
            assert result.exit_code == 1
            assert "Error: Expense missing not found" in result.output

        result = _invoke(cli_runner, cli_db_path, "expense", "edit", "missing", "--note", "x")
        assert result.exit_code == 1
        assert "Error: Expense missing not found" in result.output


class TestSummaryCommand:
    """Tests for the summary command."""

    def test_summary_with_breakdown(self, cli_runner, cli_db_path):
        _add_expense(cli_runner, cli_db_path, "7.50", "Food", "2024-03-10")
        _add_expense(cli_runner, cli_db_path, "2.50", "Transport", "2024-03-12")
        _add_expense(cli_runner, cli_db_path, "100", "Food", "2024-04-01")

        result = _invoke(cli_runner, cli_db_path, "summary", "--month", "2024-03")

        assert result.exit_code == 0
        assert "Summary for 2024-03" in result.output
        assert "Total: 10.00" in result.output
        assert "Expenses: 2" in result.output
        rows = [line for line in result.output.splitlines() if line.endswith("%")]
        assert rows[0].startswith("Food")
        assert rows[0].endswith("75%")
        assert rows[1].startswith("Transport")
        assert rows[1].endswith("25%")

    def test_empty_month(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "summary", "--month", "2020-01")

        assert result.exit_code == 0
        assert "Total: 0.00" in result.output
        assert "No expenses recorded this month." in result.output

    def test_invalid_month(self, cli_runner, cli_db_path):
        result = _invoke(cli_runner, cli_db_path, "summary", "--month", "2024-13")
        assert result.exit_code == 1
        assert "Could not parse month" in result.output


def test_restore_missing_expense_writes_nothing(cli_runner, cli_db_path, caplog):
    with caplog.at_level(logging.WARNING):
        result = _invoke(cli_runner, cli_db_path, "expense", "restore", "missing")

    assert result.exit_code == 1
    assert "Error: Expense missing not found" in result.output
    assert "nothing updated" not in caplog.text
