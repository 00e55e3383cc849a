"""Tests for account and chart commands."""

from sieledger.cli.main import cli


def test_account_add(cli_runner, temp_db):
    """Test adding an account."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "add", "1920", "Bank", "--type", "T"]
    )

    assert result.exit_code == 0
    assert "Created account 1920 'Bank'" in result.output


def test_account_add_lowercase_type(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "add", "3000", "Sales", "--type", "i"]
    )

    assert result.exit_code == 0
    assert temp_db.get_account("3000").type == "I"


def test_account_add_invalid_type(cli_runner, temp_db):
    """Test that unknown type codes are rejected by option parsing."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "add", "1920", "Bank", "--type", "X"]
    )

    assert result.exit_code == 2


def test_account_add_duplicate(cli_runner, temp_db, sample_accounts):
    """Test adding a duplicate account number fails."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "add", "1920", "Bank", "--type", "T"]
    )

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_account_list_empty(cli_runner, temp_db):
    """Test listing accounts when none exist."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "No accounts found" in result.output


def test_account_list_with_data(cli_runner, temp_db, sample_accounts):
    """Test listing accounts with data."""
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "Bank" in result.output
    assert "Income" in result.output
    assert result.output.index("1510") < result.output.index("1920")


def test_account_delete(cli_runner, temp_db, sample_accounts):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "delete", "1510"])

    assert result.exit_code == 0
    assert "Deleted account 1510" in result.output
    assert "1510" not in [a.number for a in temp_db.list_accounts()]


def test_account_delete_missing(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "delete", "9999"])

    assert result.exit_code == 1
    assert "Account 9999 not found" in result.output


def test_chart_import(cli_runner, temp_db, fixtures_dir):
    """Test importing a chart written by other software."""
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "chart", "import", str(fixtures_dir / "chart_bas.se")]
    )

    assert result.exit_code == 0
    assert "Created: 5 accounts" in result.output
    assert [a.number for a in temp_db.list_accounts()] == ["1910", "1920", "2440", "3000", "5010"]


def test_chart_import_reports_skipped(cli_runner, temp_db, fixtures_dir):
    temp_db.create_account(number="1920", type="T", name="Bank")

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "chart", "import", str(fixtures_dir / "chart_bas.se")]
    )

    assert result.exit_code == 0
    assert "Skipped: 1 accounts" in result.output
    assert temp_db.get_account("1920").name == "Bank"


def test_chart_import_reports_invalid_types(cli_runner, temp_db, tmp_path):
    sie_file = tmp_path / "chart.se"
    sie_file.write_bytes(
        b'#KONTO "1920" "Bank"\r\n#KTYP "1920" "X"\r\n'
        b'#KONTO "3000" "Sales"\r\n#KTYP "3000" "I"\r\n'
    )

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "chart", "import", str(sie_file)])

    assert result.exit_code == 0
    assert "Created: 1 accounts" in result.output
    assert "Invalid: 1 accounts" in result.output
    assert [a.number for a in temp_db.list_accounts()] == ["3000"]


def test_chart_import_malformed(cli_runner, temp_db, tmp_path):
    sie_file = tmp_path / "broken.se"
    sie_file.write_bytes(b'#KONTO "1920" "Bank"\r\n#KTYP "1930" "T"\r\n')

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "chart", "import", str(sie_file)])

    assert result.exit_code == 1
    assert "Line 2:" in result.output


def test_chart_export(cli_runner, temp_db, sample_accounts, tmp_path):
    output = tmp_path / "chart.se"

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "chart", "export", str(output), "--description", "Kontoplan"],
    )

    assert result.exit_code == 0
    assert "Exported 4 accounts" in result.output
    data = output.read_bytes()
    assert data.startswith(b"#FILTYP KONTO\r\n")
    assert b'#TEXT "Kontoplan"\r\n' in data


def test_chart_type_show_and_set(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "chart", "type"])
    assert result.exit_code == 0
    assert "EUBAS97" in result.output

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "chart", "type", "BAS2024"])
    assert result.exit_code == 0
    assert temp_db.get_setting("chart_type") == "BAS2024"
