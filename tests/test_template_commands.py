"""Tests for template commands."""

from sieledger.cli.main import cli


def test_template_create(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "template", "create", "SALE",
            "--name", "Cash sale",
            "--text", "Sale {ref}",
            "-t", "1920={amount}",
            "-t", "3000=-{amount}",
        ],
    )

    assert result.exit_code == 0
    assert "Created template 'SALE' with 2 transactions" in result.output
    assert temp_db.get_template("SALE").transactions == [("1920", "{amount}"), ("3000", "-{amount}")]


def test_template_create_malformed_transaction(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "template", "create", "SALE", "-t", "1920"]
    )

    assert result.exit_code == 1
    assert "Use KEY=VALUE" in result.output


def test_template_create_too_long_id(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "template", "create", "TOOLONG"]
    )

    assert result.exit_code == 1
    assert "max 6 characters" in result.output


def test_template_create_existing(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "template", "create", "SALE", "--name", "Other"]
    )
    assert result.exit_code == 1
    assert "already exists" in result.output

    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "template", "create", "SALE", "--name", "Other", "--replace"],
    )
    assert result.exit_code == 0
    assert temp_db.get_template("SALE").name == "Other"


def test_template_list(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "template", "list"])

    assert result.exit_code == 0
    assert "SALE" in result.output
    assert "Cash sale" in result.output


def test_template_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "template", "list"])

    assert result.exit_code == 0
    assert "No templates found" in result.output


def test_template_show(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "template", "show", "SALE"])

    assert result.exit_code == 0
    assert "Sale {ref}" in result.output
    assert "-{amount}" in result.output


def test_template_show_missing(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "template", "show", "NOPE"])

    assert result.exit_code == 1
    assert "Template 'NOPE' does not exist" in result.output


def test_template_delete(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "template", "delete", "SALE"])

    assert result.exit_code == 0
    assert temp_db.get_template("SALE") is None


def test_template_build(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path,
            "template", "build", "SALE",
            "--set", "amount=400",
            "--set", "ref=A1",
            "--date", "2024-06-15",
        ],
    )

    assert result.exit_code == 0
    assert "2024-06-15 Sale A1" in result.output
    assert "-400" in result.output
    assert "Balanced: yes" in result.output


def test_template_build_missing_value(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "template", "build", "SALE", "--set", "amount=400"]
    )

    assert result.exit_code == 1
    assert "Unable to substitute template key '{ref}'" in result.output


def test_template_build_invalid_date(cli_runner, temp_db, sample_template):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "template", "build", "SALE", "--date", "someday"],
    )

    assert result.exit_code == 1
    assert "Invalid date" in result.output
