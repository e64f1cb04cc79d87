import pytest

from intl_lint.cli import build_parser, main, parse_options
from intl_lint.core.config import LintOptions


def test_defaults():
    assert parse_options([]) == LintOptions(
        silent=False, path="./app", translation_path="./translations/en-us.yaml"
    )


def test_flags_and_aliases():
    options = parse_options(["-s", "-p", "web/app", "--translation-path", "i18n/fr.yaml"])
    assert options == LintOptions(silent=True, path="web/app", translation_path="i18n/fr.yaml")
    assert parse_options(["--silent", "--path", "x"]).silent is True


def test_help_mentions_every_flag():
    text = build_parser().format_help()
    for flag in ("--silent", "--path", "--translation-path"):
        assert flag in text


def test_scenario_all_present(make_project, monkeypatch, capsys):
    root = make_project(
        {"controllers/orders.js": "this.intl.t('orders.new')"},
        translations="orders:\n  new: New Order\n",
    )
    monkeypatch.chdir(root)

    assert main([]) == 0

    out = capsys.readouterr().out
    assert "Scanned 1 file(s), found 1 unique translation key(s)" in out
    assert "All translations present" in out
    assert "Translation validation passed!" in out


def test_scenario_missing_key_fails(make_project, monkeypatch, capsys):
    root = make_project(
        {"templates/orders.hbs": '{{t "orders.cancel"}}'},
        translations="orders:\n  new: New Order\n",
    )
    monkeypatch.chdir(root)

    assert main([]) == 1

    captured = capsys.readouterr()
    assert "- orders.cancel" in captured.out
    assert "Translation validation failed!" in captured.err


def test_scenario_missing_key_silent(make_project, monkeypatch, capsys):
    root = make_project(
        {"templates/orders.hbs": '{{t "orders.cancel"}}'},
        translations="orders:\n  new: New Order\n",
    )
    monkeypatch.chdir(root)

    assert main(["--silent"]) == 0

    out = capsys.readouterr().out
    assert "- orders.cancel" in out
    assert "completed with warnings (silent mode)" in out


def test_scenario_missing_project_path(tmp_path, monkeypatch, capsys, write_file):
    write_file("translations/en-us.yaml", "orders: {}\n")
    monkeypatch.chdir(tmp_path)

    assert main(["--path", "./nowhere"]) == 1

    captured = capsys.readouterr()
    expected = str((tmp_path / "nowhere").resolve())
    assert f"[Fleetbase] Error: Project path not found: {expected}" in captured.err
    assert "Scanned" not in captured.out


def test_missing_translation_file(make_project, monkeypatch, capsys):
    root = make_project({"a.hbs": '{{t "a"}}'})
    monkeypatch.chdir(root)

    assert main([]) == 1

    assert "Error: Translation file not found:" in capsys.readouterr().err


def test_malformed_translation_file(make_project, monkeypatch, capsys):
    root = make_project({"a.hbs": '{{t "a"}}'}, translations="a: [b\n")
    monkeypatch.chdir(root)

    assert main([]) == 1

    captured = capsys.readouterr()
    assert "Failed to parse translation file" in captured.err
    assert "Translation Linter" not in captured.out


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_latin1_source_file_does_not_abort(make_project, monkeypatch, capsys):
    root = make_project({}, translations="orders:\n  new: New Order\n")
    (root / "app" / "legacy.js").write_bytes("// café\nthis.intl.t('orders.new')".encode("latin-1"))
    monkeypatch.chdir(root)

    assert main([]) == 0

    assert "All translations present" in capsys.readouterr().out
