import pytest

from intl_lint.core.exceptions import TranslationParseError
from intl_lint.domain.resolver import key_exists
from intl_lint.infrastructure.loader import load_translations, parse_translations


def test_parses_nested_mapping():
    document = parse_translations(
        """
orders:
  new: New Order
  status:
    pending: Pending
    cancelled: ~
"""
    )
    assert document == {
        "orders": {
            "new": "New Order",
            "status": {"pending": "Pending", "cancelled": None},
        }
    }


@pytest.mark.parametrize("text", ["", "   \n\n  \n", "# only a comment\n"])
def test_blank_document_is_empty_mapping(text):
    assert parse_translations(text) == {}


def test_malformed_yaml_raises_parse_error():
    with pytest.raises(TranslationParseError) as exc_info:
        parse_translations("orders:\n  new: [unclosed\n", source="en-us.yaml")

    assert exc_info.value.details["path"] == "en-us.yaml"
    assert exc_info.value.__cause__ is not None


def test_yes_no_keys_stay_strings():
    document = parse_translations("common:\n  yes: Yes\n  no: No\n  on: On\n  off: Off\n")

    assert set(document["common"]) == {"yes", "no", "on", "off"}
    assert document["common"]["yes"] == "Yes"
    assert key_exists("common.no", document)


def test_true_false_still_booleans_as_values():
    document = parse_translations("flags:\n  enabled: true\n")
    assert document["flags"]["enabled"] is True


def test_non_string_keys_are_normalized():
    document = parse_translations("errors:\n  404: Not found\n  true: Yes\n")

    assert key_exists("errors.404", document)
    assert key_exists("errors.true", document)


def test_top_level_list_is_returned_as_is():
    document = parse_translations("- a\n- b\n")
    assert document == ["a", "b"]
    assert not key_exists("a", document)


def test_load_translations_reads_file(write_file):
    path = write_file("translations/en-us.yaml", "orders:\n  new: New Order\n")
    assert load_translations(path) == {"orders": {"new": "New Order"}}


def test_load_translations_parse_error_names_file(write_file):
    path = write_file("translations/en-us.yaml", "orders: {new: 'x'\n")

    with pytest.raises(TranslationParseError) as exc_info:
        load_translations(path)

    assert str(path) in exc_info.value.message


def test_load_translations_tolerates_invalid_utf8(tmp_path):
    path = tmp_path / "en-us.yaml"
    path.write_bytes("orders:\n  new: Caf\xe9\n".encode("latin-1"))

    document = load_translations(path)

    assert key_exists("orders.new", document)
    assert document["orders"]["new"] == "Caf�"
