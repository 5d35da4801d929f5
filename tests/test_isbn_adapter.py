from unittest.mock import MagicMock

from library_patterns.services.isbn_adapter import ExternalIsbnSystem, IsbnAdapter


def test_external_system_default_code():
    assert ExternalIsbnSystem().get_isbn_code() == "EXT-ISBN-332211"

def test_adapter_returns_external_code_unchanged():
    external = ExternalIsbnSystem("  978-84-376-0494-7 ")
    adapter = IsbnAdapter(external)
    assert adapter.get_code() == "  978-84-376-0494-7 "
    assert adapter.external is external

def test_adapter_delegates_to_external_method():
    external = MagicMock(spec=ExternalIsbnSystem)
    external.get_isbn_code.return_value = "EXT-1"

    assert IsbnAdapter(external).get_code() == "EXT-1"
    external.get_isbn_code.assert_called_once_with()

def test_external_system_has_no_get_code():
    # The adapter exists because the external API uses a different name.
    assert not hasattr(ExternalIsbnSystem(), "get_code")
