import pytest

from source_explorer.address import AddressResolver, WebAddress, resolve_address


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_blank_input_does_not_resolve(raw):
    assert resolve_address(raw) is None


def test_bare_host_is_retried_with_http_prefix():
    """``example.com`` has no scheme, so only the ``http://`` retry can succeed."""
    address = resolve_address("example.com")
    assert address == WebAddress(raw="example.com", url="http://example.com")


def test_host_with_port_is_retried_with_http_prefix():
    address = resolve_address("localhost:8080/index.html")
    assert address is not None
    assert address.url == "http://localhost:8080/index.html"


def test_address_with_scheme_resolves_directly():
    address = resolve_address("https://www.python.org/downloads/")
    assert address is not None
    assert address.url == "https://www.python.org/downloads/"
    assert str(address) == address.url


def test_surrounding_whitespace_is_ignored():
    address = resolve_address("  https://example.org  ")
    assert address is not None
    assert address.raw == "https://example.org"
    assert address.url == "https://example.org"


def test_http_prefix_without_host_is_not_retried():
    assert resolve_address("http://") is None
    assert resolve_address("https://") is None


@pytest.mark.parametrize(
    "raw",
    [
        "http://exa mple.com",
        "http://example.com:notaport/",
        "http://example.com:99999/",
        "://example.com",
    ],
)
def test_malformed_addresses_fail_without_raising(raw):
    assert resolve_address(raw) is None


def test_file_urls_are_accepted(tmp_path):
    page = tmp_path / "page.html"
    address = resolve_address(page.as_uri())
    assert address is not None
    assert address.url.startswith("file://")


def test_resolver_object_delegates():
    assert AddressResolver().resolve("example.com").url == "http://example.com"
    assert AddressResolver().resolve("") is None
