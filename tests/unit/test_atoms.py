"""Tests for shipped format predicates and the predicate registry."""

from decimal import Decimal

import pytest

from structval.atoms import CATALOG, AtomRegistry, default_registry, register


class TestPasswords:
    """Test password predicates."""

    @pytest.mark.parametrize("value,expected", [
        ("123456789", False),
        ("a123456789", True),
        ("A1234567", True),
        ("a1234", False),
        ("abcdefghij", False),
        ("пароль12345", False),
    ])
    def test_password(self, value, expected):
        assert CATALOG["password"](value) is expected

    @pytest.mark.parametrize("value,expected", [
        ("a123456789", False),
        ("Aa1!aaaa", True),
        ("Aa1aaaaa", False),
        ("Aa!", False),
    ])
    def test_strong_password(self, value, expected):
        assert CATALOG["strongPassword"](value) is expected


class TestIdentifiers:
    """Test UUID, ISBN and related identifier predicates."""

    def test_uuid4(self):
        assert CATALOG["uuid4"]("6ba7b810-9dad-41d1-80b4-00c04fd430c8")
        assert not CATALOG["uuid4"]("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
        assert not CATALOG["uuid4"]("6BA7B810-9DAD-41D1-80B4-00C04FD430C8")
        assert CATALOG["uuid4Rfc4122"]("6BA7B810-9DAD-41D1-80B4-00C04FD430C8")

    def test_uuid_any_version(self):
        assert CATALOG["uuid"]("6ba7b810-9dad-11d1-80b4-00c04fd430c8")
        assert not CATALOG["uuid"]("not-a-uuid")

    def test_isbn(self):
        assert CATALOG["isbn10"]("0306406152")
        assert CATALOG["isbn10"]("0-306-40615-2")
        assert not CATALOG["isbn10"]("0306406153")
        assert CATALOG["isbn13"]("9780306406157")
        assert not CATALOG["isbn13"]("9780306406158")

    def test_ulid(self):
        assert CATALOG["ulid"]("01ARZ3NDEKTSV4RRFFQ69G5FAV")
        assert not CATALOG["ulid"]("01ARZ3NDEKTSV4RRFFQ69G5FA")

    def test_hashes(self):
        assert CATALOG["md5"]("d41d8cd98f00b204e9800998ecf8427e")
        assert not CATALOG["md5"]("d41d8cd98f00b204e9800998ecf8427")
        assert CATALOG["sha256"]("e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855")


class TestCrypto:
    """Test cryptocurrency address predicates."""

    def test_btc_address(self):
        assert CATALOG["btcAddress"]("1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2")
        assert not CATALOG["btcAddress"]("1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN3")

    def test_bech32_address(self):
        assert CATALOG["btcLowerAddress"]("bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq")
        assert CATALOG["btcUpperAddress"]("BC1QAR0SRRR7XFKVY5L643LYDNW9RE59GTZZWF5MDQ")
        assert not CATALOG["btcLowerAddress"]("bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdp")

    def test_eth_address(self):
        assert CATALOG["ethAddress"]("0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")
        assert not CATALOG["ethAddress"]("5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed")


class TestCodes:
    """Test country and currency code predicates."""

    def test_country_codes(self):
        assert CATALOG["countryCodeAlpha2"]("CN")
        assert CATALOG["countryCodeAlpha3"]("USA")
        assert CATALOG["countryCodeNumeric"](156)
        assert CATALOG["countryCodeNumeric"]("840")
        assert not CATALOG["countryCodeAlpha2"]("XX")
        assert CATALOG["countryCode"]("DEU")

    def test_currency_codes(self):
        assert CATALOG["currency"]("USD")
        assert CATALOG["currency"]("CNY")
        assert not CATALOG["currency"]("usd")
        assert CATALOG["currencyNumeric"](978)


class TestTextFormats:
    """Test miscellaneous text predicates."""

    def test_email(self):
        assert CATALOG["email"]("user.name+tag@example.com")
        assert not CATALOG["email"]("user@")
        assert not CATALOG["email"]("a" * 250 + "@b.co")

    def test_colors(self):
        assert CATALOG["hexColor"]("#fff")
        assert CATALOG["rgb"]("rgb(255, 0, 10)")
        assert CATALOG["rgba"]("rgba(255,0,10,0.5)")
        assert CATALOG["hsl"]("hsl(360,100%,50%)")
        assert not CATALOG["rgb"]("rgb(256,0,0)")

    def test_data_uri(self):
        assert CATALOG["dataUri"]("data:text/plain;base64,SGVsbG8=")
        assert not CATALOG["dataUri"]("data:text/plain;base64,@@@")

    def test_coordinates(self):
        assert CATALOG["latitude"]("-33.8688")
        assert CATALOG["latitude"](45)
        assert not CATALOG["latitude"]("91")
        assert CATALOG["longitude"](Decimal("151.2093"))
        assert not CATALOG["longitude"]("181")

    def test_semver_and_cron(self):
        assert CATALOG["semver"]("1.2.3-rc.1+build.5")
        assert not CATALOG["semver"]("01.2.3")
        assert CATALOG["cron"]("*/5 * * * *")
        assert CATALOG["cron"]("@daily")

    def test_wrong_type_fails(self):
        assert not CATALOG["email"](42)
        assert not CATALOG["alpha"](None)
        assert not CATALOG["numeric"](True)


class TestTrailingNewline:
    """Test that anchored predicates reject a trailing newline instead of raising."""

    @pytest.mark.parametrize("name,value", [
        ("btcAddress", "1BvBMSEYstWetqTFn5Au4m4GFg7xJaNVN2\n"),
        ("btcLowerAddress", "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq\n"),
        ("btcUpperAddress", "BC1QAR0SRRR7XFKVY5L643LYDNW9RE59GTZZWF5MDQ\n"),
        ("alpha", "abc\n"),
        ("uuid4", "6ba7b810-9dad-41d1-80b4-00c04fd430c8\n"),
        ("isbn10", "0306406152\n"),
        ("isbn13", "9780306406157\n"),
        ("ethAddress", "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed\n"),
        ("email", "user@example.com\n"),
        ("md5", "d41d8cd98f00b204e9800998ecf8427e\n"),
    ])
    def test_rejected(self, name, value):
        assert CATALOG[name](value) is False


class TestAtomRegistry:
    """Test predicate registration and snapshots."""

    def test_default_holds_catalog(self):
        registry = AtomRegistry.default()
        assert set(registry.names()) == set(CATALOG)
        assert "uuid4" in registry

    def test_register_and_replace(self):
        registry = AtomRegistry()
        registry.register("yes", lambda value: True)
        registry.register("yes", lambda value: False)

        assert registry.get("yes")("anything") is False
        assert len(registry) == 1

    def test_unregister(self):
        registry = AtomRegistry({"yes": lambda value: True})
        registry.unregister("yes")
        registry.unregister("missing")
        assert "yes" not in registry

    def test_snapshot_is_frozen(self):
        registry = AtomRegistry({"a": lambda value: True})
        snapshot = registry.snapshot()
        registry.register("b", lambda value: True)

        assert "b" not in snapshot
        with pytest.raises(TypeError):
            snapshot["c"] = lambda value: True

    def test_module_register(self):
        register("alwaysTrueForTests", lambda value: True)
        try:
            assert default_registry.get("alwaysTrueForTests")("x")
        finally:
            default_registry.unregister("alwaysTrueForTests")
