"""Shipped format predicates ("atoms").

Every predicate takes the node's raw value and returns a bool. Predicates never
raise: a value of the wrong type simply fails the check.
"""

import hashlib
import re
from decimal import Decimal
from typing import Any, Callable, Dict

from .codes import (
    COUNTRY_ALPHA2,
    COUNTRY_ALPHA3,
    COUNTRY_NUMERIC,
    CURRENCY_CODES,
    CURRENCY_NUMERIC,
)

Predicate = Callable[[Any], bool]

PASSWORD_MIN_LENGTH = 8

NUMERIC_RE = re.compile(r"^[-+]?[0-9]+(?:\.[0-9]+)?$")
NUMBER_RE = re.compile(r"^[0-9]+$")
ALPHA_RE = re.compile(r"^[a-zA-Z]+$")
ALPHA_NUMERIC_RE = re.compile(r"^[a-zA-Z0-9]+$")
PHONE_RE = re.compile(r"^\+?[0-9]{6,15}$")
E164_RE = re.compile(r"^\+[1-9]?[0-9]{7,14}$")
USERNAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9_.-]{2,31}$")
EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

HEXADECIMAL_RE = re.compile(r"^(0[xX])?[0-9a-fA-F]+$")
HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_BYTE = r"(?:0|[1-9]\d?|1\d\d?|2[0-4]\d|25[0-5])"
_PERCENT = r"(?:0|[1-9]\d?|100)%"
_ALPHA_CHANNEL = r"(?:(?:0\.[0-9]*)|[01])"
RGB_RE = re.compile(
    rf"^rgb\(\s*(?:{_BYTE}\s*,\s*{_BYTE}\s*,\s*{_BYTE}"
    rf"|{_PERCENT}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT})\s*\)$"
)
RGBA_RE = re.compile(
    rf"^rgba\(\s*(?:{_BYTE}\s*,\s*{_BYTE}\s*,\s*{_BYTE}"
    rf"|{_PERCENT}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT})\s*,\s*{_ALPHA_CHANNEL}\s*\)$"
)
_HUE = r"(?:0|[1-9]\d?|[12]\d\d|3[0-5]\d|360)"
HSL_RE = re.compile(rf"^hsl\(\s*{_HUE}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*\)$")
HSLA_RE = re.compile(
    rf"^hsla\(\s*{_HUE}\s*,\s*{_PERCENT}\s*,\s*{_PERCENT}\s*,\s*{_ALPHA_CHANNEL}\s*\)$"
)

BASE64_RE = re.compile(
    r"^(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})$"
)
BASE64_URL_RE = re.compile(
    r"^(?:[A-Za-z0-9\-_]{4})*(?:[A-Za-z0-9\-_]{2}==|[A-Za-z0-9\-_]{3}=|[A-Za-z0-9\-_]{4})$"
)
BASE64_RAW_URL_RE = re.compile(r"^(?:[A-Za-z0-9\-_]{4})*(?:[A-Za-z0-9\-_]{2,4})$")
DATA_URI_RE = re.compile(r"^data:((?:\w+/(?:[^;]|;[^;])+)?)$")

ISBN10_RE = re.compile(r"^(?:[0-9]{9}X|[0-9]{10})$")
ISBN13_RE = re.compile(r"^(?:97[89][0-9]{10})$")

_HEX = "0-9a-f"
UUID_RE = re.compile(rf"^[{_HEX}]{{8}}-[{_HEX}]{{4}}-[{_HEX}]{{4}}-[{_HEX}]{{4}}-[{_HEX}]{{12}}$")
UUID3_RE = re.compile(rf"^[{_HEX}]{{8}}-[{_HEX}]{{4}}-3[{_HEX}]{{3}}-[{_HEX}]{{4}}-[{_HEX}]{{12}}$")
UUID4_RE = re.compile(rf"^[{_HEX}]{{8}}-[{_HEX}]{{4}}-4[{_HEX}]{{3}}-[89ab][{_HEX}]{{3}}-[{_HEX}]{{12}}$")
UUID5_RE = re.compile(rf"^[{_HEX}]{{8}}-[{_HEX}]{{4}}-5[{_HEX}]{{3}}-[89ab][{_HEX}]{{3}}-[{_HEX}]{{12}}$")
UUID_RFC4122_RE = re.compile(UUID_RE.pattern, re.IGNORECASE)
UUID3_RFC4122_RE = re.compile(UUID3_RE.pattern, re.IGNORECASE)
UUID4_RFC4122_RE = re.compile(UUID4_RE.pattern, re.IGNORECASE)
UUID5_RFC4122_RE = re.compile(UUID5_RE.pattern, re.IGNORECASE)
ULID_RE = re.compile(r"^[A-HJKMNP-TV-Z0-9]{26}$", re.IGNORECASE)

# hex digest length per algorithm
DIGEST_LENGTHS: Dict[str, int] = {
    "md4": 32,
    "md5": 32,
    "sha256": 64,
    "sha384": 96,
    "sha512": 128,
    "ripemd128": 32,
    "ripemd160": 40,
    "tiger128": 32,
    "tiger160": 40,
    "tiger192": 48,
}

ASCII_RE = re.compile(r"^[\x00-\x7F]+$")
PRINTABLE_ASCII_RE = re.compile(r"^[\x20-\x7E]+$")
MULTIBYTE_RE = re.compile(r"[^\x00-\x7F]")

LATITUDE_RE = re.compile(r"^[-+]?(?:[1-8]?\d(?:\.\d+)?|90(?:\.0+)?)$")
LONGITUDE_RE = re.compile(r"^[-+]?(?:180(?:\.0+)?|(?:1[0-7]\d|[1-9]?\d)(?:\.\d+)?)$")
SSN_RE = re.compile(
    r"^[0-9]{3}[ -]?(?:0[1-9]|[1-9][0-9])[ -]?"
    r"(?:[1-9][0-9]{3}|[0-9][1-9][0-9]{2}|[0-9]{2}[1-9][0-9]|[0-9]{3}[1-9])$"
)

HOSTNAME_RFC952_RE = re.compile(r"^[a-zA-Z]([a-zA-Z0-9\-]+[\.]?)*[a-zA-Z0-9]$")
HOSTNAME_RFC1123_RE = re.compile(
    r"^(?:[a-zA-Z0-9][a-zA-Z0-9-]{0,62})(?:\.[a-zA-Z0-9][a-zA-Z0-9-]{0,62})*?$"
)
FQDN_RE = re.compile(
    r"^(?:[a-zA-Z0-9][a-zA-Z0-9-]{0,62})(?:\.[a-zA-Z0-9][a-zA-Z0-9-]{0,62})*?"
    r"(?:\.[a-zA-Z][a-zA-Z0-9]{0,62})\.?$"
)
DNS_LABEL_RE = re.compile(r"^[a-z](?:[-a-z0-9]*[a-z0-9]){0,62}$")

BTC_ADDRESS_RE = re.compile(r"^[13][a-km-zA-HJ-NP-Z1-9]{25,34}$")
BTC_UPPER_ADDRESS_RE = re.compile(r"^BC1[02-9AC-HJ-NP-Z]{7,76}$")
BTC_LOWER_ADDRESS_RE = re.compile(r"^bc1[02-9ac-hj-np-z]{7,76}$")
ETH_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"

URL_ENCODED_RE = re.compile(r"^(?:[^%]|%[0-9A-Fa-f]{2})*$")
HTML_ENCODED_RE = re.compile(r"&#[x]?(?:[0-9a-fA-F]{2})|(?:&gt)|(?:&lt)|(?:&quot)|(?:&amp)+[;]?")
HTML_RE = re.compile(r"<[/]?(?:[a-zA-Z]+).*?>")
JWT_RE = re.compile(r"^[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]*$")
SPLIT_PARAMS_RE = re.compile(r"^(?:'[^']*'|\S+)(?:\s+(?:'[^']*'|\S+))*$")
BIC_RE = re.compile(r"^[A-Za-z]{6}[A-Za-z0-9]{2}(?:[A-Za-z0-9]{3})?$")
SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
CVE_RE = re.compile(r"^CVE-(?:1999|2\d{3})-(?:0[^0]\d{2}|0\d[^0]\d|0\d{2}[^0]|[1-9]\d{3,})$")
MONGODB_RE = re.compile(
    r"^mongodb(?:\+srv)?://(?:[a-zA-Z\d]+:[a-zA-Z\d$:/?#\[\]@]+@)?"
    r"[a-z\d.-]+(?::\d+)?(?:,[a-z\d.-]+(?::\d+)?)*"
    r"(?:/[a-zA-Z\-_]{1,64})?"
    r"(?:\?[a-zA-Z]+=[a-zA-Z\d]+(?:&[a-zA-Z\d]+=[a-zA-Z\d]+)*)?$"
)
CRON_RE = re.compile(
    r"^(?:@(?:annually|yearly|monthly|weekly|daily|hourly|reboot)"
    r"|@every (?:\d+(?:ns|us|µs|ms|s|m|h))+"
    r"|(?:(?:(?:\d+,)+\d+|(?:\*|\d+)[/-]\d+|\d+|\*) ?){5,7})$"
)


def _text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _matches(pattern: re.Pattern, value: Any) -> bool:
    text = _text(value)
    return text is not None and pattern.fullmatch(text) is not None


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _code_number(value: Any) -> int | None:
    """Integer form of a numeric code given as int or digit string."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def is_numeric(value: Any) -> bool:
    return _is_number(value) or _matches(NUMERIC_RE, value)


def is_number(value: Any) -> bool:
    if isinstance(value, int) and not isinstance(value, bool):
        return value >= 0
    return _matches(NUMBER_RE, value)


def is_alpha(value: Any) -> bool:
    return _matches(ALPHA_RE, value)


def is_alpha_numeric(value: Any) -> bool:
    return _matches(ALPHA_NUMERIC_RE, value)


def is_alpha_unicode(value: Any) -> bool:
    text = _text(value)
    return bool(text) and text.isalpha()


def is_alpha_unicode_numeric(value: Any) -> bool:
    text = _text(value)
    return bool(text) and text.isalnum()


def is_hexadecimal(value: Any) -> bool:
    return _matches(HEXADECIMAL_RE, value)


def is_hex_color(value: Any) -> bool:
    return _matches(HEX_COLOR_RE, value)


def is_rgb(value: Any) -> bool:
    return _matches(RGB_RE, value)


def is_rgba(value: Any) -> bool:
    return _matches(RGBA_RE, value)


def is_hsl(value: Any) -> bool:
    return _matches(HSL_RE, value)


def is_hsla(value: Any) -> bool:
    return _matches(HSLA_RE, value)


def is_phone(value: Any) -> bool:
    return _matches(PHONE_RE, value)


def is_e164(value: Any) -> bool:
    return _matches(E164_RE, value)


def is_email(value: Any) -> bool:
    text = _text(value)
    if text is None or len(text) > 254:
        return False
    return EMAIL_RE.fullmatch(text) is not None


def is_username(value: Any) -> bool:
    return _matches(USERNAME_RE, value)


def _password_classes(password: str) -> tuple[bool, bool, bool, bool]:
    """Return (has_digit, has_upper, has_lower, has_special) for an ASCII password."""
    has_digit = has_upper = has_lower = has_special = False
    for ch in password:
        if "a" <= ch <= "z":
            has_lower = True
        elif "A" <= ch <= "Z":
            has_upper = True
        elif "0" <= ch <= "9":
            has_digit = True
        else:
            has_special = True
    return has_digit, has_upper, has_lower, has_special


def is_password(value: Any) -> bool:
    """ASCII, at least 8 chars, digits plus upper or lower case letters."""
    if not is_ascii(value) or len(value) < PASSWORD_MIN_LENGTH:
        return False
    has_digit, has_upper, has_lower, _ = _password_classes(value)
    return has_digit and (has_upper or has_lower)


def is_strong_password(value: Any) -> bool:
    """ASCII, at least 8 chars, digits, upper, lower and a special character."""
    if not is_ascii(value) or len(value) < PASSWORD_MIN_LENGTH:
        return False
    has_digit, has_upper, has_lower, has_special = _password_classes(value)
    return has_digit and has_upper and has_lower and has_special


def is_country_code_alpha2(value: Any) -> bool:
    return _text(value) in COUNTRY_ALPHA2


def is_country_code_alpha3(value: Any) -> bool:
    return _text(value) in COUNTRY_ALPHA3


def is_country_code_numeric(value: Any) -> bool:
    return _code_number(value) in COUNTRY_NUMERIC


def is_country_code(value: Any) -> bool:
    return (
        is_country_code_alpha2(value)
        or is_country_code_alpha3(value)
        or is_country_code_numeric(value)
    )


def is_currency_code(value: Any) -> bool:
    return _text(value) in CURRENCY_CODES


def is_currency_code_numeric(value: Any) -> bool:
    return _code_number(value) in CURRENCY_NUMERIC


def _hash_predicate(length: int) -> Predicate:
    pattern = re.compile(rf"^[0-9a-f]{{{length}}}$")

    def check(value: Any) -> bool:
        return _matches(pattern, value)

    return check


def is_uuid(value: Any) -> bool:
    return _matches(UUID_RE, value)


def is_uuid3(value: Any) -> bool:
    return _matches(UUID3_RE, value)


def is_uuid4(value: Any) -> bool:
    return _matches(UUID4_RE, value)


def is_uuid5(value: Any) -> bool:
    return _matches(UUID5_RE, value)


def is_uuid_rfc4122(value: Any) -> bool:
    return _matches(UUID_RFC4122_RE, value)


def is_uuid3_rfc4122(value: Any) -> bool:
    return _matches(UUID3_RFC4122_RE, value)


def is_uuid4_rfc4122(value: Any) -> bool:
    return _matches(UUID4_RFC4122_RE, value)


def is_uuid5_rfc4122(value: Any) -> bool:
    return _matches(UUID5_RFC4122_RE, value)


def is_ulid(value: Any) -> bool:
    return _matches(ULID_RE, value)


def is_base64(value: Any) -> bool:
    return _matches(BASE64_RE, value)


def is_base64_url(value: Any) -> bool:
    return _matches(BASE64_URL_RE, value)


def is_base64_raw_url(value: Any) -> bool:
    return _matches(BASE64_RAW_URL_RE, value)


def is_data_uri(value: Any) -> bool:
    text = _text(value)
    if text is None:
        return False
    header, sep, payload = text.partition(",")
    if not sep:
        return False
    if header.endswith(";base64"):
        header = header[: -len(";base64")]
    return DATA_URI_RE.fullmatch(header) is not None and is_base64(payload)


def is_isbn10(value: Any) -> bool:
    text = _text(value)
    if text is None:
        return False
    digits = text.replace("-", "").replace(" ", "")
    if not ISBN10_RE.fullmatch(digits):
        return False
    total = sum((10 - i) * int(ch) for i, ch in enumerate(digits[:9]))
    total += 10 if digits[9] == "X" else int(digits[9])
    return total % 11 == 0


def is_isbn13(value: Any) -> bool:
    text = _text(value)
    if text is None:
        return False
    digits = text.replace("-", "").replace(" ", "")
    if not ISBN13_RE.fullmatch(digits):
        return False
    total = sum(int(ch) * (1 if i % 2 == 0 else 3) for i, ch in enumerate(digits[:12]))
    return (10 - total % 10) % 10 == int(digits[12])


def is_ascii(value: Any) -> bool:
    return _matches(ASCII_RE, value)


def is_printable_ascii(value: Any) -> bool:
    return _matches(PRINTABLE_ASCII_RE, value)


def is_multibyte(value: Any) -> bool:
    text = _text(value)
    return text is not None and MULTIBYTE_RE.search(text) is not None


def is_latitude(value: Any) -> bool:
    if _is_number(value):
        return -90 <= value <= 90
    return _matches(LATITUDE_RE, value)


def is_longitude(value: Any) -> bool:
    if _is_number(value):
        return -180 <= value <= 180
    return _matches(LONGITUDE_RE, value)


def is_ssn(value: Any) -> bool:
    text = _text(value)
    return text is not None and len(text) == 11 and SSN_RE.fullmatch(text) is not None


def is_hostname_rfc952(value: Any) -> bool:
    return _matches(HOSTNAME_RFC952_RE, value)


def is_hostname_rfc1123(value: Any) -> bool:
    return _matches(HOSTNAME_RFC1123_RE, value)


def is_fqdn(value: Any) -> bool:
    return _matches(FQDN_RE, value)


def is_dns(value: Any) -> bool:
    return _matches(DNS_LABEL_RE, value)


def is_btc_address(value: Any) -> bool:
    """Pay-to-pubkey-hash / script-hash address with a valid Base58Check checksum."""
    if not _matches(BTC_ADDRESS_RE, value):
        return False
    number = 0
    for ch in value:
        number = number * 58 + BASE58_ALPHABET.index(ch)
    try:
        decoded = number.to_bytes(25, "big")
    except OverflowError:
        return False
    checksum = hashlib.sha256(hashlib.sha256(decoded[:21]).digest()).digest()[:4]
    return checksum == decoded[21:]


def _bech32_polymod(values: list[int]) -> int:
    generator = [0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3]
    checksum = 1
    for v in values:
        top = checksum >> 25
        checksum = (checksum & 0x1FFFFFF) << 5 ^ v
        for i in range(5):
            if (top >> i) & 1:
                checksum ^= generator[i]
    return checksum


def _bech32_verify(address: str) -> bool:
    address = address.lower()
    hrp, _, data = address.rpartition("1")
    if hrp != "bc" or len(data) < 6:
        return False
    values = [ord(ch) >> 5 for ch in hrp] + [0] + [ord(ch) & 31 for ch in hrp]
    values += [BECH32_CHARSET.index(ch) for ch in data]
    # 1 for bech32 (segwit v0), 0x2BC830A3 for bech32m (v1+)
    return _bech32_polymod(values) in (1, 0x2BC830A3)


def is_btc_upper_address(value: Any) -> bool:
    return _matches(BTC_UPPER_ADDRESS_RE, value) and _bech32_verify(value)


def is_btc_lower_address(value: Any) -> bool:
    return _matches(BTC_LOWER_ADDRESS_RE, value) and _bech32_verify(value)


def is_eth_address(value: Any) -> bool:
    return _matches(ETH_ADDRESS_RE, value)


def is_url_encoded(value: Any) -> bool:
    return _matches(URL_ENCODED_RE, value)


def is_html_encoded(value: Any) -> bool:
    text = _text(value)
    return text is not None and HTML_ENCODED_RE.search(text) is not None


def is_html(value: Any) -> bool:
    text = _text(value)
    return text is not None and HTML_RE.search(text) is not None


def is_jwt(value: Any) -> bool:
    return _matches(JWT_RE, value)


def is_split_params(value: Any) -> bool:
    return _matches(SPLIT_PARAMS_RE, value)


def is_bic(value: Any) -> bool:
    return _matches(BIC_RE, value)


def is_semver(value: Any) -> bool:
    return _matches(SEMVER_RE, value)


def is_cve(value: Any) -> bool:
    return _matches(CVE_RE, value)


def is_mongodb(value: Any) -> bool:
    return _matches(MONGODB_RE, value)


def is_cron(value: Any) -> bool:
    return _matches(CRON_RE, value)


CATALOG: Dict[str, Predicate] = {
    "phone": is_phone,
    "username": is_username,
    "password": is_password,
    "strongPassword": is_strong_password,
    "countryCodeAlpha2": is_country_code_alpha2,
    "countryCodeAlpha3": is_country_code_alpha3,
    "countryCodeNumeric": is_country_code_numeric,
    "countryCode": is_country_code,
    "currency": is_currency_code,
    "currencyNumeric": is_currency_code_numeric,
    "alpha": is_alpha,
    "alphaNumeric": is_alpha_numeric,
    "alphaUnicode": is_alpha_unicode,
    "alphaUnicodeNumeric": is_alpha_unicode_numeric,
    "numeric": is_numeric,
    "number": is_number,
    "hexadecimal": is_hexadecimal,
    "hexColor": is_hex_color,
    "rgb": is_rgb,
    "rgba": is_rgba,
    "hsl": is_hsl,
    "hsla": is_hsla,
    "e164": is_e164,
    "email": is_email,
    "base64": is_base64,
    "base64Url": is_base64_url,
    "base64RawUrl": is_base64_raw_url,
    "isbn10": is_isbn10,
    "isbn13": is_isbn13,
    "uuid3": is_uuid3,
    "uuid4": is_uuid4,
    "uuid5": is_uuid5,
    "uuid": is_uuid,
    "uuid3Rfc4122": is_uuid3_rfc4122,
    "uuid4Rfc4122": is_uuid4_rfc4122,
    "uuid5Rfc4122": is_uuid5_rfc4122,
    "uuidRfc4122": is_uuid_rfc4122,
    "ulid": is_ulid,
    **{name: _hash_predicate(length) for name, length in DIGEST_LENGTHS.items()},
    "ascii": is_ascii,
    "printableAscii": is_printable_ascii,
    "multibyte": is_multibyte,
    "dataUri": is_data_uri,
    "latitude": is_latitude,
    "longitude": is_longitude,
    "ssn": is_ssn,
    "hostnameRfc952": is_hostname_rfc952,
    "hostnameRfc1123": is_hostname_rfc1123,
    "fqdn": is_fqdn,
    "btcAddress": is_btc_address,
    "btcUpperAddress": is_btc_upper_address,
    "btcLowerAddress": is_btc_lower_address,
    "ethAddress": is_eth_address,
    "urlEncoded": is_url_encoded,
    "htmlEncoded": is_html_encoded,
    "html": is_html,
    "jwt": is_jwt,
    "splitParams": is_split_params,
    "bic": is_bic,
    "semver": is_semver,
    "dns": is_dns,
    "cve": is_cve,
    "mongodb": is_mongodb,
    "cron": is_cron,
}
