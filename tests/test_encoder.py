import pytest

from devurn.core.decoder import breakdown
from devurn.core.encoder import build_urn, generate, mac_to_eui64
from devurn.core.errors import DevUrnError, InvalidInputError, UnknownSubtypeError
from devurn.core.types import ErrorKind


def test_mac48_expands_to_modified_eui64() -> None:
    assert generate("mac", "00:1B:44:11:3A:B7") == "urn:dev:mac:021b44fffe113ab7"


def test_universal_local_bit_is_toggled_both_ways() -> None:
    assert mac_to_eui64("02:00:00:00:00:01") == "000000fffe000001"
    assert mac_to_eui64("FF-FF-FF-FF-FF-FF") == "fdfffffffeffffff"


def test_eui64_only_flips_bit() -> None:
    assert mac_to_eui64("00:1B:44:FF:FE:11:3A:B7") == "021b44fffe113ab7"
    assert generate("mac", "0a1b2c3d4e5f6071") == "urn:dev:mac:081b2c3d4e5f6071"


def test_mac_to_eui64_rejects_other_lengths() -> None:
    with pytest.raises(ValueError):
        mac_to_eui64("001122")


def test_one_wire_is_normalized_without_bit_changes() -> None:
    assert generate("ow", " 10:E2:07:3A:01:08:00:63 ") == "urn:dev:ow:10e2073a01080063"


def test_one_wire_rejects_short_identifier() -> None:
    with pytest.raises(InvalidInputError) as info:
        generate("ow", "1000008F12AA")
    assert info.value.kind is ErrorKind.INVALID_LENGTH


def test_organization_identifiers_are_kept_verbatim() -> None:
    assert generate("org", "  32473:Foo-Bar ") == "urn:dev:org:32473:Foo-Bar"
    assert generate("os", "32473:12345") == "urn:dev:os:32473:12345"
    assert generate("ops", "32473:Switch:AB12") == "urn:dev:ops:32473:Switch:AB12"


def test_generate_raises_on_invalid_input() -> None:
    with pytest.raises(InvalidInputError) as info:
        generate("org", "032473:foo")
    assert info.value.kind is ErrorKind.INVALID_PEN
    assert isinstance(info.value, ValueError)

    with pytest.raises(DevUrnError) as empty:
        generate("mac", "   ")
    assert empty.value.kind is ErrorKind.EMPTY_INPUT


def test_generate_raises_on_unknown_subtype() -> None:
    with pytest.raises(UnknownSubtypeError) as info:
        generate("uuid", "abc")
    assert info.value.kind is ErrorKind.UNKNOWN_SUBTYPE


def test_build_urn_renders_canonical_text() -> None:
    assert str(build_urn("ops", "1:a:b")) == "urn:dev:ops:1:a:b"


@pytest.mark.parametrize(
    "subtype, raw",
    [("org", " 32473:foo "), ("os", "32473:SN-1"), ("ops", "32473:switch:12345")],
)
def test_organization_round_trip(subtype: str, raw: str) -> None:
    assert breakdown(generate(subtype, raw)).identifier == raw.strip()


def test_hex_round_trip_recovers_canonical_form() -> None:
    assert breakdown(generate("mac", "00-1B-44-11-3A-B7")).identifier == "021b44fffe113ab7"
    assert breakdown(generate("ow", "10E2073A01080063")).identifier == "10e2073a01080063"


def test_generate_accepts_very_long_pen() -> None:
    pen = "7" * 5000
    assert generate("org", pen + ":foo") == f"urn:dev:org:{pen}:foo"


def test_generate_trims_byte_order_mark() -> None:
    assert generate("os", "\ufeff32473:12345\u00a0") == "urn:dev:os:32473:12345"
