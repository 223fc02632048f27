"""Unit tests for shareable snippet fragments."""

import base64

from baseline_check.history import decode_share_fragment, encode_share_fragment


class TestShareFragment:
    def test_round_trip(self):
        code = ".box { display: grid; }\nfetch('/x?a=1&b=2')"
        assert decode_share_fragment(encode_share_fragment(code)) == code

    def test_round_trip_unicode(self):
        code = "const greeting = 'héllo ✅';"
        assert decode_share_fragment(encode_share_fragment(code)) == code

    def test_format(self):
        assert encode_share_fragment("a b") == "code=" + base64.b64encode(b"a%20b").decode("ascii")

    def test_leading_hash(self):
        fragment = "#" + encode_share_fragment("grid")
        assert decode_share_fragment(fragment) == "grid"

    def test_among_other_params(self):
        fragment = "#theme=dark&" + encode_share_fragment("grid")
        assert decode_share_fragment(fragment) == "grid"

    def test_missing_key(self):
        assert decode_share_fragment("#theme=dark") == ""

    def test_empty(self):
        assert decode_share_fragment("") == ""

    def test_malformed(self):
        assert decode_share_fragment("code=%%%not-base64") == ""

    def test_non_ascii_value(self):
        assert decode_share_fragment("code=été") == ""

    def test_invalid_percent_encoding(self):
        fragment = "code=" + base64.b64encode(b"%FF%FE").decode("ascii")
        assert decode_share_fragment(fragment) == ""
