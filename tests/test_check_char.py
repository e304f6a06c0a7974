"""
Tests for HIBC check character generation.
"""

import pytest
from hibc_udi import generate_check_char, verify_check_char, InvalidSymbolError


class TestGenerateCheckChar:
    """Check character vectors."""

    def test_reference_vectors(self):
        """Vectors from ANSI/HIBC 2.5 Appendix B and the reference suite."""
        assert generate_check_char("+A123BJC5D6E71") == "G"
        assert generate_check_char("+123456789") == "0"
        assert generate_check_char("+foobar") == "N"

    def test_primary_structures(self):
        """Check characters of known primary structures."""
        assert generate_check_char("+SNOWMAKER0") == "Q"
        assert generate_check_char("+BLUEUNICORN7") == "N"
        assert generate_check_char("+A123AA40") == " "

    def test_link_character(self):
        """The primary of the Appendix F sample product yields link character X."""
        assert generate_check_char("+A123BJC5D6E71G1") == "X"

    def test_case_insensitive(self):
        """Lowercase data gives the same check character as uppercase data."""
        assert generate_check_char("+foobar") == generate_check_char("+FOOBAR")

    def test_empty(self):
        """Empty data sums to zero."""
        assert generate_check_char("") == "0"

    def test_deterministic(self):
        """Identical input always yields the same character."""
        results = {generate_check_char("+$$73C001X") for _ in range(50)}
        assert results == {"3"}

    def test_invalid_symbol(self):
        """Data outside the alphabet propagates InvalidSymbolError."""
        with pytest.raises(InvalidSymbolError):
            generate_check_char("+A123#")
        with pytest.raises(InvalidSymbolError):
            generate_check_char("QWERTFG€678")
        with pytest.raises(InvalidSymbolError):
            generate_check_char("+A123ı")


class TestVerifyCheckChar:
    """Check character verification of encoded strings."""

    def test_valid(self):
        assert verify_check_char("+A123BJC5D6E71G")
        assert verify_check_char("+SNOWMAKER0Q")
        assert verify_check_char("+A123AA40 ")
        assert verify_check_char("+A123BJC5D6E71G1/$$73C0012")

    def test_invalid(self):
        assert not verify_check_char("+SNOWMAKER0R")
        assert not verify_check_char("+")
        assert not verify_check_char("")

    def test_letter_lookalikes(self):
        """Non-ASCII letters that uppercase to I or S are not in the alphabet."""
        with pytest.raises(InvalidSymbolError):
            verify_check_char("+ſNOWMAKER0Q")
        with pytest.raises(InvalidSymbolError):
            verify_check_char("+SNOWMAKER0ı")
