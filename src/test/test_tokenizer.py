import pytest
from typing import Any

from business_logic.edm.errors import EmptyTagLine, MissingChecksumDelimiter
from business_logic.edm.tokenizer import line_tag, tokenize
from edm_samples import ALARMS, FUEL, REGISTRATION


def test_tokenize(subtests: Any) -> None:
    with subtests.test("Registration"):
        assert tokenize(REGISTRATION) == ["N354DT"]

    with subtests.test("Alarms"):
        assert tokenize(ALARMS) == ["135", "115", "35", "420", "15", "1650", "50", "240"]

    with subtests.test("Whitespace trimmed"):
        assert tokenize(FUEL) == ["0", "999", "0", "2950", "2950"]

    with subtests.test("Empty tokens and duplicates kept"):
        assert tokenize("$X,1,,1, ,2*00") == ["1", "", "1", "", "2"]

    with subtests.test("No comma"):
        assert tokenize("$H*48") == []

    with subtests.test("Text before first comma dropped"):
        assert tokenize("$U N354DT,abc*00") == ["abc"]

    with subtests.test("Missing delimiter"):
        with pytest.raises(MissingChecksumDelimiter):
            tokenize("$U,N354DT")


def test_line_tag(subtests: Any) -> None:
    with subtests.test("Second character"):
        assert line_tag(REGISTRATION) == "U"
        assert line_tag("$A") == "A"

    for line in ("", "$"):
        with subtests.test(f"Too short {line!r}"):
            with pytest.raises(EmptyTagLine):
                line_tag(line)
