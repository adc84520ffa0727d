"""
Tests for PatternExtractor.
"""

import pytest

from legalmind.analysis.extractor import FieldKind, assign_party_roles
from legalmind.analysis.samples import SAMPLE_LICENSE_AGREEMENT
from legalmind.config.constants import LICENSEE_ROLE, LICENSOR_ROLE


class TestDateExtraction:

    def test_month_name_date(self, extractor):
        dates = extractor.extract_dates("Effective as of February 1, 2024.")
        assert len(dates) == 1
        assert dates[0].kind is FieldKind.DATE
        assert dates[0].raw_match == "February 1, 2024"
        assert dates[0].normalized == "2024-02-01"

    def test_numeric_formats(self, extractor):
        dates = extractor.extract_dates("Signed 03/15/2024, renewed 2025-03-15.")
        assert [d.raw_match for d in dates] == ["03/15/2024", "2025-03-15"]
        assert [d.normalized for d in dates] == ["2024-03-15", "2025-03-15"]

    def test_order_and_duplicates(self, extractor):
        text = "Due 2024-01-01 and again 2024-01-01, then January 5, 2024."
        dates = extractor.extract_dates(text)
        assert [d.normalized for d in dates] == ["2024-01-01", "2024-01-01", "2024-01-05"]
        assert dates[0].position < dates[1].position < dates[2].position

    def test_impossible_date_has_no_normalized_form(self, extractor):
        dates = extractor.extract_dates("on 13/45/2024")
        assert len(dates) == 1
        assert dates[0].normalized is None

    def test_ordinal_day_not_matched(self, extractor):
        assert extractor.extract_dates("payable on February 1st of each year") == []


class TestAmountExtraction:

    def test_amounts(self, extractor):
        amounts = extractor.extract_amounts("Fee of $75,000 plus $1,250.50 and $99.")
        assert [a.raw_match for a in amounts] == ["$75,000", "$1,250.50", "$99"]
        assert [a.normalized for a in amounts] == ["75,000", "1,250.50", "99"]
        assert all(a.currency == "USD" for a in amounts)

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Penalty of $10,0000 applies", ["10,0000"]),
            ("Deposit of $75,00 due", ["75,00"]),
            ("Fee of $75,000, payable yearly", ["75,000"]),
        ],
    )
    def test_malformed_grouping_kept_whole(self, extractor, text, expected):
        assert [a.normalized for a in extractor.extract_amounts(text)] == expected

    def test_no_amounts(self, extractor):
        assert extractor.extract_amounts("Seventy-Five Thousand Dollars") == []


class TestPartyExtraction:

    def test_sample_agreement_parties(self, extractor):
        parties = extractor.extract_party_names(SAMPLE_LICENSE_AGREEMENT)
        assert [p.normalized for p in parties] == ["CloudTech Solutions Inc.", "GlobalCorp LLC"]
        assert [p.role for p in parties] == [LICENSOR_ROLE, LICENSEE_ROLE]

    def test_quoted_names_deduplicated(self, extractor):
        text = '"Acme Corp." agrees with Acme Corp. and Beta Holdings LLC.'
        parties = extractor.extract_party_names(text)
        assert [p.normalized for p in parties] == ["Acme Corp.", "Beta Holdings LLC"]

    def test_quote_spans_do_not_merge(self, extractor):
        text = 'between Alpha Inc. ("Licensor"), and Beta LLC ("Licensee")'
        parties = extractor.extract_party_names(text)
        assert [p.normalized for p in parties] == ["Alpha Inc.", "Beta LLC"]

    def test_quoted_multiword_name_is_one_party(self, extractor):
        text = 'between "Big Blue Widgets Inc." and GlobalCorp LLC'
        parties = extractor.extract_party_names(text)
        assert [p.normalized for p in parties] == ["Big Blue Widgets Inc.", "GlobalCorp LLC"]

    def test_no_parties(self, extractor):
        assert extractor.extract_party_names("a plain sentence with no companies") == []

    def test_third_party_is_licensee(self):
        assert assign_party_roles(3) == [LICENSOR_ROLE, LICENSEE_ROLE, LICENSEE_ROLE]
        assert assign_party_roles(0) == []


class TestExtractAll:

    def test_license_fee_sentence(self, extractor):
        text = (
            "License fee of $75,000 due February 1, 2024 between "
            "CloudTech Solutions Inc. and GlobalCorp LLC"
        )
        found = extractor.extract_all(text)
        assert [a.normalized for a in found["amounts"]] == ["75,000"]
        assert [d.raw_match for d in found["dates"]] == ["February 1, 2024"]
        assert [(p.normalized, p.role) for p in found["parties"]] == [
            ("CloudTech Solutions Inc.", LICENSOR_ROLE),
            ("GlobalCorp LLC", LICENSEE_ROLE),
        ]

    def test_sample_agreement(self, extractor):
        found = extractor.extract_all(SAMPLE_LICENSE_AGREEMENT)
        assert set(found) == {"dates", "amounts", "parties"}
        assert [d.normalized for d in found["dates"]] == ["2024-02-01"]
        assert [a.raw_match for a in found["amounts"]] == ["$75,000"]
        assert len(found["parties"]) == 2

    def test_empty_text(self, extractor):
        assert extractor.extract_all("") == {"dates": [], "amounts": [], "parties": []}

    def test_non_string_rejected(self, extractor):
        with pytest.raises(TypeError):
            extractor.extract_all(None)

    def test_attributes(self, extractor):
        found = extractor.extract_all("Acme Corp. pays $5")
        assert found["amounts"][0].attributes == {"currency": "USD"}
        assert found["parties"][0].attributes == {"role": "Licensor / Provider"}

    def test_to_dict(self, extractor):
        data = extractor.extract_amounts("$10")[0].to_dict()
        assert data == {
            "kind": "amount",
            "raw_match": "$10",
            "normalized": "10",
            "position": 0,
            "currency": "USD",
        }
