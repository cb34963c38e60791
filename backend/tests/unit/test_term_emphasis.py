"""
Name: Term Emphasis Unit Tests
"""

import pytest

from casedocs.application.term_emphasis import emphasise_terms


@pytest.mark.unit
class TestEmphasiseTerms:
    """Test suite for emphasise_terms."""

    def test_wraps_exact_term_case_insensitively(self):
        results = [{"chunk_text": "Injury reported. INJURY confirmed."}]

        result = emphasise_terms(results, ["injury"])

        assert result[0]["chunk_text"] == (
            "<strong>Injury</strong> reported. <strong>INJURY</strong> confirmed."
        )

    def test_exact_phrase_wins_over_words(self):
        results = [{"chunk_text": "The police report was filed; police attended."}]

        result = emphasise_terms(results, ["police report"])

        assert result[0]["chunk_text"] == (
            "The <strong>police report</strong> was filed; police attended."
        )

    def test_falls_back_to_individual_words(self):
        results = [{"chunk_text": "A report from the police."}]

        result = emphasise_terms(results, ["police report"])

        assert result[0]["chunk_text"] == (
            "A <strong>report</strong> from the <strong>police</strong>."
        )

    def test_terms_are_literal(self):
        results = [{"chunk_text": "Total (estimated) cost a.b"}]

        result = emphasise_terms(results, ["(estimated)", "a.b"])

        assert result[0]["chunk_text"] == (
            "Total <strong>(estimated)</strong> cost <strong>a.b</strong>"
        )

    def test_custom_wrapper(self):
        result = emphasise_terms([{"chunk_text": "claim"}], ["claim"], ("<mark>", "</mark>"))

        assert result[0]["chunk_text"] == "<mark>claim</mark>"

    def test_results_without_text_and_input_untouched(self):
        original = {"chunk_text": "claim", "chunk_id": "c-1"}
        no_text = {"chunk_id": "c-2"}

        result = emphasise_terms([original, no_text], ["claim"])

        assert original["chunk_text"] == "claim"
        assert result[1] is no_text
        assert result[0]["chunk_id"] == "c-1"
