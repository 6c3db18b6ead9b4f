"""
Tests for the Morpheus morphology client.

Tests cover Body/infl list normalization, defensive field extraction,
headword fallback, error mapping and the no-request path for blank input.
"""

import copy

import pytest
import requests

from logos.core.config import Settings
from logos.core.constants import MORPHOLOGY_ENDPOINT
from logos.core.errors import MalformedResponse, NoAnalysisError, ServiceError
from logos.core.models import InflectionForm, MorphologyEntry
from logos.languages import GREEK, LATIN
from logos.processing.api_client import APIClient
from logos.processing.morphology import MorphologyClient, format_entry, parse_morpheus_response


@pytest.fixture
def greek_client(mock_session):
    return MorphologyClient(GREEK, api_client=APIClient(Settings(), session=mock_session))


@pytest.fixture
def latin_client(mock_session):
    return MorphologyClient(LATIN, api_client=APIClient(Settings(), session=mock_session))


class TestParseMorpheusResponse:
    """Test flattening of the annotation envelope."""

    def test_single_body(self, greek_morpheus_response):
        """A bare Body object yields exactly one entry."""
        entries = parse_morpheus_response(greek_morpheus_response, "λόγου")

        assert len(entries) == 1
        entry = entries[0]
        assert entry.headword == "λόγος"
        assert entry.part_of_speech == "noun"
        assert entry.declension == "2nd"
        assert entry.gender == "masculine"
        assert entry.inflections == [
            InflectionForm(
                case="genitive",
                number="singular",
                gender="masculine",
                stem="λόγ",
                suffix="ου",
            )
        ]

    def test_single_body_equals_singleton_list(self, greek_morpheus_response):
        """Wrapping the Body object in a list changes nothing."""
        as_list = copy.deepcopy(greek_morpheus_response)
        annotation = as_list["RDF"]["Annotation"]
        annotation["Body"] = [annotation["Body"]]

        assert parse_morpheus_response(as_list, "λόγου") == parse_morpheus_response(greek_morpheus_response, "λόγου")

    def test_body_list_keeps_service_order(self, latin_morpheus_response):
        """Each Body in a list becomes an entry, in response order."""
        entries = parse_morpheus_response(latin_morpheus_response, "amor")

        assert [entry.headword for entry in entries] == ["amo", "amor"]

    def test_verb_inflection(self, latin_morpheus_response):
        """Verbal attributes are extracted, nominal ones stay empty."""
        verb = parse_morpheus_response(latin_morpheus_response, "amor")[0]

        assert verb.part_of_speech == "verb"
        assert verb.declension is None
        infl = verb.inflections[0]
        assert infl.mood == "indicative"
        assert infl.tense == "present"
        assert infl.voice == "passive"
        assert infl.person == "1st"
        assert infl.case is None
        assert infl.form == "amor"

    def test_inflection_list(self, latin_morpheus_response):
        """A list of infl nodes yields one InflectionForm each."""
        noun = parse_morpheus_response(latin_morpheus_response, "amor")[1]

        assert [infl.case for infl in noun.inflections] == ["nominative", "vocative"]

    def test_missing_suffix_defaults_to_empty(self, latin_morpheus_response):
        """A term without suff yields an empty suffix, not None."""
        noun = parse_morpheus_response(latin_morpheus_response, "amor")[1]

        assert noun.inflections[0].stem == "amor"
        assert noun.inflections[0].suffix == ""

    def test_missing_headword_falls_back_to_query(self, greek_morpheus_response):
        """Without dict.hdwd the queried word is the headword."""
        del greek_morpheus_response["RDF"]["Annotation"]["Body"]["rest"]["entry"]["dict"]["hdwd"]

        entries = parse_morpheus_response(greek_morpheus_response, "λόγου")

        assert entries[0].headword == "λόγου"

    def test_missing_dict_and_infl(self):
        """An entry with neither dict nor infl still produces a bare entry."""
        data = {"RDF": {"Annotation": {"Body": {"rest": {"entry": {}}}}}}

        entries = parse_morpheus_response(data, "xyz")

        assert entries == [MorphologyEntry(headword="xyz")]

    def test_bodies_without_entry_are_dropped(self, latin_morpheus_response):
        """Bodies lacking rest.entry are filtered out."""
        del latin_morpheus_response["RDF"]["Annotation"]["Body"][0]["rest"]["entry"]

        entries = parse_morpheus_response(latin_morpheus_response, "amor")

        assert [entry.headword for entry in entries] == ["amor"]

    def test_all_bodies_without_entry_returns_empty_list(self):
        """If every body is filtered out, the result is an empty list."""
        data = {"RDF": {"Annotation": {"Body": [{"rest": {}}, {"about": "urn:uuid:1"}]}}}

        assert parse_morpheus_response(data, "amor") == []

    def test_missing_annotation_raises(self):
        """A response without RDF.Annotation is malformed."""
        with pytest.raises(MalformedResponse):
            parse_morpheus_response({"RDF": {}}, "amor")

    def test_non_dict_response_raises(self):
        """A JSON payload that is not an object is malformed."""
        with pytest.raises(MalformedResponse):
            parse_morpheus_response([], "amor")

    @pytest.mark.parametrize("body", [None, []])
    def test_no_bodies_raises(self, body):
        """An annotation without bodies means no analysis."""
        annotation = {} if body is None else {"Body": body}

        with pytest.raises(NoAnalysisError):
            parse_morpheus_response({"RDF": {"Annotation": annotation}}, "qwerty")


class TestMorphologyClientResolve:
    """Test the HTTP round trip of MorphologyClient.resolve."""

    @pytest.mark.parametrize("word", ["", "   ", "\t\n"])
    def test_blank_input_makes_no_request(self, greek_client, mock_session, word):
        """Blank input returns [] without touching the network."""
        assert greek_client.resolve(word) == []
        mock_session.get.assert_not_called()

    def test_greek_request_parameters(self, greek_client, mock_session, make_response, greek_morpheus_response):
        """Greek queries use lang=grc and the morpheusgrc engine, trimmed."""
        mock_session.get.return_value = make_response(201, greek_morpheus_response)

        entries = greek_client.resolve("  λόγου ")

        mock_session.get.assert_called_once_with(
            MORPHOLOGY_ENDPOINT,
            params={"lang": "grc", "engine": "morpheusgrc", "word": "λόγου"},
            headers=None,
            timeout=None,
        )
        assert entries[0].headword == "λόγος"

    def test_latin_request_parameters(self, latin_client, mock_session, make_response, latin_morpheus_response):
        """Latin queries use lang=lat and the morpheuslat engine."""
        mock_session.get.return_value = make_response(200, latin_morpheus_response)

        entries = latin_client.resolve("amor")

        _, kwargs = mock_session.get.call_args
        assert kwargs["params"] == {"lang": "lat", "engine": "morpheuslat", "word": "amor"}
        assert len(entries) == 2

    def test_error_status_raises_service_error(self, greek_client, mock_session, make_response):
        """A non-success status surfaces as ServiceError with the status code."""
        mock_session.get.return_value = make_response(500)

        with pytest.raises(ServiceError) as exc_info:
            greek_client.resolve("λόγου")

        assert exc_info.value.upstream_status == 500
        assert exc_info.value.status_code == 503

    def test_connection_error_raises_service_error(self, greek_client, mock_session):
        """Network failures surface as ServiceError without a status."""
        mock_session.get.side_effect = requests.exceptions.ConnectionError("connection refused")

        with pytest.raises(ServiceError) as exc_info:
            greek_client.resolve("λόγου")

        assert exc_info.value.upstream_status is None

    def test_invalid_json_raises_malformed(self, greek_client, mock_session, make_response):
        """A success status with a non-JSON body is malformed."""
        mock_session.get.return_value = make_response(200, text="<html>maintenance</html>")

        with pytest.raises(MalformedResponse):
            greek_client.resolve("λόγου")

    def test_all_filtered_returns_empty_list(self, latin_client, mock_session, make_response):
        """Bodies without entries give an empty list, not an error."""
        mock_session.get.return_value = make_response(201, {"RDF": {"Annotation": {"Body": {"rest": {}}}}})

        assert latin_client.resolve("amor") == []

    def test_custom_endpoint(self, mock_session, make_response, greek_morpheus_response):
        """The endpoint comes from the settings."""
        settings = Settings(morphology_endpoint="http://localhost:8080/analysis/word", request_timeout=5.0)
        client = MorphologyClient(GREEK, api_client=APIClient(settings, session=mock_session))
        mock_session.get.return_value = make_response(201, greek_morpheus_response)

        client.resolve("λόγου")

        args, kwargs = mock_session.get.call_args
        assert args[0] == "http://localhost:8080/analysis/word"
        assert kwargs["timeout"] == 5.0


class TestFormatEntry:
    """Test plain-text rendering of entries."""

    def test_noun_entry(self, greek_morpheus_response):
        """Headword, metadata and a split stem/suffix form are shown."""
        entry = parse_morpheus_response(greek_morpheus_response, "λόγου")[0]

        formatted = format_entry(entry)

        lines = formatted.split("\n")
        assert lines[0] == "λόγος [POS: noun, declension: 2nd, gender: masculine]"
        assert lines[1] == "  λόγ-ου case: genitive, number: singular, gender: masculine"

    def test_bare_entry(self):
        """An entry without metadata or inflections is just its headword."""
        assert format_entry(MorphologyEntry(headword="amo")) == "amo"

    def test_inflection_without_form(self):
        """Attributes are listed even when stem and suffix are empty."""
        entry = MorphologyEntry(headword="amo", inflections=[InflectionForm(mood="imperative")])

        assert format_entry(entry) == "amo\n  mood: imperative"
