"""
Logos - Morphology Blueprint

Routes exposing the Morpheus analysis and the combined lookup.

    GET /api/morphology/<language>/<word>  morphological entries for a form
    GET /api/lookup/<language>/<query>     headword resolution plus definition
"""

from flask import Blueprint, current_app, jsonify

from logos.core.errors import InputError
from logos.core.text import clean_query
from logos.languages import get_language
from logos.logging_config import get_logger
from logos.processing.lookup import WordLookup
from logos.processing.morphology import MorphologyClient

logger = get_logger("web.morphology")

morphology_bp = Blueprint("morphology", __name__)


def _component(name):
    return current_app.extensions["logos"][name]


@morphology_bp.route("/morphology/<language>/<word>")
def get_morphology(language, word):
    """Morphological analysis of a word form"""
    profile = get_language(language)
    word = clean_query(word)
    if not word:
        raise InputError("Word parameter is required.")

    entries = MorphologyClient(profile, api_client=_component("api_client")).resolve(word)
    return jsonify(
        {
            "word": word,
            "language": profile.key,
            "entries": [entry.model_dump() for entry in entries],
        }
    )


@morphology_bp.route("/lookup/<language>/<query>")
def lookup(language, query):
    """Resolve a query to its headword and define it"""
    profile = get_language(language)
    word_lookup = WordLookup(
        profile,
        morphology=MorphologyClient(profile, api_client=_component("api_client")),
        extractor=_component("extractor"),
    )
    return jsonify(word_lookup.lookup(query).model_dump())
