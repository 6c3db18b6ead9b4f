"""
Logos - Wiktionary Blueprint

Routes returning cleaned Wiktionary definitions.

    GET /api/wiktionary/<lemma>             Ancient Greek section
    GET /api/wiktionary/<language>/<lemma>  section for any supported language
"""

from flask import Blueprint, current_app, jsonify

from logos.core.errors import InputError
from logos.languages import GREEK, get_language
from logos.logging_config import get_logger

logger = get_logger("web.wiktionary")

wiktionary_bp = Blueprint("wiktionary", __name__)


def _extractor():
    return current_app.extensions["logos"]["extractor"]


def _definition_response(lemma, language):
    result = _extractor().define(lemma, language)
    logger.info("Served %s definition for %r", language.key, result.lemma)
    return jsonify(result.model_dump())


@wiktionary_bp.route("/wiktionary/", defaults={"lemma": ""})
@wiktionary_bp.route("/wiktionary/<lemma>")
def get_greek_definition(lemma):
    """Ancient Greek definition of a lemma"""
    if not lemma.strip():
        raise InputError("Lemma parameter is required.")
    return _definition_response(lemma, GREEK)


@wiktionary_bp.route("/wiktionary/<language>/<lemma>")
def get_definition(language, lemma):
    """Definition of a lemma in the requested language"""
    return _definition_response(lemma, get_language(language))
