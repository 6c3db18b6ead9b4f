"""
Logos - Flask Blueprints

Routes read their shared components from ``current_app.extensions["logos"]``,
filled in by ``create_app``.
"""

from logos.web.blueprints.morphology import morphology_bp
from logos.web.blueprints.wiktionary import wiktionary_bp

__all__ = [
    "wiktionary_bp",
    "morphology_bp",
]
