"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# Upstream services
MORPHOLOGY_ENDPOINT = "https://services.perseids.org/bsp/morphologyservice/analysis/word"
WIKTIONARY_BASE_URL = "https://en.wiktionary.org/wiki/"
USER_AGENT = "Logos Wiktionary Scraper (Academic Use)"

# Sections of a Wiktionary language entry that are cut from the rendered definition
CUTOFF_KEYWORDS = (
    "Derived terms",
    "Descendants",
    "References",
    "Further reading",
)

# Greek script blocks (basic and polytonic)
GREEK_SCRIPT_PATTERN = r"[\u0370-\u03FF\u1F00-\u1FFF]"

# Presentational classes applied to the sanitized definition fragment
H3_CLASSES = "text-xl font-bold text-indigo-700 mt-6 mb-2 pb-1 border-b border-indigo-200 text-left"
H4_CLASSES = "text-lg font-semibold text-slate-700 mt-4 mb-1 text-left"
TABLE_CLASSES = "w-full border border-gray-300 rounded-lg overflow-hidden my-4 text-sm shadow-md text-left"
CELL_CLASSES = "p-3 border-b border-gray-200 text-left"
HEADER_CELL_CLASSES = "bg-indigo-50 font-semibold text-indigo-800 text-left"

# Elements allowed to keep a class attribute after sanitization
CLASSED_ELEMENTS = ("table", "th", "td", "h3", "h4")
