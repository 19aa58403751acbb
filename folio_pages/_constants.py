"""Reserved names shared across folio_pages.

These constants keep filenames, template names, and content conventions
centralized so the scanner, the content builder, the render driver, and tests
import the same values without drifting. Intended for internal use within the
folio_pages package.

Examples
--------
>>> from folio_pages import _constants
>>> _constants.INDEX_STEM + _constants.MARKDOWN_SUFFIX
'_index.md'
>>> _constants.PARENT_DIR_TOKEN * 2
'../../'
"""

MARKDOWN_SUFFIX = ".md"
INDEX_STEM = "_index"
FRONT_MATTER_DELIMITER = "+++"

HOME_TEMPLATE = "index.html"
SECTION_TEMPLATE = "section.html"
PAGE_TEMPLATE = "page.html"
ERROR_TEMPLATE = "404.html"

INDEX_DOCUMENT = "index.html"
ERROR_DOCUMENT = "404.html"

PARENT_DIR_TOKEN = "../"
HOME_LISTING_SECTION = "writing"
