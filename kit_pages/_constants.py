"""Common literal values used across kit_pages.

These constants keep filenames centralized so the builder, the CLI, and the
tests can import the same values without drifting. Intended for internal use
within the kit_pages package.

Examples
--------
>>> from kit_pages import _constants
>>> _constants.PAGE_OUTPUT_TEMPLATE.format(slug="commands/feature")
'commands/feature/index.html'

The page at :data:`ROOT_SLUG` is the site home and is written to
:data:`ROOT_PAGE_OUTPUT` at the top of the output directory.
"""

DEFAULT_CONFIG_PATH = "config/site.yaml"
STYLESHEET_NAME = "pygments.css"
PAGE_OUTPUT_TEMPLATE = "{slug}/index.html"
ROOT_SLUG = "index"
ROOT_PAGE_OUTPUT = "index.html"
