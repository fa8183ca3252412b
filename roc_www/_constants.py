"""Common literal values used across roc_www.

These constants keep page names, asset paths, and the homepage splice marker
centralized so the shell builders, the site builder, and tests import the
same values without drifting. Intended for internal use within the roc_www
package.

Examples
--------
>>> from roc_www import _constants
>>> _constants.HOMEPAGE
'index.html'
>>> _constants.NAV_PREFIX + "tutorial"
'/wip/tutorial'
"""

HOMEPAGE = "index.html"
HOMEPAGE_BODY_ID = "homepage-main"

SPLICE_MARKER = "<!-- THIS COMMENT WILL BE REPLACED BY THE LARGER EXAMPLE -->"

NAV_PREFIX = "/wip/"

FAVICON_PATH = "/favicon.svg"
FONT_PRELOADS = (
    "/fonts/lato-v23-latin/lato-v23-latin-regular.woff2",
    "/fonts/source-code-pro-v22-latin/source-code-pro-v22-latin-regular.woff2",
)
REPL_SCRIPT_PATH = "/repl/roc_repl_wasm.js"
STYLESHEETS = ("/wip/site.css", "/wip/repl.css")
MASK_ICON_COLOR = "#7d59dd"

# netlify.toml pins the sha256 of this exact text in its Content-Security-Policy.
# Any edit here needs the hash updated there or the script is blocked in production.
NO_JS_SCRIPT = (
    "document.documentElement.className = "
    "document.documentElement.className.replace('no-js', '');"
)

HOSTING_PROVIDER = "Netlify"
HOSTING_PROVIDER_URL = "https://www.netlify.com"
