"""Channel JavaScript: one IIFE whose init() wires up the enabled features."""

from cytheme.features import enabled_features
from cytheme.model import ThemeConfig

NO_JS = "// No JavaScript features enabled."

HEADER = """\
/*
  Cytube Theme Script
  Generated by cytheme
*/

(function() {
  'use strict';

  // Wait for the DOM so all elements are present
  if (document.readyState === 'complete' || document.readyState === 'interactive') {
    init();
  } else {
    window.addEventListener('DOMContentLoaded', init);
  }

  /*
   * =================================================================================
   * Main Initialization Function
   * =================================================================================
   */
  function init() {
"""

END_INIT = """
  } // End of init()
"""

HELPERS_BANNER = """
  /*
   * =================================================================================
   * Feature Functions
   * =================================================================================
   */
"""

FOOTER = "})(); // End of main IIFE\n"


def js_string(text: str) -> str:
    """Escape text for a single-quoted JS string literal."""
    return (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\r", "\\r")
        .replace("\n", "\\n")
    )


def render_js(theme: ThemeConfig) -> str:
    """Render the channel script, or a one-line comment when nothing is enabled."""
    js = theme.javascript
    features = enabled_features(theme)
    if not features and not js.welcome_message:
        return NO_JS

    script = HEADER
    if js.welcome_message:
        script += (
            "\n"
            "    // --- Welcome Alert ---\n"
            "    // Displays a welcome message when the script loads.\n"
            f"    alert('{js_string(js.welcome_message)}');\n"
        )

    calls = [f"    {feature.call}\n" for feature in features if feature.call]
    if calls:
        script += "\n    // --- Initializing UI Features ---\n" + "".join(calls)

    for feature in features:
        script += feature.code_for(theme)

    script += END_INIT

    helpers = [feature.helper for feature in features if feature.helper]
    if helpers:
        script += HELPERS_BANNER + "\n".join(helpers)

    script += FOOTER
    return script
