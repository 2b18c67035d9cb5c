"""Structured-output schema sent with every theme generation request."""

from typing import Any


def _string(description: str) -> dict[str, str]:
    return {"type": "STRING", "description": description}


def _boolean(description: str) -> dict[str, str]:
    return {"type": "BOOLEAN", "description": description}


def _object(description: str, properties: dict[str, Any]) -> dict[str, Any]:
    return {"type": "OBJECT", "description": description, "properties": properties}


FOUNDATION_SCHEMA = _object("Core styles for the page layout and elements.", {
    "bodyBgColor": _string("Page background color, hex format."),
    "messageBufferBgColor": _string("Background for elements that would normally be behind the (now hidden) chat, hex format."),
    "chatTextColor": _string("Default text color for elements like polls, hex format."),
    "linkColor": _string("Color for hyperlinks, hex format."),
    "timestampColor": _string("Timestamp color for playlist items, hex format."),
    "ownerColor": _string("Username color for channel owner in the userlist (userlist is hidden), hex format."),
    "userlistBgColor": _string("Background color for the userlist area (hidden), hex format."),
    "userlistTextColor": _string("Default text color for the userlist (hidden), hex format."),
    "queueActiveBgColor": _string("Background color for the currently playing item in the playlist, hex format."),
    "queueActiveTextColor": _string("Text color for the currently playing item in the playlist, hex format."),
    "pollWellBgColor": _string("Background for polls. Hex format or 'transparent'."),
    "pollWellColor": _string("Text color for polls, hex format."),
    "queueItemBorder": _boolean("Whether to show a border under playlist items."),
    "navbarBgColor": _string("Navbar background color, rgba format for transparency."),
})

MOTD_SCHEMA = _object(
    "Message of the Day (MOTD) banner content and styling. You may provide a URL for a background image.",
    {
        "backgroundImageUrl": _string("A URL for a background image for the MOTD banner. Should be thematically appropriate. Can be an empty string if no image is desired."),
        "title": _string("A short, catchy main title for the MOTD."),
        "subtitle": _string("A secondary subtitle for the MOTD."),
        "titleColor": _string("Color for the main title text, hex format."),
        "titleFontSize": _string("Font size for the main title (e.g., '100px')."),
        "titleTextShadow": _string("CSS text-shadow for the main title (e.g., '2px 2px 8px #000000')."),
        "subtitleColor": _string("Color for the subtitle text, hex format."),
        "subtitleFontSize": _string("Font size for the subtitle (e.g., '50px')."),
        "subtitleTextShadow": _string("CSS text-shadow for the subtitle (e.g., '2px 2px 4px #000000')."),
    },
)

CSS_EFFECTS_SCHEMA = _object(
    "A set of boolean flags to enable or disable specific, pre-defined CSS visual effects. "
    "Use them to enhance the theme's atmosphere.",
    {
        "pulsatingVideowrapBorder": _boolean("Adds an animated, glowing border around the video player."),
        "animatedBackground": _boolean("Adds a slow, shifting gradient animation to the page background. Overrides bodyBgColor."),
        "customScrollbars": _boolean("Applies a custom style to browser scrollbars."),
        "videowrapTvScanlines": _boolean("Overlays the video with faint, flickering scanlines, simulating a vintage CRT monitor."),
        "videowrapVhsGlitch": _boolean("Adds a chaotic 'glitch' effect to the video border, mimicking a damaged VHS tape."),
        "videowrapFloatingFrame": _boolean("Makes the video player appear to float above the page."),
        "videowrapFilmBorder": _boolean("Adds an animated border that looks like a classic film strip."),
        "pulsatingMotdBackground": _boolean("Adds a subtle pulsating glow animation to the MOTD banner."),
        "animatedQueue": _boolean("Adds a subtle glow animation to the currently active video in the playlist."),
        "cinematicBlackBars": _boolean("Adds permanent black bars to the top and bottom of the screen."),
        "animatedBackgroundFloatingBlobs": _boolean("Adds large, colorful, slowly morphing blobs that drift in the background for a modern, fluid aesthetic."),
        "animatedQueueNowPlaying": _boolean("Adds an animated equalizer-style bar to the active playlist item, indicating it's 'Now Playing'."),
        "playlistHoverGlitchText": _boolean("Makes the text of a playlist item glitch when the user hovers over it. Great for tech or cyberpunk themes."),
        "videowrapCrtEffect": _boolean("Applies a barrel distortion and vignette effect to the video player, mimicking the look of a vintage curved CRT screen."),
        "videowrapSignalInterference": _boolean("Periodically shows a rolling bar of static over the video, simulating TV signal interference."),
    },
)

JAVASCRIPT_SCHEMA = _object("A set of boolean flags to enable or disable specific JavaScript features.", {
    "welcomeMessage": _string("A welcome message to show in an alert. Keep it short and related to the theme. Can be empty string."),
    "enableCinematicMode": _boolean("Enables a button to toggle a 'cinematic' viewing mode."),
    "enableMouseFollower": _boolean("Enables a decorative element that follows the cursor."),
    "enableRandomThemeButton": _boolean("Adds a button to randomize theme colors. Probably should be false unless requested."),
    "enableMatrixRain": _boolean("Creates a 'Matrix' style digital rain effect in the background. Excellent for hacker, cyberpunk, or tech themes. It is performance-intensive."),
    "enableVideowrapShake": _boolean("Enables a feature that randomly and briefly shakes the video player for a jarring, impactful effect."),
})

RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "fontImportUrl": _string(
            "A full URL for a CSS @import rule to load a custom font. Can be from fonts.google.com, "
            "cdnfonts.com, or other sources. Example: 'https://fonts.cdnfonts.com/css/simpsonfont'. "
            "Can be an empty string if no custom font is needed."
        ),
        "fontFamilyName": _string(
            "The exact font-family name to use in CSS, corresponding to the imported font. "
            "Example: 'Simpsonfont'. Can be an empty string."
        ),
        "foundation": FOUNDATION_SCHEMA,
        "motd": MOTD_SCHEMA,
        "cssEffects": CSS_EFFECTS_SCHEMA,
        "javascript": JAVASCRIPT_SCHEMA,
        "advancedCss": _string(
            "A block of raw, advanced CSS to inject. Use this for complex animations, keyframes, or "
            "selectors not covered by other options. The CSS should be valid and minified. "
            "Can be an empty string."
        ),
    },
}

PROMPT_TEMPLATE = (
    "Generate a complete theme configuration for a Cytube channel based on the following "
    "description. Adhere strictly to the provided JSON schema. The chat and userlist are "
    "permanently hidden, so do not generate any styles for them. Make the theme creative and "
    'cohesive. Description: "{description}"'
)


def build_prompt(description: str) -> str:
    return PROMPT_TEMPLATE.format(description=description)
