"""CSS effect table: one fixed, self-contained CSS block per effect flag.

Blocks are emitted in table order, grouped under one header per group that
has at least one enabled block. Blocks never interact: enabling several
effects that target the same element (``#videowrap`` mostly) simply stacks
their rules, and the browser's cascade decides.
"""

from dataclasses import dataclass

from cytheme.model import ThemeConfig


@dataclass(frozen=True)
class EffectGroup:
    key: str
    title: str
    visual: bool  # listed under the "Visual Effects" header


@dataclass(frozen=True)
class EffectBlock:
    flag: str  # CssEffects attribute
    group: str  # EffectGroup.key
    css: str

    @property
    def label(self) -> str:
        return _label(self.flag)


GROUPS: list[EffectGroup] = [
    EffectGroup("videowrap", "Videowrap & Frame Effects", True),
    EffectGroup("background", "Background Effects", True),
    EffectGroup("playlist", "Playlist Effects", True),
    EffectGroup("layout", "Layout & Utility Effects", True),
    EffectGroup("themed", "Themed Gimmick Effects", False),
    EffectGroup("spooky", "Weird & Spooky Gimmicks", False),
    EffectGroup("christmas", "Christmas & Festive Gimmicks", False),
]

# Fractal-noise SVG tile shared by the grain/static blocks.
NOISE_SVG = (
    "data:image/svg+xml;base64,PHN2ZyB4bWxucz0iaHR0cDovL3d3dy53My5vcmcvMjAwMC9zdmciIHZpZXdCb3g9IjAgMCA1"
    "MTIgNTEyIj48ZmlsdGVyIGlkPSJub2lzZSI+PGZlVHVyYnVsZW5jZSB0eXBlPSJmcmFjdGFsTm9pc2UiIGJhc2VGcmVxdWVu"
    "Y3k9IjAuNjUiIG51bU9jdGF2ZXM9IjMiIHN0aXRjaFRpbGVzPSJzdGl0Y2giLz48L2ZpbHRlcj48cmVjdCB3aWR0aD0iNTEy"
    "IiBoZWlnaHQ9IjUxMiIgZmlsdGVyPSJ1cmwoI25vaXNlKSIgb3BhY2l0eT0iMC4yIi8+PC9zdmc+"
)

SLIDE_IN_ITEMS = 20


def _slide_in_css() -> str:
    lines = [
        "@keyframes playlist-slide-in { from { opacity: 0; transform: translateX(-20px); } "
        "to { opacity: 1; transform: translateX(0); } }",
        "#queue > li { animation: playlist-slide-in 0.5s ease-out both; }",
    ]
    for i in range(1, SLIDE_IN_ITEMS + 1):
        lines.append(f"#queue > li:nth-child({i}) {{ animation-delay: {i * 0.05:.2f}s; }}")
    return "\n".join(lines)


EFFECTS: list[EffectBlock] = [
    # -- Videowrap & frame ----------------------------------------------------
    EffectBlock("pulsating_videowrap_border", "videowrap", (
        "@keyframes pulsate-border { 0% { box-shadow: 0 0 10px 0px rgba(79, 70, 229, 0.5); } "
        "50% { box-shadow: 0 0 20px 5px rgba(129, 140, 248, 0.8); } "
        "100% { box-shadow: 0 0 10px 0px rgba(79, 70, 229, 0.5); } } "
        "#videowrap { border: 2px solid rgba(129, 140, 248, 0.5); border-radius: 10px; "
        "animation: pulsate-border 3s infinite ease-in-out; }"
    )),
    EffectBlock("videowrap_tv_scanlines", "videowrap", (
        "#videowrap { position: relative; overflow: hidden; } "
        "#videowrap::after { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background: repeating-linear-gradient(0deg, rgba(0,0,0,0.3) 0, rgba(0,0,0,0.3) 1px, transparent 1px, transparent 2px); "
        "opacity: 0.5; pointer-events: none; z-index: 1001; animation: scanline-flicker 0.2s linear infinite; } "
        "@keyframes scanline-flicker { 0% { opacity: 0.4; transform: translateY(0); } "
        "50% { opacity: 0.6; transform: translateY(1px); } 100% { opacity: 0.4; transform: translateY(0); } }"
    )),
    EffectBlock("videowrap_vhs_glitch", "videowrap", (
        "@keyframes vhs-glitch-1 { 0%, 100% { clip-path: inset(5% 0 90% 0); } 10% { clip-path: inset(95% 0 2% 0); } "
        "30% { clip-path: inset(30% 0 50% 0); } 50% { clip-path: inset(5% 0 80% 0); } 80% { clip-path: inset(80% 0 5% 0); } } "
        "@keyframes vhs-glitch-2 { 0%, 100% { clip-path: inset(80% 0 10% 0); transform: translateX(-5px); } "
        "25% { clip-path: inset(10% 0 75% 0); transform: translateX(5px); } "
        "55% { clip-path: inset(60% 0 30% 0); transform: translateX(3px); } "
        "85% { clip-path: inset(25% 0 60% 0); transform: translateX(-3px); } } "
        "#videowrap { position: relative; } "
        "#videowrap::before, #videowrap::after { content: ''; position: absolute; top: 0; left: 0; width: 100%; "
        "height: 100%; background: inherit; z-index: 1000; } "
        "#videowrap::before { animation: vhs-glitch-2 1s steps(2, end) infinite; background: #f0f; mix-blend-mode: screen; } "
        "#videowrap::after { animation: vhs-glitch-1 1.5s steps(2, end) infinite; background: #0ff; mix-blend-mode: screen; }"
    )),
    EffectBlock("videowrap_floating_frame", "videowrap", (
        "@keyframes float-frame { 0% { transform: translateY(0px); box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.45); } "
        "50% { transform: translateY(-8px); box-shadow: 0 35px 60px -15px rgba(0, 0, 0, 0.55); } "
        "100% { transform: translateY(0px); box-shadow: 0 25px 50px -12px rgba(0, 0, 0, 0.45); } } "
        "#videowrap { animation: float-frame 6s ease-in-out infinite; border-radius: 12px; }"
    )),
    EffectBlock("videowrap_film_border", "videowrap", (
        "@keyframes scroll-filmstrip { from { background-position: 0 0; } to { background-position: 0 -30px; } } "
        "#videowrap { position: relative; padding: 0 30px; background-color: #000; border: 1px solid #333; } "
        "#videowrap::before, #videowrap::after { content: ''; position: absolute; top: 0; bottom: 0; width: 25px; "
        "background: repeating-linear-gradient(#000, #000 10px, #fff 10px, #fff 20px, #000 20px); "
        "background-size: 100% 30px; background-repeat: repeat-y; animation: scroll-filmstrip 0.75s linear infinite; } "
        "#videowrap::before { left: 0; } #videowrap::after { right: 0; }"
    )),
    EffectBlock("videowrap_sepia_film", "videowrap", (
        "@keyframes film-grain { 0%, 100% { transform: translate(0, 0); } 10% { transform: translate(-1%, -1%); } "
        "20% { transform: translate(1%, 1%); } 30% { transform: translate(-2%, 2%); } 40% { transform: translate(2%, -2%); } "
        "50% { transform: translate(-1%, 2%); } 60% { transform: translate(2%, 1%); } 70% { transform: translate(-2%, -1%); } "
        "80% { transform: translate(1%, -2%); } 90% { transform: translate(-1%, 1%); } } "
        "@keyframes film-flicker { 0% { opacity: 1; } 48% { opacity: 1; } 50% { opacity: 0.8; } 52% { opacity: 1; } "
        "98% { opacity: 1; } 100% { opacity: 0.9; } } "
        "#videowrap { position: relative; overflow: hidden; filter: sepia(0.6) contrast(1.1) brightness(0.9); "
        "animation: film-flicker 3s infinite linear; } "
        "#videowrap::after { content: ''; position: absolute; top: -50%; left: -50%; width: 200%; height: 200%; "
        "background: repeating-linear-gradient(rgba(0,0,0,0) 0%, rgba(0,0,0,0.1) 50%, rgba(0,0,0,0) 100%), "
        "repeating-radial-gradient(rgba(0,0,0,0) 0%, rgba(0,0,0,0.1) 50%, rgba(0,0,0,0) 100%); "
        "opacity: 0.3; pointer-events: none; z-index: 1001; animation: film-grain 0.2s infinite; }"
    )),
    EffectBlock("videowrap_night_vision", "videowrap", (
        "#videowrap { position: relative; overflow: hidden; filter: brightness(1.2) contrast(1.5); } "
        "#videowrap::before { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background: radial-gradient(circle, rgba(0, 255, 0, 0.2) 40%, rgba(0, 50, 0, 0.8) 110%); "
        "mix-blend-mode: screen; z-index: 1001; pointer-events: none; } "
        "#videowrap::after { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background: repeating-linear-gradient(0deg, rgba(0, 100, 0, 0.2) 0, rgba(0, 100, 0, 0.2) 1px, transparent 1px, transparent 3px); "
        "opacity: 0.6; z-index: 1002; pointer-events: none; }"
    )),
    EffectBlock("videowrap_security_camera", "videowrap", (
        "@keyframes rec-blink { 0%, 100% { opacity: 1; } 50% { opacity: 0.3; } } "
        "#ytapiplayer { filter: contrast(1.2) grayscale(0.5); } "
        "#videowrap { position: relative; overflow: hidden; background: #000; } "
        "#videowrap::before { content: '● REC'; position: absolute; top: 15px; left: 15px; "
        "font-family: 'Courier New', monospace; font-size: 18px; color: #ff0000; text-shadow: 0 0 5px #ff0000; "
        "z-index: 1001; animation: rec-blink 1.5s infinite; } "
        "#videowrap::after { content: 'CAM-01'; position: absolute; bottom: 15px; right: 15px; "
        "font-family: 'Courier New', monospace; font-size: 16px; color: rgba(255, 255, 255, 0.7); "
        "background: rgba(0, 0, 0, 0.5); padding: 2px 5px; z-index: 1001; }"
    )),
    EffectBlock("videowrap_holographic", "videowrap", (
        "@keyframes holo-flicker { 0% { opacity: 0.8; } 5% { opacity: 0.7; } 10% { opacity: 0.8; } 20% { opacity: 0.8; } "
        "25% { opacity: 0.6; } 30% { opacity: 0.8; } 100% { opacity: 0.8; } } "
        "@keyframes holo-scanline-scroll { from { transform: translateY(-10px); } to { transform: translateY(0); } } "
        "#videowrap { position: relative; border: none; box-shadow: 0 0 15px 5px rgba(0, 255, 255, 0.3), "
        "inset 0 0 10px 2px rgba(0, 255, 255, 0.2); background-color: transparent; animation: holo-flicker 5s infinite; } "
        "#ytapiplayer { opacity: 0.8; mix-blend-mode: screen; } "
        "#videowrap::after { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background: repeating-linear-gradient(0deg, rgba(0, 200, 255, 0.1) 0px, rgba(0, 200, 255, 0.2) 2px, transparent 4px); "
        "z-index: 1001; pointer-events: none; animation: holo-scanline-scroll 0.5s linear infinite; }"
    )),
    EffectBlock("videowrap_static_noise", "videowrap", (
        "@keyframes static-noise-anim { 0% { transform: translate(0, 0); } 10% { transform: translate(-5%, -10%); } "
        "20% { transform: translate(-15%, 5%); } 30% { transform: translate(7%, -25%); } 40% { transform: translate(-5%, 25%); } "
        "50% { transform: translate(-15%, 10%); } 60% { transform: translate(15%, 0%); } 70% { transform: translate(0%, 15%); } "
        "80% { transform: translate(3%, 35%); } 90% { transform: translate(-10%, 10%); } 100% { transform: translate(0, 0); } } "
        "#videowrap { position: relative; overflow: hidden; } "
        "#videowrap::after { content: ''; position: absolute; top: -50%; left: -50%; width: 200%; height: 200%; "
        f"background: url('{NOISE_SVG}'); opacity: 0.15; pointer-events: none; z-index: 1002; "
        "animation: static-noise-anim 0.2s infinite linear; }"
    )),
    EffectBlock("videowrap_glitch_effect", "videowrap", (
        "@keyframes digital-glitch-anim-1 { 0% { clip: rect(79px, 9999px, 81px, 0); } 10% { clip: rect(32px, 9999px, 83px, 0); } "
        "20% { clip: rect(6px, 9999px, 69px, 0); } 30% { clip: rect(25px, 9999px, 98px, 0); } "
        "40% { clip: rect(4px, 9999px, 89px, 0); } 50% { clip: rect(3px, 9999px, 66px, 0); } "
        "60% { clip: rect(62px, 9999px, 85px, 0); } 70% { clip: rect(5px, 9999px, 63px, 0); } "
        "80% { clip: rect(8px, 9999px, 73px, 0); } 90% { clip: rect(88px, 9999px, 7px, 0); } "
        "100% { clip: rect(74px, 9999px, 61px, 0); } } "
        "@keyframes digital-glitch-anim-2 { 0% { clip: rect(7px, 9999px, 91px, 0); } 10% { clip: rect(23px, 9999px, 3px, 0); } "
        "20% { clip: rect(10px, 9999px, 2px, 0); } 30% { clip: rect(22px, 9999px, 6px, 0); } "
        "40% { clip: rect(81px, 9999px, 70px, 0); } 50% { clip: rect(48px, 9999px, 2px, 0); } "
        "60% { clip: rect(8px, 9999px, 57px, 0); } 70% { clip: rect(9px, 9999px, 98px, 0); } "
        "80% { clip: rect(5px, 9999px, 77px, 0); } 90% { clip: rect(16px, 9999px, 9px, 0); } "
        "100% { clip: rect(2px, 9999px, 91px, 0); } } "
        "#videowrap { position: relative; } "
        "#ytapiplayer { animation: digital-glitch-anim-1 2s infinite linear alternate-reverse; } "
        "#videowrap::before, #videowrap::after { content: ''; position: absolute; top: 0; left: 0; width: 100%; "
        "height: 100%; background: inherit; z-index: 1000; } "
        "#videowrap::before { animation: digital-glitch-anim-2 1.5s infinite linear alternate-reverse; transform: translateX(10px); } "
        "#videowrap::after { animation: digital-glitch-anim-1 1s infinite linear alternate-reverse; transform: translateX(-10px); }"
    )),
    EffectBlock("videowrap_film_grain", "videowrap", (
        "@keyframes film-grain-anim { 0%, 100% { transform: translate(0, 0); } 10% { transform: translate(-2%, -2%); } "
        "20% { transform: translate(2%, 2%); } 30% { transform: translate(-3%, 3%); } 40% { transform: translate(3%, -3%); } "
        "50% { transform: translate(-2%, 3%); } 60% { transform: translate(3%, 2%); } 70% { transform: translate(-3%, -2%); } "
        "80% { transform: translate(2%, -3%); } 90% { transform: translate(-2%, 2%); } } "
        "#videowrap { position: relative; overflow: hidden; } "
        "#videowrap::after { content: ''; position: absolute; top: -50%; left: -50%; width: 200%; height: 200%; "
        f"background: url('{NOISE_SVG}'); opacity: 0.1; pointer-events: none; z-index: 1002; "
        "animation: film-grain-anim 0.3s steps(5, end) infinite; }"
    )),
    EffectBlock("videowrap_crt_effect", "videowrap", (
        "#videowrap { border-radius: 25px; overflow: hidden; box-shadow: inset 0 0 20px 10px rgba(0,0,0,0.5); } "
        "#videowrap::before { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background: radial-gradient(circle at center, rgba(255,255,255,0) 50%, rgba(0,0,0,0.4) 100%); "
        "z-index: 1001; pointer-events: none; border-radius: 25px; }"
    )),
    EffectBlock("videowrap_signal_interference", "videowrap", (
        "@keyframes signal-interference { 0% { transform: translateY(-100%); opacity: 0; } "
        "5% { transform: translateY(0%); opacity: 0.3; } 6% { transform: translateY(100%); opacity: 0; } "
        "100% { transform: translateY(100%); opacity: 0; } } "
        "#videowrap::after { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 10%; "
        "background: linear-gradient(rgba(0,0,0,0.1) 50%, rgba(255,255,255,0.1) 50%); background-size: 100% 4px; "
        "z-index: 1002; pointer-events: none; animation: signal-interference 8s infinite steps(10); }"
    )),
    EffectBlock("videowrap_pulsating_glow", "videowrap", (
        "@keyframes pulsate-glow { 0% { box-shadow: 0 0 20px 0px rgba(129, 140, 248, 0.4); } "
        "50% { box-shadow: 0 0 35px 10px rgba(129, 140, 248, 0.7); } "
        "100% { box-shadow: 0 0 20px 0px rgba(129, 140, 248, 0.4); } } "
        "#videowrap { animation: pulsate-glow 4s infinite ease-in-out; border-radius: 12px; }"
    )),
    EffectBlock("videowrap_old_tv_startup", "videowrap", (
        "@keyframes tv-startup-line { 0% { clip-path: inset(50% 0 50% 0); } 20% { clip-path: inset(0 0 0 0); } } "
        "@keyframes tv-startup-flash { 0%, 100% { opacity: 0; } 15% { opacity: 0; } 20% { opacity: 1; } 25% { opacity: 0; } } "
        "#videowrap { animation: tv-startup-line 1s cubic-bezier(0.76, 0, 0.24, 1) forwards; } "
        "#videowrap::before { content: ''; position: absolute; top: 0; left: 0; width: 100%; height: 100%; "
        "background: #fff; z-index: 1002; pointer-events: none; animation: tv-startup-flash 1s linear forwards; }"
    )),
    # -- Background -----------------------------------------------------------
    EffectBlock("animated_background", "background", (
        "body { background: linear-gradient(-45deg, #0f0c29, #302b63, #24243e, #111827); background-size: 400% 400%; "
        "animation: gradient-animation 15s ease infinite; } "
        "@keyframes gradient-animation { 0% { background-position: 0% 50%; } 50% { background-position: 100% 50%; } "
        "100% { background-position: 0% 50%; } }"
    )),
    EffectBlock("animated_background_nebula", "background", (
        ".nebula { position: absolute; top: 0; left: 0; right: 0; bottom: 0; width: 100vw; height: 100vh; "
        "background: radial-gradient(ellipse at 70% 30%, rgba(108, 92, 231, 0.3) 0%, transparent 50%), "
        "radial-gradient(ellipse at 20% 80%, rgba(74, 222, 128, 0.25) 0%, transparent 40%), "
        "radial-gradient(circle at 50% 50%, rgba(236, 72, 153, 0.2) 0%, transparent 60%); "
        "mix-blend-mode: screen; animation: nebula-drift 120s infinite linear alternate; z-index: -2; } "
        "@keyframes nebula-drift { from { transform: rotate(0deg) scale(1.5); } to { transform: rotate(360deg) scale(2); } }"
    )),
    EffectBlock("animated_background_pulsating_grid", "background", (
        "@keyframes pulsate-grid { 0%, 100% { border-color: rgba(139, 92, 246, 0.1); } "
        "50% { border-color: rgba(167, 139, 250, 0.4); } } "
        ".plane { animation: pulsate-grid 8s infinite ease-in-out; }"
    )),
    EffectBlock("static_noise_background", "background", (
        "@keyframes static-noise-anim-bg { 0% { transform: translate(0, 0); } 10% { transform: translate(-2%, -5%); } "
        "20% { transform: translate(-7%, 2%); } 30% { transform: translate(3%, -10%); } 40% { transform: translate(-2%, 10%); } "
        "50% { transform: translate(-7%, 5%); } 60% { transform: translate(7%, 0%); } 70% { transform: translate(0%, 7%); } "
        "80% { transform: translate(1%, 15%); } 90% { transform: translate(-5%, 5%); } 100% { transform: translate(0, 0); } } "
        "body::after { content: ''; position: fixed; top: -50%; left: -50%; width: 200%; height: 200%; "
        f"background: url('{NOISE_SVG}'); opacity: 0.05; pointer-events: none; z-index: -1; "
        "animation: static-noise-anim-bg 0.2s infinite linear; }"
    )),
    EffectBlock("animated_background_floating_blobs", "background", (
        "body { overflow: hidden; } "
        "@keyframes move-blob-1 { 0%, 100% { transform: translate(0, 0); } 50% { transform: translate(30vw, -20vh) scale(1.2); } } "
        "@keyframes move-blob-2 { 0%, 100% { transform: translate(0, 0); } 50% { transform: translate(-25vw, 25vh) scale(0.9); } } "
        "body::before, body::after { content: ''; position: fixed; z-index: -2; top: 20vh; left: 10vw; width: 30vw; "
        "height: 30vw; background: radial-gradient(circle, rgba(79, 70, 229, 0.4) 0%, transparent 70%); "
        "border-radius: 50%; animation: move-blob-1 30s infinite ease-in-out; filter: blur(50px); } "
        "body::after { top: 50vh; left: 60vw; width: 25vw; height: 25vw; "
        "background: radial-gradient(circle, rgba(219, 39, 119, 0.4) 0%, transparent 70%); "
        "animation: move-blob-2 40s infinite ease-in-out; }"
    )),
    # -- Playlist -------------------------------------------------------------
    EffectBlock("animated_queue", "playlist", (
        "@keyframes active-queue-glow { 0% { box-shadow: inset 0 0 10px 0 rgba(255, 255, 255, 0.2); } "
        "50% { box-shadow: inset 0 0 20px 5px rgba(255, 255, 255, 0.4); } "
        "100% { box-shadow: inset 0 0 10px 0 rgba(255, 255, 255, 0.2); } } "
        "#queue li.queue_active { animation: active-queue-glow 3s infinite ease-in-out; }"
    )),
    EffectBlock("animated_queue_now_playing", "playlist", (
        "@keyframes sound-bar { 0%, 100% { transform: scaleY(0.2); } 20% { transform: scaleY(1); } "
        "40% { transform: scaleY(0.5); } 60% { transform: scaleY(0.8); } 80% { transform: scaleY(0.3); } } "
        "#queue li.queue_active { position: relative; padding-left: 28px; } "
        "#queue li.queue_active::before { content: ''; position: absolute; left: 8px; bottom: 30%; width: 2px; "
        "height: 12px; background-color: #4ade80; box-shadow: 5px 0 0 0 #4ade80, 10px 0 0 0 #4ade80; "
        "transform-origin: bottom; animation: sound-bar 1.2s infinite ease-out; }"
    )),
    EffectBlock("playlist_hover_glitch_text", "playlist", (
        "@keyframes text-glitch { 0% { text-shadow: 0.05em 0 0 #00fffc, -0.05em 0 0 #ff00ff; } "
        "15% { text-shadow: 0.05em 0 0 #00fffc, -0.05em 0 0 #ff00ff; } "
        "16% { text-shadow: -0.05em -0.025em 0 #00fffc, 0.025em 0.025em 0 #ff00ff; } "
        "49% { text-shadow: -0.05em -0.025em 0 #00fffc, 0.025em 0.025em 0 #ff00ff; } "
        "50% { text-shadow: 0.025em 0.05em 0 #00fffc, 0.05em 0 0 #ff00ff; } "
        "99% { text-shadow: 0.025em 0.05em 0 #00fffc, 0.05em 0 0 #ff00ff; } "
        "100% { text-shadow: -0.025em 0 0 #00fffc, -0.025em -0.05em 0 #ff00ff; } } "
        "#queue li:hover .qe_title { animation: text-glitch 0.65s infinite; }"
    )),
    EffectBlock("playlist_slide_in_on_load", "playlist", _slide_in_css()),
    EffectBlock("playlist_item_spotlight", "playlist", (
        "@keyframes spotlight-sweep { 0% { background-position: -100% 50%; } 100% { background-position: 200% 50%; } } "
        "#queue > li:hover { background: linear-gradient(90deg, transparent 20%, rgba(255,255,255,0.1) 50%, "
        "transparent 80%) !important; background-size: 200% 100%; animation: spotlight-sweep 1.5s linear infinite; }"
    )),
    # -- Layout & utility -----------------------------------------------------
    EffectBlock("cinematic_black_bars", "layout", (
        "/* Cinematic Black Bars */\n"
        "body::before, body::after { content: ''; position: fixed; left: 0; right: 0; height: 10vh; background: #000; "
        "z-index: 9998; pointer-events: none; } body::before { top: 0; } body::after { bottom: 0; }"
    )),
    EffectBlock("custom_scrollbars", "layout", (
        "::-webkit-scrollbar { width: 10px; } ::-webkit-scrollbar-track { background: #1f2937; } "
        "::-webkit-scrollbar-thumb { background: #4f46e5; border-radius: 5px; } "
        "::-webkit-scrollbar-thumb:hover { background: #6366f1; }"
    )),
    # -- Themed gimmicks ------------------------------------------------------
    EffectBlock("simpsons_cloud_background", "themed", """\
/* --- Simpsons Cloud Background --- */
/* This will override other background settings */
@import url('https://fonts.cdnfonts.com/css/simpsonfont');

body {
  background: linear-gradient(to bottom, #62cff4 0%, #2c67f2 100%);
  font-family: 'Simpsonfont', cursive, 'Comic Sans MS', cursive, Arial, sans-serif;
  color: #fdd835;
}

body::before {
  content: "";
  position: fixed;
  width: 100%;
  height: 250px;
  bottom: 0;
  left: 0;
  z-index: 1;
  background:
    radial-gradient(circle 60px at 20% 70%, #fff 98%, transparent 99%),
    radial-gradient(circle 50px at 31% 55%, #fff 98%, transparent 99%),
    radial-gradient(circle 40px at 40% 70%, #fff 98%, transparent 99%),
    radial-gradient(circle 55px at 55% 65%, #fff 98%, transparent 99%),
    radial-gradient(circle 45px at 65% 65%, #fff 98%, transparent 99%),
    radial-gradient(circle 60px at 80% 70%, #fff 98%, transparent 99%);
  background-repeat: repeat-x;
  background-size: 200px 120px;
  opacity: 0.18;
  pointer-events: none;
}"""),
    EffectBlock("simpsons_tv_frame", "themed", """\
/* --- Simpsons TV Videowrap --- */
/* This may conflict with other videowrap effects */
#videowrap {
  background-color: #1a1a1a;
  border: 7px solid #8b4513; /* wood-like frame */
  border-radius: 12px;
  overflow: hidden;
  box-shadow: inset 0 0 15px rgba(0,0,0,0.7), 0 0 25px rgba(0,0,0,0.5);
  transform: rotateX(2deg) rotateY(-2deg) scale(1.02);
  transition: transform 0.5s ease-in-out;
}"""),
    # -- Weird & spooky -------------------------------------------------------
    EffectBlock("invert_colors", "spooky", (
        "/* Invert Colors */ body { filter: invert(1); background-color: #fff; } "
        "img, video, #ytapiplayer { filter: invert(1); }"
    )),
    EffectBlock("creepy_text_shadow", "spooky", (
        "/* Creepy Text Shadow */ body { text-shadow: 0 0 3px rgba(255, 0, 0, 0.4), "
        "1px 1px 1px rgba(0,0,0,0.8), -1px -1px 1px rgba(0,0,0,0.8); }"
    )),
    EffectBlock("dramatic_lighting", "spooky", (
        "/* Dramatic Lighting */ body { background-color: #000 !important; } "
        "body::after { content: ''; position: fixed; top: 0; left: 0; width: 100vw; height: 100vh; "
        "background: radial-gradient(circle at var(--mouse-x, 50%) var(--mouse-y, 50%), transparent 80px, "
        "rgba(0,0,0,0.95) 200px); pointer-events: none; z-index: 9997; }"
    )),
    EffectBlock("spooky_fog_overlay", "spooky", f"""\
@keyframes fog-drift {{ 0% {{ transform: translateX(-10%); opacity: 0; }} 50% {{ opacity: 0.6; }} 100% {{ transform: translateX(10%); opacity: 0; }} }}
body::before {{
    content: '';
    position: fixed;
    top: 0; left: 0; width: 200%; height: 100%;
    background-image: url('{NOISE_SVG}');
    background-size: 200%;
    mix-blend-mode: overlay;
    filter: blur(8px);
    z-index: 10;
    pointer-events: none;
    animation: fog-drift 40s infinite linear alternate;
}}"""),
    # -- Christmas ------------------------------------------------------------
    EffectBlock("christmas_lights_header", "christmas", """\
@keyframes light-blink { 0% { opacity: 1; } 50% { opacity: 0.6; } 100% { opacity: 1; } }
.navbar { position: relative; overflow: visible !important; }
.navbar::before {
    content: '';
    position: absolute;
    top: 0; left: 0; width: 100%; height: 15px;
    background-image:
        radial-gradient(circle at center, #ff0 4px, transparent 5px),
        radial-gradient(circle at center, #f00 4px, transparent 5px),
        radial-gradient(circle at center, #0f0 4px, transparent 5px),
        radial-gradient(circle at center, #00f 4px, transparent 5px);
    background-size: 60px 15px;
    background-position: 0 0, 15px 0, 30px 0, 45px 0;
    animation: light-blink 1.5s infinite linear;
    z-index: 100;
}"""),
    EffectBlock("let_it_snow", "christmas", """\
@keyframes snowfall {
  0% { background-position: 0 0, 0 0, 0 0; }
  100% { background-position: 200px 1000px, 400px 1000px, 600px 1500px; }
}
body::before {
  content: '';
  position: fixed;
  top: 0; left: 0; right: 0; bottom: 0;
  z-index: 9990;
  pointer-events: none;
  background-image:
    radial-gradient(4px 4px at 20px 30px, #fff 50%, transparent 100%),
    radial-gradient(3px 3px at 120px 80px, rgba(255, 255, 255, 0.8) 50%, transparent 100%),
    radial-gradient(2px 2px at 60px 140px, rgba(255, 255, 255, 0.6) 50%, transparent 100%);
  background-size: 200px 200px, 300px 300px, 250px 250px;
  animation: snowfall 10s linear infinite;
}"""),
]

_BY_FLAG = {block.flag: block for block in EFFECTS}


def get_effect(flag: str) -> EffectBlock:
    return _BY_FLAG[flag]


def enabled_effects(theme: ThemeConfig, group: str) -> list[EffectBlock]:
    """Enabled blocks of one group, in table order."""
    return [
        block for block in EFFECTS
        if block.group == group and getattr(theme.css_effects, block.flag)
    ]


def _label(flag: str) -> str:
    return flag.replace("_", " ").title()


# Rendered inside the MOTD section rather than from the table.
MOTD_FLAGS = ("pulsating_motd_background",)
