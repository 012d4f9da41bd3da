"""Theme colors and color utilities for the UI."""


class Palette:
    """Dark theme palette."""

    BG = "#121212"
    CARD_BG = "#1e1e1e"
    DIALOG_BG = "#333333"
    SCRIM = "rgba(0, 0, 0, 0.7)"

    TEXT_PRIMARY = "#ffffff"
    TEXT_SECONDARY = "#aaaaaa"
    TEXT_BODY = "#dddddd"
    TEXT_MUTED = "#888888"
    ACCENT = "#FFD700"

    GREEN = "#4CAF50"
    BLUE = "#2196F3"
    RESUME_BLUE = "#007bff"
    RED = "#D32F2F"
    GREY = "#666666"
    DEV_PURPLE = "#841584"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
    except ValueError:
        return a
    t = max(0.0, min(1.0, float(t)))
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"


def button_style(color: str, *, radius: int = 8, font_size: int = 16) -> str:
    """Stylesheet for a solid action button; hover lightens, disabled greys out."""
    hover = blend_hex(color, "#FFFFFF", 0.15)
    pressed = blend_hex(color, "#000000", 0.15)
    return f"""
        QPushButton {{
            background: {color};
            color: #ffffff;
            padding: 12px 20px;
            border: none;
            border-radius: {radius}px;
            font-weight: 700;
            font-size: {font_size}px;
        }}
        QPushButton:hover {{ background: {hover}; }}
        QPushButton:pressed {{ background: {pressed}; }}
        QPushButton:disabled {{ background: {blend_hex(color, Palette.BG, 0.6)}; color: #999999; }}
    """
