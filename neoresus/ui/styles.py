"""
Centralized styles module for the NeoResus UI.

Light bedside theme: high-contrast text on white cards, with one accent
colour per card category (airway, drug, fluid) and the stopwatch colour
driven by the urgency tier.
"""

from neoresus.core.enums import UrgencyTier

# =============================================================================
# COLORS
# =============================================================================

COLORS = {
    # Surfaces
    'background': '#F2F4F7',
    'card': '#FFFFFF',
    'header': '#FAFBFC',
    'control': '#EEF1F5',
    'control_hover': '#E3E8EF',
    'control_pressed': '#D6DDE7',

    # Borders
    'border': '#DDE2EA',
    'border_light': '#C9D1DC',

    # Text
    'text': '#111827',
    'text_secondary': '#4B5563',
    'text_dim': '#9CA3AF',

    # Accents
    'primary': '#2563EB',
    'success': '#16A34A',
    'warning': '#EA580C',
    'danger': '#DC2626',
    'advisory': '#D97706',

    # Calculator card categories
    'airway': '#2563EB',
    'drug': '#E11D48',
    'fluid': '#059669',
    'goal': '#16A34A',
}

URGENCY_COLORS = {
    UrgencyTier.NORMAL: COLORS['primary'],
    UrgencyTier.WARNING: COLORS['warning'],
    UrgencyTier.CRITICAL: COLORS['danger'],
}

FONTS = {
    'family': 'Arial',
    'size_small': '11px',
    'size_normal': '13px',
    'size_medium': '14px',
    'size_large': '16px',
    'size_title': '22px',
    'size_display': '32px',
}

# =============================================================================
# STYLE BUILDERS
# =============================================================================

def get_base_widget_style():
    """Base style for all widgets."""
    return f"""
        QWidget {{
            background-color: {COLORS['background']};
            color: {COLORS['text']};
            font-family: {FONTS['family']};
            font-size: {FONTS['size_normal']};
        }}
        QLabel {{
            background-color: transparent;
            background: none;
        }}
    """

def get_card_style(accent_color=None, radius=14):
    """White card with optional left accent border."""
    accent = f"border-left: 4px solid {accent_color};" if accent_color else ""
    return f"""
        QFrame {{
            background-color: {COLORS['card']};
            border: 1px solid {COLORS['border']};
            border-radius: {radius}px;
            {accent}
        }}
        QLabel {{
            border: none;
        }}
    """

def get_tinted_frame_style(color, alpha=0.08, radius=12):
    """Tinted panel for a single numeric value."""
    return f"""
        QFrame {{
            background-color: {get_rgba(color, alpha)};
            border: 1px solid {get_rgba(color, 0.25)};
            border-radius: {radius}px;
        }}
        QLabel {{
            border: none;
            color: {color};
        }}
    """

def get_banner_style(color, alpha=0.12):
    """Notice banner (stage warning, stale-step advisory)."""
    return f"""
        QFrame {{
            background-color: {get_rgba(color, alpha)};
            border: 1px solid {get_rgba(color, 0.35)};
            border-radius: 12px;
        }}
        QLabel {{
            border: none;
            color: {color};
            font-weight: 700;
        }}
    """

def get_spinbox_style():
    """Style for QSpinBox and QDoubleSpinBox."""
    return f"""
        QSpinBox, QDoubleSpinBox {{
            background-color: {COLORS['control']};
            color: {COLORS['text']};
            border: 1px solid {COLORS['border']};
            border-radius: 6px;
            padding: 4px 8px;
            font-size: {FONTS['size_large']};
            font-weight: 600;
            min-width: 90px;
        }}
        QSpinBox:focus, QDoubleSpinBox:focus {{
            border-color: {COLORS['primary']};
        }}
    """

def get_button_style(variant="neutral", padding="10px 16px", radius=12, font_size=None):
    """Style for QPushButton."""
    variant_map = {
        "primary": COLORS['primary'],
        "success": COLORS['success'],
        "warning": COLORS['warning'],
        "danger": COLORS['danger'],
        "neutral": COLORS['control'],
    }
    base = variant_map.get(variant, COLORS['control'])
    is_neutral = base == COLORS['control']
    text = COLORS['text'] if is_neutral else "white"
    hover_bg = COLORS['control_hover'] if is_neutral else get_rgba(base, 0.9)
    pressed_bg = COLORS['control_pressed'] if is_neutral else get_rgba(base, 0.8)
    font_size = font_size or FONTS['size_medium']
    return f"""
        QPushButton {{
            background-color: {base};
            color: {text};
            padding: {padding};
            border-radius: {radius}px;
            font-size: {font_size};
            font-weight: 700;
            border: 1px solid transparent;
            text-align: left;
        }}
        QPushButton:hover {{
            background-color: {hover_bg};
        }}
        QPushButton:pressed {{
            background-color: {pressed_bg};
        }}
    """

def get_tab_widget_style():
    """Style for the section tabs."""
    return f"""
        QTabWidget::pane {{
            border: none;
            background-color: {COLORS['background']};
        }}
        QTabBar::tab {{
            background-color: transparent;
            color: {COLORS['text_dim']};
            padding: 8px 14px;
            font-size: {FONTS['size_normal']};
            font-weight: 700;
            min-width: 70px;
            border-bottom: 2px solid transparent;
        }}
        QTabBar::tab:selected {{
            color: {COLORS['primary']};
            border-bottom: 2px solid {COLORS['primary']};
        }}
    """

def get_scrollarea_style():
    """Style for QScrollArea."""
    return f"""
        QScrollArea {{
            border: none;
            background-color: transparent;
        }}
        QScrollBar:vertical {{
            background-color: {COLORS['background']};
            width: 8px;
        }}
        QScrollBar::handle:vertical {{
            background-color: {COLORS['border_light']};
            border-radius: 4px;
            min-height: 30px;
        }}
    """

def get_checkbox_style():
    """Style for checklist items."""
    return f"""
        QCheckBox {{
            color: {COLORS['text']};
            font-size: {FONTS['size_normal']};
            spacing: 10px;
            padding: 6px 2px;
            background-color: transparent;
        }}
        QCheckBox::indicator {{
            width: 18px;
            height: 18px;
            border-radius: 5px;
            border: 1px solid {COLORS['border_light']};
            background-color: {COLORS['card']};
        }}
        QCheckBox::indicator:checked {{
            background-color: {COLORS['primary']};
            border-color: {COLORS['primary']};
        }}
    """

def get_stopwatch_style(tier: UrgencyTier):
    """Large stopwatch digits coloured by urgency tier."""
    return f"""
        color: {URGENCY_COLORS[tier]};
        font-size: {FONTS['size_display']};
        font-weight: 700;
        font-family: monospace;
    """

# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def hex_to_rgb(hex_color):
    """Convert hex color to r, g, b string for rgba()."""
    hex_color = hex_color.lstrip('#')
    r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
    return f"{r}, {g}, {b}"

def get_rgba(hex_color, alpha):
    """Get rgba string from hex color and alpha value (0-1)."""
    return f"rgba({hex_to_rgb(hex_color)}, {alpha})"

# =============================================================================
# PRE-BUILT STYLE CONSTANTS
# =============================================================================

STYLE_SPINBOX = get_spinbox_style()
STYLE_TAB_WIDGET = get_tab_widget_style()
STYLE_SCROLLAREA = get_scrollarea_style()
STYLE_CHECKBOX = get_checkbox_style()
