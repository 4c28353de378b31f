COLORS = {
    # Series
    'POPULATION': (31, 119, 180),     # Blue
    'HEALTH': (214, 39, 40),          # Red
    'ENERGY': (44, 160, 44),          # Green
    'FOOD': (255, 127, 14),           # Orange
    'TRAIT': (148, 103, 189),         # Purple
    'BIRTHS': (44, 160, 44),          # Green
    'DEATHS': (214, 39, 40),          # Red

    # UI elements
    'UI_BACKGROUND': (245, 245, 245), # Light gray
    'UI_BORDER': (200, 200, 200),     # Medium gray
    'UI_TEXT': (50, 50, 50),          # Dark gray
    'UI_BUTTON': (100, 149, 237),     # Cornflower blue
    'UI_BUTTON_HOVER': (70, 130, 180), # Steel blue
    'UI_PAUSE': (144, 238, 144),       # Light green
    'UI_STOP': (255, 182, 193),        # Light pink
    'UI_CHART_BG': (255, 255, 255),    # White
    'UI_CHART_GRID': (230, 230, 230),  # Light gray
}
