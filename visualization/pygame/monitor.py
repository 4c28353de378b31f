import pygame
from .colors import COLORS
from .chart_data import ChartData
from .chart_renderer import update_chart_data, draw_charts
from .ui_renderer import (
    draw_buttons,
    draw_status,
    draw_live_counters,
)
from .event_handler import handle_events


class PygameMonitor:
    def __init__(self, sim, cfg):
        self.sim = sim
        self.cfg = cfg

        # --- Initialize pygame ---
        pygame.init()
        self.width, self.height = 1280, 900
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Cell Simulation - Pygame Monitor")

        # Fonts
        self.fonts = {
            "small": pygame.font.Font(None, 18),
            "medium": pygame.font.Font(None, 22),
            "large": pygame.font.Font(None, 28),
            "title": pygame.font.Font(None, 32),
        }

        # Chart layout
        self.charts_x, self.charts_y = 50, 80
        self.chart_w = (self.width - 2 * self.charts_x - 15) // 2
        self.chart_h = 190

        # UI state
        self.is_paused = False
        self.should_stop = False
        self.mouse_pos = (0, 0)
        self.ticks_per_second = cfg.TICKS_PER_SECOND
        self.step_requested = False

        # Chart data
        self.charts = self._init_charts()

        # Buttons
        self.buttons = self._init_buttons()

        # FPS control
        self.fps_clock = pygame.time.Clock()
        self.fps = 60

    # ---------- Initialization helpers ----------

    def _init_charts(self):
        return {
            "population": ChartData([], 0, 0, COLORS["POPULATION"], "Population"),
            "health": ChartData([], 0, 0, COLORS["HEALTH"], "Mean Health"),
            "energy": ChartData([], 0, 0, COLORS["ENERGY"], "Mean Energy"),
            "food": ChartData([], 0, 0, COLORS["FOOD"], "Food"),
            "eating_dist": ChartData([], 0, 0, COLORS["TRAIT"], "Eating Energy Distribution"),
            "healing_dist": ChartData([], 0, 0, COLORS["TRAIT"], "Healing Energy Distribution"),
            "child_energy_dist": ChartData([], 0, 0, COLORS["TRAIT"], "Child Threshold Distribution"),
        }

    def _init_buttons(self):
        button_width, button_height = 120, 40
        button_y = self.height - 60
        center = self.width // 2
        return {
            "slow_down": {
                "rect": pygame.Rect(center - 2 * button_width - 30, button_y, button_width, button_height),
                "text": "« Slower",
                "color": COLORS["UI_BUTTON"],
                "hover_color": COLORS["UI_BUTTON_HOVER"],
                "action": "slow_down",
            },
            "pause_play": {
                "rect": pygame.Rect(center - button_width - 10, button_y, button_width, button_height),
                "text": "⏸ Pause",
                "color": COLORS["UI_BUTTON"],
                "hover_color": COLORS["UI_BUTTON_HOVER"],
                "action": "toggle_pause",
            },
            "stop": {
                "rect": pygame.Rect(center + 10, button_y, button_width, button_height),
                "text": "⏹ Stop",
                "color": COLORS["UI_STOP"],
                "hover_color": (255, 150, 150),
                "action": "stop",
            },
            "speed_up": {
                "rect": pygame.Rect(center + button_width + 30, button_y, button_width, button_height),
                "text": "Faster »",
                "color": COLORS["UI_BUTTON"],
                "hover_color": COLORS["UI_BUTTON_HOVER"],
                "action": "speed_up",
            },
        }

    # ---------- Main loop ----------

    def render(self):
        """Render one frame"""
        if not handle_events(self):
            return False

        update_chart_data(self)

        self.screen.fill(COLORS["UI_BACKGROUND"])
        draw_live_counters(self)
        draw_charts(self)
        draw_status(self)
        draw_buttons(self)

        pygame.display.flip()
        self.fps_clock.tick(self.fps)
        return True

    # ---------- Utility ----------

    def should_continue(self):
        return not self.should_stop

    def ready_to_step(self, now, last_tick_time):
        """True when the sim should advance: time is up, or a single step was asked for while paused."""
        if self.step_requested:
            self.step_requested = False
            return True
        if self.is_paused or self.ticks_per_second <= 0:
            return False
        return now - last_tick_time >= 1.0 / self.ticks_per_second

    def cleanup(self):
        pygame.quit()
