import pygame
from .colors import COLORS

# Keep line charts readable on long runs
MAX_POINTS = 500


def update_chart_data(monitor):
    """Update chart data from simulation"""
    sim = monitor.sim

    monitor.charts['population'].update(sim.step_population[-MAX_POINTS:])
    monitor.charts['health'].update(sim.step_mean_health[-MAX_POINTS:])
    monitor.charts['energy'].update(sim.step_mean_energy[-MAX_POINTS:])
    monitor.charts['food'].update(sim.step_food[-MAX_POINTS:])

    # Trait distributions
    traits = sim.trait_snapshot
    monitor.charts['eating_dist'].update(traits['attempted_eating_energy'].tolist())
    monitor.charts['healing_dist'].update(traits['attempted_healing_energy'].tolist())
    monitor.charts['child_energy_dist'].update(traits['child_threshold_energy'].tolist())


# ========== Drawing helpers ==========

def _draw_frame(monitor, x, y, width, height, title):
    rect = pygame.Rect(x, y, width, height)
    pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], rect, 2)

    title_surface = monitor.fonts['small'].render(title, True, COLORS['UI_TEXT'])
    monitor.screen.blit(title_surface, (x + 5, y + 5))


def _draw_line_chart(monitor, x, y, width, height, data, title):
    _draw_frame(monitor, x, y, width, height, title)

    if len(data.values) < 2:
        return

    # Grid lines
    for i in range(5):
        grid_y = y + 20 + (i * (height - 40) // 4)
        pygame.draw.line(monitor.screen, COLORS['UI_CHART_GRID'], (x, grid_y), (x + width, grid_y), 1)

    # Latest value
    last = monitor.fonts['small'].render(f"{data.values[-1]:.3g}", True, data.color)
    monitor.screen.blit(last, (x + width - last.get_width() - 5, y + 5))

    # Data line
    points = []
    for i, value in enumerate(data.values):
        norm = (value - data.min_value) / (data.max_value - data.min_value) if data.max_value > data.min_value else 0.5
        px = x + 10 + (i * (width - 20) / max(1, len(data.values) - 1))
        py = y + height - 20 - (norm * (height - 40))
        points.append((px, py))
    if len(points) > 1:
        pygame.draw.lines(monitor.screen, data.color, False, points, 2)


def _draw_histogram_chart(monitor, x, y, width, height, data, title):
    _draw_frame(monitor, x, y, width, height, title)

    if not data.values:
        return

    values = data.values
    min_val, max_val = min(values), max(values)
    if max_val == min_val:
        return

    num_bins = 10
    bin_width = (width - 20) // num_bins
    bins = [0] * num_bins
    for v in values:
        idx = min(int((v - min_val) / (max_val - min_val) * num_bins), num_bins - 1)
        bins[idx] += 1

    max_count = max(bins) or 1
    for i, count in enumerate(bins):
        if count > 0:
            bar_height = (count / max_count) * (height - 40)
            bar_rect = pygame.Rect(x + 10 + i * bin_width, y + height - 20 - bar_height, bin_width - 1, bar_height)
            pygame.draw.rect(monitor.screen, data.color, bar_rect)
            pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], bar_rect, 1)


def _draw_step_stats_chart(monitor, x, y, width, height, title):
    _draw_frame(monitor, x, y, width, height, title)

    sim = monitor.sim
    stats = [
        (f"Births: {sim.step_births[-1]}", COLORS['BIRTHS']),
        (f"Deaths: {sim.step_deaths[-1]}", COLORS['DEATHS']),
        (f"Total births: {sum(sim.step_births)}", COLORS['UI_TEXT']),
        (f"Total deaths: {sum(sim.step_deaths)}", COLORS['UI_TEXT']),
    ]
    y_offset = 25
    for stat, color in stats:
        surf = monitor.fonts['small'].render(stat, True, color)
        monitor.screen.blit(surf, (x + 10, y + y_offset))
        y_offset += 20


# ========== Main drawing orchestrator ==========

def draw_charts(monitor):
    x0, y0 = monitor.charts_x, monitor.charts_y
    w, h, gap = monitor.chart_w, monitor.chart_h, 15

    _draw_line_chart(monitor, x0, y0, w, h, monitor.charts['population'], "Population")
    _draw_line_chart(monitor, x0 + w + gap, y0, w, h, monitor.charts['food'], "Food")
    _draw_line_chart(monitor, x0, y0 + h + gap, w, h, monitor.charts['health'], "Mean Health")
    _draw_line_chart(monitor, x0 + w + gap, y0 + h + gap, w, h, monitor.charts['energy'], "Mean Energy")

    small_w = (2 * w + gap - 3 * gap) // 4
    y1 = y0 + 2 * (h + gap)
    _draw_histogram_chart(monitor, x0, y1, small_w, h, monitor.charts['eating_dist'], "Eating Energy")
    _draw_histogram_chart(monitor, x0 + small_w + gap, y1, small_w, h, monitor.charts['healing_dist'], "Healing Energy")
    _draw_histogram_chart(monitor, x0 + 2 * (small_w + gap), y1, small_w, h, monitor.charts['child_energy_dist'], "Child Threshold")
    _draw_step_stats_chart(monitor, x0 + 3 * (small_w + gap), y1, small_w, h, "Step Stats")
