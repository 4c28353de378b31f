import pygame
from .colors import COLORS


def draw_buttons(monitor):
    for button in monitor.buttons.values():
        color = button['hover_color'] if button['rect'].collidepoint(monitor.mouse_pos) else button['color']
        pygame.draw.rect(monitor.screen, color, button['rect'])
        pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], button['rect'], 2)
        text_surface = monitor.fonts['medium'].render(button['text'], True, COLORS['UI_TEXT'])
        text_rect = text_surface.get_rect(center=button['rect'].center)
        monitor.screen.blit(text_surface, text_rect)


def draw_status(monitor):
    sim = monitor.sim
    status_x = monitor.charts_x
    status_y = monitor.height - 170
    status_rect = pygame.Rect(status_x, status_y, monitor.width - 2 * status_x, 90)
    pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], status_rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], status_rect, 2)

    if monitor.should_stop:
        status_text = f"Simulation Stopped - Step {sim.steps}"
        status_color = COLORS['UI_STOP']
    elif monitor.is_paused:
        status_text = f"Paused - Step {sim.steps}"
        status_color = COLORS['UI_PAUSE']
    elif sim.finished():
        status_text = f"Finished - Step {sim.steps}"
        status_color = COLORS['UI_TEXT']
    else:
        status_text = f"Running - Step {sim.steps}"
        status_color = COLORS['UI_BUTTON']

    status_surface = monitor.fonts['medium'].render(status_text, True, status_color)
    monitor.screen.blit(status_surface, (status_x + 10, status_y + 10))

    y_offset = 35
    world = sim.world
    pop_text = f"Population: {world.num_cells()} | Food: {float(world.food()):.1f}"
    monitor.screen.blit(monitor.fonts['small'].render(pop_text, True, COLORS['UI_TEXT']), (status_x + 10, status_y + y_offset))

    speed_text = f"Speed: {monitor.ticks_per_second:.3g} steps/sec | {monitor.fps} FPS"
    surf = monitor.fonts['small'].render(speed_text, True, COLORS['UI_TEXT'])
    monitor.screen.blit(surf, (status_x + 10, status_y + y_offset + 20))


def draw_live_counters(monitor):
    sim = monitor.sim
    world = sim.world
    counter_rect = pygame.Rect(monitor.charts_x, 20, monitor.width - 2 * monitor.charts_x, 40)
    pygame.draw.rect(monitor.screen, COLORS['UI_CHART_BG'], counter_rect)
    pygame.draw.rect(monitor.screen, COLORS['UI_BORDER'], counter_rect, 2)

    text = (f"Step {sim.steps} / {monitor.cfg.STEPS} | Cells {world.num_cells()} | "
            f"Health {world.mean_health():.3f} | Energy {world.mean_energy():.2f} | Food {float(world.food()):.1f}")
    surf = monitor.fonts['large'].render(text, True, COLORS['UI_TEXT'])
    rect = surf.get_rect(center=counter_rect.center)
    monitor.screen.blit(surf, rect)
