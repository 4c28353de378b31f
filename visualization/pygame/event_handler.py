# event_handler.py
import pygame
from .colors import COLORS

MIN_SPEED, MAX_SPEED = 0.125, 240.0


def handle_events(monitor):
    """Process pending pygame events. Returns False once the window should close."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            monitor.should_stop = True
            return False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            _handle_click(monitor, event.pos)
        elif event.type == pygame.KEYDOWN:
            if not _handle_key(monitor, event.key):
                return False
        elif event.type == pygame.MOUSEMOTION:
            monitor.mouse_pos = event.pos
    return True


def _handle_key(monitor, key):
    if key == pygame.K_SPACE:
        _toggle_pause(monitor)
    elif key == pygame.K_s:
        _stop_simulation(monitor)
    elif key == pygame.K_n and monitor.is_paused:
        monitor.step_requested = True
    elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_UP):
        _change_speed(monitor, 2.0)
    elif key in (pygame.K_MINUS, pygame.K_DOWN):
        _change_speed(monitor, 0.5)
    elif key == pygame.K_ESCAPE:
        monitor.should_stop = True
        return False
    return True


def _handle_click(monitor, pos):
    actions = {
        "toggle_pause": lambda: _toggle_pause(monitor),
        "stop": lambda: _stop_simulation(monitor),
        "speed_up": lambda: _change_speed(monitor, 2.0),
        "slow_down": lambda: _change_speed(monitor, 0.5),
    }
    for button in monitor.buttons.values():
        if button['rect'].collidepoint(pos):
            actions[button['action']]()


def _change_speed(monitor, factor):
    monitor.ticks_per_second = min(max(monitor.ticks_per_second * factor, MIN_SPEED), MAX_SPEED)
    print(f"Simulation speed: {monitor.ticks_per_second:.3g} steps/sec")


def _toggle_pause(monitor):
    monitor.is_paused = not monitor.is_paused
    if monitor.is_paused:
        monitor.buttons['pause_play']['text'] = '▶ Play'
        monitor.buttons['pause_play']['color'] = COLORS['UI_PAUSE']
    else:
        monitor.buttons['pause_play']['text'] = '⏸ Pause'
        monitor.buttons['pause_play']['color'] = COLORS['UI_BUTTON']


def _stop_simulation(monitor):
    monitor.should_stop = True
    monitor.buttons['stop']['text'] = '⏹ Stopped'
    monitor.buttons['stop']['color'] = (255, 100, 100)
