import time
from cellsim.config import CFG, cfg_from_args
from cellsim.sim import Sim, print_stats, print_stats_header, run, step_and_report
from cellsim.charts import final_charts


def run_with_monitor(sim: Sim, cfg: CFG):
    from visualization.pygame.monitor import PygameMonitor

    monitor = PygameMonitor(sim, cfg)
    last_tick_time = time.time()

    print_stats_header()
    print_stats(sim, 0, 0)
    try:
        while monitor.should_continue():
            now = time.time()

            # only advance sim if enough time has passed
            if not sim.finished() and monitor.ready_to_step(now, last_tick_time):
                last_tick_time = now
                step_and_report(sim)
                if sim.finished():
                    print("Simulation completed")

            # always render monitor; closing the window ends the run
            if not monitor.render():
                break

        if monitor.should_stop:
            print("Simulation stopped by user")
    finally:
        monitor.cleanup()


def main(argv=None):
    cfg = cfg_from_args(argv)
    sim = Sim(cfg)

    if cfg.MONITOR:
        run_with_monitor(sim, cfg)
    else:
        run(sim)

    if cfg.CHARTS:
        final_charts(sim)


if __name__ == "__main__":
    main()
