import numpy as np
from .sim import Sim, TRAITS


def print_summary(sim: Sim):
    world = sim.world
    print(f"\n=== SIMULATION SUMMARY ===")
    print(f"Steps completed: {sim.steps}")
    print(f"Final population: {world.num_cells()}")
    print(f"Total births: {sum(sim.step_births)}")
    print(f"Total deaths: {sum(sim.step_deaths)}")
    if world.num_cells():
        print(f"Average final health: {world.mean_health():.3f}")
        print(f"Average final energy: {world.mean_energy():.1f}")
    print(f"Food left: {float(world.food()):.1f}")


def final_charts(sim: Sim):
    """Generate and save individual analysis charts for the simulation."""
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        import os
    except ImportError:
        print("Matplotlib not available for final charts. Install with: pip install matplotlib")
        print_summary(sim)
        print("========================\n")
        return

    cfg = sim.cfg

    if not sim.step_population:
        print("No simulation data to plot")
        return

    output_dir = cfg.CHART_DIR
    os.makedirs(output_dir, exist_ok=True)

    steps = np.arange(len(sim.step_population))

    def line_chart(values, title, ylabel, color, filename):
        plt.figure(figsize=(10, 6), dpi=150)
        plt.plot(steps, values, lw=3, color=color)
        plt.title(f"{title} - {sim.steps} Steps", fontsize=16, fontweight='bold')
        plt.xlabel("Step", fontsize=12)
        plt.ylabel(ylabel, fontsize=12)
        plt.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(f"{output_dir}/{filename}", dpi=150, bbox_inches='tight')
        plt.close()

    # 1. Population, health, energy, food over time
    line_chart(sim.step_population, "Population Evolution", "Number of Cells", '#1f77b4', "population_evolution.png")
    line_chart(sim.step_mean_health, "Average Health", "Mean Health", "#d62728", "health_evolution.png")
    line_chart(sim.step_mean_energy, "Average Energy Levels", "Mean Energy", "#2ca02c", "energy_evolution.png")
    line_chart(sim.step_food, "World Food", "Food", "#ff7f0e", "food_evolution.png")

    # 2. Births and deaths per step
    plt.figure(figsize=(10, 6), dpi=150)
    plt.plot(steps, sim.step_births, lw=2, color="#2ca02c", label="Births")
    plt.plot(steps, sim.step_deaths, lw=2, color="#d62728", label="Deaths")
    plt.title(f"Births and Deaths - {sim.steps} Steps", fontsize=16, fontweight='bold')
    plt.xlabel("Step", fontsize=12)
    plt.ylabel("Cells", fontsize=12)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(f"{output_dir}/births_deaths.png", dpi=150, bbox_inches='tight')
    plt.close()

    # 3. Trait evolution (mean per step)
    for trait in TRAITS:
        trait_name = trait.replace("_", " ").capitalize()
        line_chart(sim.trait_means[trait], f"{trait_name} Evolution", trait_name, '#9467bd', f"{trait}_evolution.png")

    # 4. Final trait distributions
    fig, axes = plt.subplots(2, 2, figsize=(12, 8), dpi=150)
    for ax, trait in zip(axes.flat, TRAITS):
        last = sim.trait_snapshot[trait]
        ax.set_title(trait.replace("_", " ").capitalize(), fontweight='bold')
        ax.grid(True, alpha=0.3)
        if last.size > 0:
            ax.hist(last, bins=cfg.TRAIT_BINS, alpha=0.7, color='#ff7f0e', edgecolor='black')
    plt.tight_layout()
    plt.savefig(f"{output_dir}/final_traits.png", dpi=150, bbox_inches='tight')
    plt.close(fig)

    print_summary(sim)
    print(f"\n📊 Charts saved to '{output_dir}/' directory:")
    print(f"  • population_evolution.png")
    print(f"  • health_evolution.png")
    print(f"  • energy_evolution.png")
    print(f"  • food_evolution.png")
    print(f"  • births_deaths.png")
    print(f"  • [trait]_evolution.png ({len(TRAITS)} individual trait plots)")
    print(f"  • final_traits.png")
    print("========================\n")
