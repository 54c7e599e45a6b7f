"""
DynamicArray Demo -- Capacity growth, amortized append cost, positional insert
cost, and the iterate-and-remove pattern.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from dynamic_array import DynamicArray, DEFAULT_CAPACITY

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

N_APPENDS = 2000
INITIAL_CAPACITIES = [0, 1, DEFAULT_CAPACITY, 100]
INSERT_SIZE = 500
INSERT_POSITIONS = np.linspace(0.0, 1.0, 11)


# ---------------------------------------------------------------------------
# Measurement helpers
# ---------------------------------------------------------------------------
def measure_growth(n_appends, initial_capacity=DEFAULT_CAPACITY):
    """Append n_appends integers and record size, capacity and copy counts.

    A reallocation that happens while the array holds s elements copies s
    elements into the new buffer.
    """
    arr = DynamicArray(initial_capacity)
    size = np.zeros(n_appends, dtype=np.int64)
    capacity = np.zeros(n_appends, dtype=np.int64)
    copies = np.zeros(n_appends, dtype=np.int64)
    resized = np.zeros(n_appends, dtype=bool)

    total_copies = 0
    for i in range(n_appends):
        before = arr.capacity()
        moved = arr.size()
        arr.add(i)
        if arr.capacity() != before:
            total_copies += moved
            resized[i] = True
        size[i] = arr.size()
        capacity[i] = arr.capacity()
        copies[i] = total_copies

    return {"size": size, "capacity": capacity, "copies": copies, "resized": resized}


def amortized_cost(profile):
    """Cumulative element writes per append: (appends + copies) / appends."""
    size = profile["size"].astype(float)
    return (size + profile["copies"]) / size


def measure_insert_position_cost(n, positions):
    """Number of element shifts for one add_at into an n-element array.

    positions are relative (0.0 = front, 1.0 = back).
    """
    shifts = np.zeros(len(positions), dtype=np.int64)
    for k, rel in enumerate(positions):
        arr = DynamicArray(n + 1, range(n))
        index = int(round(rel * n))
        arr.add_at(index, -1)
        shifts[k] = arr.size() - 1 - index
    return shifts


# ---------------------------------------------------------------------------
# Example 1: Capacity Staircase
# ---------------------------------------------------------------------------
def example_1_capacity_staircase():
    """Show capacity following max(minimum, 2c + 2) as elements are appended."""
    print("=" * 60)
    print("Example 1: Capacity Staircase")
    print("=" * 60)

    profile = measure_growth(N_APPENDS, DEFAULT_CAPACITY)
    resize_at = np.flatnonzero(profile["resized"])
    caps = profile["capacity"][resize_at]

    print(f"\n  Initial capacity: {DEFAULT_CAPACITY}")
    print(f"  Appends: {N_APPENDS}, reallocations: {len(resize_at)}")
    prev = DEFAULT_CAPACITY
    for idx, cap in zip(resize_at, caps):
        print(f"    size {profile['size'][idx]:5d}: capacity {prev:5d} -> {cap:5d}")
        assert cap >= max(profile["size"][idx], 2 * prev + 2)
        prev = cap

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))

    axes[0].step(profile["size"], profile["capacity"], where="post",
                 color=COLORS["blue"], label="capacity")
    axes[0].plot(profile["size"], profile["size"], color=COLORS["dark"],
                 linestyle="--", linewidth=1, label="size")
    axes[0].scatter(profile["size"][resize_at], caps, color=COLORS["red"],
                    zorder=3, s=20, label="reallocation")
    axes[0].set_xlabel("Size")
    axes[0].set_ylabel("Capacity")
    axes[0].set_title("Capacity vs Size\nGrowth law: max(minimum, 2c + 2)",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    utilization = profile["size"] / profile["capacity"]
    axes[1].plot(profile["size"], utilization, color=COLORS["green"])
    axes[1].axhline(0.5, color=COLORS["orange"], linestyle="--", linewidth=1)
    axes[1].set_xlabel("Size")
    axes[1].set_ylabel("size / capacity")
    axes[1].set_ylim(0, 1.05)
    axes[1].set_title("Buffer Utilization\nDrops to ~50% after each doubling",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_capacity_staircase.png", dpi=120)
    plt.close(fig)
    print("\n  Saved: viz/01_capacity_staircase.png")


# ---------------------------------------------------------------------------
# Example 2: Amortized Append Cost
# ---------------------------------------------------------------------------
def example_2_amortized_cost():
    """Cumulative writes per append stay bounded for every starting capacity."""
    print("\n" + "=" * 60)
    print("Example 2: Amortized Append Cost")
    print("=" * 60)

    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    palette = [COLORS["blue"], COLORS["red"], COLORS["green"], COLORS["purple"]]

    final_costs = []
    for cap, color in zip(INITIAL_CAPACITIES, palette):
        profile = measure_growth(N_APPENDS, cap)
        cost = amortized_cost(profile)
        final_costs.append(cost[-1])
        print(f"\n  Initial capacity {cap:4d}: "
              f"{profile['resized'].sum()} reallocations, "
              f"{profile['copies'][-1]} copies, "
              f"final cost/append = {cost[-1]:.3f}, max = {cost.max():.3f}")
        assert cost.max() <= 3.0

        axes[0].plot(profile["size"], cost, color=color, label=f"initial={cap}")
        axes[1].plot(profile["size"], profile["copies"], color=color, label=f"initial={cap}")

    axes[0].axhline(3.0, color=COLORS["dark"], linestyle="--", linewidth=1, label="bound 3")
    axes[0].set_xlabel("Appends")
    axes[0].set_ylabel("(appends + copies) / appends")
    axes[0].set_title("Amortized Cost per Append\nConstant despite occasional O(n) copies",
                      fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].set_xlabel("Appends")
    axes[1].set_ylabel("Cumulative element copies")
    axes[1].set_title("Total Copies from Reallocation\nLinear in the number of appends",
                      fontsize=10, fontweight="bold")
    axes[1].legend(fontsize=9)
    axes[1].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_amortized_cost.png", dpi=120)
    plt.close(fig)
    print("\n  Saved: viz/02_amortized_cost.png")
    return final_costs


# ---------------------------------------------------------------------------
# Example 3: Positional Insert Cost
# ---------------------------------------------------------------------------
def example_3_insert_position_cost():
    """add_at shifts every element after the index one slot right."""
    print("\n" + "=" * 60)
    print("Example 3: Positional Insert Cost")
    print("=" * 60)

    shifts = measure_insert_position_cost(INSERT_SIZE, INSERT_POSITIONS)
    for rel, s in zip(INSERT_POSITIONS, shifts):
        print(f"  insert at {rel:4.0%} of {INSERT_SIZE}: {s:4d} shifts")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(INSERT_POSITIONS * 100, shifts, width=6, color=COLORS["orange"], edgecolor="white")
    ax.set_xlabel("Insert position (% of size)")
    ax.set_ylabel("Elements shifted")
    ax.set_title(f"Shift Cost of add_at on {INSERT_SIZE} Elements\n"
                 "Front insert is O(n), append is O(1)",
                 fontsize=10, fontweight="bold")
    ax.grid(True, alpha=0.3, axis="y")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_insert_position_cost.png", dpi=120)
    plt.close(fig)
    print("\n  Saved: viz/03_insert_position_cost.png")


# ---------------------------------------------------------------------------
# Example 4: Iterate and Remove
# ---------------------------------------------------------------------------
def example_4_iterate_and_remove():
    """Remove elements through the iterator without skipping neighbours."""
    print("\n" + "=" * 60)
    print("Example 4: Iterate and Remove")
    print("=" * 60)

    values = np.random.randint(0, 100, size=12).tolist()
    arr = DynamicArray(elements=values)
    print(f"\n  Start:   {arr}")

    it = arr.iterator()
    removed = []
    for value in it:
        if value % 2 == 0:
            removed.append(it.remove())
    print(f"  Removed: {removed}")
    print(f"  Kept:    {arr}")
    print(f"  Buffer:  {arr!r}")
    assert all(v % 2 == 1 for v in arr)
    assert len(removed) + arr.size() == len(values)


# ---------------------------------------------------------------------------
# PDF Report
# ---------------------------------------------------------------------------
def generate_pdf_report():
    """Collect every visualization into report.pdf behind a title page."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "DynamicArray", fontsize=28, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Growable Buffer with Amortized O(1) Append",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "A fixed-size backing buffer is replaced with a larger one on overflow,\n"
            "growing to max(minimum, 2 * capacity + 2). Each reallocation copies\n"
            "every element, but the copies are spread over enough appends that\n"
            "the average cost per append stays constant.\n\n"
            "This demo covers:\n"
            "  1. Capacity staircase and buffer utilization\n"
            "  2. Amortized append cost for several initial capacities\n"
            "  3. Shift cost of positional insertion\n"
            "  4. Removing elements through the iterator\n\n"
            f"Appends profiled: {N_APPENDS}\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.30, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        titles = {
            "01_capacity_staircase.png": "Example 1: Capacity Staircase",
            "02_amortized_cost.png": "Example 2: Amortized Append Cost",
            "03_insert_position_cost.png": "Example 3: Positional Insert Cost",
        }

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = titles.get(viz_file.name, viz_file.stem.replace("_", " ").title())
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("DynamicArray Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    VIZ_DIR.mkdir(exist_ok=True)

    example_1_capacity_staircase()
    example_2_amortized_cost()
    example_3_insert_position_cost()
    example_4_iterate_and_remove()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
