"""
Circular Queue Demo -- Growth trace, amortized copy cost, slack analysis,
and wrap-around walkthrough.

Generates:
- viz/*.png -- Individual visualization files
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from circular_queue import Queue, GROWTH_THRESHOLD, next_capacity

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "dark": "#2c3e50",
}

N_ELEMENTS = 20000


def trace_growth(n):
    """Enqueue n items, recording capacity and elements copied by each call."""
    q = Queue()
    capacities = np.zeros(n, dtype=np.int64)
    copies = np.zeros(n, dtype=np.int64)
    for i in range(n):
        before = q.capacity()
        q.enqueue(i)
        capacities[i] = q.capacity()
        if q.capacity() != before:
            copies[i] = i
    return q, capacities, copies


# ---------------------------------------------------------------------------
# Example 1: Growth Trace
# ---------------------------------------------------------------------------
def example_1_growth_trace():
    """Print the capacity steps taken by the growth policy."""
    print("=" * 60)
    print("Example 1: Growth Trace")
    print("=" * 60)

    capacity = 0
    steps = []
    while capacity < N_ELEMENTS:
        capacity = next_capacity(capacity)
        steps.append(capacity)

    for prev, cap in zip([0] + steps[:-1], steps):
        rule = "double" if prev < GROWTH_THRESHOLD else "+25%"
        print(f"  {prev:>6} -> {cap:>6}  ({rule})")
    print(f"\n  {len(steps)} reallocations to hold {N_ELEMENTS:,} elements")


# ---------------------------------------------------------------------------
# Example 2: Amortized Copy Cost
# ---------------------------------------------------------------------------
def example_2_amortized_cost():
    """Plot capacity and cumulative copies per enqueue."""
    print("\n" + "=" * 60)
    print("Example 2: Amortized Copy Cost")
    print("=" * 60)

    q, capacities, copies = trace_growth(N_ELEMENTS)
    counts = np.arange(1, N_ELEMENTS + 1)
    amortized = np.cumsum(copies) / counts
    slack = capacities - counts

    print(f"  Final size: {len(q):,}, capacity: {q.capacity():,}")
    print(f"  Total element copies: {int(copies.sum()):,}")
    print(f"  Copies per enqueue: {amortized[-1]:.3f}")
    print(f"  Peak slack: {int(slack.max()):,} slots "
          f"({slack.max() / capacities[slack.argmax()]:.1%} of capacity)")

    order = [q.dequeue()[0] for _ in range(N_ELEMENTS)]
    assert order == list(range(N_ELEMENTS)), "growth reordered elements"
    print("  Dequeue order verified after growth.")

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    axes[0].step(counts, capacities, where="post", color=COLORS["blue"], label="capacity")
    axes[0].plot(counts, counts, color=COLORS["dark"], linestyle="--", label="size")
    axes[0].axvline(GROWTH_THRESHOLD, color=COLORS["orange"], linestyle=":",
                    label=f"threshold ({GROWTH_THRESHOLD})")
    axes[0].set_xlabel("Elements enqueued")
    axes[0].set_ylabel("Slots")
    axes[0].set_title("Capacity vs Size", fontsize=10, fontweight="bold")
    axes[0].legend(fontsize=9)
    axes[0].grid(True, alpha=0.3)

    axes[1].plot(counts, amortized, color=COLORS["green"])
    axes[1].set_xscale("log")
    axes[1].set_xlabel("Elements enqueued")
    axes[1].set_ylabel("Copies per enqueue")
    axes[1].set_title("Amortized Re-linearization Cost\nStays bounded as size grows",
                      fontsize=10, fontweight="bold")
    axes[1].grid(True, alpha=0.3)

    axes[2].plot(counts, slack / capacities, color=COLORS["red"])
    axes[2].axvline(GROWTH_THRESHOLD, color=COLORS["orange"], linestyle=":")
    axes[2].set_xlabel("Elements enqueued")
    axes[2].set_ylabel("Unused fraction of capacity")
    axes[2].set_title("Slack\nBounded tighter above the threshold",
                      fontsize=10, fontweight="bold")
    axes[2].grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_growth_cost.png", dpi=150, bbox_inches="tight")
    plt.close(fig)


# ---------------------------------------------------------------------------
# Example 3: Wrap-Around Walkthrough
# ---------------------------------------------------------------------------
def example_3_wrap_around():
    """Show the physical layout while the live window wraps and then grows."""
    print("\n" + "=" * 60)
    print("Example 3: Wrap-Around Walkthrough")
    print("=" * 60)

    q = Queue(4)
    script = [("enqueue", 1), ("enqueue", 2), ("enqueue", 3), ("dequeue", None),
              ("enqueue", 4), ("enqueue", 5), ("dequeue", None), ("enqueue", 6),
              ("enqueue", 7)]
    for op, arg in script:
        if op == "enqueue":
            q.enqueue(arg)
            label = f"enqueue({arg})"
        else:
            value, _ = q.dequeue()
            label = f"dequeue() -> {value}"
        print(f"  {label:<16} head={q._head} tail={q._tail} "
              f"cap={q.capacity()} slots={q._data}  {q}")

    restored = Queue.from_json(q.to_json())
    print(f"\n  Encoded: {q.to_json()}")
    print(f"  Decoded: {restored} (capacity {restored.capacity()})")


def main():
    example_1_growth_trace()
    example_2_amortized_cost()
    example_3_wrap_around()
    print(f"\nVisualizations: {VIZ_DIR}")


if __name__ == "__main__":
    main()
