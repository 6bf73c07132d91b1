"""
Keyed Heap Demo -- Comparison counts for bulk build, incremental insert,
heap sort and k-th order statistic queries.

Generates:
- viz/build_heap_cost.png -- build_heap vs. repeated insert, comparisons per element
- viz/kth_min_cost.png -- kth_min_element cost as k grows
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

sys.path.insert(0, str(Path(__file__).resolve().parent))
from keyed_heap import Heap, reverse_order

SEED = 42
rng = np.random.default_rng(SEED)

SIZES = [2 ** p for p in range(6, 15)]
KTH_HEAP_SIZE = 4096
KTH_VALUES = [1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024]

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "dark": "#2c3e50",
}


# ---------------------------------------------------------------------------
# Measurements
# ---------------------------------------------------------------------------

def build_cost(keys):
    heap = Heap()
    heap.build_heap(keys, keys)
    return heap.comparisons


def insert_cost(keys):
    heap = Heap()
    for k in keys:
        heap.insert(k, k)
    return heap.comparisons


def heap_sort_cost(keys, comparator=None):
    heap = Heap(comparator)
    heap.build_heap(keys, keys)
    heap.reset_comparisons()
    out = [heap.delete().key for _ in range(len(keys))]
    expected = sorted(keys, reverse=comparator is reverse_order)
    assert out == expected, "extraction order is not sorted"
    return heap.comparisons


def kth_cost(keys, k):
    heap = Heap()
    heap.build_heap(keys, keys)
    heap.reset_comparisons()
    entry = heap.kth_min_element(k)
    assert entry.key == sorted(keys)[k - 1]
    return heap.comparisons


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def report_build_vs_insert():
    print("=" * 64)
    print("build_heap vs. repeated insert (comparisons per element)")
    print("=" * 64)
    print(f"{'n':>8} {'build':>10} {'insert':>10} {'sort':>10} {'sort max':>10}")
    build_ratio, insert_ratio = [], []
    for n in SIZES:
        keys = rng.permutation(n).tolist()
        b = build_cost(keys)
        i = insert_cost(keys)
        s = heap_sort_cost(keys)
        s_max = heap_sort_cost(keys, reverse_order)
        build_ratio.append(b / n)
        insert_ratio.append(i / n)
        print(f"{n:>8} {b / n:>10.3f} {i / n:>10.3f} {s / n:>10.3f} {s_max / n:>10.3f}")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(SIZES, build_ratio, "o-", color=COLORS["blue"], label="build_heap")
    ax.plot(SIZES, insert_ratio, "s-", color=COLORS["red"], label="n x insert")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("n")
    ax.set_ylabel("comparisons / n")
    ax.set_title("Bulk build stays linear")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "build_heap_cost.png", dpi=120)
    plt.close(fig)


def report_kth_min():
    print()
    print("=" * 64)
    print(f"kth_min_element on {KTH_HEAP_SIZE} entries")
    print("=" * 64)
    keys = rng.permutation(KTH_HEAP_SIZE).tolist()
    costs = np.array([kth_cost(keys, k) for k in KTH_VALUES], dtype=np.float64)
    bound = np.array(KTH_VALUES) * np.log2(KTH_HEAP_SIZE)
    for k, c, b in zip(KTH_VALUES, costs, bound):
        print(f"  k={k:>5}  comparisons={int(c):>7}  k*log2(n)={b:>9.1f}")

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(KTH_VALUES, costs, "o-", color=COLORS["green"], label="measured")
    ax.plot(KTH_VALUES, bound, "--", color=COLORS["dark"], label="k log2 n")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log")
    ax.set_xlabel("k")
    ax.set_ylabel("comparisons")
    ax.set_title(f"kth_min_element cost, n = {KTH_HEAP_SIZE}")
    ax.grid(True, alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "kth_min_cost.png", dpi=120)
    plt.close(fig)


def main():
    report_build_vs_insert()
    report_kth_min()
    print()
    print(f"Plots written to {VIZ_DIR}")


if __name__ == "__main__":
    main()
