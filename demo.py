"""
OrderedTree Demo -- Walkthroughs, deletion cases, and height visualizations.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Combined PDF report
"""

import logging
import time

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

from ordered_tree import OrderedTree, DuplicateInsert, ValueNotFound

SEED = 42
np.random.seed(SEED)

SIZES = [16, 64, 256, 1024, 2048]
CHURN_STEPS = 4000

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)


def _node_positions(tree):
    """Map each value to (in-order rank, depth) for plotting."""
    ranks = {value: i for i, value in enumerate(tree.in_order())}
    positions, edges = {}, []
    stack = [(tree._root, 0)] if tree._root is not None else []
    while stack:
        node, depth = stack.pop()
        positions[node.value] = (ranks[node.value], -depth)
        for child in (node.left, node.right):
            if child is not None:
                edges.append((node.value, child.value))
                stack.append((child, depth + 1))
    return positions, edges


def _draw_tree(ax, tree, title, highlight=()):
    positions, edges = _node_positions(tree)
    for parent, child in edges:
        (x0, y0), (x1, y1) = positions[parent], positions[child]
        ax.plot([x0, x1], [y0, y1], color="gray", linewidth=1, zorder=1)
    for value, (x, y) in positions.items():
        color = "orange" if value in highlight else "steelblue"
        ax.scatter([x], [y], s=600, color=color, zorder=2)
        ax.text(x, y, str(value), ha="center", va="center", color="white", fontsize=9, zorder=3)
    ax.set_title(title)
    ax.axis("off")


def example_1_basic_operations():
    """Insert, look up, and reject a duplicate."""
    print("=" * 60)
    print("Example 1: Basic Operations")
    print("=" * 60)

    tree = OrderedTree([5, 10, 3])
    print("In-order traversal:")
    tree.traverse_in_order()
    print(f"contains(10) = {tree.contains(10)}")
    print(f"contains(4)  = {tree.contains(4)}")

    try:
        tree.insert(5)
    except DuplicateInsert as exc:
        print(f"Second insert of 5 rejected: {exc}")

    try:
        OrderedTree().delete(42)
    except ValueNotFound as exc:
        print(f"Delete on empty tree rejected: {exc}")

    return tree


def example_2_delete_cases():
    """Show the tree before and after each structural delete case."""
    print("\n" + "=" * 60)
    print("Example 2: Delete Cases")
    print("=" * 60)

    values = [100, 50, 70, 80, 200, 68, 60, 59, 54, 55, 30]
    cases = [
        ("leaf", 30),
        ("only left child", 59),
        ("only right child", 54),
        ("two children", 50),
    ]

    fig, axes = plt.subplots(len(cases), 2, figsize=(12, 4 * len(cases)))
    for row, (case, target) in enumerate(cases):
        tree = OrderedTree(values)
        _draw_tree(axes[row, 0], tree, f"Before delete({target}) [{case}]", highlight=(target,))
        removed = tree.delete(target)
        assert tree.is_valid()
        _draw_tree(axes[row, 1], tree, f"After delete({target})")
        print(f"{case:>18}: removed {removed}, remaining {tree.in_order()}")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_delete_cases.png", dpi=150)
    plt.close(fig)

    return fig


def example_3_height_growth():
    """Sorted input degenerates into a list; shuffled input stays shallow."""
    print("\n" + "=" * 60)
    print("Example 3: Height vs Insertion Order")
    print("=" * 60)

    sorted_heights, random_heights = [], []
    for n in SIZES:
        sorted_tree = OrderedTree(range(n))
        random_tree = OrderedTree(np.random.permutation(n).tolist())
        sorted_heights.append(sorted_tree.height())
        random_heights.append(random_tree.height())
        print(f"n={n:>5}  sorted height={sorted_heights[-1]:>5}  random height={random_heights[-1]:>3}")

    sizes = np.array(SIZES)
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, sorted_heights, "r-o", label="Sorted insertion")
    ax.plot(sizes, random_heights, "b-o", label="Random insertion")
    ax.plot(sizes, np.log2(sizes) + 1, "g--", label="log2(n) + 1")
    ax.set_xscale("log", base=2)
    ax.set_yscale("log", base=2)
    ax.set_xlabel("Number of values")
    ax.set_ylabel("Height")
    ax.set_title("Unbalanced Tree Height")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_height_growth.png", dpi=150)
    plt.close(fig)

    return fig, sorted_heights, random_heights


def example_4_random_churn():
    """Interleave random inserts and deletes and track size and height."""
    print("\n" + "=" * 60)
    print("Example 4: Random Insert/Delete Churn")
    print("=" * 60)

    np.random.seed(SEED)
    tree = OrderedTree()
    sizes, heights = [], []
    inserted = deleted = 0
    start = time.perf_counter()
    for value, op in zip(np.random.randint(0, 500, CHURN_STEPS).tolist(),
                         np.random.rand(CHURN_STEPS).tolist()):
        try:
            if op < 0.6:
                tree.insert(value)
                inserted += 1
            else:
                tree.delete(value)
                deleted += 1
        except (DuplicateInsert, ValueNotFound):
            pass
        sizes.append(len(tree))
        heights.append(tree.height())
    elapsed = time.perf_counter() - start

    assert tree.is_valid()
    assert len(tree) == inserted - deleted
    print(f"Successful inserts: {inserted}, deletes: {deleted}, final size: {len(tree)}")
    print(f"Final height: {tree.height()}, elapsed: {elapsed:.3f}s")

    fig, ax = plt.subplots(figsize=(8, 6))
    ax.plot(sizes, label="Size", color="steelblue")
    ax.plot(heights, label="Height", color="darkorange")
    ax.set_xlabel("Operation")
    ax.set_ylabel("Count")
    ax.set_title("Size and Height Under Random Churn")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_random_churn.png", dpi=150)
    plt.close(fig)

    return fig, tree


def generate_pdf_report(figures_data):
    """Generate combined PDF report."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    pdf_path = VIZ_DIR.parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "OrderedTree", fontsize=36, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Unbalanced Binary Search Tree", fontsize=24, ha="center")
        fig.text(0.5, 0.2, f"Seed: {SEED}", fontsize=12, ha="center", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for title, filename in figures_data:
            page = plt.figure(figsize=(11, 8.5))
            page.text(0.5, 0.98, title, fontsize=14, ha="center", fontweight="bold")
            ax = page.add_axes([0.05, 0.05, 0.9, 0.88])
            ax.imshow(plt.imread(VIZ_DIR / filename))
            ax.axis("off")
            pdf.savefig(page)
            plt.close(page)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("\n" + "#" * 60)
    print("#" + " " * 21 + "ORDERED TREE DEMO" + " " * 20 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_basic_operations()
    example_2_delete_cases()
    example_3_height_growth()
    example_4_random_churn()

    generate_pdf_report([
        ("Example 2: Delete Cases", "02_delete_cases.png"),
        ("Example 3: Height Growth", "03_height_growth.png"),
        ("Example 4: Random Churn", "04_random_churn.png"),
    ])

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
