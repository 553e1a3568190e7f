from collections import Counter
from typing import List, Tuple

import numpy as np

FreqRow = Tuple[str, int, float]


def char_frequencies(text: str, letters_only: bool = True) -> List[FreqRow]:
    """Count characters of `text`, most common first (ties by character)."""
    if letters_only:
        chars = [ch for ch in text if ch.isalpha()]
    else:
        chars = [ch for ch in text if not ch.isspace()]
    n = len(chars)
    if n == 0:
        return []
    counts = Counter(chars)
    rows = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [(ch, count, count / n * 100) for ch, count in rows]


def format_frequencies(rows: List[FreqRow]) -> str:
    lines = [f"{'Char':<6}{'Count':>7}{'%':>9}"]
    for ch, count, pct in rows:
        lines.append(f"{ch!r:<6}{count:>7}{pct:>8.2f}%")
    return "\n".join(lines)


def plot_frequencies(rows: List[FreqRow], path: str, title: str = "Character frequency") -> None:
    """Save a bar chart of the frequency rows to `path`."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    labels = [ch for ch, _, _ in rows]
    pcts = np.array([pct for _, _, pct in rows], dtype=float)
    x = np.arange(len(labels))

    fig, ax = plt.subplots(figsize=(max(6, len(labels) * 0.4), 4))
    ax.bar(x, pcts)
    ax.set_xticks(x)
    ax.set_xticklabels(labels)
    ax.set_ylabel("%")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(path)
    plt.close(fig)
