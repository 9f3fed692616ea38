"""Benchmark the tag matcher on ordinary and adversarial documents.

Run with:
    python benchmarks/benchmark_scan.py

Doubling the input size should roughly double the time for every corpus;
the unterminated, late-bracket and no-bracket corpora are the ones a
backtracking regex or a per-candidate forward search handles worst.
"""

import time

from corchetes import ShortcodeParser


def build_parser() -> ShortcodeParser:
    parser = ShortcodeParser()
    parser.register("b", lambda attrs, content, p, tag: f"<b>{content}</b>")
    parser.register("img", lambda attrs, content, p, tag: f'<img src="{attrs.get("src", "")}">')
    return parser


def corpora(size: int) -> dict[str, str]:
    return {
        "ordinary": 'Text [b]bold[/b] and [img src="a.png" /]. ' * size,
        "unterminated": "[b]" * size,
        "late-bracket": "[b " * size + "]",
        "no-bracket": "[b " * size,
        "escaped": "[[b]] " * size,
        "plain": "no shortcodes here " * size,
    }


def benchmark(parser: ShortcodeParser, text: str, iterations: int = 5) -> float:
    parser.parse(text)
    start = time.perf_counter()
    for _ in range(iterations):
        parser.parse(text)
    return (time.perf_counter() - start) / iterations


def main() -> None:
    parser = build_parser()
    print(f"{'corpus':<14}{'size':>8}{'ms':>10}")
    for size in (1_000, 2_000, 4_000, 8_000):
        for name, text in corpora(size).items():
            elapsed = benchmark(parser, text)
            print(f"{name:<14}{size:>8}{elapsed * 1000:>10.2f}")


if __name__ == "__main__":
    main()
