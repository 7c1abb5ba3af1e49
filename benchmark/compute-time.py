"""Benchmark per-rule compute time across synthetic and adversarial messages.

Install the package first (``pip install -e .``), then run, for example:

    python benchmark/compute-time.py --length-mode log --num-lengths 40 --repeats 5

Two corpora are timed. ``synthetic`` mixes everyday words with scam
vocabulary into sentences; ``adversarial`` repeats the leading keyword of the
prize rule with no amount after it, which is the worst case for its bounded
gap.
"""


import argparse
import gc
import json
import math
import random
import time
from pathlib import Path
from typing import TypeAlias

from scam_guard.analysis import AnalysisDocument
from scam_guard.rules import RuleList, build_default_rules
from scam_guard.rules.base import Rule, RuleConfig
from scam_guard.sanitize import MAX_TEXT_LENGTH

BenchmarkRecord: TypeAlias = dict[str, str | int | float]

_WORD_BANK: tuple[str, ...] = (
    "about",
    "after",
    "again",
    "appointment",
    "around",
    "bank",
    "before",
    "birthday",
    "call",
    "card",
    "check",
    "click",
    "coffee",
    "confirm",
    "dinner",
    "family",
    "friday",
    "funds",
    "here",
    "hours",
    "immediately",
    "invoice",
    "later",
    "link",
    "lunch",
    "meeting",
    "message",
    "money",
    "morning",
    "office",
    "package",
    "paypal",
    "please",
    "prize",
    "refund",
    "reply",
    "schedule",
    "send",
    "soon",
    "thanks",
    "today",
    "tomorrow",
    "urgent",
    "verify",
    "weekend",
    "within",
    "won",
    "your",
)

_SENTENCE_WORD_COUNTS: tuple[int, ...] = (6, 9, 12, 7, 10, 8)
_CORPORA: tuple[str, ...] = ("synthetic", "adversarial")


def parse_args() -> argparse.Namespace:
    """Parse benchmark CLI arguments."""
    parser = argparse.ArgumentParser(
        description=(
            "Measure forward-pass compute time for every default configured rule "
            "across message lengths."
        )
    )
    parser.add_argument(
        "--min-words",
        type=int,
        default=1,
        help="Minimum word count (inclusive).",
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=10_000,
        help="Maximum word count (inclusive).",
    )
    parser.add_argument(
        "--length-mode",
        choices=("log", "linear"),
        default="log",
        help="Length sampling strategy over --num-lengths points.",
    )
    parser.add_argument(
        "--num-lengths",
        type=int,
        default=40,
        help="Number of sampled lengths.",
    )
    parser.add_argument(
        "--repeats",
        type=int,
        default=3,
        help="Timed runs per rule, corpus and text length.",
    )
    parser.add_argument(
        "--warmup-runs",
        type=int,
        default=1,
        help="Untimed warmup runs per rule, corpus and text length.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=7,
        help="Random seed used for synthetic word generation.",
    )
    parser.add_argument(
        "--output",
        default="benchmark/output/rule_compute_time.jsonl",
        help="Output JSONL path.",
    )
    return parser.parse_args()


def build_lengths(
    *,
    min_words: int,
    max_words: int,
    length_mode: str,
    num_lengths: int,
) -> list[int]:
    """Build sorted word counts according to the chosen sampling mode."""
    if min_words < 1:
        raise ValueError("--min-words must be >= 1")
    if max_words < min_words:
        raise ValueError("--max-words must be >= --min-words")
    if num_lengths < 2:
        raise ValueError("--num-lengths must be >= 2")
    if min_words == max_words:
        return [min_words]

    values = {min_words, max_words}
    if length_mode == "linear":
        step = (max_words - min_words) / (num_lengths - 1)
        values |= {int(round(min_words + idx * step)) for idx in range(num_lengths)}
        return sorted(values)
    if length_mode == "log":
        log_min = math.log(min_words)
        log_max = math.log(max_words)
        for idx in range(num_lengths):
            ratio = idx / (num_lengths - 1)
            values.add(int(round(math.exp(log_min + ratio * (log_max - log_min)))))
        return sorted(values)
    raise ValueError(f"Unsupported --length-mode: {length_mode}")


def compose_synthetic(words: list[str]) -> str:
    """Join words into short capitalized sentences."""
    sentences: list[str] = []
    cursor = 0
    index = 0
    while cursor < len(words):
        span = _SENTENCE_WORD_COUNTS[index % len(_SENTENCE_WORD_COUNTS)]
        segment = words[cursor : cursor + span]
        cursor += span
        sentence = " ".join(segment)
        sentences.append(sentence[:1].upper() + sentence[1:] + ".")
        index += 1
    return " ".join(sentences)


def compose_adversarial(word_count: int) -> str:
    """Repeat a prize keyword with no amount anywhere after it."""
    return " ".join(["won"] * word_count)


def build_text(corpus: str, word_count: int, word_stream: list[str]) -> str:
    """Build the benchmark text for one corpus and length."""
    if corpus == "synthetic":
        return compose_synthetic(word_stream[:word_count])
    if corpus == "adversarial":
        return compose_adversarial(word_count)
    raise ValueError(f"Unknown corpus: {corpus}")


def time_rule(
    *,
    rule: Rule[RuleConfig],
    document: AnalysisDocument,
    repeats: int,
    warmup_runs: int,
) -> list[float]:
    """Measure one rule over repeated runs and return elapsed milliseconds."""
    for _ in range(warmup_runs):
        rule.forward(document)

    elapsed_ms: list[float] = []
    for _ in range(repeats):
        start_ns = time.perf_counter_ns()
        rule.forward(document)
        end_ns = time.perf_counter_ns()
        elapsed_ms.append((end_ns - start_ns) / 1_000_000.0)
    return elapsed_ms


def benchmark_rules(
    *,
    rules: RuleList,
    lengths: list[int],
    word_stream: list[str],
    repeats: int,
    warmup_runs: int,
    output_path: Path,
) -> int:
    """Benchmark each corpus/length/rule triple and write per-run JSONL rows."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    row_count = 0

    with output_path.open("w", encoding="utf-8") as handle:
        gc_enabled = gc.isenabled()
        gc.disable()
        try:
            for corpus in _CORPORA:
                for word_count in lengths:
                    document = AnalysisDocument.from_text(
                        build_text(corpus, word_count, word_stream)
                    )
                    for rule in rules:
                        timings = time_rule(
                            rule=rule,
                            document=document,
                            repeats=repeats,
                            warmup_runs=warmup_runs,
                        )
                        for run_index, elapsed in enumerate(timings, start=1):
                            record: BenchmarkRecord = {
                                "corpus": corpus,
                                "rule": rule.__class__.__name__,
                                "rule_key": rule.name,
                                "category": rule.category.value,
                                "word_count": word_count,
                                "char_count": len(document.text),
                                "run": run_index,
                                "time_ms": elapsed,
                            }
                            handle.write(json.dumps(record, sort_keys=True) + "\n")
                            row_count += 1
        finally:
            if gc_enabled:
                gc.enable()

    return row_count


def main() -> None:
    """Run the compute-time benchmark and persist JSONL rows."""
    args = parse_args()
    lengths = build_lengths(
        min_words=args.min_words,
        max_words=args.max_words,
        length_mode=args.length_mode,
        num_lengths=args.num_lengths,
    )
    rules = build_default_rules()
    rng = random.Random(args.seed)
    word_stream = rng.choices(_WORD_BANK, k=args.max_words)
    output_path = Path(args.output)

    row_count = benchmark_rules(
        rules=rules,
        lengths=lengths,
        word_stream=word_stream,
        repeats=args.repeats,
        warmup_runs=args.warmup_runs,
        output_path=output_path,
    )
    print(
        "Benchmark complete:",
        f"{len(rules)} rules, {len(lengths)} lengths x {len(_CORPORA)} corpora,",
        f"{args.repeats} repeats, {row_count} rows -> {output_path}",
        f"(texts capped at {MAX_TEXT_LENGTH} characters)",
    )


if __name__ == "__main__":
    main()
