#!/usr/bin/env python3

import argparse
import itertools
import json

from oneiros.config import START_RULE, MAX_OUTPUT_SIZE, REPORT_EVERY
from oneiros.errors import GrammarException
from oneiros.grammar import Grammar
from oneiros.rng import Xorshift64
from oneiros.utils import ThroughputMeter, log


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Generate random inputs from a JSON grammar as fast as possible.")
    parser.add_argument("grammar_file", type=str, help="Path to the JSON grammar file")
    parser.add_argument("--seed", type=lambda s: int(s, 0), default=None, help="RNG seed (default: random)")
    parser.add_argument("--start", type=str, default=START_RULE, help=f"Start rule (default: {START_RULE})")
    parser.add_argument("--iterations", type=int, default=None, help="Stop after this many derivations (default: run forever)")
    parser.add_argument("--report-every", type=int, default=REPORT_EVERY, help="Report throughput every N derivations")
    parser.add_argument("--max-size", type=int, default=MAX_OUTPUT_SIZE, help="Output size ceiling in bytes")
    parser.add_argument("--stats", action="store_true", help="Print grammar statistics and exit")
    return parser.parse_args(argv)

def run(grammar, iterations=None, report_every=REPORT_EVERY, max_size=MAX_OUTPUT_SIZE):
    buf = bytearray()
    stack = []
    meter = ThroughputMeter()

    counter = itertools.count(1) if iterations is None else range(1, iterations + 1)
    for iters in counter:
        buf.clear()
        grammar.generate(stack, buf, max_size=max_size)
        meter.update(len(buf))

        if report_every and iters % report_every == 0:
            log.info(f"Bytes per sec: {meter.bytes_per_sec:12.0f} | Example: {bytes(buf)!r}")

    return meter

def main(argv=None):
    args = parse_args(argv)

    try:
        grammar = Grammar.from_file(args.grammar_file, start=args.start)
    except GrammarException as e:
        log.error(f"Failed to compile grammar {args.grammar_file}: {e}")
        return 1
    if grammar is None:
        log.error(f"Failed to load grammar from {args.grammar_file}")
        return 1
    log.info(f"Loaded {grammar} from {args.grammar_file}")

    if args.stats:
        print(json.dumps(grammar.stats(), indent=2))
        return 0

    seed = args.seed if args.seed is not None else Xorshift64.from_entropy().state
    grammar.seed(seed)
    log.info(f"Seeded RNG with {seed:#x}")

    meter = run(grammar, iterations=args.iterations, report_every=args.report_every, max_size=args.max_size)
    log.info(f"Generated {meter.generated} bytes in {meter.iterations} derivations ({meter.bytes_per_sec:.0f} bytes/sec)")
    return 0
