import argparse
import io
import time

from shortscale import MAX_NUMBER, shortscale, shortscale_writer

# 777_777_777_777_777_777 - longest result
# 999_999_999_999_999_999 - largest number
#   9_007_199_254_740_991 - JavaScript Number.MAX_SAFE_INTEGER
BENCH_NUMBERS = (
    9_007_199_254_740_991,
    777_777_777_777_777_777,
    999_999_999_999_999_999,
)


def time_calls(func, iterations, warmup=0):
    if iterations < 1:
        raise ValueError("iterations must be at least 1.")
    for _ in range(warmup):
        func()
    chars = 0
    start = time.perf_counter()
    for _ in range(iterations):
        chars += func()
    elapsed = time.perf_counter() - start
    return elapsed * 1e9 / iterations, chars


def _result(name, num, iterations, ns_per_call, chars):
    return {
        "name": name,
        "number": num,
        "iterations": iterations,
        "ns_per_call": ns_per_call,
        "chars": chars,
    }


def bench_shortscale(num, iterations=100_000, warmup=1_000):
    ns_per_call, chars = time_calls(
        lambda: len(shortscale(num)), iterations, warmup
    )
    return _result("shortscale", num, iterations, ns_per_call, chars)


def bench_shortscale_writer(num, iterations=100_000, warmup=1_000):
    # One buffer reused across calls, so only the writes are measured.
    buffer = io.StringIO()

    def call():
        start = buffer.tell()
        shortscale_writer(buffer, num)
        return buffer.tell() - start

    ns_per_call, chars = time_calls(call, iterations, warmup)
    return _result("shortscale_writer", num, iterations, ns_per_call, chars)


def format_result(result):
    return (
        f"{result['name']:<20} {result['number']:>26_} "
        f"{result['ns_per_call']:>10.1f} ns/call "
        f"({result['iterations']} calls, {result['chars']} chars)"
    )


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Benchmark the short scale number-to-words converter.",
    )
    parser.add_argument(
        "--number",
        type=int,
        action="append",
        help="Number to convert (repeatable). Defaults to the built-in set.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=100_000,
        help="Timed calls per benchmark.",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=1_000,
        help="Untimed calls before each benchmark.",
    )
    parser.add_argument(
        "--mode",
        choices=["all", "string", "writer"],
        default="all",
        help="Which entry point to benchmark.",
    )
    return parser


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)
    if args.iterations < 1:
        parser.error("--iterations must be at least 1.")
    if args.warmup < 0:
        parser.error("--warmup must not be negative.")
    for num in args.number or ():
        if not 0 <= num <= MAX_NUMBER:
            parser.error(f"--number {num} is outside 0..{MAX_NUMBER}.")

    benches = []
    if args.mode in ("all", "string"):
        benches.append(bench_shortscale)
    if args.mode in ("all", "writer"):
        benches.append(bench_shortscale_writer)

    results = []
    for num in args.number or BENCH_NUMBERS:
        for bench in benches:
            result = bench(num, iterations=args.iterations, warmup=args.warmup)
            print(format_result(result))
            results.append(result)
    return results


if __name__ == "__main__":
    main()
