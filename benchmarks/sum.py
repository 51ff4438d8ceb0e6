#!/usr/bin/env python3
"""Sum Benchmark - Python"""

import time

N = 1_000_000_000


def add_up_to(n):
    return n * (n + 1) // 2


# O(n) reference, kept for comparison against the closed form above
def add_up_to_loop(n):
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def main():
    start = time.perf_counter()
    add_up_to(N)
    end = time.perf_counter()

    elapsed = end - start
    print(f"Time Elapsed: {elapsed} sec")
    return elapsed


if __name__ == "__main__":
    main()
