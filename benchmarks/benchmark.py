import random

from pyinstrument import Profiler

from ordered import difference, distinct, group_join, insert_ordered, intersect, union


def make_inputs(n, seed=0):
    rng = random.Random(seed)
    a = sorted(rng.randrange(n) for _ in range(n))
    b = sorted(rng.randrange(n) for _ in range(n))
    return a, b


def benchmark_large():
    N = 200_000
    a, b = make_inputs(N)
    print(f"Generated two sorted inputs of {N} items")

    profiler = Profiler()
    profiler.start()

    for _ in range(5):
        for op in (difference, intersect, union):
            total = sum(1 for _ in op(a, b))
            print(f"{op.__name__}: {total} items")
        total = sum(1 for _ in distinct(a))
        print(f"distinct: {total} items")

        pairs = []
        group_join(a, b, lambda x: x, lambda y: y, lambda x, y: pairs.append((x, y)))
        print(f"group_join: {len(pairs)} pairs")

    container = []
    for value in a[:20_000]:
        insert_ordered(container, value)
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("ordered_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
