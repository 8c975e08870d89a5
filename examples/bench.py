import random
import timeit

from skewheap import Heap


def nums(count):
    values = list(range(1, count + 1))
    random.shuffle(values)
    return values


def fill(values):
    return Heap().fill(values)


def fill_and_drain(values):
    return Heap().fill(values).drain()


def run(name, func, sizes=(100, 1000, 10000), repeat=5):
    for size in sizes:
        values = nums(size)
        timer = timeit.Timer(lambda: func(values))
        loops, _ = timer.autorange()
        best = min(timer.repeat(repeat, loops)) / loops
        print("{0:<12} {1:>6} {2:>12.1f} us".format(name, size, best * 1e6))


if __name__ == "__main__":
    run("fill", fill)
    run("fill/drain", fill_and_drain)
