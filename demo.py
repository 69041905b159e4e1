import argparse
import logging
import random

from rbcollection import settings
from rbcollection.collection import TreeCollection


def parse_args():
    parser = argparse.ArgumentParser(description="Print a red black tree as it is built")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--count", type=int, default=settings.DEMO_RANDOM_COUNT)
    return parser.parse_args()


def show(title, collection):
    print(f"{title} (size {len(collection)}):")
    print(collection)


if __name__ == "__main__":
    args = parse_args()
    logging.basicConfig(level=settings.LOG_LEVEL)
    rng = random.Random(args.seed)

    collection = TreeCollection()

    for key in [6, 8, -25]:
        collection.add(key)
        show(f"Added {key}", collection)

    values = [7, 14, 5] + [rng.randrange(10) for _ in range(args.count)]
    collection.add_all(values)
    show(f"Added {values}", collection)

    collection.remove_all(values)
    show(f"Removed {values}", collection)

    collection.clear()
    for _ in range(args.count):
        collection.add(rng.randint(settings.DEMO_MIN, settings.DEMO_MAX))
    show(f"Random tree of {args.count} values", collection)
