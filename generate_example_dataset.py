import json
import sys

from faker import Faker

from rbcollection.settings import BENCH_DATASET

if __name__ == "__main__":
    fake = Faker()
    n = int(sys.argv[1])
    with open(BENCH_DATASET, "wb") as f:
        for i in range(n):
            record = {
                "name": fake.name(),
                "number": fake.pyint(min_value=-(2 ** 31), max_value=2 ** 31),
            }
            data = json.dumps(record) + "\n"
            f.write(data.encode("utf8"))

        # repeat some keys so the tree has to hold duplicates
        for i in range(0, n, 10):
            record = {"name": fake.name(), "number": i}
            data = json.dumps(record) + "\n"
            f.write(data.encode("utf8"))
