import random
import sys
import time

import pandas
import psutil

from labelgrid import DataFrame

NROWS = 1_000_000

random.seed(42)
years = [random.randint(2000, 2023) for _ in range(NROWS)]
areas = [random.choice(["North", "South", "East", "West"]) for _ in range(NROWS)]
counts = [random.randint(1, 500) for _ in range(NROWS)]

try:
    aggregation_type = sys.argv[1]
except IndexError:
    aggregation_type = None

if aggregation_type == "single":
    def run():
        df = DataFrame.from_dict({"year": years, "geo_count": counts})
        return df.groupby(years).sum()
elif aggregation_type == "multi":
    def run():
        df = DataFrame.from_dict({"year": years, "geo_count": counts})
        return df.groupby(list(zip(years, areas))).sum()
elif aggregation_type == "pandas":
    def run():
        df = pandas.DataFrame({"year": years, "geo_count": counts})
        return df.groupby("year").agg({"geo_count": "sum"})
else:
    print("Aggregation must be single, multi or pandas")
    sys.exit(1)

proc = psutil.Process()
start = time.time()
result = run()
end = time.time()

print(
    "TIME:",
    round(end - start, 1),
    "MEMORY:",
    proc.memory_full_info().rss // (1024 * 1024),
)
