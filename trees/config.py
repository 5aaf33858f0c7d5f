import os

DEFAULT_CAPACITY = 4

# sangría por nivel en el volcado de texto
INDENT = "  "

LOG_LEVEL = os.environ.get("QUADTREE_LOG_LEVEL", "INFO").upper()

DEMO_POINTS = 100098
DEMO_EXTENT = 100

BENCHMARK_SIZES = [100, 500, 2000]
BENCHMARK_EXTENT = 100
