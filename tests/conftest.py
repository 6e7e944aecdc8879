import os

# Settings are read at import time; routers and services pull them in.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("TIMEZONE", "UTC")
