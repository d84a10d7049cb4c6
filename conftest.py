import sys
from pathlib import Path
import os

# Ensure repo root on sys.path for imports from anywhere in tests tree.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("JSON_CARDS_BACKEND", "memory")
os.environ.pop("JSON_CARDS_MAX_DEPTH", None)
os.environ.pop("JSON_CARDS_PREVIEW_LINES", None)
