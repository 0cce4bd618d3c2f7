import sys
import pathlib

# Ensure backend package importable when running pytest from the repo root
BASE_DIR = pathlib.Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))
