import os
import sys
from pathlib import Path

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# Keep the test run from writing log files.
os.environ.setdefault(
    "KEYVALUES_PARSER_CONFIG", str(PROJECT_ROOT / "tests" / "data" / "test_config.yml")
)
