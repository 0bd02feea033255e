"""Streamlit Cloud entry point for the LakeScope dashboard."""
import sys
from pathlib import Path

src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from lakescope.dashboard.app import main  # noqa: E402

main()
