"""Streamlit deployment entry point: `streamlit run app.py` runs the page in app/app.py."""
import runpy
from pathlib import Path

runpy.run_path(str(Path(__file__).resolve().parent / "app" / "app.py"), run_name="__main__")
