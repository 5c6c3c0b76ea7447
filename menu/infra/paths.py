from pathlib import Path

# Centralized paths for packaged data files (read-only)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
INGREDIENTS_FILE = DATA_DIR / 'ingredients.json'

__all__ = ['DATA_DIR', 'INGREDIENTS_FILE']
