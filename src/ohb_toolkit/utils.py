"""
Helpers shared across modules: console reporting and JSON storage.
"""
import functools
import json
import time
from pathlib import Path


def timer(func):
    """Decorator reporting how long the wrapped step took."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start = time.time()
        result = func(*args, **kwargs)
        elapsed = time.time() - start
        print(f"  ⏱  {func.__name__} completed in {elapsed:.1f}s")
        return result
    return wrapper


def write_json(path: Path, payload) -> None:
    """Write payload as pretty UTF-8 JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(payload, f, ensure_ascii=False, indent=2)


def print_header(title: str):
    """Print a formatted header for the console log."""
    width = 60
    print("\n" + "=" * width)
    print(f"  {title}")
    print("=" * width)


def print_step(step: str):
    """Print a progress step."""
    print(f"\n  -> {step}")
