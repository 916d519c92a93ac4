"""Create text files with random names and content."""

from __future__ import annotations

import os
import random
from datetime import datetime

ADJECTIVES = ("quick", "lazy", "happy", "sad", "big", "small", "fast", "slow", "bright", "dark")
NOUNS = ("cat", "dog", "bird", "fish", "tree", "rock", "star", "moon", "sun", "cloud")
SENTENCES = (
    "This is a randomly generated file.",
    "The quick brown fox jumps over the lazy dog.",
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
    "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.",
    "Ut enim ad minim veniam, quis nostrud exercitation ullamco.",
    "Duis aute irure dolor in reprehenderit in voluptate velit esse.",
    "Excepteur sint occaecat cupidatat non proident, sunt in culpa.",
)


def target_directory(base_dir: str | os.PathLike, depth: int) -> str:
    """Return the directory nested ``depth - 1`` levels below ``base_dir``."""
    parts = [f"level_{level}" for level in range(1, depth)]
    return os.path.join(os.fspath(base_dir), *parts)


def random_filename(rng: random.Random) -> str:
    """Return a name such as ``quick_cat_42``."""
    return f"{rng.choice(ADJECTIVES)}_{rng.choice(NOUNS)}_{rng.randrange(1000)}"


def _rfc3339_now() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    return stamp[:-6] + "Z" if stamp.endswith("+00:00") else stamp


def random_content(rng: random.Random) -> str:
    """Return a timestamp header followed by three to seven random sentences."""
    lines = [rng.choice(SENTENCES) for _ in range(3 + rng.randrange(5))]
    return f"Generated at: {_rfc3339_now()}\n\n" + "".join(f"{line}\n" for line in lines)


def create_random_files(base_dir: str | os.PathLike, depth: int, count: int) -> list[str]:
    """Write ``count`` random .txt files at ``depth`` below ``base_dir``; return their paths."""
    rng = random.Random()
    target = target_directory(os.path.abspath(base_dir), depth)
    if depth > 1:
        os.makedirs(target, mode=0o755, exist_ok=True)

    created = []
    for _ in range(count):
        file_path = os.path.join(target, random_filename(rng) + ".txt")
        with open(file_path, "w", encoding="utf-8") as handle:
            handle.write(random_content(rng))
        print(f"Created: {file_path}")
        created.append(file_path)
    return created