"""Runtime settings for the command-line program."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv


@dataclass
class Settings:
    data_file: Path = Path("family_tree.dat")
    plot_file: Path | None = Path("family_tree.png")  # None shows the chart instead
    root_index: int = 0
    log_level: str = "WARNING"


def load_settings() -> Settings:
    """Read settings from a .env file (if any) and the environment."""
    load_dotenv(find_dotenv(usecwd=True))
    defaults = Settings()

    root = os.getenv("FAMILY_TREE_ROOT", str(defaults.root_index))
    try:
        root_index = int(root)
    except ValueError:
        raise ValueError(f"FAMILY_TREE_ROOT must be an integer, got {root!r}") from None

    # An empty FAMILY_TREE_PLOT means "preview, don't write a file"
    plot = os.getenv("FAMILY_TREE_PLOT", str(defaults.plot_file)).strip()

    return Settings(
        data_file=Path(os.getenv("FAMILY_TREE_FILE", str(defaults.data_file))),
        plot_file=Path(plot) if plot else None,
        root_index=root_index,
        log_level=os.getenv("FAMILY_TREE_LOG_LEVEL", defaults.log_level).upper(),
    )
