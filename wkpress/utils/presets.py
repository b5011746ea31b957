"""
Option presets for generators.

Presets are named option sets kept in a YAML file and grouped by category.
They are composable: later presets override earlier ones.

Example file:

    page:
      a4_portrait:
        page-size: A4
        orientation: Portrait
    quality:
      print:
        dpi: 300
        image-quality: 100

Examples:
    >>> apply_presets(pdf, ["page_a4_portrait", "quality_print"])
"""

import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()


def _default_presets_path() -> Path:
    presets_path = os.getenv("WKPRESS_PRESETS_PATH")
    if not presets_path:
        raise ValueError("No presets file given and WKPRESS_PRESETS_PATH is not set")
    return Path(presets_path)


def load_option_presets(config_path: Path = None) -> Dict[str, Dict[str, Any]]:
    """
    Load a presets file and flatten it to a single-level dict.

    Collapses nested structure: page.a4_portrait -> page_a4_portrait

    Args:
        config_path: Path to the YAML file (defaults to WKPRESS_PRESETS_PATH env variable)

    Returns:
        Flattened dict mapping preset names to option dicts
    """
    if config_path is None:
        config_path = _default_presets_path()

    nested = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    if not isinstance(nested, dict):
        raise ValueError(f"Presets file must map categories to presets: {config_path}")

    flattened = {}
    for category, presets in nested.items():
        if not isinstance(presets, dict):
            raise ValueError(f"Preset category '{category}' must map names to options: {config_path}")
        for name, options in presets.items():
            flattened[f"{category}_{name}"] = options or {}

    return flattened


def apply_presets(generator, preset_names: List[str], config_path: Path = None) -> None:
    """
    Apply named presets to a generator's instance options, in order.

    Args:
        generator: Generator whose options are updated
        preset_names: Preset names (e.g., ["page_a4_portrait", "quality_print"])
        config_path: Optional path to the presets file

    Raises:
        ValueError: If a preset is not found
        InvalidOption: If a preset sets an option the generator does not know
    """
    if not preset_names:
        return

    presets = load_option_presets(config_path)

    for preset_name in preset_names:
        if preset_name not in presets:
            available = list(presets.keys())
            raise ValueError(f"Preset '{preset_name}' not found. Available presets: {available}")

        generator.set_options(presets[preset_name])
