from __future__ import annotations
from pathlib import Path
from typing import Optional
import yaml
from pydantic import ValidationError
from src.toolscout.scoring.vocabulary import Vocabulary
from src.utils.logger import get_logger

logger = get_logger("toolscout.config")


def load_vocabulary(path: Optional[Path]) -> Vocabulary:
    """Load vocabulary YAML from path. Returns defaults if the file doesn't exist or is invalid."""
    if path is None or not path.exists():
        return Vocabulary()
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return Vocabulary.model_validate(raw)
    except yaml.YAMLError as e:
        logger.error(f"❌ Invalid YAML in {path}: {e}")
        return Vocabulary()
    except (ValidationError, TypeError, ValueError) as e:
        logger.error(f"❌ Invalid vocabulary schema at {path}: {e}")
        return Vocabulary()
    except OSError as e:
        logger.error(f"❌ Could not read vocabulary from {path}: {e}")
        return Vocabulary()


def save_vocabulary(vocabulary: Vocabulary, path: Path) -> None:
    """Save vocabulary to YAML file, creating parent dirs as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            vocabulary.model_dump(mode="json"),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
