"""
Evaluation configuration: the static template plus the component whitelist.

Loaded once at startup and shared read-only by every evaluation. A missing
or malformed catalog is a startup failure, not a request error.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Tuple, Union

from archcoach.errors import ConfigurationError
from archcoach.prompts.evaluate_architecture import (
    ARCHITECTURE_EVALUATION_TEMPLATE,
    COMPONENTS_PLACEHOLDER,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationConfig:
    """
    Immutable evaluation prompt configuration.

    Attributes:
        template: Instruction text containing the components placeholder
        components: Whitelisted component type names, in catalog order
        system_prompt: Template with the whitelist substituted
    """
    template: str
    components: Tuple[str, ...]
    system_prompt: str

    @classmethod
    def build(cls, components: Iterable[str], template: str = ARCHITECTURE_EVALUATION_TEMPLATE) -> "EvaluationConfig":
        components = tuple(components)
        return cls(
            template=template,
            components=components,
            system_prompt=render_template(template, components),
        )


def render_template(template: str, components: Iterable[str]) -> str:
    """Substitute the whitelist as YAML list lines ('    - "<type>"')."""
    listing = "".join(f'    - "{name}"\n' for name in components)
    return template.replace(COMPONENTS_PLACEHOLDER, listing)


def parse_component_types(defs: Any) -> Tuple[str, ...]:
    """
    Extract component type names from a catalog document.

    Expected shape: {"categories": [{"items": [{"type": "..."}, ...]}, ...]}

    Raises:
        ConfigurationError: If the document does not have that shape
    """
    try:
        return tuple(
            str(item["type"])
            for category in defs["categories"]
            for item in category["items"]
        )
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Malformed architecture catalog: {e!r}") from e


def load_evaluation_config(path: Union[str, Path]) -> EvaluationConfig:
    """
    Load the component whitelist and render the evaluation prompt.

    Raises:
        ConfigurationError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            defs = json.load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read architecture catalog {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Architecture catalog {path} is not valid JSON: {e}") from e

    components = parse_component_types(defs)
    logger.info(f"Loaded {len(components)} architecture components from {path}")
    return EvaluationConfig.build(components)
